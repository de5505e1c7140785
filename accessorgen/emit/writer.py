"""Output naming and writing for generated accessor files."""

from __future__ import annotations

from pathlib import Path

OUTPUT_SUFFIX = "_accessor_gen.go"
TEST_OUTPUT_SUFFIX = "_accessor_gen_test.go"
_GENERATED_SUFFIX = "_gen.go"


def should_skip(path: Path) -> bool:
    """Return True for files that never produce accessors."""
    name = path.name
    return (
        not name.endswith(".go")
        or name.endswith(OUTPUT_SUFFIX)
        or name.endswith("_test.go")
    )


def output_path_for(path: Path) -> Path:
    return path.with_name(_stem(path.name) + OUTPUT_SUFFIX)


def output_test_path_for(path: Path) -> Path:
    return path.with_name(_stem(path.name) + TEST_OUTPUT_SUFFIX)


def write_output(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    path.chmod(0o644)
    return path


def _stem(name: str) -> str:
    if name.endswith(_GENERATED_SUFFIX):
        return name[: -len(_GENERATED_SUFFIX)]
    return name[: -len(".go")] if name.endswith(".go") else name


__all__ = [
    "OUTPUT_SUFFIX",
    "TEST_OUTPUT_SUFFIX",
    "output_path_for",
    "should_skip",
    "output_test_path_for",
    "write_output",
]
