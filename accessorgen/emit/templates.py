"""Renders generation artifacts through jinja2 templates."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader

from ..models import FieldDescriptor, GeneratedArtifact, RecordDescriptor

_DEFAULT_TEMPLATES = Path(__file__).resolve().parent.parent / "templates"

ACCESSOR_TEMPLATE = "accessor.go.j2"
TEST_TEMPLATE = "accessor_test.go.j2"

_MAJOR_VERSION = re.compile(r"^v\d+$")


def capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


class AccessorRenderer:
    """Renders accessor methods, and optionally their tests, for an artifact."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, artifact: GeneratedArtifact) -> str:
        template = self._env.get_template(ACCESSOR_TEMPLATE)
        return template.render(
            package_name=artifact.package_name,
            imports=artifact.imports,
            records=artifact.records,
            mode=artifact.mode,
        )

    def render_tests(self, artifact: GeneratedArtifact) -> Optional[str]:
        """Render test scaffolding, or ``None`` when no field can be exercised."""
        records = _testable_records(artifact.records)
        if not records or not (artifact.mode.includes_getters or artifact.mode.includes_setters):
            return None
        template = self._env.get_template(TEST_TEMPLATE)
        return template.render(
            package_name=artifact.package_name,
            imports=_referenced_imports(artifact.imports, records),
            records=records,
            mode=artifact.mode,
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES))
        # ensure uniqueness preserving order
        ordered = list(dict.fromkeys(directories))
        env = Environment(
            loader=FileSystemLoader(ordered),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["capitalize_first"] = capitalize_first
        return env


def is_testable(field: FieldDescriptor) -> bool:
    # Interfaces have no composite literal to assign.
    return bool(field.rendered_type) and not field.is_interface


def _testable_records(records: List[RecordDescriptor]) -> List[RecordDescriptor]:
    # Generic records would need an instantiation to be tested.
    return [
        record
        for record in records
        if not record.type_params and any(is_testable(field) for field in record.fields)
    ]


def import_name(entry: str) -> str:
    """Return the identifier an import spec binds, e.g. ``ext`` or ``time``."""
    alias, _, path = entry.strip().rpartition(" ")
    if alias:
        return alias
    segments = path.strip('"`').split("/")
    name = segments[-1]
    if _MAJOR_VERSION.match(name) and len(segments) > 1:
        name = segments[-2]
    # gopkg.in style paths carry the version after a dot.
    return name.split(".", 1)[0]


def _referenced_imports(imports: Iterable[str], records: List[RecordDescriptor]) -> List[str]:
    """Keep the imports a test file needs; unused ones do not compile."""
    texts = [
        text
        for record in records
        for field in record.fields
        if is_testable(field)
        for text in (field.rendered_type, field.example_value_a, field.example_value_b)
    ]
    kept: List[str] = []
    for entry in imports:
        name = import_name(entry)
        if name in {"_", "."}:
            continue
        pattern = re.compile(rf"\b{re.escape(name)}\.")
        if any(pattern.search(text) for text in texts):
            kept.append(entry)
    return kept


__all__ = [
    "ACCESSOR_TEMPLATE",
    "AccessorRenderer",
    "TEST_TEMPLATE",
    "capitalize_first",
    "import_name",
    "is_testable",
]
