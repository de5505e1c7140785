"""Whole-directory loading: parse every Go file and index its declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from tree_sitter import Node

from ..errors import LoadError, ParseError
from ..logging import get_logger
from ..models import CompilationUnit
from .parser import GoParser
from .semantics import ResolvedType, TypeIndex

logger = get_logger("golang.loader")


@dataclass(frozen=True)
class DirectoryResolution:
    """Parsed units and semantic type information for one directory."""

    path: Path
    units: Tuple[CompilationUnit, ...]
    index: TypeIndex = field(repr=False, compare=False)

    @property
    def package_name(self) -> str:
        return self.units[0].package_name if self.units else ""

    def unit(self, path: Path | str) -> Optional[CompilationUnit]:
        target = Path(path)
        for unit in self.units:
            if unit.path == target:
                return unit
        return None

    def type_of(self, node: Optional[Node]) -> Optional[ResolvedType]:
        return self.index.type_of(node)


def is_loadable_source(path: Path) -> bool:
    """Return True for Go files that belong to the package under analysis."""
    return path.is_file() and path.suffix == ".go" and not path.name.endswith("_test.go")


def load_directory(path: Path | str, parser: GoParser | None = None) -> DirectoryResolution:
    """Parse and index every non-test Go file directly inside ``path``."""
    directory = Path(path)
    if not directory.is_dir():
        raise LoadError(directory, "not a directory")

    parser = parser or GoParser()
    try:
        sources = sorted(entry for entry in directory.iterdir() if is_loadable_source(entry))
    except OSError as exc:
        raise LoadError(directory, f"cannot list directory: {exc}") from exc

    units = []
    packages: Dict[str, Path] = {}
    for source in sources:
        try:
            unit = parser.parse_file(source)
        except ParseError as exc:
            raise LoadError(directory, f"error loading package: {exc}") from exc
        packages.setdefault(unit.package_name, source)
        units.append(unit)

    if len(packages) > 1:
        found = ", ".join(f"{name} ({src.name})" for name, src in packages.items())
        raise LoadError(directory, f"found multiple packages: {found}")

    logger.debug("Loaded %d Go files from %s", len(units), directory)
    return DirectoryResolution(path=directory, units=tuple(units), index=TypeIndex(units))


__all__ = ["DirectoryResolution", "is_loadable_source", "load_directory"]
