"""Composes the field model of a compilation unit into a generation artifact."""

from __future__ import annotations

from typing import Optional

from ..logging import get_logger
from ..models import CompilationUnit, GeneratedArtifact
from ..options import DEFAULT_MODE, GenerationMode
from ..stores import ResolutionCache
from .walker import DeclarationWalker


class FieldModelAssembler:
    """Turns a unit into a ``GeneratedArtifact``, or ``None`` when it has no fields."""

    def __init__(self, cache: ResolutionCache, walker: DeclarationWalker | None = None) -> None:
        self._cache = cache
        self._walker = walker or DeclarationWalker(cache)
        self.logger = get_logger("fields.assembler")

    def assemble(
        self, unit: CompilationUnit, mode: GenerationMode = DEFAULT_MODE
    ) -> Optional[GeneratedArtifact]:
        records = [record for record in self._walker.walk(unit) if record.fields]
        if not records:
            self.logger.debug("No struct fields in %s, skipping", unit.path)
            return None
        return GeneratedArtifact(
            package_name=unit.package_name,
            imports=list(unit.imports),
            records=records,
            mode=mode,
            source_path=unit.path,
        )


__all__ = ["FieldModelAssembler"]
