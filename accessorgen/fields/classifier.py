"""Detects pointer fields whose pointee is a primitive scalar."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

from tree_sitter import Node

from ..golang.syntax import ExprKind, expr_kind, pointee
from ..stores import ResolutionCache
from .renderer import render


class Classification(NamedTuple):
    is_primitive_pointer: bool
    dereferenced_type: str


NOT_PRIMITIVE_POINTER = Classification(False, "")


class PrimitivePointerClassifier:
    """Consults the directory resolution to classify pointer fields."""

    def __init__(self, cache: ResolutionCache) -> None:
        self._cache = cache

    def classify(self, node: Optional[Node], directory: Path | str) -> Classification:
        if expr_kind(node) is not ExprKind.POINTER:
            return NOT_PRIMITIVE_POINTER
        target = pointee(node)  # type: ignore[arg-type]
        resolved = self._cache.resolve(directory).type_of(target)
        if resolved is None or not resolved.is_basic:
            return NOT_PRIMITIVE_POINTER
        return Classification(True, render(target))


__all__ = ["Classification", "NOT_PRIMITIVE_POINTER", "PrimitivePointerClassifier"]
