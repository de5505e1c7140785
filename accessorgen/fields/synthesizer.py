"""Synthesizes two distinct non-zero Go literals per field type.

Scalars diverge between variant A and B.  Containers always nest variant A
values, so their A and B literals are identical, and so are opaque composites
(``Type{}``) and pointers (``new(T)``).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from tree_sitter import Node

from ..golang.semantics import ResolvedType, ScalarFamily
from ..golang.syntax import ExprKind, element, expr_kind, map_key, map_value, pointee
from ..stores import ResolutionCache
from .classifier import PrimitivePointerClassifier
from .renderer import render


class Variant(str, Enum):
    A = "a"
    B = "b"


_LITERALS: Dict[ScalarFamily, Tuple[str, str]] = {
    ScalarFamily.STRING: ('"str"', '"str2"'),
    ScalarFamily.INTEGER: ("1", "2"),
    ScalarFamily.FLOAT: ("1.0", "2.0"),
    ScalarFamily.COMPLEX: ("1", "2"),
    ScalarFamily.BOOLEAN: ("true", "false"),
    ScalarFamily.CHAR: ("1", "2"),
}

# Predeclared kinds whose literal is already typed (or untyped by choice).
_BARE_FAMILIES = {ScalarFamily.STRING, ScalarFamily.BOOLEAN, ScalarFamily.CHAR}

_NAMED_KINDS = {
    ExprKind.IDENTIFIER,
    ExprKind.SELECTOR,
    ExprKind.GENERIC,
    ExprKind.GENERIC_LIST,
}


class ValueSynthesizer:
    """Produces example values A and B for a field type expression."""

    def __init__(
        self,
        cache: ResolutionCache,
        classifier: PrimitivePointerClassifier | None = None,
    ) -> None:
        self._cache = cache
        self._classifier = classifier or PrimitivePointerClassifier(cache)

    def synthesize_a(self, node: Optional[Node], directory: Path | str) -> str:
        return self.synthesize(node, directory, Variant.A)

    def synthesize_b(self, node: Optional[Node], directory: Path | str) -> str:
        return self.synthesize(node, directory, Variant.B)

    def synthesize(self, node: Optional[Node], directory: Path | str, variant: Variant) -> str:
        kind = expr_kind(node)
        rendered = render(node)
        if kind is ExprKind.OTHER or not rendered:
            return _empty_literal(rendered)

        if kind in _NAMED_KINDS:
            resolved = self._cache.resolve(directory).type_of(node)
            if resolved is not None and resolved.is_basic:
                return _scalar_literal(rendered, resolved, variant)
            return _empty_literal(rendered)

        if kind is ExprKind.POINTER:
            classification = self._classifier.classify(node, directory)
            if classification.is_primitive_pointer:
                return f"new({classification.dereferenced_type})"
            target = render(pointee(node))  # type: ignore[arg-type]
            if not target:
                return _empty_literal(rendered)
            return f"new({target})"

        if kind is ExprKind.SLICE:
            item = self.synthesize_a(element(node), directory)  # type: ignore[arg-type]
            return f"{rendered}{{{item}, {item}, {item}}}"

        if kind is ExprKind.ARRAY:
            item = self.synthesize_a(element(node), directory)  # type: ignore[arg-type]
            return f"{rendered}{{{item}}}"

        if kind is ExprKind.MAP:
            key = self.synthesize_a(map_key(node), directory)  # type: ignore[arg-type]
            value = self.synthesize_a(map_value(node), directory)  # type: ignore[arg-type]
            return f"{rendered}{{{key}: {value}}}"

        raise AssertionError(f"unhandled expression kind: {kind}")


def _scalar_literal(rendered: str, resolved: ResolvedType, variant: Variant) -> str:
    if resolved.basic is None:
        return _empty_literal(rendered)
    family = resolved.basic.family
    value_a, value_b = _LITERALS[family]
    literal = value_a if variant is Variant.A else value_b
    if resolved.is_predeclared and rendered == resolved.name and family in _BARE_FAMILIES:
        return literal
    return f"{rendered}({literal})"


def _empty_literal(rendered: str) -> str:
    return f"{rendered}{{}}"


__all__ = ["ValueSynthesizer", "Variant"]
