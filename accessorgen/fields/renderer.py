"""Canonical text for Go type expressions."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from ..golang.parser import node_text
from ..golang.syntax import (
    ExprKind,
    array_length,
    element,
    expr_kind,
    generic_base,
    map_key,
    map_value,
    pointee,
    selector_name,
    selector_owner,
    type_arguments,
    unwrap,
)


def render(node: Optional[Node]) -> str:
    """Render a type expression, or return ``""`` for unsupported shapes."""
    kind = expr_kind(node)
    if kind is ExprKind.OTHER:
        return ""
    node = unwrap(node)
    if node is None:
        return ""
    if kind is ExprKind.IDENTIFIER:
        return node_text(node)
    if kind is ExprKind.POINTER:
        return "*" + render(pointee(node))
    if kind is ExprKind.SLICE:
        return "[]" + render(element(node))
    if kind is ExprKind.ARRAY:
        length = array_length(node)
        size = node_text(length) if length is not None else "..."
        return f"[{size}]" + render(element(node))
    if kind is ExprKind.MAP:
        return f"map[{render(map_key(node))}]{render(map_value(node))}"
    if kind is ExprKind.SELECTOR:
        return f"{_text(selector_owner(node))}.{_text(selector_name(node))}"
    if kind is ExprKind.GENERIC:
        return f"{render(generic_base(node))}[{render(type_arguments(node)[0])}]"
    if kind is ExprKind.GENERIC_LIST:
        arguments = ", ".join(render(argument) for argument in type_arguments(node))
        return f"{render(generic_base(node))}[{arguments}]"
    raise AssertionError(f"unhandled expression kind: {kind}")


def _text(node: Optional[Node]) -> str:
    return node_text(node) if node is not None else ""


__all__ = ["render"]
