"""Closed classification of Go type expressions."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from tree_sitter import Node


class ExprKind(str, Enum):
    IDENTIFIER = "identifier"
    POINTER = "pointer"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"
    SELECTOR = "selector"
    GENERIC = "generic"
    GENERIC_LIST = "generic_list"
    OTHER = "other"


_NODE_KINDS = {
    "type_identifier": ExprKind.IDENTIFIER,
    "identifier": ExprKind.IDENTIFIER,
    "pointer_type": ExprKind.POINTER,
    "slice_type": ExprKind.SLICE,
    "array_type": ExprKind.ARRAY,
    "implicit_length_array_type": ExprKind.ARRAY,
    "map_type": ExprKind.MAP,
    "qualified_type": ExprKind.SELECTOR,
}

# Named children that never carry type information.
_TRIVIA = {"comment"}


def unwrap(node: Optional[Node]) -> Optional[Node]:
    """Strip redundant parentheses and single-term type elements."""
    while node is not None and node.type in {"parenthesized_type", "type_elem", "type_constraint"}:
        inner = _named(node)
        if len(inner) != 1:
            return node
        node = inner[0]
    return node


def expr_kind(node: Optional[Node]) -> ExprKind:
    node = unwrap(node)
    if node is None:
        return ExprKind.OTHER
    if node.type == "generic_type":
        arguments = type_arguments(node)
        if not arguments:
            return ExprKind.OTHER
        return ExprKind.GENERIC if len(arguments) == 1 else ExprKind.GENERIC_LIST
    return _NODE_KINDS.get(node.type, ExprKind.OTHER)


def pointee(node: Node) -> Optional[Node]:
    children = _named(unwrap(node))
    return unwrap(children[0]) if children else None


def element(node: Node) -> Optional[Node]:
    return unwrap(unwrap(node).child_by_field_name("element"))


def array_length(node: Node) -> Optional[Node]:
    return unwrap(node).child_by_field_name("length")


def map_key(node: Node) -> Optional[Node]:
    return unwrap(unwrap(node).child_by_field_name("key"))


def map_value(node: Node) -> Optional[Node]:
    return unwrap(unwrap(node).child_by_field_name("value"))


def selector_owner(node: Node) -> Optional[Node]:
    return unwrap(node).child_by_field_name("package")


def selector_name(node: Node) -> Optional[Node]:
    return unwrap(node).child_by_field_name("name")


def generic_base(node: Node) -> Optional[Node]:
    return unwrap(unwrap(node).child_by_field_name("type"))


def type_arguments(node: Node) -> List[Node]:
    arguments = unwrap(node).child_by_field_name("type_arguments")
    if arguments is None:
        return []
    return [unwrap(child) for child in _named(arguments)]


def _named(node: Optional[Node]) -> List[Node]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type not in _TRIVIA]


__all__ = [
    "ExprKind",
    "array_length",
    "element",
    "expr_kind",
    "generic_base",
    "map_key",
    "map_value",
    "pointee",
    "selector_name",
    "selector_owner",
    "type_arguments",
    "unwrap",
]
