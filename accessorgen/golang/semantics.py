"""Directory-scoped semantic type information for Go declarations.

The index answers one question for a type expression: what does it resolve
to once named types are followed to their underlying representation.  It
only knows about declarations inside the directory it was built from, so
qualified references into other packages resolve to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Set

from tree_sitter import Node

from ..models import CompilationUnit
from .parser import node_text
from .syntax import ExprKind, expr_kind, generic_base, unwrap


class ScalarFamily(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    BOOLEAN = "boolean"
    CHAR = "char"


class BasicKind(str, Enum):
    BOOL = "bool"
    STRING = "string"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    BYTE = "byte"
    RUNE = "rune"

    @property
    def family(self) -> ScalarFamily:
        return _FAMILIES[self]


_FAMILIES = {
    BasicKind.BOOL: ScalarFamily.BOOLEAN,
    BasicKind.STRING: ScalarFamily.STRING,
    BasicKind.FLOAT32: ScalarFamily.FLOAT,
    BasicKind.FLOAT64: ScalarFamily.FLOAT,
    BasicKind.COMPLEX64: ScalarFamily.COMPLEX,
    BasicKind.COMPLEX128: ScalarFamily.COMPLEX,
    BasicKind.BYTE: ScalarFamily.CHAR,
    BasicKind.RUNE: ScalarFamily.CHAR,
}
for _kind in BasicKind:
    _FAMILIES.setdefault(_kind, ScalarFamily.INTEGER)

_BASIC_BY_NAME = {kind.value: kind for kind in BasicKind}

# Predeclared identifiers that name interface types.
_PREDECLARED_INTERFACES = {"any", "error", "comparable"}


class TypeKind(str, Enum):
    BASIC = "basic"
    STRUCT = "struct"
    INTERFACE = "interface"
    POINTER = "pointer"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"
    CHAN = "chan"
    FUNC = "func"
    TYPE_PARAM = "type_param"


_COMPOSITE_KINDS = {
    "struct_type": TypeKind.STRUCT,
    "interface_type": TypeKind.INTERFACE,
    "pointer_type": TypeKind.POINTER,
    "slice_type": TypeKind.SLICE,
    "array_type": TypeKind.ARRAY,
    "implicit_length_array_type": TypeKind.ARRAY,
    "map_type": TypeKind.MAP,
    "channel_type": TypeKind.CHAN,
    "function_type": TypeKind.FUNC,
}


@dataclass(frozen=True)
class ResolvedType:
    """A resolved type: its name (empty for literals) and underlying shape."""

    name: str
    kind: TypeKind
    basic: Optional[BasicKind] = None

    @property
    def is_basic(self) -> bool:
        return self.kind is TypeKind.BASIC and self.basic is not None

    @property
    def is_predeclared(self) -> bool:
        return self.is_basic and self.name == self.basic.value  # type: ignore[union-attr]


def basic_kind(name: str) -> Optional[BasicKind]:
    return _BASIC_BY_NAME.get(name)


class TypeIndex:
    """Package-level type declarations of one directory, keyed by name."""

    def __init__(self, units: Iterable[CompilationUnit]) -> None:
        self._declarations: Dict[str, Node] = {}
        for unit in units:
            for spec in iter_type_specs(unit.root):
                name_node = spec.child_by_field_name("name")
                if name_node is None:
                    continue
                # First declaration in file order wins.
                self._declarations.setdefault(node_text(name_node), spec)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def declaration(self, name: str) -> Optional[Node]:
        return self._declarations.get(name)

    def type_of(self, node: Optional[Node]) -> Optional[ResolvedType]:
        """Resolve ``node`` or return ``None`` when nothing is known about it."""
        node = unwrap(node)
        if node is None:
            return None
        kind = expr_kind(node)
        if kind is ExprKind.IDENTIFIER:
            name = node_text(node)
            if _is_type_parameter(node, name):
                return ResolvedType(name=name, kind=TypeKind.TYPE_PARAM)
            return self._resolve_name(name, set())
        if kind is ExprKind.SELECTOR:
            return None
        if kind in (ExprKind.GENERIC, ExprKind.GENERIC_LIST):
            base = generic_base(node)
            if base is None or expr_kind(base) is not ExprKind.IDENTIFIER:
                return None
            resolved = self._resolve_name(node_text(base), set())
            if resolved is None:
                return None
            return ResolvedType(name=node_text(node), kind=resolved.kind, basic=resolved.basic)
        composite = _COMPOSITE_KINDS.get(node.type)
        if composite is not None:
            return ResolvedType(name="", kind=composite)
        return None

    def _resolve_name(self, name: str, seen: Set[str]) -> Optional[ResolvedType]:
        spec = self._declarations.get(name)
        if spec is None:
            basic = basic_kind(name)
            if basic is not None:
                return ResolvedType(name=name, kind=TypeKind.BASIC, basic=basic)
            if name in _PREDECLARED_INTERFACES:
                return ResolvedType(name=name, kind=TypeKind.INTERFACE)
            return None
        if name in seen:
            return None
        seen.add(name)
        underlying = self._underlying(spec.child_by_field_name("type"), seen)
        if underlying is None:
            return None
        return ResolvedType(name=name, kind=underlying.kind, basic=underlying.basic)

    def _underlying(self, node: Optional[Node], seen: Set[str]) -> Optional[ResolvedType]:
        node = unwrap(node)
        if node is None:
            return None
        kind = expr_kind(node)
        if kind is ExprKind.IDENTIFIER:
            return self._resolve_name(node_text(node), seen)
        if kind in (ExprKind.GENERIC, ExprKind.GENERIC_LIST):
            base = generic_base(node)
            if base is not None and expr_kind(base) is ExprKind.IDENTIFIER:
                return self._resolve_name(node_text(base), seen)
            return None
        composite = _COMPOSITE_KINDS.get(node.type)
        if composite is not None:
            return ResolvedType(name="", kind=composite)
        return None


def iter_type_specs(root: Node) -> Iterable[Node]:
    """Yield top-level ``type_spec`` and ``type_alias`` nodes in source order."""
    for declaration in root.named_children:
        if declaration.type != "type_declaration":
            continue
        for spec in declaration.named_children:
            if spec.type in {"type_spec", "type_alias"}:
                yield spec


def type_parameter_names(spec: Node) -> list[str]:
    """Return the type parameter names of a declaration in declaration order."""
    parameters = spec.child_by_field_name("type_parameters")
    if parameters is None:
        return []
    names: list[str] = []
    for declaration in parameters.named_children:
        for name_node in declaration.children_by_field_name("name"):
            names.append(node_text(name_node))
    return names


_SCOPE_NODES = {"type_spec", "type_alias", "function_declaration", "method_declaration"}


def _is_type_parameter(node: Node, name: str) -> bool:
    scope = node.parent
    while scope is not None:
        if scope.type in _SCOPE_NODES:
            return name in type_parameter_names(scope)
        scope = scope.parent
    return False


__all__ = [
    "BasicKind",
    "ResolvedType",
    "ScalarFamily",
    "TypeIndex",
    "TypeKind",
    "basic_kind",
    "iter_type_specs",
    "type_parameter_names",
]
