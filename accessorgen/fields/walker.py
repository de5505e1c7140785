"""Finds struct declarations in a compilation unit and models their fields."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from tree_sitter import Node

from ..golang.parser import node_text
from ..golang.semantics import TypeKind, iter_type_specs, type_parameter_names
from ..golang.syntax import unwrap
from ..models import CompilationUnit, FieldDescriptor, RecordDescriptor
from ..stores import ResolutionCache
from .classifier import PrimitivePointerClassifier
from .renderer import render
from .synthesizer import ValueSynthesizer


class DeclarationWalker:
    """Builds record descriptors for the top-level structs of a unit."""

    def __init__(
        self,
        cache: ResolutionCache,
        classifier: PrimitivePointerClassifier | None = None,
        synthesizer: ValueSynthesizer | None = None,
    ) -> None:
        self._cache = cache
        self._classifier = classifier or PrimitivePointerClassifier(cache)
        self._synthesizer = synthesizer or ValueSynthesizer(cache, self._classifier)

    def walk(self, unit: CompilationUnit) -> List[RecordDescriptor]:
        directory = unit.directory
        records: List[RecordDescriptor] = []
        for spec in iter_type_specs(unit.root):
            # Aliases (`type A = struct{...}`) are not new record types.
            if spec.type != "type_spec":
                continue
            field_list = _struct_fields(spec.child_by_field_name("type"))
            if field_list is None:
                continue
            name_node = spec.child_by_field_name("name")
            if name_node is None:
                continue

            fields: List[FieldDescriptor] = []
            for declaration in field_list.named_children:
                if declaration.type != "field_declaration":
                    continue
                fields.extend(self._describe(declaration, directory))

            records.append(
                RecordDescriptor(
                    name=node_text(name_node),
                    fields=tuple(fields),
                    type_params=format_type_params(type_parameter_names(spec)),
                )
            )
        return records

    def _describe(self, declaration: Node, directory: Path) -> List[FieldDescriptor]:
        names = declaration.children_by_field_name("name")
        if not names:
            # Embedded fields bind no name.
            return []
        type_node = declaration.child_by_field_name("type")
        rendered = render(type_node)
        classification = self._classifier.classify(type_node, directory)
        value_a = self._synthesizer.synthesize_a(type_node, directory)
        value_b = self._synthesizer.synthesize_b(type_node, directory)
        resolved = self._cache.resolve(directory).type_of(type_node)
        is_interface = resolved is not None and resolved.kind is TypeKind.INTERFACE
        return [
            FieldDescriptor(
                name=node_text(name),
                rendered_type=rendered,
                dereferenced_type=classification.dereferenced_type,
                is_primitive_pointer=classification.is_primitive_pointer,
                example_value_a=value_a,
                example_value_b=value_b,
                is_interface=is_interface,
            )
            for name in names
        ]


def format_type_params(names: List[str]) -> str:
    if not names:
        return ""
    return "[" + ", ".join(names) + "]"


def _struct_fields(node: Optional[Node]) -> Optional[Node]:
    node = unwrap(node)
    if node is None or node.type != "struct_type":
        return None
    for child in node.named_children:
        if child.type == "field_declaration_list":
            return child
    return None


__all__ = ["DeclarationWalker", "format_type_params"]
