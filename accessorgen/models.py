"""Core data models shared across accessorgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Tuple

from .options import GenerationMode


@dataclass(frozen=True)
class CompilationUnit:
    """A parsed Go source file."""

    path: Path
    source: bytes
    tree: Any = field(repr=False, compare=False)
    package_name: str
    imports: Tuple[str, ...] = ()

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved model of one struct field."""

    name: str
    rendered_type: str
    dereferenced_type: str = ""
    is_primitive_pointer: bool = False
    example_value_a: str = ""
    example_value_b: str = ""
    is_interface: bool = False


@dataclass(frozen=True)
class RecordDescriptor:
    """A struct declaration and its fields in declaration order."""

    name: str
    fields: Tuple[FieldDescriptor, ...]
    type_params: str = ""

    @property
    def receiver_type(self) -> str:
        return f"{self.name}{self.type_params}"


@dataclass
class GeneratedArtifact:
    """Everything the emission stage needs to render one output file."""

    package_name: str
    imports: List[str]
    records: List[RecordDescriptor]
    mode: GenerationMode
    source_path: Path

    @property
    def field_count(self) -> int:
        return sum(len(record.fields) for record in self.records)
