"""Go source analysis: parsing, expression shapes and directory type information."""

from ..errors import LoadError, ParseError
from .loader import DirectoryResolution, load_directory
from .parser import GoParser
from .semantics import BasicKind, ResolvedType, ScalarFamily, TypeIndex, TypeKind
from .syntax import ExprKind, expr_kind

__all__ = [
    "BasicKind",
    "DirectoryResolution",
    "ExprKind",
    "GoParser",
    "LoadError",
    "ParseError",
    "ResolvedType",
    "ScalarFamily",
    "TypeIndex",
    "TypeKind",
    "expr_kind",
    "load_directory",
]
