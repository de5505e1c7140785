"""Code emission: templates, formatting and output files."""

from ..errors import FormatError
from .formatter import GoFormatter
from .templates import AccessorRenderer
from .writer import output_path_for, output_test_path_for, should_skip, write_output

__all__ = [
    "AccessorRenderer",
    "FormatError",
    "GoFormatter",
    "output_path_for",
    "should_skip",
    "output_test_path_for",
    "write_output",
]
