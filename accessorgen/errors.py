"""Exception hierarchy shared across accessorgen components."""

from __future__ import annotations

from pathlib import Path


class AccessorGenError(RuntimeError):
    """Base class for failures that abort processing of a path."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.reason = message


class ParseError(AccessorGenError):
    """Raised when a Go source file cannot be parsed."""

    def __init__(self, path: Path | str, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(path, message)
        self.line = line


class LoadError(AccessorGenError):
    """Raised when a directory cannot be loaded and type-checked."""


class FormatError(AccessorGenError):
    """Raised when the formatting pass rejects generated source."""


__all__ = ["AccessorGenError", "FormatError", "LoadError", "ParseError"]
