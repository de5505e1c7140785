"""Generation mode and run options."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List


class GenerationMode(str, Enum):
    """Which accessor method bodies are emitted for each field."""

    UNKNOWN = ""
    GETTER = "getter"
    SETTER = "setter"
    ACCESSOR = "accessor"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "GenerationMode":
        normalised = text.strip().lower()
        for member in cls:
            if member.value == normalised and member is not cls.UNKNOWN:
                return member
        choices = ", ".join(m.value for m in cls if m is not cls.UNKNOWN)
        raise ValueError(f"Unknown mode '{text}' (expected one of: {choices})")

    @property
    def includes_getters(self) -> bool:
        return self in (GenerationMode.GETTER, GenerationMode.ACCESSOR)

    @property
    def includes_setters(self) -> bool:
        return self in (GenerationMode.SETTER, GenerationMode.ACCESSOR)

    # Toggles are applied in sequence and do not commute.

    def enable_getters(self) -> "GenerationMode":
        if self is GenerationMode.SETTER:
            return GenerationMode.ACCESSOR
        return GenerationMode.GETTER

    def enable_setters(self) -> "GenerationMode":
        if self is GenerationMode.GETTER:
            return GenerationMode.ACCESSOR
        return GenerationMode.SETTER

    def disable_getters(self) -> "GenerationMode":
        if self is GenerationMode.ACCESSOR:
            return GenerationMode.SETTER
        return GenerationMode.UNKNOWN

    def disable_setters(self) -> "GenerationMode":
        if self is GenerationMode.ACCESSOR:
            return GenerationMode.GETTER
        return GenerationMode.UNKNOWN


DEFAULT_MODE = GenerationMode.ACCESSOR


@dataclass
class Options:
    """Settings for a single generation run."""

    directory: Path = field(default_factory=Path.cwd)
    mode: GenerationMode = DEFAULT_MODE
    recursive: bool = False
    with_tests: bool = False
    formatter: str = "goimports"
    exclude_dirs: List[str] = field(default_factory=list)


OptionModifier = Callable[[Options], None]


def build_options(*modifiers: OptionModifier) -> Options:
    """Return default options with ``modifiers`` applied in order."""
    options = Options()
    for modifier in modifiers:
        modifier(options)
    return options


def directory(path: str | os.PathLike[str]) -> OptionModifier:
    """Set the directory to process. Default is the current working directory."""

    def _apply(options: Options) -> None:
        options.directory = Path(os.path.normpath(os.fspath(path)))

    return _apply


def mode(value: GenerationMode | str) -> OptionModifier:
    """Set the generation mode. Default is accessor."""
    resolved = value if isinstance(value, GenerationMode) else GenerationMode.parse(value)

    def _apply(options: Options) -> None:
        options.mode = resolved

    return _apply


def recursive(enabled: bool) -> OptionModifier:
    def _apply(options: Options) -> None:
        options.recursive = enabled

    return _apply


def with_tests(enabled: bool) -> OptionModifier:
    def _apply(options: Options) -> None:
        options.with_tests = enabled

    return _apply


def formatter(name: str) -> OptionModifier:
    def _apply(options: Options) -> None:
        options.formatter = name

    return _apply


def exclude_dirs(names: List[str]) -> OptionModifier:
    def _apply(options: Options) -> None:
        options.exclude_dirs = list(names)

    return _apply


def enable_getters() -> OptionModifier:
    """Enable getters without overriding the previously selected setters."""

    def _apply(options: Options) -> None:
        options.mode = options.mode.enable_getters()

    return _apply


def enable_setters() -> OptionModifier:
    """Enable setters without overriding the previously selected getters."""

    def _apply(options: Options) -> None:
        options.mode = options.mode.enable_setters()

    return _apply


def disable_getters() -> OptionModifier:
    def _apply(options: Options) -> None:
        options.mode = options.mode.disable_getters()

    return _apply


def disable_setters() -> OptionModifier:
    def _apply(options: Options) -> None:
        options.mode = options.mode.disable_setters()

    return _apply


__all__ = [
    "DEFAULT_MODE",
    "GenerationMode",
    "OptionModifier",
    "Options",
    "build_options",
    "directory",
    "disable_getters",
    "disable_setters",
    "enable_getters",
    "enable_setters",
    "exclude_dirs",
    "formatter",
    "mode",
    "recursive",
    "with_tests",
]
