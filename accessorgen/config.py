"""Configuration loading for accessorgen (.accessorgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import AccessorGenError
from .options import GenerationMode, OptionModifier
from . import options as opts

CONFIG_FILENAME = ".accessorgen.yml"


class ConfigError(AccessorGenError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AccessorGenConfig:
    """Represents the settings defined in .accessorgen.yml."""

    root: Path
    mode: Optional[GenerationMode] = None
    recursive: Optional[bool] = None
    tests: Optional[bool] = None
    formatter: Optional[str] = None
    exclude_dirs: List[str] = field(default_factory=list)

    def modifiers(self) -> List[OptionModifier]:
        """Return option modifiers for every value the file sets."""
        result: List[OptionModifier] = []
        if self.mode is not None:
            result.append(opts.mode(self.mode))
        if self.recursive is not None:
            result.append(opts.recursive(self.recursive))
        if self.tests is not None:
            result.append(opts.with_tests(self.tests))
        if self.formatter is not None:
            result.append(opts.formatter(self.formatter))
        if self.exclude_dirs:
            result.append(opts.exclude_dirs(self.exclude_dirs))
        return result


_FORMATTERS = {"goimports", "gofmt", "none"}


def load_config(config_path: Path) -> AccessorGenConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AccessorGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(config_file, f"{CONFIG_FILENAME} must contain a mapping at the root")

    mode = None
    mode_text = _as_str(data.get("mode"))
    if mode_text:
        try:
            mode = GenerationMode.parse(mode_text)
        except ValueError as exc:
            raise ConfigError(config_file, str(exc)) from exc

    formatter = _as_str(data.get("formatter"))
    if formatter is not None:
        formatter = formatter.strip().lower()
        if formatter not in _FORMATTERS:
            choices = ", ".join(sorted(_FORMATTERS))
            raise ConfigError(
                config_file, f"Unknown formatter '{formatter}' (expected one of: {choices})"
            )

    return AccessorGenConfig(
        root=root,
        mode=mode,
        recursive=_as_bool(data.get("recursive")),
        tests=_as_bool(data.get("tests")),
        formatter=formatter,
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(path, f"cannot read configuration: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["AccessorGenConfig", "CONFIG_FILENAME", "ConfigError", "load_config"]
