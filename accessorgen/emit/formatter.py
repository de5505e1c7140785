"""Import fixing and formatting of generated Go source."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..errors import FormatError
from ..logging import get_logger

Runner = Callable[[Sequence[str], str], str]

# Tools tried in order of preference; the first one on PATH wins.
_TOOL_CHAIN = {
    "goimports": ("goimports", "gofmt"),
    "gofmt": ("gofmt",),
    "none": (),
}


class GoFormatter:
    """Pipes generated source through goimports or gofmt."""

    def __init__(
        self,
        preferred: str = "goimports",
        *,
        runner: Runner | None = None,
        which: Callable[[str], Optional[str]] | None = None,
    ) -> None:
        if preferred not in _TOOL_CHAIN:
            choices = ", ".join(_TOOL_CHAIN)
            raise ValueError(f"Unknown formatter '{preferred}' (expected one of: {choices})")
        self.preferred = preferred
        self._runner = runner or self._default_runner
        self._which = which or shutil.which
        self.logger = get_logger("emit.formatter")
        self._tool: Optional[str] = None
        self._tool_resolved = False

    @property
    def tool(self) -> Optional[str]:
        if not self._tool_resolved:
            self._tool = next(
                (name for name in _TOOL_CHAIN[self.preferred] if self._which(name)), None
            )
            self._tool_resolved = True
            if self._tool is None and self.preferred != "none":
                self.logger.warning(
                    "No Go formatter found on PATH (tried %s); writing unformatted output",
                    ", ".join(_TOOL_CHAIN[self.preferred]),
                )
        return self._tool

    def format(self, source: str, path: Path) -> str:
        tool = self.tool
        if tool is None:
            return source
        args = [tool]
        if tool == "goimports":
            args.extend(["-srcdir", str(path.parent)])
        self.logger.debug("Formatting %s with %s", path, tool)
        try:
            return self._runner(args, source)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise FormatError(path, f"{tool} failed: {detail}") from exc

    @staticmethod
    def _default_runner(args: Sequence[str], source: str) -> str:
        completed = subprocess.run(
            list(args),
            input=source,
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["GoFormatter", "Runner"]
