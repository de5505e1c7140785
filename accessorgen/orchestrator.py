"""Pipeline orchestration: walk directories, assemble, render, format and write."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set

from .emit import AccessorRenderer, GoFormatter
from .emit.writer import output_path_for, output_test_path_for, should_skip, write_output
from .fields import FieldModelAssembler
from .logging import get_logger
from .models import CompilationUnit, GeneratedArtifact
from .options import GenerationMode, Options
from .stores import ResolutionCache

_EXCLUDED_DIRS = {"vendor", "testdata", "node_modules"}


@dataclass
class GeneratedFile:
    """One source file and the outputs generated for it."""

    source: Path
    output: Path
    test_output: Optional[Path] = None


@dataclass
class RunReport:
    """Outcome of a generation run."""

    generated: List[GeneratedFile] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    directories: List[Path] = field(default_factory=list)

    @property
    def written(self) -> List[Path]:
        paths: List[Path] = []
        for item in self.generated:
            paths.append(item.output)
            if item.test_output is not None:
                paths.append(item.test_output)
        return paths


class Orchestrator:
    """Coordinates accessor generation for one or more directories."""

    def __init__(
        self,
        cache: ResolutionCache | None = None,
        assembler: FieldModelAssembler | None = None,
        renderer: AccessorRenderer | None = None,
        formatter: GoFormatter | None = None,
    ) -> None:
        self.cache = cache or ResolutionCache()
        self.assembler = assembler or FieldModelAssembler(self.cache)
        self.renderer = renderer or AccessorRenderer()
        self._formatter_override = formatter
        self.formatter = formatter or GoFormatter()
        self.logger = get_logger("orchestrator")

    def run(self, options: Options) -> RunReport:
        """Process ``options.directory``, recursively when requested."""
        root = Path(os.path.abspath(options.directory))
        if self._formatter_override is None and self.formatter.preferred != options.formatter:
            self.formatter = GoFormatter(options.formatter)

        report = RunReport()
        if options.mode is GenerationMode.UNKNOWN:
            self.logger.warning("Generation mode is unset; nothing to generate")
            return report

        self.logger.info("Starting %s run for %s", options.mode, root)
        if options.recursive:
            directories: Sequence[Path] = list(
                iter_directories(root, excluded=_EXCLUDED_DIRS | set(options.exclude_dirs))
            )
        else:
            directories = [root]

        for directory in directories:
            self.process_directory(
                directory, options.mode, with_tests=options.with_tests, report=report
            )
        self.logger.debug(
            "Processed %d directories, wrote %d files",
            len(report.directories),
            len(report.written),
        )
        return report

    def process_directory(
        self,
        directory: Path | str,
        mode: GenerationMode,
        *,
        with_tests: bool = False,
        report: RunReport | None = None,
    ) -> RunReport:
        report = report if report is not None else RunReport()
        resolution = self.cache.resolve(directory)
        report.directories.append(resolution.path)
        for unit in resolution.units:
            if should_skip(unit.path):
                self.logger.debug("Ignoring %s", unit.path)
                continue
            generated = self.process_unit(unit, mode, with_tests=with_tests)
            if generated is None:
                report.skipped.append(unit.path)
            else:
                report.generated.append(generated)
        return report

    def process_unit(
        self, unit: CompilationUnit, mode: GenerationMode, *, with_tests: bool = False
    ) -> Optional[GeneratedFile]:
        artifact = self.assembler.assemble(unit, mode)
        if artifact is None:
            return None

        output = self._emit(artifact)
        test_output = self._emit_tests(artifact) if with_tests else None
        self.logger.info("Wrote %s", output)
        return GeneratedFile(source=unit.path, output=output, test_output=test_output)

    def _emit(self, artifact: GeneratedArtifact) -> Path:
        target = output_path_for(artifact.source_path)
        source = self.renderer.render(artifact)
        return write_output(target, self.formatter.format(source, target))

    def _emit_tests(self, artifact: GeneratedArtifact) -> Optional[Path]:
        source = self.renderer.render_tests(artifact)
        if source is None:
            return None
        target = output_test_path_for(artifact.source_path)
        return write_output(target, self.formatter.format(source, target))


def iter_directories(root: Path, *, excluded: Set[str]) -> Iterator[Path]:
    """Yield ``root`` and its sub-directories, skipping hidden and excluded ones."""
    for current, dirnames, _ in os.walk(root):
        dirnames[:] = sorted(
            name for name in dirnames if not name.startswith((".", "_")) and name not in excluded
        )
        yield Path(current)


__all__ = ["GeneratedFile", "Orchestrator", "RunReport", "iter_directories"]
