"""CLI entrypoint for accessorgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from . import __version__
from . import options as opts
from .config import ConfigError, load_config
from .errors import AccessorGenError
from .logging import configure_logging, get_logger
from .options import GenerationMode, OptionModifier
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="accessorgen",
        description="Generate getter and setter methods for Go struct fields.",
    )
    parser.add_argument(
        "--dir",
        default=None,
        help="Directory to process (default is current working directory).",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GenerationMode if m is not GenerationMode.UNKNOWN],
        default=None,
        help="Mode to generate: 'getter', 'setter', or 'accessor' (default: accessor).",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="Recursively process directories (default: false).",
    )
    parser.add_argument(
        "--tests",
        action="store_true",
        default=None,
        help="Also generate test scaffolding exercising the accessors.",
    )
    parser.add_argument(
        "--formatter",
        choices=["goimports", "gofmt", "none"],
        default=None,
        help="Formatting pass applied to generated code (default: goimports).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .accessorgen.yml file (default: looked up in --dir).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s v{__version__}",
        help="Show version information.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def _modifiers_from_args(args: argparse.Namespace) -> List[OptionModifier]:
    directory = Path(args.dir) if args.dir else Path.cwd()
    config = load_config(Path(args.config) if args.config else directory)

    modifiers: List[OptionModifier] = [opts.directory(directory)]
    # File values first so flags given on the command line win.
    modifiers.extend(config.modifiers())
    if args.mode is not None:
        modifiers.append(opts.mode(args.mode))
    if args.recursive is not None:
        modifiers.append(opts.recursive(args.recursive))
    if args.tests is not None:
        modifiers.append(opts.with_tests(args.tests))
    if args.formatter is not None:
        modifiers.append(opts.formatter(args.formatter))
    return modifiers


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for accessorgen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )
    logger = get_logger("cli")

    try:
        options = opts.build_options(*_modifiers_from_args(args))
    except ConfigError as exc:
        parser.exit(1, f"Error: {exc}\n")

    try:
        report = Orchestrator().run(options)
    except AccessorGenError as exc:
        logger.debug("Run failed", exc_info=True)
        parser.exit(1, f"Error: {exc}\nRun with --verbose for more details.\n")

    for item in report.generated:
        print(f"Generated {options.mode}s for file: {item.source}")
    if not report.generated:
        print(f"No struct fields found under {options.directory}")


if __name__ == "__main__":
    main(sys.argv[1:])
