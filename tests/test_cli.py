"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from accessorgen import __version__
from accessorgen import options as opts
from accessorgen.cli import _build_parser, _modifiers_from_args, main
from accessorgen.options import GenerationMode


def test_cli_defaults_leave_options_unset() -> None:
    args = _build_parser().parse_args([])
    assert args.dir is None
    assert args.mode is None
    assert args.recursive is None
    assert args.tests is None
    assert args.verbose is False
    assert args.log_file is None


def test_cli_accepts_all_flags() -> None:
    args = _build_parser().parse_args(
        ["--dir", "pkg", "--mode", "getter", "--recursive", "--tests", "--formatter", "none", "-v"]
    )
    assert args.dir == "pkg"
    assert args.mode == "getter"
    assert args.recursive is True
    assert args.tests is True
    assert args.formatter == "none"
    assert args.verbose is True


def test_cli_rejects_unknown_mode() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["--mode", "both"])


def test_cli_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_flags_override_config_file(tmp_path: Path) -> None:
    (tmp_path / ".accessorgen.yml").write_text("mode: getter\nrecursive: true\n", encoding="utf-8")
    args = _build_parser().parse_args(["--dir", str(tmp_path), "--mode", "setter"])

    options = opts.build_options(*_modifiers_from_args(args))

    assert options.directory == tmp_path
    assert options.mode is GenerationMode.SETTER
    assert options.recursive is True


def test_main_generates_files(go_package, capsys, monkeypatch) -> None:
    monkeypatch.setattr("accessorgen.cli.configure_logging", lambda **_: None)
    directory = go_package.write({"user.go": "package user\n\ntype User struct {\n\tName string\n}\n"})

    main(["--dir", str(directory), "--formatter", "none"])

    out = capsys.readouterr().out
    assert f"Generated accessors for file: {directory / 'user.go'}" in out
    assert (directory / "user_accessor_gen.go").exists()


def test_main_reports_load_errors(go_package, capsys, monkeypatch) -> None:
    monkeypatch.setattr("accessorgen.cli.configure_logging", lambda **_: None)
    directory = go_package.write({"bad.go": "package bad\n\ntype T struct {\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["--dir", str(directory), "--formatter", "none"])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_main_passes_log_file_to_logging(go_package, tmp_path, monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr("accessorgen.cli.configure_logging", lambda **kwargs: calls.append(kwargs))
    directory = go_package.write({"user.go": "package user\n\ntype User struct {\n\tName string\n}\n"})
    log_file = tmp_path / "accessorgen.log"

    main(["--dir", str(directory), "--formatter", "none", "--log-file", str(log_file), "-v"])

    assert calls == [{"verbose": True, "log_file": log_file}]
