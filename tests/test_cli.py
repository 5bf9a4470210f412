from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kickstart import cli
from kickstart.cli import main
from kickstart.console import ALIASES, PALETTE, resolve


def test_cli_create_backend(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["create:backend", "shop-api", "--directory", str(tmp_path)])

    assert exit_code == 0
    assert (tmp_path / "shop-api" / "server.js").read_text(encoding="utf-8") == "//servercode"
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == resolve("info").apply("Creating backend project: shop-api")
    assert lines[1] == resolve("success").apply("Project created successfully!")


def test_cli_reports_existing_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "shop-api").mkdir()

    assert main(["create:backend", "shop-api", "-d", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert resolve("warn").apply("Directory already exists!") in out
    assert (tmp_path / "shop-api" / "server.js").exists()


def test_cli_without_command_creates_default_project(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0
    assert (tmp_path / "My-app" / "server.js").exists()


def test_cli_reports_scaffold_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "taken").write_text("", encoding="utf-8")

    assert main(["create:backend", "taken", "-d", str(tmp_path)]) == 1
    assert "\x1b[31;1m" in capsys.readouterr().out


def test_cli_rejects_invalid_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["create:backend", "a/b", "-d", str(tmp_path)]) == 1
    assert "invalid project name" in capsys.readouterr().out


def test_cli_styles_preview(capsys: pytest.CaptureFixture[str]):
    assert main(["styles"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(ALIASES) + len(PALETTE)
    assert resolve("cyan.intense").apply("cyan.intense") in lines
    assert resolve("debug").apply("debug") in lines


def test_cli_rejects_unknown_command():
    with pytest.raises(SystemExit) as excinfo:
        main(["create:frontend"])
    assert excinfo.value.code == 2


def test_cli_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "kickstart 0.1.0"


def test_cli_verbose_enables_debug_logging_and_fallback_warnings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    calls: list[dict] = []
    emitters: list[cli.Emitter] = []
    real_emitter = cli.Emitter

    def record_emitter(*args, **kwargs):
        emitter = real_emitter(*args, **kwargs)
        emitters.append(emitter)
        return emitter

    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(cli, "Emitter", record_emitter)
    caplog.set_level(logging.DEBUG, logger="kickstart")

    assert main(["-v", "create:backend", "svc", "-d", str(tmp_path)]) == 0

    assert calls and calls[0]["level"] == logging.DEBUG
    assert emitters[0].settings.warn_on_fallback is True
    assert any(record.name == "kickstart.scaffold" for record in caplog.records)


def test_cli_default_run_has_fallback_warnings_off(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    emitters: list[cli.Emitter] = []
    real_emitter = cli.Emitter

    def record_emitter(*args, **kwargs):
        emitter = real_emitter(*args, **kwargs)
        emitters.append(emitter)
        return emitter

    monkeypatch.setattr(cli, "Emitter", record_emitter)

    assert main(["create:backend", "svc", "-d", str(tmp_path)]) == 0
    assert emitters[0].settings.warn_on_fallback is False


def test_cli_bare_run_skips_creating_announcement(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Creating backend project" not in "\n".join(lines)
    assert lines[0] == resolve("success").apply("Project created successfully!")
