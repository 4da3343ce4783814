"""Tests for log, compact, show and path commands."""

import json

import pytest
from typer.testing import CliRunner

from logfold.cli.main import app


runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Run commands in an empty directory with logs under tmp_path/logs."""
    log_dir = tmp_path / "logs"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOGFOLD_DIR", str(log_dir))
    monkeypatch.setenv("NO_COLOR", "1")
    return log_dir / "log.txt"


def test_log_writes_entry(cli_env):
    result = runner.invoke(app, ["log", "info", "hello world"])
    assert result.exit_code == 0
    assert "[INFO] hello world" in result.output
    assert cli_env.read_text().rstrip("\n").endswith("[INFO] hello world")


def test_log_with_source(cli_env):
    result = runner.invoke(app, ["log", "warning", "low disk", "--source", "storage"])
    assert result.exit_code == 0
    assert "] [storage] [WARNING] low disk" in cli_env.read_text()


def test_log_repeats_fold(cli_env):
    for _ in range(3):
        runner.invoke(app, ["log", "info", "disk ok"])
    lines = cli_env.read_text().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("[INFO] disk ok (repeated 3 times)")


def test_log_unknown_level(cli_env):
    result = runner.invoke(app, ["log", "loud", "x"])
    assert result.exit_code == 1
    assert "Unknown log level" in result.output
    assert not cli_env.exists()


def test_log_with_config_file(cli_env, tmp_path, monkeypatch):
    monkeypatch.delenv("LOGFOLD_DIR")
    config = tmp_path / "conf.yaml"
    config.write_text(f"log_dir: {tmp_path / 'other'}\nfilename: app.log\n")
    result = runner.invoke(app, ["--config", str(config), "log", "info", "x"])
    assert result.exit_code == 0
    assert (tmp_path / "other" / "app.log").exists()


def test_compact(cli_env):
    cli_env.parent.mkdir(parents=True)
    cli_env.write_text(
        "[2024-01-01 00:00:00] [INFO] a[2024-01-01 00:00:01] [INFO] a\n"
        "[2024-01-01 00:00:02] [INFO] b\n"
    )
    result = runner.invoke(app, ["compact"])
    assert result.exit_code == 0
    assert "Compacted" in result.output
    assert cli_env.read_text().splitlines() == [
        "[2024-01-01 00:00:01] [INFO] a (repeated 2 times)",
        "[2024-01-01 00:00:02] [INFO] b",
    ]


def test_compact_max_lines(cli_env):
    cli_env.parent.mkdir(parents=True)
    cli_env.write_text("".join(f"[2024-01-01 00:00:00] [INFO] m{i}\n" for i in range(10)))
    result = runner.invoke(app, ["compact", "--max-lines", "4"])
    assert result.exit_code == 0
    assert len(cli_env.read_text().splitlines()) == 4


def test_compact_invalid_max_lines(cli_env):
    result = runner.invoke(app, ["compact", "--max-lines", "0"])
    assert result.exit_code == 1
    assert "max_lines" in result.output


def test_compact_nothing(cli_env):
    result = runner.invoke(app, ["compact"])
    assert result.exit_code == 0
    assert "Nothing to compact" in result.output


def test_show_empty(cli_env):
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "No log entries yet" in result.output


def test_show_entries(cli_env):
    runner.invoke(app, ["log", "info", "first"])
    runner.invoke(app, ["log", "error", "second"])
    result = runner.invoke(app, ["show", "--last", "1"])
    assert result.exit_code == 0
    assert "[ERROR] second" in result.stdout
    assert "first" not in result.stdout


def test_show_json(cli_env):
    runner.invoke(app, ["log", "info", "first"])
    result = runner.invoke(app, ["show", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["path"] == str(cli_env)
    assert data["entries"][0].endswith("[INFO] first")


def test_path(cli_env):
    result = runner.invoke(app, ["path"])
    assert result.exit_code == 0
    assert result.stdout.strip() == str(cli_env)
