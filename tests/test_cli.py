"""CLI tests via typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from ninny.cli.app import app
from ninny.core.errors import ExitCode

runner = CliRunner()

DOC = """\
name = demo
debug

[server.http]
port = 8080 ; default
host = "0.0.0.0"

[server]
workers = 4
"""


@pytest.fixture
def doc_file(write_ini):
    return write_ini(DOC)


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "ninny 0.1.0" in result.output


def test_show_json(doc_file):
    result = runner.invoke(app, ["show", str(doc_file), "--format", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "name": "demo",
        "debug": "true",
        "server": {"workers": "4", "http": {"port": "8080", "host": "0.0.0.0"}},
    }


def test_show_tree_is_default(doc_file):
    result = runner.invoke(app, ["show", str(doc_file)])
    assert result.exit_code == 0, result.output
    assert "[server]" in result.stdout
    assert "[http]" in result.stdout
    assert "port = '8080'" in result.stdout


def test_show_plain(doc_file):
    result = runner.invoke(app, ["show", str(doc_file), "-f", "plain", "--indent", "2"])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("{\n")
    assert "  server: {\n" in result.stdout


def test_show_uses_repo_config(doc_file, tmp_path):
    cfg = tmp_path / ".ninny" / "config.toml"
    cfg.parent.mkdir()
    cfg.write_text('[render]\nformat = "json"\n', encoding="utf-8")

    result = runner.invoke(app, ["show", str(doc_file)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["name"] == "demo"


def test_show_rejects_unknown_format(doc_file):
    result = runner.invoke(app, ["show", str(doc_file), "--format", "xml"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert "Invalid config" not in result.output


def test_show_rejects_unknown_format_from_config(doc_file, tmp_path):
    cfg = tmp_path / ".ninny" / "config.toml"
    cfg.parent.mkdir()
    cfg.write_text('[render]\nformat = "xml"\n', encoding="utf-8")

    result = runner.invoke(app, ["show", str(doc_file)])
    assert result.exit_code == int(ExitCode.ERROR)
    assert "Invalid config" in result.output


def test_show_parse_error(write_ini):
    p = write_ini("[s]\nk=1\nk=2\n")
    result = runner.invoke(app, ["show", str(p)])
    assert result.exit_code == int(ExitCode.PARSE_ERROR)
    assert "Duplicate key" in result.output


def test_show_missing_file(tmp_path):
    result = runner.invoke(app, ["show", str(tmp_path / "nope.ini")])
    assert result.exit_code == int(ExitCode.ERROR)
    assert "Cannot read" in result.output


def test_check_ok(doc_file):
    result = runner.invoke(app, ["check", str(doc_file)])
    assert result.exit_code == 0, result.output
    assert "OK" in result.output


def test_check_reports_each_file(doc_file, write_ini):
    bad = write_ini("[a.b\n", name="bad.ini")
    result = runner.invoke(app, ["check", str(doc_file), str(bad)])
    assert result.exit_code == int(ExitCode.PARSE_ERROR)
    assert "OK" in result.output
    assert "Unclosed section header" in result.output


def test_check_errors_go_to_stderr(doc_file, write_ini):
    bad = write_ini("[a.b\n", name="bad.ini")
    result = runner.invoke(app, ["check", str(doc_file), str(bad), str(doc_file.parent / "nope.ini")])
    assert result.exit_code == int(ExitCode.ERROR)
    assert "OK" in result.stdout
    assert "Unclosed section header" not in result.stdout
    assert "Cannot read" not in result.stdout
    assert "Unclosed section header" in result.stderr
    assert "Cannot read" in result.stderr


def test_get_value(doc_file):
    result = runner.invoke(app, ["get", str(doc_file), "server.http.host"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "0.0.0.0"


def test_get_section_as_json(doc_file):
    result = runner.invoke(app, ["get", str(doc_file), "server.http"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"port": "8080", "host": "0.0.0.0"}


def test_get_missing_key(doc_file):
    result = runner.invoke(app, ["get", str(doc_file), "server.nope"])
    assert result.exit_code == int(ExitCode.ERROR)
    assert "No such key" in result.output


def test_init_writes_config(tmp_path):
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 0, result.output
    cfg = tmp_path / ".ninny" / "config.toml"
    assert cfg.is_file()
    assert "[render]" in cfg.read_text(encoding="utf-8")

    again = runner.invoke(app, ["init", str(tmp_path)])
    assert "already exists" in again.output


def test_init_force_overwrites(tmp_path):
    cfg = tmp_path / ".ninny" / "config.toml"
    cfg.parent.mkdir()
    cfg.write_text("# mine\n", encoding="utf-8")

    result = runner.invoke(app, ["init", str(tmp_path), "--force"])
    assert result.exit_code == 0, result.output
    assert "[render]" in cfg.read_text(encoding="utf-8")


def test_demo_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["demo", "--format", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["toplevel"] == "hello"
    assert data["goodbye"]["world"] == "Captain Planet!"


def test_demo_rejects_unknown_format(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["demo", "-f", "toml"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output
