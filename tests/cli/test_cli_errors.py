# tests/cli/test_cli_errors.py
from pathlib import Path

from typer.testing import CliRunner

from portastore.cli.app import app

runner = CliRunner()


def roots(tmp_path: Path) -> list[str]:
    return ["--local-root", str(tmp_path / "L"), "--roaming-root", str(tmp_path / "R")]


def test_rm_root_is_refused(tmp_path: Path):
    r = runner.invoke(app, [*roots(tmp_path), "rm"])
    assert r.exit_code == 1
    assert "Cannot delete root storage folder" in r.output
    assert (tmp_path / "L").is_dir()


def test_cat_missing_file(tmp_path: Path):
    r = runner.invoke(app, [*roots(tmp_path), "cat", "nope.txt"])
    assert r.exit_code == 1
    assert "Error:" in r.output


def test_ls_missing_folder(tmp_path: Path):
    r = runner.invoke(app, [*roots(tmp_path), "ls", "a/b"])
    assert r.exit_code == 1


def test_unknown_collision_keyword_fails_cleanly(tmp_path: Path):
    r = runner.invoke(app, [*roots(tmp_path), "mkdir", "x", "--collision", "sometimes"])
    assert r.exit_code != 0
    assert "Unknown collision option" in r.output


def test_unknown_backend_fails_cleanly(tmp_path: Path):
    r = runner.invoke(app, ["--backend", "ftp", *roots(tmp_path), "roots"])
    assert r.exit_code != 0
    assert "Unknown backend" in r.output


def test_half_configured_roots_fail_cleanly(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("PORTASTORE_ROAMING_ROOT", raising=False)
    r = runner.invoke(app, ["--local-root", str(tmp_path / "L"), "roots"])
    assert r.exit_code != 0
    assert "must be set together" in r.output


def test_rm_missing_entry_reports_it_missing(tmp_path: Path):
    r = runner.invoke(app, [*roots(tmp_path), "rm", "missing.txt"])
    assert r.exit_code == 1
    assert "No such file or folder: missing.txt" in r.output
