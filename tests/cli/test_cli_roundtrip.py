# tests/cli/test_cli_roundtrip.py
from pathlib import Path

from typer.testing import CliRunner

from portastore.cli.app import app

runner = CliRunner()


def invoke(tmp_path: Path, *args: str):
    return runner.invoke(
        app,
        [
            "--local-root",
            str(tmp_path / "Local"),
            "--roaming-root",
            str(tmp_path / "Roaming"),
            *args,
        ],
    )


def test_roots(tmp_path: Path):
    r = invoke(tmp_path, "roots")
    assert r.exit_code == 0, r.output
    assert f"local: {tmp_path / 'Local'}" in r.output
    assert f"roaming: {tmp_path / 'Roaming'}" in r.output


def test_mkdir_write_ls_cat(tmp_path: Path):
    assert invoke(tmp_path, "mkdir", "Docs").exit_code == 0
    r = invoke(tmp_path, "write", "Docs/a.txt", "hello")
    assert r.exit_code == 0, r.output
    assert (tmp_path / "Local" / "Docs" / "a.txt").read_text() == "hello"

    r = invoke(tmp_path, "ls")
    assert r.exit_code == 0, r.output
    assert r.output.splitlines() == ["Docs/"]

    r = invoke(tmp_path, "ls", "Docs")
    assert r.output.splitlines() == ["a.txt"]

    r = invoke(tmp_path, "cat", "Docs/a.txt")
    assert r.exit_code == 0, r.output
    assert r.output == "hello"


def test_roaming_root_option(tmp_path: Path):
    r = invoke(tmp_path, "write", "--root", "roaming", "s.txt", "synced")
    assert r.exit_code == 0, r.output
    assert (tmp_path / "Roaming" / "s.txt").read_text() == "synced"


def test_mkdir_fail_collision(tmp_path: Path):
    invoke(tmp_path, "mkdir", "Docs")
    r = invoke(tmp_path, "mkdir", "Docs", "--collision", "fail")
    assert r.exit_code == 1
    assert "Error:" in r.output


def test_mv_and_rm(tmp_path: Path):
    invoke(tmp_path, "write", "a.txt", "x")
    r = invoke(tmp_path, "mv", "a.txt", "b.txt")
    assert r.exit_code == 0, r.output
    assert (tmp_path / "Local" / "b.txt").exists()

    r = invoke(tmp_path, "rm", "b.txt")
    assert r.exit_code == 0, r.output
    assert not (tmp_path / "Local" / "b.txt").exists()

    invoke(tmp_path, "mkdir", "tree")
    invoke(tmp_path, "write", "tree/leaf", "y")
    r = invoke(tmp_path, "rm", "tree")
    assert r.exit_code == 0, r.output
    assert not (tmp_path / "Local" / "tree").exists()
