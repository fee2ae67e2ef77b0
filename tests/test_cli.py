"""CLI tests."""

import sys

import pytest

from scsr import cli


def _run_cli(args, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["scsr"] + args)
    return cli.main()


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("TRUE", True),
    ("True", True),
    ("false", False),
    ("FALSE", False),
    ("yes", False),
    ("", False),
])
def test_parse_detailed(value, expected):
    assert cli.parse_detailed(value) is expected


def test_missing_build_directory(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli([str(tmp_path), "--no-color"], monkeypatch)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Nothing found in the build directory" in captured.err


def test_summary_report(monkeypatch, capsys, project, write_artifact):
    write_artifact("Huge", 24577)
    write_artifact("Near", 19661)
    write_artifact("Tiny", 50)
    _run_cli([str(project), "--no-color"], monkeypatch)
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == "Please review the following contracts!!!"
    assert "./contracts/Huge.sol" in captured.out
    assert "24,577" in captured.out
    assert "This contract is too big to be deployed!" in captured.out
    assert "Maximum capacity almost reached. Please refactor." in captured.out
    assert "Tiny" not in captured.out
    assert captured.out.index("Huge") < captured.out.index("Near")
    assert captured.err == ""


def test_detailed_flag_case_insensitive(monkeypatch, capsys, project, write_artifact):
    write_artifact("Tiny", 50)
    _run_cli([str(project), "TRUE", "--no-color"], monkeypatch)
    out = capsys.readouterr().out
    assert "./contracts/Tiny.sol" in out
    assert "0%" in out


def test_nothing_to_report_prints_nothing(monkeypatch, capsys, project, write_artifact):
    write_artifact("Tiny", 50)
    _run_cli([str(project), "false"], monkeypatch)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_malformed_artifact_logged_and_skipped(monkeypatch, capsys, project, write_artifact):
    write_artifact("A", 20000)
    write_artifact("B", 21000)
    write_artifact("C", 22000)
    (project / "build" / "contracts" / "Broken.json").write_text("{oops", encoding="utf-8")
    _run_cli([str(project), "--no-color"], monkeypatch)
    captured = capsys.readouterr()
    assert "Broken.json" in captured.err
    assert captured.err.startswith("Error: ")
    assert "Broken" not in captured.out
    for name in ("A", "B", "C"):
        assert f"./contracts/{name}.sol" in captured.out


def test_default_root_is_cwd(monkeypatch, capsys, project, write_artifact):
    write_artifact("Huge", 30000)
    monkeypatch.chdir(project)
    _run_cli(["--no-color"], monkeypatch)
    assert "./contracts/Huge.sol" in capsys.readouterr().out


def test_colored_output(monkeypatch, capsys, project, write_artifact):
    write_artifact("Huge", 30000)
    _run_cli([str(project)], monkeypatch)
    assert "\033[31m" in capsys.readouterr().out


def test_custom_build_dir(monkeypatch, capsys, project, write_artifact):
    write_artifact("Huge", 30000)
    (project / "build" / "contracts").rename(project / "artifacts")
    _run_cli([str(project), "--build-dir", "artifacts", "--no-color"], monkeypatch)
    assert "./contracts/Huge.sol" in capsys.readouterr().out


def test_unexpected_error_exits_nonzero(monkeypatch, capsys, project):
    def _boom(**kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("scsr.api.run_report", _boom)
    with pytest.raises(SystemExit) as excinfo:
        _run_cli([str(project)], monkeypatch)
    assert excinfo.value.code == 1
    assert "Unexpected error: disk on fire" in capsys.readouterr().err
