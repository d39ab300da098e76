# tests/test_cli.py
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from jpdetect.cli import main


def test_cli_detects_file(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes("こんにちは".encode("cp932"))
    result = subprocess.run(
        [sys.executable, "-m", "jpdetect.cli", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == f"{f}: cp932 (shift-jis)"


def test_cli_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "jpdetect.cli"],
        input=b"Hello world",
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "stdin: ascii (ascii)"


def test_cli_version():
    result = subprocess.run(
        [sys.executable, "-m", "jpdetect.cli", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "1.0.0" in result.stdout


def test_cli_minimal_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes("日本語".encode("euc_jp"))
    main(["--minimal", str(f)])
    assert capsys.readouterr().out.strip() == "euc_jp"


def test_cli_minimal_undetermined(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(b"\x80")
    main(["--minimal", str(f)])
    assert capsys.readouterr().out.strip() == "None"


def test_cli_reports_jis_variant(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(b"\x1b$@$3$s\x1b(B")
    main([str(f)])
    out = capsys.readouterr().out
    assert out.strip() == f"{f}: iso2022_jp_ext (jis, jis0208-1978)"


def test_cli_multiple_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f1 = tmp_path / "a.txt"
    f2 = tmp_path / "b.txt"
    f1.write_bytes(b"Hello")
    f2.write_bytes("日本語".encode())
    main([str(f1), str(f2)])
    lines = capsys.readouterr().out.strip().split("\n")
    assert lines == [f"{f1}: ascii (ascii)", f"{f2}: utf-8 (utf-8)"]


def test_cli_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="1"):
        main(["nonexistent_file_xyz.txt"])
    captured = capsys.readouterr()
    assert "nonexistent_file_xyz.txt" in captured.err


def test_cli_convert_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "A.cs"
    f.write_bytes("こんにちは\r\n".encode("cp932"))
    main(["--convert", str(f)])
    assert capsys.readouterr().out.strip() == f"{f}: converted from cp932"
    assert f.read_bytes() == "こんにちは\n".encode()


def test_cli_convert_unchanged(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "A.cs"
    f.write_bytes(b"\xef\xbb\xbfclass A {}\r\n")
    main(["--convert", str(f)])
    assert capsys.readouterr().out.strip() == f"{f}: unchanged"


def test_cli_convert_project_root(
    project: Path, capsys: pytest.CaptureFixture[str]
):
    f = project / "Assets" / "Scripts" / "A.cs"
    f.write_bytes("日本語\r\n".encode("euc_jp"))
    other = project / "Assets" / "notes.txt"
    other.write_bytes(b"a\r\n")
    main(["--convert", "--project-root", str(project)])
    assert capsys.readouterr().out.strip() == f"{f}: converted from euc_jp"
    assert f.read_bytes() == "日本語\n".encode()
    assert other.read_bytes() == b"a\r\n"


def test_cli_convert_error_continues(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    bad = tmp_path / "bad.cs"
    bad.write_bytes(b"\xe6\x97\xa5\xe6\x97\xa5\xc0\x80")
    good = tmp_path / "good.cs"
    good.write_bytes(b"a\r\n")
    with pytest.raises(SystemExit, match="1"):
        main(["--convert", str(bad), str(good)])
    captured = capsys.readouterr()
    assert "bad.cs" in captured.err
    assert f"{good}: converted from ascii" in captured.out
    assert good.read_bytes() == b"a\n"


def test_cli_verbose_logs(tmp_path: Path):
    f = tmp_path / "A.cs"
    f.write_bytes("日本語".encode("euc_jp"))
    result = subprocess.run(
        [sys.executable, "-m", "jpdetect.cli", "-vv", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "sjis = 2, euc = 6, utf8 = 2" in result.stderr


def test_cli_minimal_with_convert_rejected(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    f = tmp_path / "A.cs"
    f.write_bytes(b"a\r\n")
    with pytest.raises(SystemExit, match="2"):
        main(["--convert", "--minimal", str(f)])
    assert "--minimal" in capsys.readouterr().err
    assert f.read_bytes() == b"a\r\n"


def test_cli_convert_walk_error(
    project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    def failing_walk(project_root, config=None):
        msg = "Permission denied"
        raise PermissionError(msg)
        yield

    monkeypatch.setattr("jpdetect.cli.iter_eligible_files", failing_walk)
    with pytest.raises(SystemExit, match="1"):
        main(["--convert", "--project-root", str(project)])
    captured = capsys.readouterr()
    assert f"jpdetect: {project}: Permission denied" in captured.err
    assert captured.out == ""
