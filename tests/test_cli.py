import struct

import pytest

from retromfa.args import help_text, usage_text
from retromfa.cli import OUTPUT_NAME, main

PIXELS = b"\x01\x02\x03\x04"


def _bmp_bytes() -> bytes:
    header = struct.pack("<2sIHHI", b"BM", 14 + len(PIXELS), 0, 0, 14)
    return header + PIXELS


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_help_prints_help_and_succeeds(capsys, workdir):
    assert main(["--help"]) == 0
    assert capsys.readouterr().out == help_text()


def test_short_help(capsys, workdir):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == help_text()


def test_no_arguments_prints_usage(capsys, workdir):
    assert main([]) == 1
    assert capsys.readouterr().out == usage_text()


def test_unknown_option_fails(capsys, workdir):
    assert main(["-x"]) == 1
    assert capsys.readouterr().out == usage_text()


def test_too_many_arguments_fail(capsys, workdir):
    assert main(["a.mfa", "b.mfa"]) == 1
    assert capsys.readouterr().out == usage_text()


def test_missing_file_fails(capsys, workdir):
    assert main([str(workdir / "absent.mfa")]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error reading file")
    assert not (workdir / OUTPUT_NAME).exists()


def test_file_without_signatures_fails(capsys, workdir):
    path = workdir / "empty.mfa"
    path.write_bytes(b"\x00" * 32)
    assert main([str(path)]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_bmp_is_reported_and_extracted(capsys, workdir):
    path = workdir / "blue.mfa"
    data = _bmp_bytes()
    path.write_bytes(data)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        f"Files found inside \033[3m{path}\033[0m: 1\n"
        "  PNG: 0\n"
        "  JPEG: 0\n"
        "  BMP: 1\n"
    )
    assert "file.type: 1\n" in out
    assert (workdir / OUTPUT_NAME).read_bytes() == data


def test_png_only_is_counted_but_nothing_written(capsys, workdir):
    path = workdir / "pic.mfa"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 8)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "  PNG: 1\n" in out
    assert "file.type" not in out
    assert not (workdir / OUTPUT_NAME).exists()