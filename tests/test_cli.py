import logging

import pytest

from n64romconvert.cli import main_convert, main_type
from n64romconvert.constants import VERSION
from n64romconvert.ordering import RomOrdering
from n64romconvert.swap import endian_swap

PAYLOAD = bytes(range(256)) * 4  # 1024 bytes


@pytest.fixture
def z64_rom(tmp_path):
    path = tmp_path / "baserom.us.z64"
    path.write_bytes(RomOrdering.BIG_ENDIAN.magic + PAYLOAD[4:])
    return path


def test_convert(z64_rom, tmp_path, capsys):
    dest = tmp_path / "baserom.us.n64"

    assert main_convert([str(z64_rom), str(dest)]) == 0

    assert dest.read_bytes() == endian_swap(z64_rom.read_bytes())
    out = capsys.readouterr().out
    assert "BIG_ENDIAN" in out
    assert "LITTLE_ENDIAN" in out
    assert "baserom.us.n64" in out


def test_convert_quiet(z64_rom, tmp_path, capsys):
    dest = tmp_path / "baserom.us.v64"
    assert main_convert(["-q", str(z64_rom), str(dest)]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("flag", ["-f", "--format", "-t", "--type"])
def test_convert_explicit_format(z64_rom, tmp_path, flag):
    dest = tmp_path / "converted.bin"
    assert main_convert(["-q", flag, "n64", str(z64_rom), str(dest)]) == 0
    assert dest.read_bytes()[:4] == RomOrdering.LITTLE_ENDIAN.magic


def test_convert_invalid_format(z64_rom, tmp_path, caplog):
    dest = tmp_path / "converted.bin"
    with caplog.at_level(logging.ERROR):
        assert main_convert(["-f", "x64", str(z64_rom), str(dest)]) == 1
    assert "supplied target format `x64`, but it is invalid" in caplog.text
    assert not dest.exists()


def test_convert_same_format(z64_rom, tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main_convert([str(z64_rom), str(tmp_path / "copy.z64")]) == 1
    assert "same formats" in caplog.text


def test_convert_missing_source(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        code = main_convert([str(tmp_path / "nope.z64"), str(tmp_path / "x.n64")])
    assert code == 1
    assert "could not open ROM" in caplog.text


def test_convert_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_convert(["--version"])
    assert excinfo.value.code == 0
    assert VERSION in capsys.readouterr().out


def test_convert_missing_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main_convert([])
    assert excinfo.value.code == 2


def test_type(z64_rom, capsys):
    assert main_type([str(z64_rom)]) == 0
    out = capsys.readouterr().out
    assert "BIG_ENDIAN" in out
    assert "z64" in out


def test_type_invalid_rom(tmp_path, caplog):
    rom = tmp_path / "garbage.bin"
    rom.write_bytes(b"\x00" * 16)
    with caplog.at_level(logging.ERROR):
        assert main_type([str(rom)]) == 1
    assert "Unrecognized ROM magic" in caplog.text


def test_convert_onto_itself(z64_rom, caplog):
    original = z64_rom.read_bytes()
    with caplog.at_level(logging.ERROR):
        code = main_convert(["-q", "-f", "n64", str(z64_rom), str(z64_rom)])
    assert code == 1
    assert "onto itself" in caplog.text
    assert z64_rom.read_bytes() == original


def test_convert_empty_format_is_invalid(z64_rom, tmp_path, caplog):
    dest = tmp_path / "converted.n64"
    with caplog.at_level(logging.ERROR):
        assert main_convert(["-f", "", str(z64_rom), str(dest)]) == 1
    assert "supplied target format ``, but it is invalid" in caplog.text
    assert not dest.exists()


def test_convert_write_error(z64_rom, tmp_path, caplog, monkeypatch):
    def failing_write(stream, data):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("n64romconvert.swap.write_bytes", failing_write)

    with caplog.at_level(logging.ERROR):
        code = main_convert(["-q", str(z64_rom), str(tmp_path / "out.n64")])
    assert code == 1
    assert "No space left on device" in caplog.text
