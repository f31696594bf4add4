"""
Tests for the command-line file converter.
"""

import pytest

from zscii.cli import Converter, main
from .conftest import HELLO_PACKED, HELLO_TEXT


class TestConverter:
    """Tests for Converter file conversion."""

    def test_encode_file(self, tmp_path):
        source = tmp_path / "hello.txt"
        source.write_bytes(HELLO_TEXT.encode('utf-8'))

        target = Converter().encode_file(str(source))

        assert target == tmp_path / "hello.zscii"
        assert target.read_bytes() == HELLO_PACKED

    def test_decode_file(self, tmp_path):
        source = tmp_path / "hello.zscii"
        source.write_bytes(HELLO_PACKED)

        target = Converter().decode_file(str(source))

        assert target == tmp_path / "hello.utf-8"
        assert target.read_bytes() == HELLO_TEXT.encode('utf-8')

    def test_explicit_output(self, tmp_path):
        source = tmp_path / "hello.txt"
        source.write_bytes("Grüße\n".encode('utf-8'))
        output = tmp_path / "out.bin"

        Converter().encode_file(str(source), str(output))
        back = Converter().decode_file(str(output), str(tmp_path / "back.txt"))

        assert back.read_bytes().decode('utf-8') == "Grüße\n"

    def test_verbose_log(self, tmp_path, capsys):
        source = tmp_path / "hello.txt"
        source.write_bytes(b"hi")

        Converter(verbose=True).encode_file(str(source))

        err = capsys.readouterr().err
        assert "[zscii] Encoding" in err
        assert "(2 bytes)" in err

    def test_quiet_by_default(self, tmp_path, capsys):
        source = tmp_path / "hello.txt"
        source.write_bytes(b"hi")

        Converter().encode_file(str(source))

        assert capsys.readouterr().err == ""


class TestMain:
    """Tests for the zsciiconv command line."""

    def test_encode(self, tmp_path):
        source = tmp_path / "story.txt"
        source.write_bytes(HELLO_TEXT.encode('utf-8'))

        with pytest.raises(SystemExit) as exc_info:
            main(['-e', str(source)])

        assert exc_info.value.code == 0
        assert (tmp_path / "story.zscii").read_bytes() == HELLO_PACKED

    def test_decode(self, tmp_path):
        source = tmp_path / "story.zscii"
        source.write_bytes(HELLO_PACKED)

        with pytest.raises(SystemExit) as exc_info:
            main(['-d', str(source)])

        assert exc_info.value.code == 0
        assert (tmp_path / "story.utf-8").read_text(encoding='utf-8') == HELLO_TEXT

    def test_unmappable_input_fails(self, tmp_path, capsys):
        source = tmp_path / "snow.txt"
        source.write_bytes("☃".encode('utf-8'))

        with pytest.raises(SystemExit) as exc_info:
            main(['--encode', str(source)])

        assert exc_info.value.code == 1
        assert "Conversion error" in capsys.readouterr().err
        assert not (tmp_path / "snow.zscii").exists()

    def test_odd_length_input_fails(self, tmp_path, capsys):
        source = tmp_path / "broken.zscii"
        source.write_bytes(HELLO_PACKED[:-1])

        with pytest.raises(SystemExit) as exc_info:
            main(['--decode', str(source)])

        assert exc_info.value.code == 1
        assert "not an even number of bytes" in capsys.readouterr().err

    def test_missing_file_fails(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['-e', str(tmp_path / "nope.txt")])
        assert exc_info.value.code == 1

    def test_mode_required(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "story.txt")])
        assert exc_info.value.code == 2

    def test_modes_exclusive(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['-e', '-d', str(tmp_path / "story.txt")])
        assert exc_info.value.code == 2
