"""
Tests for encoding detection and byte/text conversion.
"""

import pytest

from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import EncodingError
from fsedit.use_cases.editing.encoding_detector import (
    SAMPLE_SIZE,
    decode_bytes,
    detect_encoding,
    encode_text,
)


@pytest.fixture
def cp1252_locale(monkeypatch):
    monkeypatch.setattr(
        "fsedit.entities.encoding.locale.getpreferredencoding",
        lambda do_setlocale=True: "cp1252",
    )


class TestDetectEncoding:
    """Test cases for detect_encoding."""

    def test_empty_input(self):
        assert detect_encoding(b"") is FileEncoding.UTF8_NO_BOM

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"\xef\xbb\xbfhello", FileEncoding.UTF8_WITH_BOM),
            (b"\xff\xfe" + "hello".encode("utf-16-le"), FileEncoding.UTF16_LE),
            (b"\xfe\xff" + "hello".encode("utf-16-be"), FileEncoding.UTF16_BE),
            (b"\xff\xfe\x00\x00" + "hello".encode("utf-32-le"), FileEncoding.UTF32_LE),
        ],
    )
    def test_byte_order_marks(self, data, expected):
        assert detect_encoding(data) is expected

    def test_ascii(self):
        assert detect_encoding(b"plain text\n") is FileEncoding.ASCII

    def test_utf8_without_bom(self):
        assert detect_encoding("héllo wörld\n".encode("utf-8")) is FileEncoding.UTF8_NO_BOM

    def test_invalid_utf8_falls_back_to_system_default(self):
        assert detect_encoding(b"caf\xe9\n") is FileEncoding.SYSTEM_DEFAULT

    def test_multibyte_sequence_cut_by_sample_is_tolerated(self):
        data = b"a" * (SAMPLE_SIZE - 1) + "é".encode("utf-8") + b"z"
        assert detect_encoding(data) is FileEncoding.UTF8_NO_BOM

    def test_incomplete_sequence_at_end_of_file_is_invalid(self):
        data = b"abc" + "é".encode("utf-8")[:1]
        assert detect_encoding(data) is FileEncoding.SYSTEM_DEFAULT

    def test_only_the_sample_is_inspected(self):
        data = b"a" * SAMPLE_SIZE + "é".encode("utf-8")
        assert detect_encoding(data) is FileEncoding.ASCII


class TestDecodeBytes:
    def test_strips_utf8_bom(self):
        assert decode_bytes(b"\xef\xbb\xbfhi", FileEncoding.UTF8_WITH_BOM) == "hi"

    def test_strips_stray_bom_for_utf8_without_bom(self):
        assert decode_bytes(b"\xef\xbb\xbfhi", FileEncoding.UTF8_NO_BOM) == "hi"

    def test_utf16_le(self):
        data = b"\xff\xfe" + "zwölf".encode("utf-16-le")
        assert decode_bytes(data, FileEncoding.UTF16_LE) == "zwölf"

    def test_utf32_le(self):
        data = b"\xff\xfe\x00\x00" + "x\ny".encode("utf-32-le")
        assert decode_bytes(data, FileEncoding.UTF32_LE) == "x\ny"

    def test_auto_detect(self):
        data = b"\xfe\xff" + "ok".encode("utf-16-be")
        assert decode_bytes(data, FileEncoding.AUTO_DETECT) == "ok"

    def test_invalid_bytes_raise(self):
        with pytest.raises(EncodingError, match="Cannot decode content as utf8"):
            decode_bytes(b"caf\xe9", FileEncoding.UTF8_NO_BOM)

    def test_system_default(self, cp1252_locale):
        assert decode_bytes(b"caf\xe9", FileEncoding.SYSTEM_DEFAULT) == "café"


class TestEncodeText:
    def test_prepends_bom(self):
        assert encode_text("hi", FileEncoding.UTF8_WITH_BOM) == b"\xef\xbb\xbfhi"
        assert encode_text("hi", FileEncoding.UTF16_BE) == b"\xfe\xff\x00h\x00i"

    def test_auto_detect_writes_utf8_without_bom(self):
        assert encode_text("é", FileEncoding.AUTO_DETECT) == b"\xc3\xa9"

    def test_unrepresentable_text_raises(self):
        with pytest.raises(EncodingError, match="Cannot encode content as ascii"):
            encode_text("é", FileEncoding.ASCII)

    def test_system_default(self, cp1252_locale):
        assert encode_text("café", FileEncoding.SYSTEM_DEFAULT) == b"caf\xe9"

    @pytest.mark.parametrize(
        "encoding",
        [
            FileEncoding.UTF8_WITH_BOM,
            FileEncoding.UTF16_LE,
            FileEncoding.UTF16_BE,
            FileEncoding.UTF32_LE,
        ],
    )
    def test_detected_back_after_encoding(self, encoding):
        data = encode_text("line één\nline two\n", encoding)
        assert detect_encoding(data) is encoding
        assert decode_bytes(data, encoding) == "line één\nline two\n"
