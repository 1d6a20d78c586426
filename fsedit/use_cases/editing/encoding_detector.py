"""
Detection of on-disk text encodings and conversion between bytes and text.
"""

import codecs

from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import EncodingError

# Content heuristics only look at the head of the file
SAMPLE_SIZE = 8192

# Longer marks first: UTF-32 LE starts with the UTF-16 LE mark
_BOM_TABLE: tuple[tuple[bytes, FileEncoding], ...] = (
    (b"\xef\xbb\xbf", FileEncoding.UTF8_WITH_BOM),
    (b"\xff\xfe\x00\x00", FileEncoding.UTF32_LE),
    (b"\xff\xfe", FileEncoding.UTF16_LE),
    (b"\xfe\xff", FileEncoding.UTF16_BE),
)


def _sniff_bom(data: bytes) -> FileEncoding | None:
    for mark, encoding in _BOM_TABLE:
        if data.startswith(mark):
            return encoding
    return None


def _is_valid_utf8(sample: bytes, truncated: bool) -> bool:
    """
    Check UTF-8 structure of a sample.

    When the sample was cut from a longer stream, a multi-byte sequence
    left incomplete at the cut is not counted as an error.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    try:
        decoder.decode(sample, final=not truncated)
    except UnicodeDecodeError:
        return False
    return True


def detect_encoding(data: bytes) -> FileEncoding:
    """
    Classify raw bytes into a supported encoding.

    Byte-order marks win; otherwise the first SAMPLE_SIZE bytes are
    classified as ASCII, UTF-8 without BOM, or the system default when
    they are not valid UTF-8. Never raises.

    Args:
        data: Raw file content

    Returns:
        The detected FileEncoding (UTF8_NO_BOM for empty input)
    """
    if not data:
        return FileEncoding.UTF8_NO_BOM

    marked = _sniff_bom(data)
    if marked is not None:
        return marked

    sample = data[:SAMPLE_SIZE]
    if sample.isascii():
        return FileEncoding.ASCII
    if _is_valid_utf8(sample, truncated=len(data) > SAMPLE_SIZE):
        return FileEncoding.UTF8_NO_BOM
    return FileEncoding.SYSTEM_DEFAULT


def decode_bytes(data: bytes, encoding: FileEncoding) -> str:
    """
    Decode raw bytes with the given encoding, dropping its byte-order mark.

    Args:
        data: Raw file content
        encoding: Encoding to decode with; AUTO_DETECT detects it first

    Returns:
        The decoded text

    Raises:
        EncodingError: If the bytes are not valid in that encoding
    """
    if encoding is FileEncoding.AUTO_DETECT:
        encoding = detect_encoding(data)

    bom = encoding.bom
    if bom and data.startswith(bom):
        data = data[len(bom):]
    elif encoding is FileEncoding.UTF8_NO_BOM and data.startswith(b"\xef\xbb\xbf"):
        data = data[3:]

    try:
        return data.decode(encoding.codec)
    except (UnicodeDecodeError, LookupError) as e:
        raise EncodingError(f"Cannot decode content as {encoding.value}: {e}")


def encode_text(text: str, encoding: FileEncoding) -> bytes:
    """
    Encode text for writing, prefixed with the encoding's byte-order mark.

    Args:
        text: Text to encode
        encoding: Target encoding; AUTO_DETECT writes UTF-8 without BOM

    Returns:
        The bytes to write

    Raises:
        EncodingError: If the text contains characters the encoding cannot represent
    """
    encoding = encoding.writable()
    try:
        return encoding.bom + text.encode(encoding.codec)
    except (UnicodeEncodeError, LookupError) as e:
        raise EncodingError(f"Cannot encode content as {encoding.value}: {e}")
