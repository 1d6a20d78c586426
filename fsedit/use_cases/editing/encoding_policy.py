"""
Choice of the encoding used to write a file.
"""

from typing import Optional

from fsedit.entities.edit import WriteOptions
from fsedit.entities.encoding import FileEncoding
from fsedit.use_cases.editing.encoding_detector import detect_encoding


def resolve_write_encoding(
    options: WriteOptions, existing: Optional[bytes], text: Optional[str] = None
) -> FileEncoding:
    """
    Decide which encoding the final bytes are written in.

    With preserve_original_encoding and an existing file, the encoding
    detected on the current bytes wins and the requested one is ignored.
    Otherwise the requested encoding applies, AUTO_DETECT meaning UTF-8
    without BOM.

    A preserved ASCII encoding is widened to UTF-8 without BOM when the new
    text is no longer pure ASCII; the unchanged part keeps identical bytes.

    Args:
        options: Requested write options
        existing: Current bytes of the target, or None if it does not exist
        text: Text about to be written, used for the ASCII widening

    Returns:
        A writable FileEncoding
    """
    if options.preserve_original_encoding and existing is not None:
        encoding = detect_encoding(existing)
        if encoding is FileEncoding.ASCII and text is not None and not text.isascii():
            return FileEncoding.UTF8_NO_BOM
        return encoding
    return options.encoding.writable()
