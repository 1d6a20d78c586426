"""
Text encoding domain entity.
"""

import locale
from enum import Enum

from fsedit.exceptions import SchemaError

_ALIASES: dict[str, str] = {
    "utf8": "utf8",
    "utf8nobom": "utf8",
    "utf8bom": "utf8-bom",
    "utf8withbom": "utf8-bom",
    "utf8sig": "utf8-bom",
    "ascii": "ascii",
    "usascii": "ascii",
    "utf16": "utf16le",
    "utf16le": "utf16le",
    "unicode": "utf16le",
    "utf16be": "utf16be",
    "bigendianunicode": "utf16be",
    "utf32": "utf32le",
    "utf32le": "utf32le",
    "system": "system",
    "systemdefault": "system",
    "default": "system",
    "auto": "auto",
    "autodetect": "auto",
}


class FileEncoding(Enum):
    """
    Supported on-disk text encodings.

    The value is the wire name used by the tools and the HTTP API.
    """

    UTF8_NO_BOM = "utf8"
    UTF8_WITH_BOM = "utf8-bom"
    ASCII = "ascii"
    UTF16_LE = "utf16le"
    UTF16_BE = "utf16be"
    UTF32_LE = "utf32le"
    SYSTEM_DEFAULT = "system"
    AUTO_DETECT = "auto"

    @property
    def codec(self) -> str:
        """Name of the Python codec used to convert text without the BOM."""
        if self is FileEncoding.SYSTEM_DEFAULT:
            return locale.getpreferredencoding(False)
        return _CODECS[self]

    @property
    def bom(self) -> bytes:
        """Byte-order mark written in front of the encoded text (may be empty)."""
        return _BOMS.get(self, b"")

    @property
    def writes_bom(self) -> bool:
        return bool(self.bom)

    @property
    def unit_width(self) -> int:
        """Number of bytes per code unit."""
        return _WIDTHS.get(self, 1)

    def writable(self) -> "FileEncoding":
        """Return the encoding to use when this value is requested for a write."""
        if self is FileEncoding.AUTO_DETECT:
            return FileEncoding.UTF8_NO_BOM
        return self

    @classmethod
    def parse(cls, value: "str | FileEncoding | None") -> "FileEncoding":
        """
        Parse a wire value into a FileEncoding.

        Matching ignores case, dashes and underscores, so "UTF-8-BOM",
        "utf8_bom" and "Utf8WithBom" are all accepted.

        Raises:
            SchemaError: If the value names no supported encoding
        """
        if value is None:
            return cls.UTF8_NO_BOM
        if isinstance(value, FileEncoding):
            return value
        key = "".join(ch for ch in str(value).lower() if ch.isalnum())
        wire = _ALIASES.get(key)
        if wire is None:
            raise SchemaError(f"Unsupported encoding: {value!r}")
        return cls(wire)


_CODECS: dict[FileEncoding, str] = {
    FileEncoding.UTF8_NO_BOM: "utf-8",
    FileEncoding.UTF8_WITH_BOM: "utf-8",
    FileEncoding.ASCII: "ascii",
    FileEncoding.UTF16_LE: "utf-16-le",
    FileEncoding.UTF16_BE: "utf-16-be",
    FileEncoding.UTF32_LE: "utf-32-le",
    FileEncoding.AUTO_DETECT: "utf-8",
}

_BOMS: dict[FileEncoding, bytes] = {
    FileEncoding.UTF8_WITH_BOM: b"\xef\xbb\xbf",
    FileEncoding.UTF16_LE: b"\xff\xfe",
    FileEncoding.UTF16_BE: b"\xfe\xff",
    FileEncoding.UTF32_LE: b"\xff\xfe\x00\x00",
}

_WIDTHS: dict[FileEncoding, int] = {
    FileEncoding.UTF16_LE: 2,
    FileEncoding.UTF16_BE: 2,
    FileEncoding.UTF32_LE: 4,
}
