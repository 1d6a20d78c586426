"""
Loading a text file through the ports into decoded, numbered lines.
"""

from dataclasses import dataclass

from fsedit.entities.encoding import FileEncoding
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.use_cases.editing.encoding_detector import decode_bytes, detect_encoding
from fsedit.use_cases.editing.text_lines import LineLayout, split_text


@dataclass(frozen=True)
class TextDocument:
    """Decoded snapshot of a file, tied to the exact bytes it came from."""

    path: str
    raw: bytes
    encoding: FileEncoding
    lines: list[str]
    layout: LineLayout

    @property
    def total_lines(self) -> int:
        return len(self.lines)


def load_document(file_repository: FileRepositoryPort, abs_path: str) -> TextDocument:
    """
    Read and decode a file; the encoding is detected from its current bytes.

    Raises:
        NotFoundError: If the file does not exist
        FileRepositoryError: If reading fails
        EncodingError: If the bytes cannot be decoded with the detected encoding
    """
    raw = file_repository.read_bytes(abs_path)
    encoding = detect_encoding(raw)
    lines, layout = split_text(decode_bytes(raw, encoding))
    return TextDocument(abs_path, raw, encoding, lines, layout)
