"""
Edit domain entities: instructions, options and results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import SchemaError


class EditType(Enum):
    """Kind of a line edit."""

    INSERT = "Insert"
    DELETE = "Delete"
    REPLACE = "Replace"
    REPLACE_SECTION = "ReplaceSection"

    @classmethod
    def parse(cls, value: Any) -> "EditType":
        """
        Parse the wire tag of an instruction.

        Tags match case-insensitively; "replace_section" and "replace-section"
        are accepted for ReplaceSection. Anything else is a schema error,
        there is no default kind.

        Raises:
            SchemaError: If the value is not a known tag
        """
        if isinstance(value, EditType):
            return value
        if not isinstance(value, str):
            raise SchemaError(f"Edit type must be a string (got {value!r})")
        key = value.strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value.lower() == key:
                return member
        raise SchemaError(f"Unknown edit type: {value!r}")


@dataclass(frozen=True)
class EditInstruction:
    """
    One requested change.

    Line numbers are 1-based and always refer to the file as it was before
    any instruction of the batch was applied.
    """

    line_number: int
    type: EditType
    text: Optional[str] = None
    old_text: Optional[str] = None
    end_line: Optional[int] = None


@dataclass(frozen=True)
class WriteOptions:
    """Options controlling the encoding of written bytes."""

    encoding: FileEncoding = FileEncoding.UTF8_NO_BOM
    preserve_original_encoding: bool = False


@dataclass
class EditBatchResult:
    """Structured outcome of an edit, write or substitution request."""

    success: bool
    message: str
    edit_count: int = 0
    diff: str = ""
    preserved_encoding: Optional[str] = None
    content_hash: Optional[str] = None
    errors: list[str] = field(default_factory=list)
    dry_run: bool = False

    @classmethod
    def failure(
        cls, message: str, errors: Optional[list[str]] = None, dry_run: bool = False
    ) -> "EditBatchResult":
        return cls(
            success=False,
            message=message,
            errors=list(errors) if errors else [message],
            dry_run=dry_run,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire representation."""
        return {
            "success": self.success,
            "message": self.message,
            "editCount": self.edit_count,
            "diff": self.diff,
            "preservedEncoding": self.preserved_encoding,
            "contentHash": self.content_hash,
            "errors": list(self.errors),
            "dryRun": self.dry_run,
        }


@dataclass(frozen=True)
class ReadResult:
    """A range of lines read from a text file."""

    path: str
    lines: list[str]
    start_line: int
    end_line: int
    total_lines: int
    encoding: FileEncoding
    content_hash: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "lines": list(self.lines),
            "startLine": self.start_line,
            "endLine": self.end_line,
            "totalLines": self.total_lines,
            "encoding": self.encoding.value,
            "contentHash": self.content_hash,
        }
