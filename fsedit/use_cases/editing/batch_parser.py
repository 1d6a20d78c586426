"""
Parsing of the edit batch and write options wire formats.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator, model_validator

from fsedit.entities.edit import EditInstruction, EditType, WriteOptions
from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import SchemaError


def _canonical_keys(data: Any, names: tuple[str, ...]) -> Any:
    """Map property names onto the canonical camelCase ones, ignoring case and '_'."""
    if not isinstance(data, dict):
        return data
    lookup = {name.lower(): name for name in names}
    out: dict[str, Any] = {}
    for key, value in data.items():
        canonical = lookup.get(str(key).replace("_", "").lower(), key)
        out[canonical] = value
    return out


class EditInstructionPayload(BaseModel):
    """Wire shape of one edit instruction."""

    model_config = ConfigDict(extra="ignore")

    lineNumber: StrictInt = Field(..., description="1-based line in the original file")
    type: EditType = Field(..., description="Insert, Delete, Replace or ReplaceSection")
    text: Optional[StrictStr] = Field(None, description="New text; \\n separates lines")
    oldText: Optional[StrictStr] = Field(
        None, description="Substring of the target line to replace (Replace only)"
    )
    endLine: Optional[StrictInt] = Field(
        None, description="Last line of the section (ReplaceSection only)"
    )

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive(cls, data: Any) -> Any:
        return _canonical_keys(data, ("lineNumber", "type", "text", "oldText", "endLine"))

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> EditType:
        try:
            return EditType.parse(value)
        except SchemaError as e:
            raise ValueError(str(e))

    def to_instruction(self) -> EditInstruction:
        return EditInstruction(
            line_number=self.lineNumber,
            type=self.type,
            text=self.text,
            old_text=self.oldText,
            end_line=self.endLine,
        )


class WriteOptionsPayload(BaseModel):
    """Wire shape of the write options."""

    model_config = ConfigDict(extra="ignore")

    encoding: Optional[StrictStr] = Field(None, description="Target encoding")
    preserveOriginalEncoding: Optional[StrictBool] = Field(
        None, description="Keep the encoding detected on the existing file"
    )

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive(cls, data: Any) -> Any:
        return _canonical_keys(data, ("encoding", "preserveOriginalEncoding"))


def _format_pydantic_errors(prefix: str, exc: PydanticValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "value"
        message = str(err.get("msg", "invalid value"))
        # drop pydantic's "Value error, " prefix on messages raised by validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.append(f"{prefix}{location}: {message}")
    return messages


def _load_json(raw: str, what: str) -> Any:
    if not raw or not raw.strip():
        raise SchemaError(f"{what} JSON is empty")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        errors = [f"JSON parsing error: {e}"]
        if "control character" in e.msg:
            errors.append(
                "Hint: check for unescaped newlines. Use \\n instead of literal line breaks in JSON strings."
            )
        elif "delimiter" in e.msg:
            errors.append('Hint: check for unescaped quotes. Use \\" for literal quotes in JSON strings.')
        raise SchemaError(f"Malformed {what} JSON", errors)


def parse_edit_batch(raw: Any) -> list[EditInstruction]:
    """
    Parse an edit batch from a JSON string or an already decoded list.

    Every instruction is checked; all schema problems are reported together.

    Raises:
        SchemaError: If the batch is malformed
    """
    data = _load_json(raw, "edit batch") if isinstance(raw, str) else raw
    if not isinstance(data, list):
        raise SchemaError("Edit batch must be a JSON array of edit objects")

    instructions: list[EditInstruction] = []
    errors: list[str] = []
    for index, item in enumerate(data):
        prefix = f"Edit #{index + 1}: "
        if not isinstance(item, dict):
            errors.append(f"{prefix}expected an object, got {type(item).__name__}")
            continue
        try:
            instructions.append(EditInstructionPayload.model_validate(item).to_instruction())
        except PydanticValidationError as e:
            errors.extend(_format_pydantic_errors(prefix, e))

    if errors:
        raise SchemaError(f"Edit batch has {len(errors)} schema error(s)", errors)
    return instructions


def parse_write_options(
    raw: Any,
    preserve_default: bool = False,
    default_encoding: FileEncoding = FileEncoding.UTF8_NO_BOM,
) -> WriteOptions:
    """
    Parse write options from a JSON string, a dict or None.

    Args:
        raw: Wire options; None yields the defaults
        preserve_default: Value of preserveOriginalEncoding when not given
        default_encoding: Encoding used when none is given

    Raises:
        SchemaError: If the options are malformed or name an unknown encoding
    """
    if raw is None or raw == "":
        return WriteOptions(default_encoding, preserve_original_encoding=preserve_default)
    if isinstance(raw, WriteOptions):
        return raw
    data = _load_json(raw, "write options") if isinstance(raw, str) else raw
    if not isinstance(data, dict):
        raise SchemaError("Write options must be a JSON object")
    try:
        payload = WriteOptionsPayload.model_validate(data)
    except PydanticValidationError as e:
        errors = _format_pydantic_errors("", e)
        raise SchemaError("Invalid write options", errors)

    preserve = payload.preserveOriginalEncoding
    return WriteOptions(
        encoding=default_encoding if payload.encoding is None else FileEncoding.parse(payload.encoding),
        preserve_original_encoding=preserve_default if preserve is None else preserve,
    )
