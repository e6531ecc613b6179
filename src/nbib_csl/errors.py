"""Structural errors raised while converting nbib citation blocks."""
from __future__ import annotations

from typing import Optional


class NbibError(Exception):
    default_code = "NBIB_ERROR"
    default_message = "Failed to convert nbib record."

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        line: str | None = None,
        block: Optional[int] = None,
    ):
        self.code = code or self.default_code
        self.message = message or self.default_message
        self.line = line
        self.block = block
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.block is not None:
            text = f"block {self.block}: {text}"
        if self.line is not None:
            text += f" -> {self.line!r}"
        return text


class MalformedLine(NbibError):
    """Raw line too short to hold a tag."""

    default_code = "MALFORMED_LINE"
    default_message = "Malformed line of length <= 4."


class InvalidState(NbibError):
    """Continuation line with no open field."""

    default_code = "INVALID_STATE"
    default_message = "Continuation line without a preceding tagged field."


class MalformedRecord(NbibError):
    """Merged line failing the tag/separator check."""

    default_code = "MALFORMED_RECORD"
    default_message = "Malformed record; expected 'TAG - value'."
