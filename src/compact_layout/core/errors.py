"""
Module: core.errors

Purpose:
    The single exception type raised by the layout engine. Every failure
    path (bad configuration, bad content block, unplaceable content)
    surfaces as a LayoutError carrying a code discriminator and a
    human-readable suggestion.

Key Classes:
    - LayoutErrorCode: Closed set of failure categories
    - LayoutError: Exception with code, suggestion and context fields

Used By:
    - engine.validation: INVALID_CONFIG
    - engine.factory: INVALID_CONTENT_BLOCK
    - engine.distributor: COLUMN_OVERFLOW, INVALID_CONTENT_BLOCK
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class LayoutErrorCode(str, Enum):
    """Category of a layout failure."""
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_CONTENT_BLOCK = "INVALID_CONTENT_BLOCK"
    COLUMN_OVERFLOW = "COLUMN_OVERFLOW"

    def __str__(self) -> str:
        return self.value


class LayoutError(Exception):
    """
    Raised when configuration or content cannot be laid out.

    Attributes:
        code: Failure category
        message: Human-readable description
        suggestion: How the caller can fix the input
        section: Config section or layout area involved ("typography", ...)
        content_type: Content type involved, if any
        block_id: Content block involved, if any
        errors: Every violation collected (first one is ``message``)

    Example:
        >>> err = LayoutError("bad", LayoutErrorCode.INVALID_CONFIG, suggestion="fix it")
        >>> err.code
        <LayoutErrorCode.INVALID_CONFIG: 'INVALID_CONFIG'>
    """

    def __init__(
        self,
        message: str,
        code: LayoutErrorCode,
        *,
        suggestion: str = "",
        section: Optional[str] = None,
        content_type: Optional[str] = None,
        block_id: Optional[str] = None,
        errors: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = LayoutErrorCode(code)
        self.suggestion = suggestion
        self.section = section
        self.content_type = content_type
        self.block_id = block_id
        self.errors = errors or [message]

    def to_dict(self) -> dict[str, Any]:
        """Structured payload for callers reporting errors over an API."""
        return {
            "code": self.code.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "section": self.section,
            "content_type": self.content_type,
            "block_id": self.block_id,
            "errors": list(self.errors),
        }

    def __repr__(self) -> str:
        return f"LayoutError(code={self.code.value!r}, message={self.message!r})"
