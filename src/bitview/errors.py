# bitview/errors.py

from __future__ import annotations

from enum import Enum, unique


@unique
class FormatKind(Enum):
    """Why a piece of binary/hex text was rejected."""
    MISSING_RADIX_PREFIX = "missing radix prefix"
    INVALID_BINARY_DIGIT = "invalid binary digit"
    INVALID_HEX_DIGIT = "invalid hexadecimal digit"
    INVALID_NIBBLE = "invalid nibble"
    NOT_NIBBLE_ALIGNED = "not nibble aligned"
    WIDTH_EXCEEDED = "width exceeded"
    EMPTY_INPUT = "empty input"


class BitFormatError(ValueError):
    """Raised when textual binary/hex input does not satisfy the grammar.

    ``text`` is the normalized offending input, ``reason`` the full
    human-readable message (also what ``str(err)`` returns).
    """

    def __init__(self, kind: FormatKind, text: str, reason: str):
        super().__init__(reason)
        self.kind = kind
        self.text = text
        self.reason = reason

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.reason!r})"


class RenderInvariantError(RuntimeError):
    """A value reached the presenter in a state validation should have ruled out."""
