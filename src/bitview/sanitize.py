# bitview/sanitize.py

from __future__ import annotations

import re

from .errors import BitFormatError, FormatKind

HEX_PREFIX = "0x"

_SPACE_RUN = re.compile(r" {2,}")


def trim(text: str) -> str:
    """Strip leading/trailing ASCII spaces only; tabs and newlines are kept."""
    return text.strip(" ")

def normalize(text: str) -> str:
    """Collapse every run of spaces to a single space (for error messages)."""
    return _SPACE_RUN.sub(" ", text)

def canonicalize(text: str, is_hex: bool = False) -> str:
    """Reduce input to a contiguous digit string.

    Hex input must start with a lowercase ``0x`` which is removed. In both
    modes every space is dropped, interior ones included.
    """
    if is_hex:
        if not text.startswith(HEX_PREFIX):
            raise BitFormatError(
                FormatKind.MISSING_RADIX_PREFIX,
                text,
                f"{text} is not a valid hexadecimal value.",
            )
        text = text[len(HEX_PREFIX):]
    return text.replace(" ", "")

def ungroup(text: str, delimiter: str) -> str:
    """Turn a rendering's group delimiter back into spaces."""
    return text.replace(delimiter, " ")
