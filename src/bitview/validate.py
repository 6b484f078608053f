# bitview/validate.py

from __future__ import annotations

import logging
import re

from .errors import BitFormatError, FormatKind
from .sanitize import canonicalize, normalize, trim
from .widths import BITS_PER_NIBBLE, MAX_BITS

logger = logging.getLogger(__name__)

MAX_HEX_DIGITS = MAX_BITS // BITS_PER_NIBBLE
CEILING_SUFFIX = " The largest data type supported by this library is 64-bits"
HEX_CEILING_SUFFIX = f"{CEILING_SUFFIX} ({MAX_HEX_DIGITS} hex digits)"

_BIN_DIGITS = re.compile(r"[01]*")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")


def _reject(kind: FormatKind, normalized: str, what: str, suffix: str = "") -> BitFormatError:
    logger.debug("rejected %s input %r: %s", what, normalized, kind.value)
    return BitFormatError(kind, normalized, f"{normalized} is not a valid {what} value.{suffix}")


def validate_binary(text: str) -> str:
    """Return the contiguous ``0``/``1`` digits of ``text`` (1..64 of them).

    Spaces anywhere are ignored. Raises BitFormatError otherwise; the message
    quotes the input with its space runs collapsed.
    """
    normalized = normalize(trim(text))
    digits = canonicalize(normalized)
    suffix = CEILING_SUFFIX if len(digits) > MAX_BITS else ""
    if not digits:
        raise _reject(FormatKind.EMPTY_INPUT, normalized, "binary")
    if not _BIN_DIGITS.fullmatch(digits):
        raise _reject(FormatKind.INVALID_BINARY_DIGIT, normalized, "binary", suffix)
    if suffix:
        raise _reject(FormatKind.WIDTH_EXCEEDED, normalized, "binary", suffix)
    return digits


def validate_hex(text: str) -> str:
    """Return the hex digits following the mandatory ``0x`` (1..16 of them).

    The digits keep the case they were written in.
    """
    normalized = normalize(trim(text))
    try:
        digits = canonicalize(normalized, is_hex=True)
    except BitFormatError as exc:
        logger.debug("rejected hexadecimal input %r: %s", normalized, exc.kind.value)
        raise
    suffix = HEX_CEILING_SUFFIX if len(digits) > MAX_HEX_DIGITS else ""
    if not digits:
        raise _reject(FormatKind.EMPTY_INPUT, normalized, "hexadecimal")
    if not _HEX_DIGITS.fullmatch(digits):
        raise _reject(FormatKind.INVALID_HEX_DIGIT, normalized, "hexadecimal", suffix)
    if suffix:
        raise _reject(FormatKind.WIDTH_EXCEEDED, normalized, "hexadecimal", suffix)
    return digits
