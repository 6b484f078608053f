# bitview/api.py

"""Public entry points.

Rendering and parsing raise ``BitFormatError`` on bad input; the
validation/conversion helpers return ``Ok``/``Err`` instead.
"""
from __future__ import annotations

from typing import Optional

from . import codec, validate
from .bits import Bits
from .config import DEFAULT_FORMAT, FormatConfig, Radix
from .errors import BitFormatError
from .results import Result, capture
from .sanitize import ungroup
from .widths import Width


# ---------------- Rendering ----------------
def render(value: Bits, config: FormatConfig = DEFAULT_FORMAT) -> str:
    return value.render(config)

def render_binary(value: Bits, config: FormatConfig = DEFAULT_FORMAT) -> str:
    return value.render(config.replace(radix=Radix.BINARY))

def render_hex(value: Bits, config: FormatConfig = DEFAULT_FORMAT) -> str:
    return value.render(config.replace(radix=Radix.HEX))


# ---------------- Parsing ----------------
def parse_binary(
    text: str, width: Optional[Width] = None, config: Optional[FormatConfig] = None
) -> Bits:
    """Parse binary text; ``config`` undoes the delimiter and byte order it rendered with."""
    if config is not None:
        text = ungroup(text, config.group_delimiter)
    return Bits.parse(validate.validate_binary(text), width, config)

def parse_hex(
    text: str, width: Optional[Width] = None, config: Optional[FormatConfig] = None
) -> Bits:
    """Parse ``0x``-prefixed hex; unprefixed text is rejected, not read as binary."""
    validate.validate_hex(text)
    return Bits.parse(text, width, config)


# ---------------- Validation / conversion ----------------
def validate_binary(text: str) -> Result[str, BitFormatError]:
    return capture(validate.validate_binary, text)

def validate_hex(text: str) -> Result[str, BitFormatError]:
    return capture(validate.validate_hex, text)

def convert_hex_to_binary_string(text: str) -> Result[str, BitFormatError]:
    return capture(codec.hex_string_to_binary_string, text)

def convert_binary_to_hex_string(text: str) -> Result[str, BitFormatError]:
    return capture(codec.binary_string_to_hex_string, text)

def zero_extend(text: str, width: Width | int) -> Result[str, BitFormatError]:
    return capture(codec.zero_extend, text, width)
