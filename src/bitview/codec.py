# bitview/codec.py

from __future__ import annotations

from .errors import BitFormatError, FormatKind
from .sanitize import HEX_PREFIX, trim
from .validate import validate_binary, validate_hex
from .widths import BITS_PER_NIBBLE, Width, bit_width

BINARY = 2
HEX = 16

_DIGITS = "0123456789abcdef"


# ---------------- Nibbles ----------------
def nibble_to_binary_string(digit: str) -> str:
    """Map one hex digit (either case) to its 4 bits, MSB first: 'a' -> '1010'."""
    if len(digit) != 1 or digit.lower() not in _DIGITS:
        raise BitFormatError(
            FormatKind.INVALID_HEX_DIGIT, digit, f"{digit} is not a valid hexadecimal digit"
        )
    return f"{_DIGITS.index(digit.lower()):04b}"

def binary_digits_to_hex_digit(bits: str) -> str:
    """Inverse of nibble_to_binary_string; always returns an uppercase digit."""
    if len(bits) != BITS_PER_NIBBLE or any(c not in "01" for c in bits):
        raise BitFormatError(
            FormatKind.INVALID_NIBBLE, bits, f"{bits} is not a valid nibble"
        )
    return _DIGITS[int(bits, 2)].upper()


# ---------------- Whole strings ----------------
def hex_string_to_binary_string(text: str) -> str:
    """'0xFA' -> '11111010'. Every hex digit contributes exactly four bits."""
    return "".join(nibble_to_binary_string(d) for d in validate_hex(text))

def binary_string_to_hex_string(text: str) -> str:
    """'0000 0000' -> '0x00'. The bit count must be a whole number of nibbles."""
    bits = validate_binary(text)
    if len(bits) % BITS_PER_NIBBLE:
        raise BitFormatError(
            FormatKind.NOT_NIBBLE_ALIGNED,
            bits,
            f"{bits} is not a sequence of whole nibbles ({len(bits)} bits)",
        )
    nibbles = [bits[i:i + BITS_PER_NIBBLE] for i in range(0, len(bits), BITS_PER_NIBBLE)]
    return HEX_PREFIX + "".join(binary_digits_to_hex_digit(n) for n in nibbles)


# ---------------- Numbers ----------------
def digits_to_int(digits: str, radix: int) -> int:
    """Fold pre-validated digits, most significant first, into an integer."""
    number = 0
    for d in digits:
        number = number * radix + _DIGITS.index(d.lower())
    return number

def int_to_digits(value: int, radix: int) -> str:
    """Digits of a non-negative integer, least significant FIRST.

    Always at least one digit; stops as soon as the quotient reaches zero,
    so the result is never zero-padded.
    """
    if value < 0:
        raise ValueError(f"int_to_digits needs a non-negative value (got {value})")
    out: list[str] = []
    while True:
        value, rem = divmod(value, radix)
        out.append(_DIGITS[rem])
        if not value:
            break
    return "".join(out)

def zero_extend(text: str, width: Width | int) -> str:
    """Left-pad validated binary (or 0x-prefixed hex) with zeroes to ``width`` bits.

    Input already at least ``width`` bits long comes back unchanged.
    """
    target = bit_width(width)
    if trim(text).startswith(HEX_PREFIX):
        bits = hex_string_to_binary_string(text)
    else:
        bits = validate_binary(text)
    return bits.rjust(target, "0")
