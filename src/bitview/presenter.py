# bitview/presenter.py

from __future__ import annotations

from .codec import int_to_digits
from .config import Case, FormatConfig, GroupUnit, Order, Radix, ZeroPolicy
from .errors import RenderInvariantError
from .sanitize import HEX_PREFIX
from .widths import Width


def swap_bytes(pattern: int, width: Width) -> int:
    """Reverse the byte order of an unsigned pattern within ``width``; self-inverse."""
    return int.from_bytes(pattern.to_bytes(width.byte_count, "big"), "little")

def bit_pattern(value: int, width: Width, order: Order = Order.BIG_ENDIAN) -> int:
    """Unsigned bit pattern of ``value`` in ``width`` (2's complement for negatives).

    Little endian swaps the bytes within the width.
    """
    pattern = value & width.mask
    if order is Order.LITTLE_ENDIAN:
        pattern = swap_bytes(pattern, width)
    return pattern

def group_digits(digits: str, size: int, delimiter: str) -> str:
    """Insert ``delimiter`` every ``size`` digits counting from the right.

    The leftmost group takes the remainder: group_digits('10000', 4, ' ')
    gives '1 0000'.
    """
    if size <= 0 or len(digits) <= size:
        return digits
    head = len(digits) % size
    groups = [digits[:head]] if head else []
    groups.extend(digits[i:i + size] for i in range(head, len(digits), size))
    return delimiter.join(groups)


class Presenter:
    """Turns a value's LSD-first digit string into display text for one config."""

    def __init__(self, config: FormatConfig, width: Width):
        self.config = config
        self.width = width

    def format(self, value: int) -> str:
        pattern = bit_pattern(value, self.width, self.config.order)
        if self.config.radix is Radix.BINARY:
            return self.format_binary(int_to_digits(pattern, 2))
        return self.format_hex(int_to_digits(pattern, 16))

    def format_binary(self, lsd_first: str) -> str:
        if any(c not in "01" for c in lsd_first):
            raise RenderInvariantError(f"corrupt binary digit string: {lsd_first!r}")
        if self.config.zero_policy is ZeroPolicy.INCLUDE_TO_WIDTH:
            lsd_first = lsd_first.ljust(self.width.bits, "0")
        digits = lsd_first[::-1]
        unit = self.config.group_unit
        if unit is GroupUnit.NONE:
            return digits
        return group_digits(digits, unit.value, self.config.group_delimiter)

    def format_hex(self, lsd_first: str) -> str:
        if any(c not in "0123456789abcdefABCDEF" for c in lsd_first):
            raise RenderInvariantError(f"corrupt hex digit string: {lsd_first!r}")
        if self.config.zero_policy is ZeroPolicy.INCLUDE_TO_WIDTH:
            lsd_first = lsd_first.ljust(self.width.nibble_count, "0")
        digits = lsd_first[::-1]
        digits = digits.upper() if self.config.case is Case.UPPER else digits.lower()
        return HEX_PREFIX + digits


def render_digits(value: int, width: Width, config: FormatConfig) -> str:
    return Presenter(config, width).format(value)
