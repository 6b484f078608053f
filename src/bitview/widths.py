# bitview/widths.py

from __future__ import annotations

from enum import Enum
from typing import Tuple

BITS_PER_BYTE = 8
BITS_PER_NIBBLE = 4
MAX_BITS = 64
MAX_BYTES = MAX_BITS // BITS_PER_BYTE


class Width(Enum):
    """The closed set of fixed integer widths a value can carry: (bits, signed)."""
    UINT8 = (8, False)
    INT8 = (8, True)
    UINT16 = (16, False)
    INT16 = (16, True)
    UINT32 = (32, False)
    INT32 = (32, True)
    UINT64 = (64, False)
    INT64 = (64, True)

    def __init__(self, bits: int, signed: bool):
        self.bits = bits
        self.signed = signed

    @property
    def label(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def byte_count(self) -> int:
        return self.bits // BITS_PER_BYTE

    @property
    def nibble_count(self) -> int:
        return self.bits // BITS_PER_NIBBLE

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def range(self) -> Tuple[int, int]:
        return int_range_for(self.byte_count, self.signed)

    def contains(self, value: int) -> bool:
        lo, hi = self.range
        return lo <= value <= hi

    @classmethod
    def for_bits(cls, count: int, signed: bool = False) -> "Width":
        """Narrowest width holding ``count`` bits."""
        if count < 1 or count > MAX_BITS:
            raise ValueError(f"bit count must be 1..{MAX_BITS}")
        for w in cls:
            if w.signed == signed and w.bits >= count:
                return w
        raise AssertionError("unreachable")  # pragma: no cover


def int_range_for(width: int, signed: bool) -> Tuple[int, int]:
    """
    Return inclusive (lo, hi) range for a given byte width and signedness.

    Ranges:
    Unsigned:        [0, 2^n - 1]
    2's complement:  [-(2^(n-1)), 2^(n-1) - 1]
    """
    if width < 1 or width > MAX_BYTES:
        raise ValueError(f"width must be 1..{MAX_BYTES}")
    if signed:
        lo = -(1 << (8 * width - 1))
        hi = (1 << (8 * width - 1)) - 1
    else:
        lo = 0
        hi = (1 << (8 * width)) - 1
    return lo, hi


def bit_width(width: "Width | int") -> int:
    """Accept either a Width or a plain bit count."""
    if isinstance(width, Width):
        return width.bits
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"Unknown width: {width!r}")
    if width not in (8, 16, 32, 64):
        raise ValueError(f"width must be one of 8, 16, 32, 64 bits (got {width})")
    return width
