# bitview/bits.py

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .codec import digits_to_int, hex_string_to_binary_string
from .config import DEFAULT_FORMAT, FormatConfig, Order
from .errors import BitFormatError, FormatKind
from .presenter import bit_pattern, render_digits, swap_bytes
from .sanitize import HEX_PREFIX, trim, ungroup
from .validate import validate_binary
from .widths import Width

logger = logging.getLogger(__name__)


class Bits:
    """An integer pinned to one fixed width, renderable as binary or hex text.

    The width never changes after construction. The most recent rendering is
    memoized together with the config that produced it, so asking again with
    an equal config returns the identical string.

    Two values compare equal when their integers are equal, whatever their
    widths: ``Bits(16, Width.INT64) == Bits(16, Width.INT32)``. A signed and
    an unsigned value sharing a bit pattern (``-1`` vs ``255``) are not equal.
    """

    __slots__ = ("_value", "_width", "_cache")

    def __init__(self, value: int, width: Width):
        if not isinstance(width, Width):
            raise ValueError(f"Unknown width: {width!r}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Bits needs an int value (got {type(value).__name__})")
        if not width.contains(value):
            lo, hi = width.range
            raise ValueError(f"Value out of range for {width.label} ({lo}..{hi}): {value}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_width", width)
        object.__setattr__(self, "_cache", None)

    @classmethod
    def parse(
        cls, text: str, width: Optional[Width] = None, config: Optional[FormatConfig] = None
    ) -> "Bits":
        """Build a value from binary text, or hex text when it starts with ``0x``.

        Signed widths read the bit pattern as two's complement. Without a
        width the narrowest unsigned one holding every written digit is used.
        Passing the ``config`` a string was rendered with undoes its group
        delimiter and byte order.
        """
        if config is not None:
            text = ungroup(text, config.group_delimiter)
        if trim(text).startswith(HEX_PREFIX):
            bits = hex_string_to_binary_string(text)
        else:
            bits = validate_binary(text)
        if width is None:
            width = Width.for_bits(len(bits))
        pattern = digits_to_int(bits, 2)
        if pattern > width.mask:
            raise BitFormatError(
                FormatKind.WIDTH_EXCEEDED,
                bits,
                f"{bits} does not fit in {width.bits} bits ({width.label})",
            )
        if config is not None and config.order is Order.LITTLE_ENDIAN:
            pattern = swap_bytes(pattern, width)
        if width.signed and pattern >> (width.bits - 1):
            pattern -= 1 << width.bits
        return cls(pattern, width)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value, self._width))

    @property
    def value(self) -> int:
        return self._value

    @property
    def width(self) -> Width:
        return self._width

    @property
    def bit_count(self) -> int:
        return self._width.bits

    @property
    def nibble_count(self) -> int:
        return self._width.nibble_count

    def to_bytes(self, order: Order = Order.BIG_ENDIAN) -> bytes:
        return bit_pattern(self._value, self._width).to_bytes(
            self._width.byte_count, byteorder=order.value
        )

    def render(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        cached: Optional[Tuple[FormatConfig, str]] = self._cache
        if cached is not None and cached[0] == config:
            return cached[1]
        logger.debug("rendering %r with %r", self, config)
        text = render_digits(self._value, self._width, config)
        object.__setattr__(self, "_cache", (config, text))
        return text

    def __eq__(self, other):
        if not isinstance(other, Bits):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Bits({self._value}, Width.{self._width.name})"
