# bitview/config.py

"""Presentation settings for rendering a value as text.

A ``FormatConfig`` is an immutable value; derive variants with
``config.replace(...)`` and pass them explicitly to every render call.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, unique

from .widths import BITS_PER_BYTE, BITS_PER_NIBBLE

DEFAULT_GROUP_DELIMITER = " "


@unique
class Radix(Enum):
    BINARY = 2
    HEX = 16


@unique
class Case(Enum):
    UPPER = "upper"
    LOWER = "lower"


@unique
class Order(Enum):
    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"


@unique
class GroupUnit(Enum):
    NONE = 0
    NIBBLE = BITS_PER_NIBBLE
    BYTE = BITS_PER_BYTE


@unique
class ZeroPolicy(Enum):
    SUPPRESS = "suppress"
    INCLUDE_TO_WIDTH = "include"


@dataclass(frozen=True)
class FormatConfig:
    radix: Radix = Radix.BINARY
    case: Case = Case.UPPER
    order: Order = Order.BIG_ENDIAN
    group_unit: GroupUnit = GroupUnit.NIBBLE
    zero_policy: ZeroPolicy = ZeroPolicy.INCLUDE_TO_WIDTH
    group_delimiter: str = DEFAULT_GROUP_DELIMITER

    def __post_init__(self):
        for name, kind in _FIELD_TYPES.items():
            if not isinstance(getattr(self, name), kind):
                raise ValueError(
                    f"{name} must be a {kind.__name__} (got {getattr(self, name)!r})"
                )
        if not isinstance(self.group_delimiter, str) or len(self.group_delimiter) != 1:
            raise ValueError(
                f"group_delimiter must be a single character (got {self.group_delimiter!r})"
            )
        # the delimiter is stripped again when parsing, so it cannot be a digit
        if self.group_delimiter.lower() in "0123456789abcdefx":
            raise ValueError(
                f"group_delimiter cannot be a digit or 'x' (got {self.group_delimiter!r})"
            )

    def replace(self, **changes) -> "FormatConfig":
        return replace(self, **changes)


_FIELD_TYPES = {
    "radix": Radix,
    "case": Case,
    "order": Order,
    "group_unit": GroupUnit,
    "zero_policy": ZeroPolicy,
}

DEFAULT_FORMAT = FormatConfig()
