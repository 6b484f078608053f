# bitview/__init__.py

"""bitview package.

Re-exports the public API for convenient imports in tests or other code.
The raising forms of the validators live in ``bitview.validate`` and
``bitview.codec``; the names exported here return ``Ok``/``Err``.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .api import (
    convert_binary_to_hex_string,
    convert_hex_to_binary_string,
    parse_binary,
    parse_hex,
    render,
    render_binary,
    render_hex,
    validate_binary,
    validate_hex,
    zero_extend,
)
from .bits import Bits
from .config import (
    DEFAULT_FORMAT,
    Case,
    FormatConfig,
    GroupUnit,
    Order,
    Radix,
    ZeroPolicy,
)
from .errors import BitFormatError, FormatKind, RenderInvariantError
from .results import Err, Ok, Result
from .widths import MAX_BITS, Width, int_range_for

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Values and configuration
    "Bits", "Width", "MAX_BITS", "int_range_for",
    "FormatConfig", "DEFAULT_FORMAT",
    "Radix", "Case", "Order", "GroupUnit", "ZeroPolicy",
    # Errors and results
    "BitFormatError", "FormatKind", "RenderInvariantError",
    "Ok", "Err", "Result",
    # API
    "render", "render_binary", "render_hex",
    "parse_binary", "parse_hex",
    "validate_binary", "validate_hex",
    "convert_hex_to_binary_string", "convert_binary_to_hex_string",
    "zero_extend",
]
