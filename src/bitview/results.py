# bitview/results.py

"""Ok/Err result values for callers that prefer not to catch exceptions.

Usage::

    match validate_hex("0xA3 YZ"):
        case Ok(value=digits): ...
        case Err(error=e): print(e.kind, e.reason)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .errors import BitFormatError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the carried error."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(self.error)


Result = Union[Ok[T], Err[E]]


def capture(func: Callable[..., T], *args, **kwargs) -> Result[T, BitFormatError]:
    """Call ``func`` and wrap its outcome; only BitFormatError becomes Err."""
    try:
        return Ok(func(*args, **kwargs))
    except BitFormatError as exc:
        return Err(exc)
