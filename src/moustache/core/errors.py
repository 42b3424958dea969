# topmark:header:start
#
#   project      : Moustache
#   file         : errors.py
#   file_relpath : src/moustache/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Moustache value model.

Rendering is a pure function of the value tree and the context, so failures are
deterministic: they are raised once and propagate to the caller unchanged.
Exceptions raised by host capabilities (renderables, filters, tag bodies) are
never wrapped into these types.

Key lookup, truthiness and the ``as_*`` conversions never raise.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moustache.rendering.types import ContentType


class ErrorCode(IntEnum):
    """Stable error codes attached to every `MoustacheError`."""

    RENDERING_ERROR = 1
    CONFIG_ERROR = 2


class MoustacheError(Exception):
    """Base class for all Moustache errors."""

    code: ErrorCode = ErrorCode.RENDERING_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(MoustacheError):
    """Error for malformed configuration documents."""

    code = ErrorCode.CONFIG_ERROR


class RenderingError(MoustacheError):
    """Error raised when a value cannot be rendered."""

    code = ErrorCode.RENDERING_ERROR


class ContentTypeMismatchError(RenderingError):
    """Collection items rendered with different content types.

    Attributes:
        expected (ContentType): Content type of the first rendered item.
        actual (ContentType): Content type of the offending item.
        index (int): Position of the offending item in the enumeration.
    """

    def __init__(self, expected: ContentType, actual: ContentType, index: int) -> None:
        super().__init__("Content type mismatch")
        self.expected = expected
        self.actual = actual
        self.index = index

    def __str__(self) -> str:
        return f"{self.message}: item {self.index} is {self.actual.label}, expected {self.expected.label}"


class FilterError(RenderingError):
    """Error raised when a filter expression cannot be evaluated."""
