# topmark:header:start
#
#   project      : Moustache
#   file         : enum_mixins.py
#   file_relpath : src/moustache/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for Moustache (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: a ``str`` Enum whose ``.value`` is a stable machine key,
      with a human label kept as member metadata.

Example:
    ```python
    class ContentType(KeyedStrEnum):
        PLAIN_TEXT = ("text", "Plain text")
        MARKUP = ("html", "Markup")

    assert ContentType.MARKUP.label == "Markup"
    assert str(ContentType.MARKUP) == "html"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
    """

    label: str

    def __new__(cls: type[_KS], key: str, label: str) -> _KS:
        """Create a new KeyedStrEnum member with a key and a label.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self.value
