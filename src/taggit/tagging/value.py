"""Typed tag values.

A ``TypedValue`` is what a tag field holds once it has been lifted out of a
specific tag sub-format: a string, an integer, a boolean, or the INVALID
marker that records a failed parse or conversion.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class TagType(Enum):
    """Value kinds a tag field may be declared with."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    INVALID = "invalid"


@dataclass(frozen=True)
class TypedValue:
    """Closed variant over STRING, INTEGER, BOOLEAN and INVALID.

    Build instances with the ``string``/``integer``/``boolean``/``invalid``
    constructors. Reading the payload of an INVALID value raises
    ``ValueError``; check ``is_invalid()`` first.
    """

    type: TagType
    _payload: Any = None

    @classmethod
    def string(cls, text: str) -> "TypedValue":
        return cls(TagType.STRING, str(text))

    @classmethod
    def integer(cls, number: int) -> "TypedValue":
        # bool is an int subclass, keep the two kinds apart
        if isinstance(number, bool):
            raise TypeError("use TypedValue.boolean() for flags")
        return cls(TagType.INTEGER, int(number))

    @classmethod
    def boolean(cls, flag: bool) -> "TypedValue":
        return cls(TagType.BOOLEAN, bool(flag))

    @classmethod
    def invalid(cls) -> "TypedValue":
        return cls(TagType.INVALID)

    def is_invalid(self) -> bool:
        return self.type is TagType.INVALID

    @property
    def value(self) -> Union[str, int, bool]:
        if self.is_invalid():
            raise ValueError("invalid tag value has no payload")
        return self._payload

    def as_str(self) -> str:
        if self.type is not TagType.STRING:
            raise ValueError(f"not a string value: {self.type.value}")
        return self._payload

    def as_int(self) -> int:
        if self.type is not TagType.INTEGER:
            raise ValueError(f"not an integer value: {self.type.value}")
        return self._payload

    def as_bool(self) -> bool:
        if self.type is not TagType.BOOLEAN:
            raise ValueError(f"not a boolean value: {self.type.value}")
        return self._payload

    def __str__(self) -> str:
        if self.is_invalid():
            return "<invalid>"
        if self.type is TagType.BOOLEAN:
            return "true" if self._payload else "false"
        return str(self._payload)
