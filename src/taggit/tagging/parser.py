"""Parsing of ``key=value`` tag definitions.

A tag definition looks like this: ``artist=Radiohead``. The key may not be
empty and may not contain an equal sign; the value is arbitrary, including
the empty string. Values are converted to the kind the schema declares for
the key. A value that does not convert becomes ``TypedValue.invalid()`` with
the reason attached; ``TagChangeSet`` logs it once and the batch goes on.

Integers take the leading number of the value and ignore any trailing
text, so ``tracknumber=3/12`` is track 3.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import (
    AssignmentError,
    InvalidTagValue,
    MalformedTagAssignment,
    UnknownTagName,
)
from .schema import TAG_SCHEMA, TagId
from .value import TagType, TypedValue

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class TagDefinition:
    id: TagId
    type: TagType
    value: TypedValue
    raw: str = ""
    diagnostic: Optional[str] = None

    @property
    def name(self) -> str:
        return self.id.value

    def is_valid(self) -> bool:
        return not self.value.is_invalid()


def leading_number(text: str) -> Optional[int]:
    """Number at the start of *text*: ``"3/12"`` -> 3, ``"2001-05-03"`` -> 2001."""
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def split_assignment(text: str) -> Tuple[str, str]:
    """Split a tag definition into key and value.

    Raises:
        MalformedTagAssignment: if there is no equal sign, or nothing before it
    """
    key, sep, value = text.partition("=")
    if not sep:
        raise MalformedTagAssignment(text, "missing '='")
    if not key:
        raise MalformedTagAssignment(text, "empty tag name")
    return key, value


def convert_value(tag_type: TagType, raw: str) -> Tuple[TypedValue, Optional[str]]:
    """Convert *raw* to *tag_type*; returns the value and a failure reason."""
    if tag_type is TagType.STRING:
        return TypedValue.string(raw), None

    if tag_type is TagType.INTEGER:
        # "3/12" and "2004-05-01" count by their leading number
        number = leading_number(raw)
        if number is None:
            return TypedValue.invalid(), f"Invalid integer value: {raw}"
        if not INT_MIN <= number <= INT_MAX:
            return TypedValue.invalid(), f"Integer string out of range: {raw}"
        return TypedValue.integer(number), None

    return TypedValue.invalid(), f"Unknown tag type: {tag_type.value}"


def value_from_text(tag_type: TagType, raw: str) -> TypedValue:
    value, reason = convert_value(tag_type, raw)
    if reason:
        logging.warning(reason)
    return value


def parse_assignment(text: str) -> TagDefinition:
    """Parse ``key=value`` into a TagDefinition.

    Conversion failures do not raise: the returned definition holds an
    invalid value and carries the reason in ``diagnostic``.

    Raises:
        MalformedTagAssignment: if *text* is not of the form ``key=value``
        UnknownTagName: if the key is not a known tag
    """
    key, raw = split_assignment(text)

    field = TAG_SCHEMA.get(key)
    if field is None:
        raise UnknownTagName(text, f"no such tag: {key}")

    value, reason = convert_value(field.type, raw)
    return TagDefinition(field.id, field.type, value, raw, reason)


class TagChangeSet:
    """Tag definitions collected from a batch of assignments.

    A later definition of the same tag replaces an earlier one. Rejected
    assignments are kept in ``errors`` in the order they were seen.
    """

    def __init__(self):
        self._definitions: Dict[TagId, TagDefinition] = {}
        self.errors: List[AssignmentError] = []

    @classmethod
    def from_assignments(cls, texts: Iterable[str]) -> "TagChangeSet":
        changes = cls()
        for text in texts:
            changes.add_assignment(text)
        return changes

    def add(self, definition: TagDefinition) -> None:
        if definition.value.is_invalid():
            raise InvalidTagValue(
                f"{definition.name}={definition.raw}", definition.diagnostic or "invalid value"
            )
        self._definitions[definition.id] = definition

    def add_assignment(self, text: str) -> bool:
        """Parse and add one assignment; log and record failures."""
        try:
            self.add(parse_assignment(text))
        except AssignmentError as e:
            logging.error(str(e))
            self.errors.append(e)
            return False
        return True

    def get(self, tag_id: TagId) -> Optional[TagDefinition]:
        return self._definitions.get(tag_id)

    def definitions(self) -> List[TagDefinition]:
        return list(self._definitions.values())

    def __contains__(self, tag_id) -> bool:
        return tag_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions.values())
