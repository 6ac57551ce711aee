"""The tag fields taggit understands.

Each user facing tag name maps to a tag id, the value kind the tag holds and
the property-map key it is read from.
"""

from enum import Enum
from types import MappingProxyType
from typing import List, NamedTuple

from .value import TagType


class TagId(Enum):
    ARTIST = "artist"
    ALBUM = "album"
    COMMENT = "comment"
    COMPILATION = "compilation"
    GENRE = "genre"
    TRACKNUMBER = "tracknumber"
    TRACKTITLE = "tracktitle"
    YEAR = "year"
    UNKNOWN = "unknown"


class TagField(NamedTuple):
    id: TagId
    type: TagType
    property_key: str


TAG_SCHEMA = MappingProxyType({
    'artist': TagField(TagId.ARTIST, TagType.STRING, 'ARTIST'),
    'album': TagField(TagId.ALBUM, TagType.STRING, 'ALBUM'),
    'comment': TagField(TagId.COMMENT, TagType.STRING, 'COMMENT'),
    'compilation': TagField(TagId.COMPILATION, TagType.STRING, 'COMPILATION'),
    'genre': TagField(TagId.GENRE, TagType.STRING, 'GENRE'),
    'tracknumber': TagField(TagId.TRACKNUMBER, TagType.INTEGER, 'TRACKNUMBER'),
    'tracktitle': TagField(TagId.TRACKTITLE, TagType.STRING, 'TITLE'),
    'year': TagField(TagId.YEAR, TagType.INTEGER, 'DATE'),
})


def name_to_id(name: str) -> TagId:
    field = TAG_SCHEMA.get(name)
    return field.id if field else TagId.UNKNOWN


def name_to_type(name: str) -> TagType:
    field = TAG_SCHEMA.get(name)
    return field.type if field else TagType.INVALID


def id_to_name(tag_id: TagId) -> str:
    return tag_id.value


def type_of_id(tag_id: TagId) -> TagType:
    return name_to_type(id_to_name(tag_id))


def list_tag_names() -> List[str]:
    """Supported tag names, sorted."""
    return sorted(TAG_SCHEMA)
