"""Audio container types and the lookup tables that resolve them."""

from enum import Enum
from types import MappingProxyType


class FileType(Enum):
    """Supported audio containers."""

    MP3 = "mp3"
    OGG_FLAC = "ogg-flac"
    OGG_VORBIS = "ogg-vorbis"
    INVALID = "invalid"


UNKNOWN_FILE_TYPE_NAME = "unknown-filetype"

EXTENSION_MAPPING = MappingProxyType({
    # Xiph.Org
    'flac': FileType.OGG_FLAC,
    'flc': FileType.OGG_FLAC,
    'ogg': FileType.OGG_VORBIS,
    'oga': FileType.OGG_VORBIS,

    # MPEG
    'mp3': FileType.MP3,
})

FILE_TYPE_NAMES = MappingProxyType({
    'ogg-flac': FileType.OGG_FLAC,
    'ogg-vorbis': FileType.OGG_VORBIS,
    'mp3': FileType.MP3,
})

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_MAPPING)


def type_from_extension(filename: str) -> FileType:
    """Resolve the container type of *filename* from its extension.

    The extension is everything after the last dot, compared case
    insensitively. Names without a dot and unknown extensions resolve to
    ``FileType.INVALID``.
    """
    _, dot, ext = str(filename).rpartition('.')
    if not dot:
        return FileType.INVALID
    return EXTENSION_MAPPING.get(ext.lower(), FileType.INVALID)


def type_from_name(name: str) -> FileType:
    return FILE_TYPE_NAMES.get(name, FileType.INVALID)


def name_from_type(file_type: FileType) -> str:
    """Reverse lookup used for diagnostics; never fails."""
    for name, value in FILE_TYPE_NAMES.items():
        if value is file_type:
            return name
    return UNKNOWN_FILE_TYPE_NAME


def extensions_for_type(file_type: FileType) -> list:
    return sorted(ext for ext, value in EXTENSION_MAPPING.items() if value is file_type)
