"""Container handles backed by mutagen.

Each supported container type is one entry of ``CONTAINERS``: the mutagen
classes used to open it, how to tell whether it carries a tag block, how to
read its own property map (single-tag containers) or, for multitag containers,
how to load each embedded sub-format block. Supporting a new container means
adding an entry.
"""

import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import mutagen
from mutagen.apev2 import APEv2, APENoHeaderError
from mutagen.flac import FLAC
from mutagen.id3 import ID3, ID3NoHeaderError, ID3UnsupportedVersionError, ParseID3v1
from mutagen.mp3 import MP3
from mutagen.oggflac import OggFLAC
from mutagen.oggvorbis import OggVorbis

from ..errors import CorruptOrUnreadableFile
from .filetypes import FileType, name_from_type
from .mappings import ape_properties, id3_properties, vorbis_properties
from .policy import TagImpl

PropertyMap = Dict[str, List[str]]

ID3V1_SIZE = 128


# Sub-format loaders (MP3)
# ------------------------
# Each returns the loaded block, or None when the file does not carry one.

def load_id3v2(handle: "AudioHandle"):
    try:
        return ID3(handle.filename, load_v1=False)
    except (ID3NoHeaderError, ID3UnsupportedVersionError):
        return None


def load_apetag(handle: "AudioHandle"):
    try:
        return APEv2(handle.filename)
    except APENoHeaderError:
        return None


def load_id3v1(handle: "AudioHandle"):
    """Return the ID3v1 fields as a list of ID3v2 frames.

    An empty list means the file has an ID3v1 tag with every field blank.
    """
    with open(handle.filename, 'rb') as f:
        f.seek(0, os.SEEK_END)
        if f.tell() < ID3V1_SIZE:
            return None
        f.seek(-ID3V1_SIZE, os.SEEK_END)
        data = f.read(ID3V1_SIZE)

    if not data.startswith(b"TAG"):
        return None
    frames = ParseID3v1(data)
    if frames is None:
        return None
    return list(frames.values())


def id3v2_block_properties(block) -> PropertyMap:
    return id3_properties(block.values())


def id3v1_block_properties(block) -> PropertyMap:
    return id3_properties(block)


# Container level property maps
# -----------------------------

def mp3_has_tag_block(handle: "AudioHandle") -> bool:
    # The tag of an MPEG file is the union of its sub-formats and always
    # exists; which sub-formats are populated is up to the probe.
    return True


def vorbis_has_tag_block(handle: "AudioHandle") -> bool:
    return handle.audio.tags is not None


def vorbis_container_properties(handle: "AudioHandle") -> PropertyMap:
    if handle.audio.tags is None:
        return {}
    return vorbis_properties(handle.audio.tags)


@dataclass(frozen=True)
class Container:
    """Capabilities of one container type."""

    kinds: Tuple[type, ...]
    has_tag_block: Callable[["AudioHandle"], bool]
    # None for multitag containers; their tags are read per sub-format
    properties: Optional[Callable[["AudioHandle"], PropertyMap]] = None
    block_loaders: Mapping[TagImpl, Callable[["AudioHandle"], Any]] = field(default_factory=dict)
    block_properties: Mapping[TagImpl, Callable[[Any], PropertyMap]] = field(default_factory=dict)


CONTAINERS = MappingProxyType({
    FileType.MP3: Container(
        kinds=(MP3,),
        has_tag_block=mp3_has_tag_block,
        block_loaders=MappingProxyType({
            TagImpl.ID3V2: load_id3v2,
            TagImpl.APETAG: load_apetag,
            TagImpl.ID3V1: load_id3v1,
        }),
        block_properties=MappingProxyType({
            TagImpl.ID3V2: id3v2_block_properties,
            TagImpl.APETAG: ape_properties,
            TagImpl.ID3V1: id3v1_block_properties,
        }),
    ),
    # .flac is usually native FLAC; Ogg encapsulated FLAC is the fallback
    FileType.OGG_FLAC: Container(
        kinds=(FLAC, OggFLAC),
        has_tag_block=vorbis_has_tag_block,
        properties=vorbis_container_properties,
    ),
    FileType.OGG_VORBIS: Container(
        kinds=(OggVorbis,),
        has_tag_block=vorbis_has_tag_block,
        properties=vorbis_container_properties,
    ),
})


class AudioHandle:
    """An opened audio container.

    Owns the mutagen file object and every sub-format block loaded from the
    file. Blocks are loaded on first use and cached until ``close()``.
    """

    def __init__(self, file_type: FileType, filename: str, audio: Any):
        self.file_type = file_type
        self.filename = filename
        self.audio = audio
        self._blocks: Dict[TagImpl, Any] = {}

    @property
    def container(self) -> Container:
        return CONTAINERS[self.file_type]

    @property
    def closed(self) -> bool:
        return self.audio is None

    def is_valid(self) -> bool:
        return not self.closed and getattr(self.audio, 'info', None) is not None

    def has_tag_block(self) -> bool:
        return not self.closed and self.container.has_tag_block(self)

    def supports(self, impl: TagImpl) -> bool:
        return impl in self.container.block_loaders

    def tag_block(self, impl: TagImpl) -> Optional[Any]:
        """Load the *impl* sub-format block, None if the file has none.

        Raises mutagen errors for blocks that exist but cannot be parsed.
        """
        if self.closed:
            raise ValueError(f"I/O operation on closed handle: {self.filename}")
        loader = self.container.block_loaders.get(impl)
        if loader is None:
            return None
        if impl not in self._blocks:
            self._blocks[impl] = loader(self)
        return self._blocks[impl]

    def block_properties(self, impl: TagImpl) -> PropertyMap:
        """Property map of the *impl* block, empty if the file has none.

        Raises:
            CorruptOrUnreadableFile: if the block exists but cannot be parsed
        """
        try:
            block = self.tag_block(impl)
        except (mutagen.MutagenError, OSError) as e:
            raise CorruptOrUnreadableFile(self.filename, f"bad {impl.value} tag: {e}") from e
        if block is None:
            return {}
        return self.container.block_properties[impl](block)

    def properties(self) -> PropertyMap:
        if self.closed:
            raise ValueError(f"I/O operation on closed handle: {self.filename}")
        if self.container.properties is None:
            raise ValueError(
                f"{name_from_type(self.file_type)} files have no single tag: {self.filename}"
            )
        return self.container.properties(self)

    def audio_properties(self) -> Dict[str, Any]:
        """Stream information in the units the listing reports."""
        info = self.audio.info
        return {
            'bitrate': int(getattr(info, 'bitrate', 0) or 0) // 1000,
            'channels': int(getattr(info, 'channels', 0) or 0),
            'length': int(getattr(info, 'length', 0) or 0),
            'samplerate': int(getattr(info, 'sample_rate', 0) or 0),
        }

    def close(self) -> None:
        self._blocks.clear()
        self.audio = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<AudioHandle {name_from_type(self.file_type)} {self.filename!r} ({state})>"


def open_handle(filename: str, file_type: FileType) -> AudioHandle:
    """Open *filename* as a container of *file_type*.

    Raises:
        CorruptOrUnreadableFile: if mutagen cannot read the file
        KeyError: if *file_type* has no container entry
    """
    container = CONTAINERS[file_type]
    try:
        # mutagen.File tries the options in turn and sniffs the right one
        audio = mutagen.File(filename, options=list(container.kinds))
    except (mutagen.MutagenError, OSError) as e:
        raise CorruptOrUnreadableFile(filename, str(e)) from e

    if audio is None:
        raise CorruptOrUnreadableFile(filename, f"not a {name_from_type(file_type)} file")

    logging.debug(f"Opened {filename} as {type(audio).__name__}")
    return AudioHandle(file_type, filename, audio)
