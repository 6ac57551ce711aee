"""Tag sub-format policy per container type.

Some containers can carry more than one tag sub-format at the same time. The
policy table lists, per container, the sub-formats it may carry in the order
they are preferred. That order doubles as the read precedence, and its first
entry is the default target for writes.

    MP3: ID3v2, then APE, then ID3v1

Containers absent from the table have exactly one implicit tag
representation (Vorbis comments for Ogg/FLAC).

A policy may carry a read map and a write map that override the declared
order per container. Both are loaded from the configuration file.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .filetypes import FileType, type_from_name, name_from_type


class TagImpl(Enum):
    """Tag sub-formats a container may embed."""

    ID3V2 = "id3v2"
    APETAG = "apetag"
    ID3V1 = "id3v1"
    NONE = "none"


UNKNOWN_TAG_IMPL_NAME = "unknown-tag-implementation"

TAG_IMPL_NAMES = MappingProxyType({
    'apetag': TagImpl.APETAG,
    'id3v1': TagImpl.ID3V1,
    'id3v2': TagImpl.ID3V2,
    'none': TagImpl.NONE,
})

MULTITAG_MAPPING = MappingProxyType({
    FileType.MP3: (TagImpl.ID3V2, TagImpl.APETAG, TagImpl.ID3V1),
})


def tag_impl_from_name(name: str) -> TagImpl:
    """Parse a sub-format name such as ``id3v2``.

    Raises:
        ValueError: if *name* is not part of the vocabulary
    """
    try:
        return TAG_IMPL_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown tag type: {name}") from None


def name_from_tag_impl(impl: TagImpl) -> str:
    for name, value in TAG_IMPL_NAMES.items():
        if value is impl:
            return name
    return UNKNOWN_TAG_IMPL_NAME


ImplOrder = Tuple[TagImpl, ...]


class TagFormatPolicy:
    """Read precedence and write defaults for every container type."""

    def __init__(
        self,
        read_map: Optional[Mapping[FileType, Iterable[TagImpl]]] = None,
        write_map: Optional[Mapping[FileType, Iterable[TagImpl]]] = None,
    ):
        self._read_map = self._check_overrides(read_map or {}, "read")
        self._write_map = self._check_overrides(write_map or {}, "write")

    @staticmethod
    def _check_overrides(overrides, kind: str) -> Mapping[FileType, ImplOrder]:
        checked: Dict[FileType, ImplOrder] = {}
        for file_type, impls in overrides.items():
            supported = MULTITAG_MAPPING.get(file_type, ())
            order = tuple(impls)
            if not supported:
                raise ValueError(
                    f"{kind}-map: {name_from_type(file_type)} does not support multiple tag types"
                )
            for impl in order:
                if impl not in supported:
                    raise ValueError(
                        f"{kind}-map: {name_from_tag_impl(impl)} is not allowed for "
                        f"{name_from_type(file_type)}"
                    )
            if len(set(order)) != len(order):
                raise ValueError(f"{kind}-map: duplicate tag types for {name_from_type(file_type)}")
            if order:
                checked[file_type] = order
        return MappingProxyType(checked)

    @classmethod
    def from_names(
        cls,
        read_map: Optional[Mapping[str, Iterable[str]]] = None,
        write_map: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "TagFormatPolicy":
        """Build a policy from ``{"mp3": ["apetag", "id3v2"]}`` style tables."""

        def convert(table, kind):
            converted = {}
            for type_name, impl_names in (table or {}).items():
                file_type = type_from_name(type_name)
                if file_type is FileType.INVALID:
                    raise ValueError(f"{kind}-map: unknown file type: {type_name}")
                converted[file_type] = [tag_impl_from_name(n) for n in impl_names]
            return converted

        return cls(convert(read_map, "read"), convert(write_map, "write"))

    @classmethod
    def from_config(cls, config) -> "TagFormatPolicy":
        policy = cls.from_names(config.get_read_map(), config.get_write_map())
        logging.debug(f"Tag format policy: {policy!r}")
        return policy

    def supported_impls(self, file_type: FileType) -> ImplOrder:
        return MULTITAG_MAPPING.get(file_type, ())

    def is_multitag_capable(self, file_type: FileType) -> bool:
        return file_type in MULTITAG_MAPPING

    def impl_allowed(self, file_type: FileType, impl: TagImpl) -> bool:
        return impl in self.supported_impls(file_type)

    def read_order(self, file_type: FileType) -> ImplOrder:
        return self._read_map.get(file_type, self.supported_impls(file_type))

    def write_order(self, file_type: FileType) -> ImplOrder:
        return self._write_map.get(file_type, self.supported_impls(file_type))

    def default_write_impl(self, file_type: FileType) -> TagImpl:
        order = self.write_order(file_type)
        return order[0] if order else TagImpl.NONE

    def __repr__(self) -> str:
        def fmt(table):
            return {
                name_from_type(ft): [name_from_tag_impl(i) for i in impls]
                for ft, impls in table.items()
            }

        return f"TagFormatPolicy(read_map={fmt(self._read_map)}, write_map={fmt(self._write_map)})"


DEFAULT_POLICY = TagFormatPolicy()


def supported_impls(file_type: FileType) -> ImplOrder:
    return DEFAULT_POLICY.supported_impls(file_type)


def is_multitag_capable(file_type: FileType) -> bool:
    return DEFAULT_POLICY.is_multitag_capable(file_type)


def default_write_impl(file_type: FileType) -> TagImpl:
    return DEFAULT_POLICY.default_write_impl(file_type)


def impl_allowed(file_type: FileType, impl: TagImpl) -> bool:
    return DEFAULT_POLICY.impl_allowed(file_type, impl)
