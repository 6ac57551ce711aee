"""Opened files and the choice of tag sub-format to read from.

Opening a file walks this state machine::

    UNOPENED -> OPENING -> OPENED_MULTITAG
                        -> OPENED_SINGLETAG
                        -> FAILED

``open_file`` raises one of the ``FileError`` kinds on failure and releases
the partially opened handle first. ``try_open`` returns the same outcome as
an ``OpenResult`` value instead.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..errors import CorruptOrUnreadableFile, FileError, NoTagsPresent, UnsupportedFileType
from .filetypes import FileType, type_from_extension
from .handle import AudioHandle, open_handle
from .policy import DEFAULT_POLICY, TagFormatPolicy, TagImpl, name_from_tag_impl
from .probe import enumerate_present_impls, select_preferred_impl

NO_TAG_TYPES = "none"


class OpenState(Enum):
    UNOPENED = "unopened"
    OPENING = "opening"
    OPENED_MULTITAG = "opened-multitag"
    OPENED_SINGLETAG = "opened-singletag"
    FAILED = "failed"


class FileRecord:
    """One audio file opened for tag access.

    The record exclusively owns its handle. ``selected_impl`` is decided
    once, right after probing, and cannot change afterwards.
    """

    def __init__(self, name: str, policy: TagFormatPolicy = DEFAULT_POLICY):
        self.name = name
        self.policy = policy
        self.type = FileType.INVALID
        self.handle: Optional[AudioHandle] = None
        self.state = OpenState.UNOPENED
        self._is_multitag = False
        self._selected_impl = TagImpl.NONE

    @property
    def is_multitag(self) -> bool:
        return self._is_multitag

    @property
    def selected_impl(self) -> TagImpl:
        return self._selected_impl

    @property
    def is_open(self) -> bool:
        return self.state in (OpenState.OPENED_MULTITAG, OpenState.OPENED_SINGLETAG)

    def open(self) -> "FileRecord":
        if self.state is not OpenState.UNOPENED:
            raise ValueError(f"{self.name}: cannot open a record in state {self.state.value}")

        self.state = OpenState.OPENING
        try:
            self.type = type_from_extension(self.name)
            if self.type is FileType.INVALID:
                raise UnsupportedFileType(self.name)

            self.handle = open_handle(self.name, self.type)
            if not self.handle.is_valid():
                raise CorruptOrUnreadableFile(self.name)
            if not self.handle.has_tag_block():
                raise NoTagsPresent(self.name)

            if self.policy.is_multitag_capable(self.type):
                self._is_multitag = True
                self._selected_impl = select_preferred_impl(self.handle, self.type, self.policy)
                self.state = OpenState.OPENED_MULTITAG
            else:
                self.state = OpenState.OPENED_SINGLETAG
        except Exception:
            self.state = OpenState.FAILED
            self.close()
            raise

        logging.debug(
            f"Opened {self.name}: multitag={self._is_multitag}, "
            f"reading {name_from_tag_impl(self._selected_impl)}"
        )
        return self

    def close(self) -> None:
        if self.handle is not None:
            self.handle.close()
            self.handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def require_handle(self) -> AudioHandle:
        if not self.is_open or self.handle is None:
            raise ValueError(f"{self.name}: file is not open")
        return self.handle

    def present_impls(self) -> List[TagImpl]:
        return enumerate_present_impls(self.require_handle(), self.type, self.policy)

    def __repr__(self) -> str:
        return f"<FileRecord {self.name!r} {self.state.value} {name_from_tag_impl(self._selected_impl)}>"


def open_file(name: str, policy: TagFormatPolicy = DEFAULT_POLICY) -> FileRecord:
    """Open *name* and select the tag sub-format to read from.

    Raises:
        UnsupportedFileType: unknown extension
        CorruptOrUnreadableFile: mutagen could not read the file
        NoTagsPresent: the container carries no tag block at all
    """
    return FileRecord(name, policy).open()


@dataclass(frozen=True)
class OpenResult:
    """Outcome of ``try_open``: a record or the error that prevented it."""

    name: str
    record: Optional[FileRecord] = None
    error: Optional[FileError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


def try_open(name: str, policy: TagFormatPolicy = DEFAULT_POLICY) -> OpenResult:
    try:
        return OpenResult(name, record=open_file(name, policy))
    except FileError as e:
        return OpenResult(name, error=e)


def tags_present_summary(record: FileRecord) -> str:
    """Comma separated names of the sub-formats present, or ``none``."""
    impls = record.present_impls()
    if not impls:
        return NO_TAG_TYPES
    return ",".join(name_from_tag_impl(impl) for impl in impls)


def read_tag_properties(record: FileRecord) -> Dict[str, List[str]]:
    """Property map of the sub-format selected for reading.

    Single-tag containers expose one unified map, which is returned as is.

    Raises:
        NoTagsPresent: for a multitag file that carries none of its
            sub-formats
    """
    handle = record.require_handle()
    if record.is_multitag:
        if record.selected_impl is TagImpl.NONE:
            raise NoTagsPresent(record.name, "no supported tag type present")
        return handle.block_properties(record.selected_impl)
    return handle.properties()
