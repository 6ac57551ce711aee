"""Tag sub-format presence probing.

``select_preferred_impl`` is the one place where read precedence is decided:
walk the policy's read order and take the first sub-format the file
actually carries.
"""

import logging
from typing import List

import mutagen

from .filetypes import FileType
from .handle import AudioHandle
from .policy import DEFAULT_POLICY, TagFormatPolicy, TagImpl


def has_impl(handle: AudioHandle, impl: TagImpl) -> bool:
    """Tell whether *handle* carries a populated *impl* tag block.

    Never raises. Sub-formats the container cannot carry are reported
    absent, and so are blocks that exist but fail to parse.
    """
    if impl is TagImpl.NONE or not handle.supports(impl):
        return False
    try:
        return handle.tag_block(impl) is not None
    except (mutagen.MutagenError, OSError, ValueError) as e:
        logging.debug(f"Could not read {impl.value} tag from {handle.filename}: {e}")
        return False


def select_preferred_impl(
    handle: AudioHandle,
    file_type: FileType,
    policy: TagFormatPolicy = DEFAULT_POLICY,
) -> TagImpl:
    for impl in policy.read_order(file_type):
        if has_impl(handle, impl):
            return impl
    return TagImpl.NONE


def enumerate_present_impls(
    handle: AudioHandle,
    file_type: FileType,
    policy: TagFormatPolicy = DEFAULT_POLICY,
) -> List[TagImpl]:
    return [impl for impl in policy.supported_impls(file_type) if has_impl(handle, impl)]
