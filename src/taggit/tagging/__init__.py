"""Tag format resolution and typed tag values.

Sub-modules:
    value.py: TypedValue and TagType
    filetypes.py: container types, extension and name tables
    policy.py: tag sub-formats and per-container read/write policy
    handle.py: mutagen backed container handles
    mappings/: property maps for ID3, APE and Vorbis comments
    probe.py: sub-format presence and read precedence
    record.py: opening files (FileRecord) and reading their tags
    schema.py: tag names, ids and value kinds
    parser.py: ``key=value`` tag definitions
"""

from .filetypes import FileType, type_from_extension, type_from_name, name_from_type
from .policy import (
    DEFAULT_POLICY,
    TagFormatPolicy,
    TagImpl,
    default_write_impl,
    is_multitag_capable,
    supported_impls,
)
from .probe import enumerate_present_impls, has_impl, select_preferred_impl
from .record import (
    FileRecord,
    OpenResult,
    OpenState,
    open_file,
    read_tag_properties,
    tags_present_summary,
    try_open,
)
from .schema import TAG_SCHEMA, TagId, name_to_id, name_to_type
from .parser import TagChangeSet, TagDefinition, parse_assignment
from .value import TagType, TypedValue

__all__ = [
    'DEFAULT_POLICY',
    'FileRecord',
    'FileType',
    'OpenResult',
    'OpenState',
    'TAG_SCHEMA',
    'TagChangeSet',
    'TagDefinition',
    'TagFormatPolicy',
    'TagId',
    'TagImpl',
    'TagType',
    'TypedValue',
    'default_write_impl',
    'enumerate_present_impls',
    'has_impl',
    'is_multitag_capable',
    'name_from_type',
    'name_to_id',
    'name_to_type',
    'open_file',
    'parse_assignment',
    'read_tag_properties',
    'select_preferred_impl',
    'supported_impls',
    'tags_present_summary',
    'try_open',
    'type_from_extension',
    'type_from_name',
]
