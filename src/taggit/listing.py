"""Field collection for the file reports.

A report for one file is three groups of typed fields, each sorted by key:

* taggit's own view of the file (type, multitag state, tag types present),
* the schema tags found in the selected property map,
* stream properties (bitrate, channels, length, samplerate).
"""

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from .errors import NoTagsPresent
from .tagging.filetypes import name_from_type
from .tagging.policy import name_from_tag_impl
from .tagging.record import FileRecord, read_tag_properties, tags_present_summary
from .tagging.parser import leading_number
from .tagging.schema import TAG_SCHEMA
from .tagging.value import TagType, TypedValue

Fields = Dict[str, TypedValue]


def list_file_fields(record: FileRecord) -> Fields:
    fields: Fields = {
        'filetype': TypedValue.string(name_from_type(record.type)),
        'multitag': TypedValue.boolean(record.is_multitag),
        'tagtypes': TypedValue.string(tags_present_summary(record)),
    }
    if record.is_multitag:
        fields['tagimpl'] = TypedValue.string(name_from_tag_impl(record.selected_impl))
    return fields


def list_tag_values(properties: Mapping[str, Sequence[str]]) -> Fields:
    """Schema tags present in *properties*, converted to their declared kind.

    Multiple values of one property are joined with ``", "``. Integer tags
    take the leading number of the first value and are left out when there
    is none.
    """
    fields: Fields = {}
    for name, field in TAG_SCHEMA.items():
        values = properties.get(field.property_key)
        if not values:
            continue
        if field.type is TagType.INTEGER:
            number = leading_number(values[0])
            if number is None:
                logging.debug(f"Ignoring non-numeric {name}: {values[0]!r}")
                continue
            fields[name] = TypedValue.integer(number)
        else:
            fields[name] = TypedValue.string(", ".join(values))
    return fields


def list_audio_properties(record: FileRecord) -> Fields:
    props = record.require_handle().audio_properties()
    return {key: TypedValue.integer(value) for key, value in props.items()}


def collect_groups(record: FileRecord) -> Tuple[Fields, Fields, Fields]:
    """File fields, tag values and audio properties of an opened *record*."""
    try:
        tags = list_tag_values(read_tag_properties(record))
    except NoTagsPresent as e:
        logging.info(str(e))
        tags = {}
    return list_file_fields(record), tags, list_audio_properties(record)


def flatten_groups(groups: Sequence[Fields]) -> List[Tuple[str, TypedValue]]:
    fields: List[Tuple[str, TypedValue]] = []
    for group in groups:
        fields.extend(sorted(group.items()))
    return fields


def collect_fields(record: FileRecord) -> List[Tuple[str, TypedValue]]:
    """All report fields of an opened *record*, group by group."""
    return flatten_groups(collect_groups(record))
