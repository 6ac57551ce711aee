"""APEv2 property mapping."""

from typing import Dict, List

from mutagen.apev2 import APETextValue

# APE item keys that differ from the property name
ITEM_KEYS = {
    'ALBUM ARTIST': 'ALBUMARTIST',
    'DISC': 'DISCNUMBER',
    'TRACK': 'TRACKNUMBER',
    'YEAR': 'DATE',
}


def ape_properties(tag) -> Dict[str, List[str]]:
    """Build a property map from a ``mutagen.apev2.APEv2`` tag.

    Binary and external items have no text representation and are skipped.
    """
    properties: Dict[str, List[str]] = {}

    for item_key, value in tag.items():
        if not isinstance(value, APETextValue):
            continue
        key = item_key.upper()
        key = ITEM_KEYS.get(key, key)
        properties.setdefault(key, []).extend(list(value))

    return properties
