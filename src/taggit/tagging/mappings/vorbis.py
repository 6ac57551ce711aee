"""Vorbis comment property mapping (Ogg Vorbis, FLAC, Ogg FLAC)."""

from typing import Dict, List


def vorbis_properties(tags) -> Dict[str, List[str]]:
    """Vorbis comment keys already are property names, modulo case."""
    properties: Dict[str, List[str]] = {}
    for key, values in tags.as_dict().items():
        properties.setdefault(key.upper(), []).extend(values)
    return properties
