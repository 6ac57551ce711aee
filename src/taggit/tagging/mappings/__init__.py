"""Property mappings for the tag sub-formats.

Every tag block is presented as a property map: upper-case field names
(``ARTIST``, ``DATE``, ``TRACKNUMBER`` ...) mapping to lists of strings. The
modules in this package translate each sub-format's native keys.
"""

from .ape import ape_properties
from .id3 import id3_properties
from .vorbis import vorbis_properties

__all__ = [
    'ape_properties',
    'id3_properties',
    'vorbis_properties',
]
