"""ID3 (v2 and v1) property mapping.

Both ID3 flavours are exposed as mutagen frames: ID3v2 through ``mutagen.id3.ID3``
and ID3v1 through ``ParseID3v1``, which lifts the fixed v1 fields into v2
frames. One mapping therefore serves both.
"""

from typing import Dict, Iterable, List

# Text frames with a fixed property name
FRAME_KEYS = {
    'TALB': 'ALBUM',
    'TBPM': 'BPM',
    'TCMP': 'COMPILATION',
    'TCOM': 'COMPOSER',
    'TCON': 'GENRE',
    'TCOP': 'COPYRIGHT',
    'TDOR': 'ORIGINALDATE',
    'TDRC': 'DATE',
    'TENC': 'ENCODEDBY',
    'TIT1': 'WORK',
    'TIT2': 'TITLE',
    'TIT3': 'SUBTITLE',
    'TLAN': 'LANGUAGE',
    'TPE1': 'ARTIST',
    'TPE2': 'ALBUMARTIST',
    'TPE3': 'CONDUCTOR',
    'TPE4': 'REMIXER',
    'TPOS': 'DISCNUMBER',
    'TPUB': 'LABEL',
    'TRCK': 'TRACKNUMBER',
    'TSRC': 'ISRC',
    'TYER': 'DATE',
}

# ParseID3v1 files the v1 comment field under this description
ID3V1_COMMENT_DESC = "ID3v1 Comment"


def comment_key(desc: str) -> str:
    """Foobar and friends write the plain comment with an empty description."""
    if not desc or desc == ID3V1_COMMENT_DESC:
        return 'COMMENT'
    return 'COMMENT:' + desc.upper()


def frame_text(frame) -> List[str]:
    if frame.FrameID == 'TCON':
        # resolves "(17)" and bare v1 genre numbers to names
        return list(frame.genres)
    return [str(t) for t in frame.text]


def id3_properties(frames: Iterable) -> Dict[str, List[str]]:
    """Build a property map from an iterable of ID3 frames."""
    properties: Dict[str, List[str]] = {}

    for frame in frames:
        frame_id = frame.FrameID
        if frame_id in FRAME_KEYS:
            key = FRAME_KEYS[frame_id]
        elif frame_id == 'COMM':
            key = comment_key(frame.desc)
        elif frame_id == 'TXXX':
            key = frame.desc.upper()
        elif frame_id == 'USLT':
            key = 'LYRICS'
        else:
            continue

        if frame_id == 'USLT':
            values = [frame.text]
        else:
            values = frame_text(frame)
        if key and values:
            properties.setdefault(key, []).extend(values)

    return properties
