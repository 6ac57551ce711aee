"""Pytest configuration and fixtures.

Audio fixtures are real, minimal files: a handful of silent MPEG frames or a
bare FLAC STREAMINFO block, with tags written by mutagen itself.
"""

import struct
from pathlib import Path

import pytest
from mutagen.apev2 import APEv2
from mutagen.flac import FLAC
from mutagen.id3 import ID3, COMM, TALB, TDRC, TIT2, TPE1, TRCK

from taggit.config import Config

# MPEG-1 Layer III, 128 kbps, 44.1 kHz, stereo, no padding: 417 byte frames
MPEG_FRAME = b"\xff\xfb\x90\x00" + b"\x00" * 413


def write_mp3(path: Path, frames: int = 10) -> Path:
    """Write a tagless MP3 made of silent frames."""
    path.write_bytes(MPEG_FRAME * frames)
    return path


def add_id3v2(path: Path, artist="ID3v2 Artist", title="ID3v2 Title", **extra) -> None:
    tags = ID3()
    tags.add(TPE1(encoding=3, text=[artist]))
    tags.add(TIT2(encoding=3, text=[title]))
    if "album" in extra:
        tags.add(TALB(encoding=3, text=[extra["album"]]))
    if "year" in extra:
        tags.add(TDRC(encoding=3, text=[extra["year"]]))
    if "track" in extra:
        tags.add(TRCK(encoding=3, text=[extra["track"]]))
    if "comment" in extra:
        tags.add(COMM(encoding=3, lang="eng", desc="", text=[extra["comment"]]))
    tags.save(str(path), v1=0)


def add_apetag(path: Path, artist="APE Artist", title="APE Title", **extra) -> None:
    # Write APE before appending an ID3v1 tag; APEv2.save drops a trailing v1 tag
    tags = APEv2()
    tags["Artist"] = artist
    tags["Title"] = title
    for key, value in extra.items():
        tags[key.capitalize()] = value
    tags.save(str(path))


def _v1_field(text: str, size: int) -> bytes:
    return text.encode("latin-1")[:size].ljust(size, b"\x00")


def add_id3v1(path: Path, artist="ID3v1 Artist", title="ID3v1 Title",
              album="", year="", comment="", track=0, genre=255) -> None:
    """Append a raw 128 byte ID3v1.1 tag."""
    data = (
        b"TAG"
        + _v1_field(title, 30)
        + _v1_field(artist, 30)
        + _v1_field(album, 30)
        + _v1_field(year, 4)
        + _v1_field(comment, 28)
        + b"\x00"
        + bytes([track, genre])
    )
    assert len(data) == 128
    with open(path, "ab") as f:
        f.write(data)


def write_flac(path: Path, seconds: int = 3, tags=None) -> Path:
    """Write a FLAC file consisting only of a STREAMINFO block.

    With *tags* (a dict) a Vorbis comment block is added through mutagen.
    """
    sample_rate = 44100
    channels = 2
    bits_per_sample = 16
    total_samples = sample_rate * seconds

    streaminfo = (
        struct.pack(">HH", 4096, 4096)  # min/max block size
        + b"\x00\x00\x00"  # min frame size (unknown)
        + b"\x00\x00\x00"  # max frame size (unknown)
        + struct.pack(
            ">Q",
            (sample_rate << 44)
            | ((channels - 1) << 41)
            | ((bits_per_sample - 1) << 36)
            | total_samples,
        )
        + b"\x00" * 16  # MD5
    )
    assert len(streaminfo) == 34

    # last metadata block, type 0 (STREAMINFO), length 34
    path.write_bytes(b"fLaC" + bytes([0x80, 0x00, 0x00, 0x22]) + streaminfo)

    if tags is not None:
        audio = FLAC(str(path))
        audio.add_tags()
        for key, value in tags.items():
            audio[key] = value
        audio.save()
    return path


@pytest.fixture
def plain_mp3(tmp_path):
    """An MP3 file without any tag."""
    return write_mp3(tmp_path / "plain.mp3")


@pytest.fixture
def id3v2_mp3(tmp_path):
    """An MP3 file with an ID3v2 tag only."""
    path = write_mp3(tmp_path / "id3v2.mp3")
    add_id3v2(
        path,
        artist="Radiohead",
        title="Airbag",
        album="OK Computer",
        year="1997",
        track="1/12",
        comment="first track",
    )
    return path


@pytest.fixture
def all_tags_mp3(tmp_path):
    """An MP3 file carrying ID3v2, APE and ID3v1 tags."""
    path = write_mp3(tmp_path / "all.mp3")
    add_id3v2(path)
    add_apetag(path)
    add_id3v1(path)
    return path


@pytest.fixture
def ape_v1_mp3(tmp_path):
    """An MP3 file carrying APE and ID3v1 tags, no ID3v2."""
    path = write_mp3(tmp_path / "ape_v1.mp3")
    add_apetag(path, artist="APE Artist", Track="7")
    add_id3v1(path, genre=17)
    return path


@pytest.fixture
def v1_only_mp3(tmp_path):
    """An MP3 file with an ID3v1 tag only."""
    path = write_mp3(tmp_path / "v1.mp3")
    add_id3v1(path, artist="Old Artist", title="Old Title", year="1984", track=5, genre=17)
    return path


@pytest.fixture
def tagged_flac(tmp_path):
    """A FLAC file with Vorbis comments."""
    return write_flac(
        tmp_path / "song.flac",
        tags={
            "artist": "Portishead",
            "title": "Roads",
            "album": "Dummy",
            "date": "1994-08-22",
            "tracknumber": "9",
            "genre": ["Trip Hop", "Electronic"],
        },
    )


@pytest.fixture
def untagged_flac(tmp_path):
    """A FLAC file without a Vorbis comment block."""
    return write_flac(tmp_path / "bare.flac")


@pytest.fixture
def corrupt_mp3(tmp_path):
    """A file with an .mp3 name that holds no MPEG data."""
    path = tmp_path / "corrupt.mp3"
    path.write_bytes(b"this is not an mpeg stream " * 20)
    return path


@pytest.fixture
def damaged_ape_mp3(tmp_path):
    """An MP3 with a good ID3v2 tag and an APE tag whose first item key is garbage."""
    path = write_mp3(tmp_path / "damaged-ape.mp3")
    add_id3v2(path, artist="Kept Artist")
    add_apetag(path)
    data = path.read_bytes()
    start = data.index(b"Artist\x00", data.index(b"APETAGEX"))
    # control characters are not allowed in APEv2 item keys
    damaged = data[:start] + bytes(range(1, 7)) + data[start + 6:]
    path.write_bytes(damaged)
    return path


@pytest.fixture
def config(tmp_path):
    """A Config bound to a file in the test's temporary directory."""
    return Config(tmp_path / ".taggit_config.toml")
