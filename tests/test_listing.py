"""Tests for report field collection."""

import pytest

from taggit.listing import (
    collect_fields,
    collect_groups,
    leading_number,
    list_file_fields,
    list_tag_values,
)
from taggit.tagging.record import open_file
from taggit.tagging.value import TypedValue


class TestLeadingNumber:
    """Test leading number extraction."""

    @pytest.mark.parametrize(
        "text,expected",
        [("3/12", 3), ("2001-05-03", 2001), (" 7", 7), ("-1", -1), ("12", 12)],
    )
    def test_numbers(self, text, expected):
        """Test text starting with a number."""
        assert leading_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "side A 3", "/12"])
    def test_no_number(self, text):
        """Test text without a leading number."""
        assert leading_number(text) is None


class TestListTagValues:
    """Test converting property maps to schema fields."""

    def test_schema_tags_only(self):
        """Test that properties outside the schema are ignored."""
        fields = list_tag_values({"ARTIST": ["Air"], "COMPOSER": ["Someone"]})
        assert fields == {"artist": TypedValue.string("Air")}

    def test_property_key_mapping(self):
        """Test that TITLE and DATE feed tracktitle and year."""
        fields = list_tag_values({"TITLE": ["La Femme d'Argent"], "DATE": ["1998-01-16"]})
        assert fields["tracktitle"] == TypedValue.string("La Femme d'Argent")
        assert fields["year"] == TypedValue.integer(1998)

    def test_track_of_total(self):
        """Test that 3/12 lists as track 3."""
        assert list_tag_values({"TRACKNUMBER": ["3/12"]})["tracknumber"] == TypedValue.integer(3)

    def test_non_numeric_integer_skipped(self):
        """Test that an unparsable number is left out."""
        assert list_tag_values({"TRACKNUMBER": ["A1"]}) == {}

    def test_multiple_values_joined(self):
        """Test that multi-valued strings are joined."""
        fields = list_tag_values({"GENRE": ["Trip Hop", "Electronic"]})
        assert fields["genre"] == TypedValue.string("Trip Hop, Electronic")

    def test_empty_list_skipped(self):
        """Test that empty value lists are ignored."""
        assert list_tag_values({"ARTIST": []}) == {}


class TestCollectFields:
    """Test full reports from real files."""

    def test_mp3_report(self, all_tags_mp3):
        """Test the report of an MP3 carrying all sub-formats."""
        with open_file(str(all_tags_mp3)) as record:
            fields = collect_fields(record)

        keys = [key for key, _ in fields]
        # file fields first, then tags, then stream properties
        assert keys[:4] == ["filetype", "multitag", "tagimpl", "tagtypes"]
        assert keys[4:6] == ["artist", "tracktitle"]
        assert keys[6:] == ["bitrate", "channels", "length", "samplerate"]

        values = dict(fields)
        assert values["filetype"] == TypedValue.string("mp3")
        assert values["multitag"] == TypedValue.boolean(True)
        assert values["tagimpl"] == TypedValue.string("id3v2")
        assert values["tagtypes"] == TypedValue.string("id3v2,apetag,id3v1")
        assert values["artist"] == TypedValue.string("ID3v2 Artist")

    def test_flac_report(self, tagged_flac):
        """Test the report of a FLAC file."""
        with open_file(str(tagged_flac)) as record:
            file_fields, tags, audio = collect_groups(record)

        assert "tagimpl" not in file_fields
        assert file_fields["filetype"] == TypedValue.string("ogg-flac")
        assert file_fields["multitag"] == TypedValue.boolean(False)
        assert tags == {
            "album": TypedValue.string("Dummy"),
            "artist": TypedValue.string("Portishead"),
            "genre": TypedValue.string("Trip Hop, Electronic"),
            "tracknumber": TypedValue.integer(9),
            "tracktitle": TypedValue.string("Roads"),
            "year": TypedValue.integer(1994),
        }
        assert audio["length"] == TypedValue.integer(3)

    def test_untagged_mp3_report(self, plain_mp3):
        """Test that an untagged MP3 still lists file and stream fields."""
        with open_file(str(plain_mp3)) as record:
            fields = dict(collect_fields(record))
            assert list_file_fields(record)["tagimpl"] == TypedValue.string("none")

        assert fields["tagtypes"] == TypedValue.string("none")
        assert "artist" not in fields
        assert fields["bitrate"] == TypedValue.integer(128)
