"""Tests for the tag sub-format policy."""

import pytest

from taggit.tagging.filetypes import FileType
from taggit.tagging.policy import (
    DEFAULT_POLICY,
    MULTITAG_MAPPING,
    TagFormatPolicy,
    TagImpl,
    default_write_impl,
    impl_allowed,
    is_multitag_capable,
    name_from_tag_impl,
    supported_impls,
    tag_impl_from_name,
)


class TestDefaultPolicy:
    """Test the built-in policy table."""

    def test_mp3_is_multitag(self):
        """Test that MP3 carries ID3v2, APE and ID3v1 in that order."""
        assert is_multitag_capable(FileType.MP3)
        assert supported_impls(FileType.MP3) == (TagImpl.ID3V2, TagImpl.APETAG, TagImpl.ID3V1)

    @pytest.mark.parametrize("file_type", [FileType.OGG_FLAC, FileType.OGG_VORBIS, FileType.INVALID])
    def test_single_tag_types(self, file_type):
        """Test that other containers have no sub-formats."""
        assert not is_multitag_capable(file_type)
        assert supported_impls(file_type) == ()
        assert default_write_impl(file_type) is TagImpl.NONE

    def test_default_write_impl_is_first_supported(self):
        """Test that writes default to ID3v2 for MP3."""
        assert default_write_impl(FileType.MP3) is TagImpl.ID3V2

    def test_impl_allowed(self):
        """Test sub-format membership."""
        assert impl_allowed(FileType.MP3, TagImpl.APETAG)
        assert not impl_allowed(FileType.MP3, TagImpl.NONE)
        assert not impl_allowed(FileType.OGG_VORBIS, TagImpl.ID3V2)

    def test_none_never_listed(self):
        """Test that NONE is not a sub-format of any container."""
        for impls in MULTITAG_MAPPING.values():
            assert TagImpl.NONE not in impls

    def test_read_order_defaults_to_declared_order(self):
        """Test that read precedence follows the table."""
        assert DEFAULT_POLICY.read_order(FileType.MP3) == supported_impls(FileType.MP3)


class TestTagImplNames:
    """Test sub-format name lookups."""

    def test_round_trip(self):
        """Test that every sub-format has a name that parses back."""
        for impl in TagImpl:
            assert tag_impl_from_name(name_from_tag_impl(impl)) is impl

    def test_case_insensitive(self):
        """Test that ID3V2 parses like id3v2."""
        assert tag_impl_from_name("ID3V2") is TagImpl.ID3V2

    def test_unknown_name_raises(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown tag type: lyrics3"):
            tag_impl_from_name("lyrics3")


class TestPolicyOverrides:
    """Test read and write map overrides."""

    def test_read_map_changes_precedence(self):
        """Test that a read map reorders precedence."""
        policy = TagFormatPolicy(read_map={FileType.MP3: [TagImpl.APETAG, TagImpl.ID3V2]})
        assert policy.read_order(FileType.MP3) == (TagImpl.APETAG, TagImpl.ID3V2)
        # write side untouched
        assert policy.default_write_impl(FileType.MP3) is TagImpl.ID3V2

    def test_write_map_changes_default(self):
        """Test that the first write map entry becomes the default target."""
        policy = TagFormatPolicy.from_names(write_map={"mp3": ["apetag"]})
        assert policy.default_write_impl(FileType.MP3) is TagImpl.APETAG
        assert policy.write_order(FileType.MP3) == (TagImpl.APETAG,)

    def test_empty_override_keeps_default(self):
        """Test that an empty list means the built-in order."""
        policy = TagFormatPolicy.from_names(read_map={"mp3": []})
        assert policy.read_order(FileType.MP3) == supported_impls(FileType.MP3)

    def test_disallowed_impl_rejected(self):
        """Test that NONE cannot be listed as a sub-format."""
        with pytest.raises(ValueError, match="not allowed"):
            TagFormatPolicy(read_map={FileType.MP3: [TagImpl.NONE]})

    def test_single_tag_type_rejected(self):
        """Test that single-tag containers cannot be overridden."""
        with pytest.raises(ValueError, match="does not support multiple tag types"):
            TagFormatPolicy.from_names(read_map={"ogg-vorbis": ["id3v2"]})

    def test_duplicates_rejected(self):
        """Test that a sub-format may appear once."""
        with pytest.raises(ValueError, match="duplicate"):
            TagFormatPolicy.from_names(write_map={"mp3": ["id3v2", "id3v2"]})

    def test_unknown_file_type_rejected(self):
        """Test that unknown file type names are rejected."""
        with pytest.raises(ValueError, match="unknown file type: wav"):
            TagFormatPolicy.from_names(read_map={"wav": ["id3v2"]})

    def test_from_config(self, config):
        """Test that a policy is built from the config maps."""
        config.set_read_order("mp3", ["id3v1", "id3v2"])
        policy = TagFormatPolicy.from_config(config)
        assert policy.read_order(FileType.MP3) == (TagImpl.ID3V1, TagImpl.ID3V2)
