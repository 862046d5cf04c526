"""Tests for name normalization."""

import pytest
from musicbaran.text_utils import name_from_href, normalize_media_name, normalize_name


class TestNormalizeName:
    """Test suite for directory/artist name normalization."""

    @pytest.mark.parametrize("name", ["The-Weeknd", "the_weeknd", "THE WEEKND", "  the weeknd  ", "The  Weeknd"])
    def test_variants_match(self, name):
        assert normalize_name(name) == "the weeknd"

    def test_empty(self):
        assert normalize_name("") == ""


class TestNormalizeMediaName:
    """Test suite for track/slug normalization."""

    def test_strips_extension_and_artist(self):
        assert normalize_media_name("artist-track1.mp3", "artist", ".mp3") == "track1"

    def test_typical_file_name(self):
        assert normalize_media_name("The Weeknd - Blinding Lights.mp3", "the weeknd", ".mp3") == "blinding lights"

    def test_artist_with_separators(self):
        """Artist given in URL form is still removed from the title."""
        assert normalize_media_name("The_Weeknd-Save_Your_Tears.mp3", "The-Weeknd", ".mp3") == "save your tears"

    def test_extension_only_stripped_at_end(self):
        assert normalize_media_name("song.mp3 live.mp3", "x", ".mp3") == "song.mp3 live"

    def test_without_extension_argument(self):
        assert normalize_media_name("Song-Name", "artist") == "song name"

    def test_name_equal_to_artist_is_empty(self):
        assert normalize_media_name("The Weeknd.mp3", "the weeknd", ".mp3") == ""

    def test_collapsing_spaces_exposes_artist_again(self):
        assert normalize_media_name("the the weeknd weeknd.mp3", "the weeknd", ".mp3") == ""
        assert normalize_media_name("The Weeknd - The Weeknd Weeknd Intro.mp3", "the weeknd", ".mp3") == "weeknd intro"

    def test_empty_artist_keeps_title(self):
        assert normalize_media_name("Some_Song.mp3", "", ".mp3") == "some song"

    @pytest.mark.parametrize("file_name,artist", [
        ("artist - song.mp3", "artist"),
        ("Song_feat_Artist.mp3", "Artist"),
        ("arartisttist.mp3", "artist"),
        ("The-Weeknd-The-Weeknd-Intro.mp3", "the-weeknd"),
        ("x__y--artist.mp3", "artist"),
        ("the the weeknd weeknd.mp3", "the weeknd"),
        ("The-The_Weeknd-Weeknd - Intro.mp3", "the-weeknd"),
    ])
    def test_result_has_no_artist_or_separators(self, file_name, artist):
        result = normalize_media_name(file_name, artist, ".mp3")

        assert artist not in result
        assert normalize_name(artist) not in result
        assert '-' not in result
        assert '_' not in result
        assert result == result.strip()

    @pytest.mark.parametrize("file_name", [
        "The Weeknd - Blinding Lights.mp3",
        "the_weeknd-save_your_tears.mp3",
        "  Intro  .mp3",
        "arartisttist.mp3",
        "the the weeknd weeknd.mp3",
    ])
    def test_idempotent(self, file_name):
        once = normalize_media_name(file_name, "the weeknd", ".mp3")
        assert normalize_media_name(once, "the weeknd") == once


class TestNameFromHref:
    """Test suite for extracting names from detail page URLs."""

    def test_slug_is_second_to_last_segment(self):
        href = "https://mymusicbaran1.ir/music/the-weeknd-blinding-lights/"
        assert name_from_href(href, "the weeknd") == "blinding lights"

    def test_matches_local_file_name(self):
        href = "https://mymusicbaran1.ir/music/the_weeknd-save-your-tears/"
        local = normalize_media_name("The Weeknd - Save Your Tears.mp3", "the weeknd", ".mp3")
        assert name_from_href(href, "the weeknd") == local

    def test_percent_encoded_slug(self):
        href = "https://mymusicbaran1.ir/album/%D8%B3%D9%84%D8%A7%D9%85/"
        assert name_from_href(href, "the weeknd") == "سلام"

    @pytest.mark.parametrize("href", ["", "/", "no-slashes", "https://host/music//"])
    def test_malformed_href(self, href):
        with pytest.raises(ValueError):
            name_from_href(href, "the weeknd")
