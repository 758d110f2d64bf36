"""
Tests for renime.rename.formatter: season tags and formatting
"""

import re

import pytest

from renime.config import SeasonMode, SeasonSpec
from renime.rename.formatter import collapse_separators, format_filename, resolve_season_tag


class TestResolveSeasonTag:
    def test_explicit_keeps_width(self):
        assert resolve_season_tag(SeasonSpec.parse("1")) == "S1"
        assert resolve_season_tag(SeasonSpec.parse("01")) == "S01"

    def test_none(self):
        assert resolve_season_tag(SeasonSpec(SeasonMode.NONE), "Show.s02e01.mkv") == ""

    def test_keep_existing(self):
        assert resolve_season_tag(SeasonSpec(SeasonMode.KEEP), "Show.s02e01.mkv") == "S02"

    def test_keep_without_marker_falls_back(self):
        assert resolve_season_tag(SeasonSpec(SeasonMode.KEEP), "show_ep5.mp4") == "S1"

    def test_default(self):
        assert resolve_season_tag(SeasonSpec(), "Show.s02e01.mkv") == "S1"


class TestFormatFilename:
    def test_series_name_replaces_prefix(self):
        assert format_filename("My Show E03 1080p-GROUP.mkv", "My Show", "S1") == "My Show - S1E03 1080p-GROUP.mkv"

    def test_prefix_used_without_series(self):
        assert format_filename("show ep5.mp4", None, "") == "show - E5.mp4"

    def test_dashed_prefix_collapses(self):
        result = format_filename("Show - 05 .mkv", None, "S1")
        assert result == "Show - S1E05 .mkv"

    def test_empty_tag_leaves_no_double_dash(self):
        result = format_filename("Show - 05.mkv", None, "")
        assert result == "Show - E05.mkv"
        assert " - -" not in result

    def test_unmatched_returns_input(self):
        assert format_filename("Pilot.mkv", "Series", "S1") == "Pilot.mkv"

    @pytest.mark.parametrize(
        "sanitized",
        ["My Show E03 1080p-GROUP.mkv", "Show - 05-06.mkv", "Show 1x05.mkv", "show ep5.mp4"],
    )
    def test_exactly_one_season_episode_token(self, sanitized):
        result = format_filename(sanitized, None, "S4")
        assert len(re.findall(r"S4E\d+(?:-\d+)*", result)) == 1


def test_collapse_separators():
    assert collapse_separators("Show  -  - E5") == "Show - E5"
