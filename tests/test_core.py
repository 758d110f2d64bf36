"""
Tests for renime.rename.core: episode adjustment and the full pipeline
"""

import pytest

from renime.config import SeasonMode, SeasonSpec
from renime.errors import NoEpisodeMarkerError, ValidationError
from renime.rename.core import RenameRequest, adjust_episode_number, build_canonical_filename


class TestAdjustEpisodeNumber:
    def test_identity_drops_trailing_content(self):
        assert adjust_episode_number("My Show - S1E03 1080p-GROUP.mkv") == "My Show - S1E03.mkv"

    def test_increment(self):
        assert adjust_episode_number("show - E5.mp4", 10) == "show - E15.mp4"

    def test_multi_episode_runs_adjust_independently(self):
        assert adjust_episode_number("Show - S1E05-06.mkv", 2) == "Show - S1E07-08.mkv"

    def test_three_episode_span(self):
        assert adjust_episode_number("Show - E01-02-03.mkv", 1) == "Show - E02-03-04.mkv"

    def test_padding_is_kept(self):
        assert adjust_episode_number("Show - S2E009.mkv", 1) == "Show - S2E010.mkv"

    @pytest.mark.parametrize("formatted", ["Show - S1E05.mkv", "Show - E12-13.avi", "Show - S01E099.mp4"])
    @pytest.mark.parametrize("k", [1, 3, 24])
    def test_increment_is_reversible(self, formatted, k):
        shifted = adjust_episode_number(formatted, k)
        assert adjust_episode_number(shifted, -k) == formatted

    def test_negative_increment(self):
        assert adjust_episode_number("Show - S1E13.mkv", -12) == "Show - S1E01.mkv"

    def test_negative_result_is_rejected(self):
        with pytest.raises(ValidationError):
            adjust_episode_number("Show - E02.mkv", -3)

    def test_extension_override(self):
        assert adjust_episode_number("Show - E5.avi", 0, "mkv") == "Show - E5.mkv"
        assert adjust_episode_number("Show - E5.avi", 0, ".mkv") == "Show - E5.mkv"

    def test_without_extension(self):
        assert adjust_episode_number("Show - S1E05", 1) == "Show - S1E06"

    def test_no_episode_token(self):
        with pytest.raises(NoEpisodeMarkerError):
            adjust_episode_number("Pilot.mkv", 1)


class TestBuildCanonicalFilename:
    """End-to-end normalization"""

    def test_explicit_season_with_series(self):
        request = RenameRequest(
            "My.Show.S01E03.1080p-GROUP.mkv",
            series_name="My Show",
            season=SeasonSpec.parse("1"),
        )
        assert build_canonical_filename(request) == "My Show - S1E03.mkv"

    def test_no_season_with_increment(self):
        request = RenameRequest("show_ep5.mp4", season=SeasonSpec(SeasonMode.NONE), increment=10)
        assert build_canonical_filename(request) == "show - E15.mp4"

    def test_keep_existing_season(self):
        request = RenameRequest("Show.s02e01.mkv", season=SeasonSpec(SeasonMode.KEEP))
        assert build_canonical_filename(request) == "Show - S02E01.mkv"

    def test_release_tags_removed(self):
        request = RenameRequest("[SubGroup] Some Anime - 12 [1080p][ABCD1234].mkv")
        assert build_canonical_filename(request) == "Some Anime - S1E12.mkv"

    def test_extension_override(self):
        request = RenameRequest("Show - 07.avi", series_name="Show", extension="mkv")
        assert build_canonical_filename(request) == "Show - S1E07.mkv"

    @pytest.mark.parametrize(
        "raw", ["Show - 05v2.mkv", "[Grp] Show - 05v2 [720p].mkv", "Show.S01E05v2.mkv"]
    )
    def test_version_suffix_is_dropped(self, raw):
        assert build_canonical_filename(RenameRequest(raw)) == "Show - S1E05.mkv"

    def test_name_without_extension(self):
        assert build_canonical_filename(RenameRequest("Show.S01E05")) == "Show - S1E05"

    def test_multi_episode_file(self):
        request = RenameRequest("Show_-_05-06.mkv", season=SeasonSpec.parse("2"), increment=1)
        assert build_canonical_filename(request) == "Show - S2E06-07.mkv"

    def test_no_episode_number(self):
        with pytest.raises(NoEpisodeMarkerError) as exc_info:
            build_canonical_filename(RenameRequest("Pilot.mkv", series_name="Show"))
        assert exc_info.value.filename == "Pilot.mkv"

    def test_deterministic(self):
        request = RenameRequest("[Grp] Show_ep07 [x264].mkv", increment=2)
        assert build_canonical_filename(request) == build_canonical_filename(request)
