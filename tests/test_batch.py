"""
Tests for renime.rename.batch: planning and applying a batch
"""

from pathlib import Path

from renime.config import RenimeConfig, SeasonMode, SeasonSpec
from renime.rename.batch import apply_renames, plan_renames


def _touch(directory: Path, *names: str) -> list[Path]:
    paths = []
    for name in names:
        p = directory / name
        p.write_text(name)
        paths.append(p)
    return paths


class TestPlanRenames:
    def test_plan_does_not_touch_files(self, tmp_path):
        files = _touch(tmp_path, "show_ep5.mp4")
        config = RenimeConfig(season=SeasonSpec(SeasonMode.NONE), increment_by=10)

        plan = plan_renames(files, config)

        assert plan.renames == [(files[0], tmp_path / "show - E15.mp4")]
        assert files[0].exists()
        assert not (tmp_path / "show - E15.mp4").exists()

    def test_files_without_episode_are_rejected(self, tmp_path):
        files = _touch(tmp_path, "Pilot.mkv", "Show - 02.mkv")

        plan = plan_renames(files, RenimeConfig(series="Show"))

        assert [new.name for _, new in plan.renames] == ["Show - S1E02.mkv"]
        assert [e.filename for e in plan.rejected] == ["Pilot.mkv"]

    def test_negative_episode_is_rejected_and_batch_continues(self, tmp_path):
        files = _touch(tmp_path, "Show - 01.mkv", "Show - 13.mkv")

        plan = plan_renames(files, RenimeConfig(increment_by=-12))

        assert plan.renames == [(files[1], tmp_path / "Show - S1E01.mkv")]
        assert [r.filename for r in plan.rejected] == ["Show - 01.mkv"]
        assert "negative" in plan.rejected[0].reason

    def test_preview_lines(self, tmp_path):
        files = _touch(tmp_path, "Show - 02.mkv")
        plan = plan_renames(files, RenimeConfig())
        assert plan.preview_lines() == [f"{files[0]} -> {tmp_path / 'Show - S1E02.mkv'}"]


class TestApplyRenames:
    def test_moves_files_in_order(self, tmp_path):
        files = _touch(tmp_path, "Show - 01.mkv", "Show - 02.mkv")
        plan = plan_renames(files, RenimeConfig(series="Show"))

        report = apply_renames(plan)

        assert report.renamed_paths == [tmp_path / "Show - S1E01.mkv", tmp_path / "Show - S1E02.mkv"]
        assert (tmp_path / "Show - S1E01.mkv").read_text() == "Show - 01.mkv"
        assert not files[0].exists()
        assert report.failures == []

    def test_collision_is_reported_and_batch_continues(self, tmp_path):
        files = _touch(tmp_path, "Show - 01.mkv", "Show - 02.mkv")
        _touch(tmp_path, "Show - S1E01.mkv")
        plan = plan_renames(files, RenimeConfig(series="Show"))

        report = apply_renames(plan)

        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.source == files[0]
        assert "already exists" in failure.error.reason
        assert files[0].exists()
        assert (tmp_path / "Show - S1E01.mkv").read_text() == "Show - S1E01.mkv"
        assert report.renamed_paths == [tmp_path / "Show - S1E02.mkv"]

    def test_missing_source_is_reported(self, tmp_path):
        files = _touch(tmp_path, "Show - 01.mkv")
        plan = plan_renames(files, RenimeConfig())
        files[0].unlink()

        report = apply_renames(plan)

        assert report.outcomes == []
        assert len(report.failures) == 1

    def test_rejected_files_are_carried_into_report(self, tmp_path):
        files = _touch(tmp_path, "Pilot.mkv")
        report = apply_renames(plan_renames(files, RenimeConfig()))
        assert report.results == []
        assert [e.filename for e in report.rejected] == ["Pilot.mkv"]
