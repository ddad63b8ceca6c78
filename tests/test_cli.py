"""Tests for the hike CLI against a local store."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from hiketrack.local_store import LocalHikeStore

runner = CliRunner()


@pytest.fixture
def store_dir(tmp_path):
    return tmp_path / "hikes"


def _write_track(path, samples):
    path.write_text(json.dumps([s.model_dump() for s in samples]))
    return path


@pytest.fixture
def long_track(tmp_path, start_fix, walk_north):
    return _write_track(tmp_path / "long.json", [start_fix, *walk_north(25, 20)])


@pytest.fixture
def short_track(tmp_path, start_fix, walk_north):
    return _write_track(tmp_path / "short.json", [start_fix, *walk_north(2, 10)])


class TestReplayCommand:
    def test_replay_saves_to_local_store(self, long_track, store_dir):
        result = runner.invoke(
            app, ["replay", str(long_track), "--local", str(store_dir), "--user", "alice"]
        )

        assert result.exit_code == 0, result.output
        assert "has been saved" in result.output
        records = LocalHikeStore(store_dir, user_id="alice").list()
        assert len(records) == 1
        assert records[0].point_count == 26
        assert records[0].stats.distance_meters == pytest.approx(500, rel=1e-6)

    def test_short_track_is_not_saved(self, short_track, store_dir):
        result = runner.invoke(
            app, ["replay", str(short_track), "--local", str(store_dir), "--user", "alice"]
        )

        assert result.exit_code == 0, result.output
        assert "too short" in result.output
        assert LocalHikeStore(store_dir, user_id="alice").list() == []

    def test_no_save(self, long_track):
        result = runner.invoke(app, ["replay", str(long_track), "--no-save", "--user", "alice"])

        assert result.exit_code == 0, result.output
        assert "Not saved" in result.output

    def test_auto_pause_excludes_gaps(self, tmp_path, start_fix, walk_north, store_dir):
        samples = walk_north(20, 20)
        # Ten minutes of silence between the 10th and 11th samples
        shifted = [
            s if i < 10 else s.model_copy(update={"timestamp": s.timestamp + 500})
            for i, s in enumerate(samples)
        ]
        track = _write_track(tmp_path / "gap.json", [start_fix, *shifted])

        result = runner.invoke(
            app,
            ["replay", str(track), "--local", str(store_dir), "--user", "alice", "--auto-pause", "60"],
        )

        assert result.exit_code == 0, result.output
        record = LocalHikeStore(store_dir, user_id="alice").list()[0]
        assert record.stats.duration_seconds == pytest.approx(19)

    def test_unreadable_track_fails(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")

        result = runner.invoke(app, ["replay", str(bad), "--no-save"])
        assert result.exit_code == 1


class TestHikeCommands:
    @pytest.fixture
    def saved_id(self, long_track, store_dir):
        runner.invoke(app, ["replay", str(long_track), "--local", str(store_dir), "--user", "alice"])
        return LocalHikeStore(store_dir, user_id="alice").list()[0].id

    def test_list(self, saved_id, store_dir):
        result = runner.invoke(app, ["list", "--local", str(store_dir), "--user", "alice"])

        assert result.exit_code == 0, result.output
        assert "Hike History" in result.output

    def test_list_empty(self, store_dir):
        result = runner.invoke(app, ["list", "--local", str(store_dir), "--user", "nobody"])

        assert result.exit_code == 0, result.output
        assert "No hikes yet" in result.output

    def test_show(self, saved_id, store_dir):
        result = runner.invoke(app, ["show", saved_id, "--local", str(store_dir), "--user", "alice"])

        assert result.exit_code == 0, result.output
        assert "26 route points" in result.output

    def test_show_missing(self, store_dir):
        result = runner.invoke(app, ["show", "missing", "--local", str(store_dir), "--user", "alice"])
        assert result.exit_code == 1

    def test_delete(self, saved_id, store_dir):
        result = runner.invoke(
            app, ["delete", saved_id, "--yes", "--local", str(store_dir), "--user", "alice"]
        )

        assert result.exit_code == 0, result.output
        assert LocalHikeStore(store_dir, user_id="alice").list() == []
