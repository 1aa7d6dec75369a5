"""Tests for the runtrack CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from src.cli import __version__
from src.cli.main import app
from src.tracking.config import reset_settings
from src.tracking.store import RunStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def store_path(tmp_path, monkeypatch):
    """Point the run store at a temporary file."""
    path = tmp_path / "runs.json"
    monkeypatch.setenv("RUNTRACK_STORE_PATH", str(path))
    monkeypatch.setenv("RUNTRACK_UNIT_SYSTEM", "metric")
    reset_settings()
    yield path
    reset_settings()


@pytest.fixture
def track_file(tmp_path):
    """Recorded two-sample track."""
    path = tmp_path / "track.json"
    path.write_text(
        json.dumps(
            [
                {"lat": 0.0, "lng": 0.0, "timestamp": 0, "altitude": 10.0},
                {"lat": 0.0, "lng": 0.01, "timestamp": 60_000, "altitude": 15.0},
            ]
        )
    )
    return path


def test_version():
    """Test --version prints the version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_track_json(track_file, store_path):
    """Test replaying a track prints the summary as JSON and stores the run."""
    result = runner.invoke(app, ["track", str(track_file), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["total_distance_km"] == pytest.approx(1.11, rel=0.01)
    assert data["elevation_gain_m"] == pytest.approx(5.0)
    assert data["total_duration_minutes"] == 1
    assert RunStore(store_path).count() == 1


def test_track_no_save(track_file, store_path):
    """Test --no-save leaves the run log untouched."""
    result = runner.invoke(app, ["track", str(track_file), "--no-save"])

    assert result.exit_code == 0
    assert "Run Complete" in result.stdout
    assert not store_path.exists()


def test_track_with_pause_and_notes(track_file, store_path):
    """Test pause windows and notes are applied."""
    result = runner.invoke(
        app, ["track", str(track_file), "-p", "10-40", "--notes", "Hill reps", "--json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["elapsed_seconds"] == 30
    run = RunStore(store_path).list_runs()[0]
    assert run.notes == "Hill reps"


def test_track_live(track_file):
    """Test --live prints a status line per sample."""
    result = runner.invoke(app, ["track", str(track_file), "--live", "--no-save"])

    assert result.exit_code == 0
    assert result.stdout.count("GPS points") == 2


def test_track_bad_pause(track_file):
    """Test an invalid pause window is a usage error."""
    result = runner.invoke(app, ["track", str(track_file), "--pause", "soon"])

    assert result.exit_code == 2


def test_track_missing_file(tmp_path):
    """Test a missing track file fails cleanly."""
    result = runner.invoke(app, ["track", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Cannot read track file" in result.stdout


def test_runs_empty():
    """Test listing with no stored runs."""
    result = runner.invoke(app, ["runs"])

    assert result.exit_code == 0
    assert "No runs yet" in result.stdout


def test_runs_show_share_delete(track_file, store_path):
    """Test managing a stored run end to end."""
    runner.invoke(app, ["track", str(track_file)])
    run_id = RunStore(store_path).list_runs()[0].run_id

    listed = runner.invoke(app, ["runs", "--json"])
    assert listed.exit_code == 0
    assert json.loads(listed.stdout)[0]["id"] == run_id

    shown = runner.invoke(app, ["show", run_id[:8], "--json"])
    assert shown.exit_code == 0
    assert json.loads(shown.stdout)["calories"] == 67

    shared = runner.invoke(app, ["share", run_id[:8]])
    assert shared.exit_code == 0
    assert RunStore(store_path).get_run(run_id).is_public

    deleted = runner.invoke(app, ["delete", run_id[:8], "--yes"])
    assert deleted.exit_code == 0
    assert RunStore(store_path).count() == 0


def test_delete_cancelled(track_file, store_path):
    """Test declining the confirmation keeps the run."""
    runner.invoke(app, ["track", str(track_file)])
    run_id = RunStore(store_path).list_runs()[0].run_id

    result = runner.invoke(app, ["delete", run_id], input="n\n")

    assert result.exit_code == 0
    assert RunStore(store_path).count() == 1


def test_show_unknown_run():
    """Test looking up a run that does not exist."""
    result = runner.invoke(app, ["show", "deadbeef"])

    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_track_elapsed_not_configurable(track_file, monkeypatch):
    """Test the ticker period cannot be changed through the environment."""
    monkeypatch.setenv("RUNTRACK_TICK_INTERVAL_MILLIS", "500")
    reset_settings()

    result = runner.invoke(app, ["track", str(track_file), "--no-save", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["elapsed_seconds"] == 60
    assert data["average_speed_kmh"] == pytest.approx(66.7, rel=0.01)


def test_track_live_shows_tracking_panel(track_file):
    """Test --live ends with the GPS tracking panel before the summary."""
    result = runner.invoke(app, ["track", str(track_file), "--live", "--no-save"])

    assert result.exit_code == 0
    assert "GPS Tracking" in result.stdout
    assert "GPS Points" in result.stdout
    assert result.stdout.index("GPS Tracking") < result.stdout.index("Run Complete")


def test_track_panel_after_location_error(tmp_path):
    """Test a location error shows the tracking panel and the warning once."""
    path = tmp_path / "track.json"
    path.write_text(
        json.dumps(
            [
                {"lat": 0.0, "lng": 0.0, "timestamp": 0},
                {"error": "timeout", "timestamp": 30_000},
                {"lat": 0.0, "lng": 0.01, "timestamp": 60_000},
            ]
        )
    )

    result = runner.invoke(app, ["track", str(path), "--no-save"])

    assert result.exit_code == 0
    assert "GPS Tracking" in result.stdout
    assert result.stdout.count("Timed out waiting for a GPS fix") == 1


def test_track_plain_has_no_panel(track_file):
    """Test a clean replay without --live only prints the summary."""
    result = runner.invoke(app, ["track", str(track_file), "--no-save"])

    assert result.exit_code == 0
    assert "GPS Tracking" not in result.stdout


def test_add_run(store_path):
    """Test logging a run by hand stores pace and calories."""
    result = runner.invoke(
        app,
        [
            "add",
            "--distance",
            "5",
            "--duration",
            "30",
            "--date",
            "2024-05-01",
            "--notes",
            "Tempo",
            "--json",
        ],
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["pace"] == pytest.approx(6.0)
    assert data["calories"] == 300
    assert data["date"] == "2024-05-01"
    assert data["isPublic"] is False
    run = RunStore(store_path).list_runs()[0]
    assert run.notes == "Tempo"


def test_add_run_table(store_path):
    """Test the default output confirms the saved run."""
    result = runner.invoke(app, ["add", "-d", "10", "-t", "55"])

    assert result.exit_code == 0
    assert "Saved run" in result.stdout
    assert RunStore(store_path).count() == 1


@pytest.mark.parametrize("args", [["-d", "0", "-t", "30"], ["-d", "5", "-t", "0"]])
def test_add_run_requires_positive_values(args, store_path):
    """Test distance and duration must be above zero."""
    result = runner.invoke(app, ["add", *args])

    assert result.exit_code == 2
    assert not store_path.exists()


def test_stats_empty():
    """Test stats with no runs shows zeros and no pace."""
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "Overall Statistics" in result.stdout
    assert "--:--" in result.stdout

    data = json.loads(runner.invoke(app, ["stats", "--json"]).stdout)
    assert data["total_runs"] == 0
    assert data["avg_pace_min_per_km"] == 0.0


def test_stats_with_runs():
    """Test stats aggregates hand-entered runs."""
    runner.invoke(app, ["add", "-d", "5", "-t", "30"])
    runner.invoke(app, ["add", "-d", "10", "-t", "50"])

    result = runner.invoke(app, ["stats", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["total_runs"] == 2
    assert data["total_distance_km"] == pytest.approx(15.0)
    assert data["total_duration_minutes"] == 80
    assert data["best_pace_min_per_km"] == pytest.approx(5.0)
    assert data["this_week"]["runs"] == 2

    table = runner.invoke(app, ["stats"])
    assert "5:00 /km" in table.stdout
