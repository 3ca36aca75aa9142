"""
Minimal smoke tests for lift-scheduler CLI.

Tests basic functionality:
- App runs without errors
- Plans can be listed and activated
- Sets can be logged and days finished
- Options persist in the state file
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lift_scheduler.cli.main import app


runner = CliRunner()


@pytest.fixture
def state_path(tmp_path, monkeypatch) -> Path:
    """State file in a temporary home so no user catalog is picked up."""
    monkeypatch.setenv("LIFT_SCHEDULER_HOME", str(tmp_path))
    return tmp_path / "state.json"


def _activate(state_path: Path, *extra: str):
    return runner.invoke(app, [
        "activate", "powerbuilding-3",
        "--days", "mon,wed,fri",
        "--start", "2026-03-02",
        "--state-path", str(state_path),
        *extra,
    ])


def _json(result) -> object:
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "strength-training planner" in result.output.lower()

    def test_plans_json_lists_catalog(self, state_path):
        result = runner.invoke(app, ["plans", "--json", "--state-path", str(state_path)])
        plans = _json(result)
        assert [p["id"] for p in plans] == ["powerbuilding-3", "hypertrophy-4", "strength-5"]
        assert plans[0]["weeks"] == 8
        assert plans[0]["days_per_week"] == 3

    def test_activate_writes_state(self, state_path):
        result = _activate(state_path)
        assert result.exit_code == 0, result.output
        assert state_path.exists()

        data = json.loads(state_path.read_text(encoding="utf-8"))
        assert data["active_plan"]["training_days"] == [1, 3, 5]
        assert len(data["days"]) == 24

    def test_activate_rejects_wrong_day_count(self, state_path):
        result = runner.invoke(app, [
            "activate", "powerbuilding-3",
            "--days", "mon,wed",
            "--start", "2026-03-02",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1
        assert not state_path.exists()

    def test_activate_rejects_unknown_plan(self, state_path):
        result = runner.invoke(app, [
            "activate", "couch-to-5k",
            "--days", "mon",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

    def test_activate_rejects_bad_weekday(self, state_path):
        result = runner.invoke(app, [
            "activate", "powerbuilding-3",
            "--days", "mon,wed,funday",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

    def test_calendar_json_lists_training_dates(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["calendar", "--json", "--state-path", str(state_path)])
        dates = _json(result)
        assert len(dates) == 24
        assert dates[:3] == ["2026-03-02", "2026-03-04", "2026-03-06"]
        assert dates[-1] == "2026-04-24"

    def test_status_json(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["status", "--json", "--state-path", str(state_path)])
        data = _json(result)
        assert data["active_plan"]["plan_id"] == "powerbuilding-3"
        assert data["scheduled_days"] == 24

    def test_day_json_reports_missing_entries(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["day", "2026-03-02", "--json", "--state-path", str(state_path)])
        data = _json(result)
        assert [ex["name"] for ex in data["exercises"]] == ["Bench Press", "DB Bench Press", "Squat"]
        assert data["missing_entries"] == 9

    def test_unscheduled_day_exits_1(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["day", "2026-03-03", "--state-path", str(state_path)])
        assert result.exit_code == 1

    def test_bad_date_exits_1(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["day", "03/02/2026", "--state-path", str(state_path)])
        assert result.exit_code == 1


class TestLogging:
    """Set entry, suggestions and day completion."""

    def test_log_set_then_exercise_shows_e1rm_and_suggestion(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1",
            "--weight", "100", "--rpe", "8", "--done",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 0, result.output
        assert "E1RM 123 kg" in result.output

        result = runner.invoke(app, [
            "exercise", "2026-03-02", "bench press", "--json",
            "--state-path", str(state_path),
        ])
        data = _json(result)
        first, second, third = data["sets"]
        assert (first["weight"], first["achieved_rpe"], first["completed"]) == (100.0, 8.0, True)
        assert first["e1rm"] == 123
        assert first["suggested_weight"] is None
        assert second["suggested_weight"] == pytest.approx(98.4)
        assert third["e1rm"] is None

    def test_log_set_by_suggestion(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1", "--weight", "100", "--rpe", "8",
            "--state-path", str(state_path),
        ])
        result = runner.invoke(app, [
            "log-set", "2026-03-02", "1", "2", "--suggested",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 0, result.output

        data = _json(runner.invoke(app, [
            "exercise", "2026-03-02", "1", "--json", "--state-path", str(state_path),
        ]))
        assert data["sets"][1]["weight"] == 98.4

    def test_suggestion_unavailable_without_anchor(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, [
            "log-set", "2026-03-02", "1", "2", "--suggested",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

    def test_rpe_is_clamped_to_scale(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "log-set", "2026-03-02", "squat", "1", "--rpe", "12",
            "--state-path", str(state_path),
        ])
        data = _json(runner.invoke(app, [
            "exercise", "2026-03-02", "squat", "--json", "--state-path", str(state_path),
        ]))
        assert data["sets"][0]["achieved_rpe"] == 10.0

    def test_log_set_needs_a_field(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1", "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

    def test_log_set_unknown_set_or_exercise(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, [
            "log-set", "2026-03-02", "1", "4", "--weight", "50",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

        result = runner.invoke(app, [
            "log-set", "2026-03-02", "curls", "1", "--weight", "50",
            "--state-path", str(state_path),
        ])
        assert result.exit_code == 1

    def test_finish_fills_zeros_and_summarizes(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1", "--weight", "100", "--rpe", "8",
            "--state-path", str(state_path),
        ])
        result = runner.invoke(app, [
            "finish", "2026-03-02", "--fill-zeros", "--json",
            "--state-path", str(state_path),
        ])
        data = _json(result)
        assert data == {
            "total_sets": 9,
            "total_reps": 60,
            "total_weight_moved_kg": 500.0,
            "date": "2026-03-02",
        }

        day = _json(runner.invoke(app, [
            "day", "2026-03-02", "--json", "--state-path", str(state_path),
        ]))
        assert day["missing_entries"] == 0

    def test_finish_keep_missing(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "finish", "2026-03-02", "--keep-missing", "--state-path", str(state_path),
        ])
        day = _json(runner.invoke(app, [
            "day", "2026-03-02", "--json", "--state-path", str(state_path),
        ]))
        assert day["missing_entries"] == 9

    def test_summary_json(self, state_path):
        _activate(state_path)
        data = _json(runner.invoke(app, [
            "summary", "2026-03-04", "--json", "--state-path", str(state_path),
        ]))
        assert data["total_sets"] == 9
        assert data["total_weight_moved_kg"] == 0


class TestPlanLifecycle:

    def test_reactivate_needs_force_to_skip_prompt(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1", "--weight", "100",
            "--state-path", str(state_path),
        ])

        result = _activate(state_path, "--force")
        assert result.exit_code == 0, result.output

        data = _json(runner.invoke(app, [
            "exercise", "2026-03-02", "1", "--json", "--state-path", str(state_path),
        ]))
        assert data["sets"][0]["weight"] is None

    def test_reactivate_declined_keeps_entries(self, state_path):
        _activate(state_path)
        runner.invoke(app, [
            "log-set", "2026-03-02", "1", "1", "--weight", "100",
            "--state-path", str(state_path),
        ])

        result = runner.invoke(app, [
            "activate", "powerbuilding-3",
            "--days", "mon,wed,fri",
            "--start", "2026-03-02",
            "--state-path", str(state_path),
        ], input="n\n")
        assert result.exit_code == 0

        data = _json(runner.invoke(app, [
            "exercise", "2026-03-02", "1", "--json", "--state-path", str(state_path),
        ]))
        assert data["sets"][0]["weight"] == 100.0

    def test_reset_clears_plan(self, state_path):
        _activate(state_path)
        result = runner.invoke(app, ["reset", "--yes", "--state-path", str(state_path)])
        assert result.exit_code == 0

        data = _json(runner.invoke(app, ["status", "--json", "--state-path", str(state_path)]))
        assert data == {"active_plan": None, "scheduled_days": 0}

    def test_custom_templates_file(self, state_path, tmp_path):
        catalog = tmp_path / "custom.yaml"
        catalog.write_text(
            "rotations:\n  3:\n    - - {name: Front Squat, sets: 2, reps: 6}\n",
            encoding="utf-8",
        )
        result = _activate(state_path, "--templates", str(catalog))
        assert result.exit_code == 0, result.output

        day = _json(runner.invoke(app, [
            "day", "2026-03-06", "--json", "--state-path", str(state_path),
        ]))
        assert [ex["name"] for ex in day["exercises"]] == ["Front Squat"]
        assert day["missing_entries"] == 2

    def test_state_with_non_list_days_exits_1(self, state_path):
        state_path.write_text(
            json.dumps({"active_plan": None, "options": {}, "days": None}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["status", "--state-path", str(state_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "days" in result.output

    def test_invalid_state_file_exits_1(self, state_path):
        state_path.write_text("{broken", encoding="utf-8")
        result = runner.invoke(app, ["status", "--state-path", str(state_path)])
        assert result.exit_code == 1


class TestOptions:

    def test_default_rest(self, state_path):
        data = _json(runner.invoke(app, ["options", "--json", "--state-path", str(state_path)]))
        assert data == {"rest_seconds": 90}

    def test_rest_is_clamped_and_saved(self, state_path):
        data = _json(runner.invoke(app, [
            "options", "--rest-seconds", "5", "--json", "--state-path", str(state_path),
        ]))
        assert data == {"rest_seconds": 10}

        data = _json(runner.invoke(app, ["options", "--json", "--state-path", str(state_path)]))
        assert data == {"rest_seconds": 10}
