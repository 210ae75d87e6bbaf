"""
Tests for the deptboard CLI.

The API factory is patched so every command talks to the in-memory backend.
"""

import json
import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from deptboard import __version__
from deptboard.cli import app
from deptboard.core.api.client import DeskApi


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_backend(backend, monkeypatch, tmp_path):
    """Route CLI sessions to the fake backend, from an empty project dir."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "deptboard.cli.session.create_api",
        lambda config: DeskApi.from_config(config, transport=backend.transport()),
    )
    return backend


class TestShow:
    def test_default_is_dashboard(self, runner):
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0, result.output
        assert "Dashboard" in result.output
        assert "Payroll review" in result.output

    def test_kanban(self, runner):
        result = runner.invoke(app, ["show", "kanban"])
        assert result.exit_code == 0, result.output
        assert "Kanban Board" in result.output
        assert "Order supplies" in result.output

    def test_task_filters(self, runner):
        result = runner.invoke(app, ["show", "tasks", "--status", "in_progress"])
        assert result.exit_code == 0, result.output
        assert "Payroll review" in result.output
        assert "Budget report" not in result.output

    def test_unknown_page(self, runner, cli_backend):
        result = runner.invoke(app, ["show", "settings"])
        assert result.exit_code == 1
        assert "Unknown page" in result.output
        assert cli_backend.requests == []

    def test_load_failure(self, runner, cli_backend):
        cli_backend.fail[("GET", "users")] = 500
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 1
        assert "Could not load data" in result.output

    def test_invalid_config(self, runner, tmp_path):
        (tmp_path / ".deptboard.json").write_text(json.dumps({"limits": {"tasks": "many"}}))
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_debug_enables_logging(self, runner):
        with patch("deptboard.cli.logging.basicConfig") as basic_config:
            result = runner.invoke(app, ["--debug", "show", "stats"])
        assert result.exit_code == 0, result.output
        basic_config.assert_called_once_with(level=logging.DEBUG)


class TestTaskCommands:
    def test_show(self, runner):
        result = runner.invoke(app, ["task", "show", "t1"])
        assert result.exit_code == 0, result.output
        assert "Budget report" in result.output
        assert "Alice" in result.output
        assert "Director" in result.output

    def test_show_missing(self, runner):
        result = runner.invoke(app, ["task", "show", "nope"])
        assert result.exit_code == 1
        assert "Task not found" in result.output

    def test_add(self, runner, cli_backend):
        result = runner.invoke(
            app, ["task", "add", "Fire drill", "--due", "2024-05-10", "--priority", "high"]
        )
        assert result.exit_code == 0, result.output
        assert "Created:" in result.output
        body = json.loads(cli_backend.requests_for("POST", "tasks")[0].content)
        assert body["title"] == "Fire drill"
        assert body["due_date"] == "2024-05-10T09:00"
        assert body["priority"] == "high"
        assert body["status"] == "pending"

    def test_add_rejects_unknown_priority(self, runner):
        result = runner.invoke(app, ["task", "add", "X", "--priority", "extreme"])
        assert result.exit_code != 0

    def test_add_failure(self, runner, cli_backend):
        cli_backend.fail[("POST", "tasks")] = 500
        result = runner.invoke(app, ["task", "add", "Doomed"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Failed to save the task." in result.output

    def test_edit(self, runner, cli_backend):
        result = runner.invoke(app, ["task", "edit", "t2", "--status", "completed"])
        assert result.exit_code == 0, result.output
        body = json.loads(cli_backend.requests_for("PUT", "tasks")[0].content)
        assert body["status"] == "completed"
        assert body["title"] == "Payroll review"

    def test_edit_missing(self, runner, cli_backend):
        result = runner.invoke(app, ["task", "edit", "nope", "--title", "X"])
        assert result.exit_code == 1
        assert cli_backend.requests_for("PUT", "tasks") == []

    def test_delete_with_yes(self, runner, cli_backend):
        result = runner.invoke(app, ["task", "delete", "t1", "--yes"])
        assert result.exit_code == 0, result.output
        assert "Deleted:" in result.output
        assert len(cli_backend.requests_for("DELETE", "tasks")) == 1

    def test_delete_declined(self, runner, cli_backend):
        result = runner.invoke(app, ["task", "delete", "t1"], input="n\n")
        assert result.exit_code == 0
        assert "Delete this task?" in result.output
        assert "Cancelled." in result.output
        assert cli_backend.requests_for("DELETE", "tasks") == []


class TestStaffCommands:
    def test_add_shows_staff_page(self, runner, cli_backend):
        result = runner.invoke(app, ["staff", "add", "Dana", "--position", "Clerk"])
        assert result.exit_code == 0, result.output
        assert "Staff Responsibilities" in result.output
        assert "Dana" in result.output
        assert "Added:" in result.output

    def test_edit_missing(self, runner):
        result = runner.invoke(app, ["staff", "edit", "ghost", "--name", "X"])
        assert result.exit_code == 1
        assert "Staff member not found" in result.output

    def test_delete_keeps_tasks(self, runner, cli_backend):
        result = runner.invoke(app, ["staff", "delete", "u1", "--yes"])
        assert result.exit_code == 0, result.output
        assert cli_backend.requests_for("DELETE", "tasks") == []
        assert any(row["assignee_id"] == "u1" for row in cli_backend.tables["tasks"])


class TestCommentCommands:
    def test_add(self, runner, cli_backend):
        result = runner.invoke(app, ["comment", "add", "Lunch at noon", "--author", "Kim"])
        assert result.exit_code == 0, result.output
        assert "Posted." in result.output
        body = json.loads(cli_backend.requests_for("POST", "comments")[0].content)
        assert body["author"] == "Kim"

    def test_add_blank(self, runner, cli_backend):
        result = runner.invoke(app, ["comment", "add", "   "])
        assert result.exit_code == 1
        assert cli_backend.requests == []

    def test_delete(self, runner, cli_backend):
        result = runner.invoke(app, ["comment", "delete", "c1", "--yes"])
        assert result.exit_code == 0, result.output
        assert [row["id"] for row in cli_backend.tables["comments"]] == ["c2"]

    def test_delete_failure(self, runner, cli_backend):
        cli_backend.fail[("DELETE", "comments")] = 500
        result = runner.invoke(app, ["comment", "delete", "c1", "--yes"])
        assert result.exit_code == 1
        assert "Delete failed." in result.output


def test_version(runner):
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output
