"""Tests for the moodlog CLI."""

import json
from datetime import date, timedelta
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from moodlog.cli import _sparkline, main
from moodlog.config import Config


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path / "data"))


@pytest.fixture
def runner(config):
    with patch("moodlog.cli.load_config", return_value=config):
        yield CliRunner()


def invoke(runner, *args, **kwargs):
    return runner.invoke(main, list(args), **kwargs)


class TestAddShow:
    def test_add_then_show(self, runner):
        result = invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "x", "-m", "0.5")
        assert result.exit_code == 0, result.output
        assert "Entry saved for 2024-01-05" in result.output

        result = invoke(runner, "show", "2024-01-05", "--json")
        assert json.loads(result.output) == {
            "date": "2024-01-05",
            "title": "A",
            "body": "x",
            "mood": 0.5,
            "class": "sad",
        }

    def test_add_prompts_for_missing_fields(self, runner):
        result = invoke(runner, "add", "-d", "2024-01-05", input="Title\nSome text\n2.5\n")
        assert result.exit_code == 0, result.output
        result = invoke(runner, "show", "2024-01-05")
        assert "## Title" in result.output
        assert "Some text" in result.output

    def test_add_empty_entry_fails(self, runner):
        result = invoke(runner, "add", "-d", "2024-01-05", "-t", "", "-b", "", "-m", "1")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_add_future_date_fails(self, runner):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        result = invoke(runner, "add", "-d", tomorrow, "-t", "A", "-b", "", "-m", "1")
        assert result.exit_code == 1

    def test_add_existing_asks_before_replacing(self, runner):
        invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "", "-m", "1")
        result = invoke(runner, "add", "-d", "2024-01-05", "-t", "B", "-b", "", "-m", "1", input="n\n")
        assert "already exists" in result.output
        assert "## A" in invoke(runner, "show", "2024-01-05").output

    def test_show_missing(self, runner):
        result = invoke(runner, "show", "2024-01-05")
        assert result.exit_code == 0
        assert "No entry for 2024-01-05" in result.output


class TestEditDelete:
    def test_edit_moves_entry(self, runner):
        invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "x", "-m", "0.5")
        result = invoke(runner, "edit", "2024-01-05", "-d", "2024-01-06", "-m", "2.0")
        assert result.exit_code == 0, result.output
        assert "moved from 2024-01-05 to 2024-01-06" in result.output

        assert "No entry" in invoke(runner, "show", "2024-01-05").output
        moved = json.loads(invoke(runner, "show", "2024-01-06", "--json").output)
        assert moved["title"] == "A"
        assert moved["mood"] == 2.0

    def test_edit_missing_fails(self, runner):
        result = invoke(runner, "edit", "2024-01-05", "-t", "x")
        assert result.exit_code == 1

    def test_delete(self, runner):
        invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "", "-m", "1")
        result = invoke(runner, "delete", "2024-01-05", "--yes")
        assert result.exit_code == 0
        assert "No entry" in invoke(runner, "show", "2024-01-05").output


class TestListChart:
    def test_list_descending(self, runner):
        invoke(runner, "add", "-d", "2024-01-03", "-t", "B", "-b", "y", "-m", "2.5")
        invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "x", "-m", "0.5")
        result = invoke(runner, "list", "--json")
        assert [e["date"] for e in json.loads(result.output)] == ["2024-01-05", "2024-01-03"]

    def test_list_empty(self, runner):
        assert "No entries yet." in invoke(runner, "list").output

    def test_chart(self, runner):
        invoke(runner, "add", "-d", "2024-01-03", "-t", "B", "-b", "y", "-m", "2.5")
        invoke(runner, "add", "-d", "2024-01-05", "-t", "A", "-b", "x", "-m", "0.5")
        result = invoke(runner, "chart")
        assert result.exit_code == 0, result.output
        assert "2024-01-03 → 2024-01-05 (2 days)" in result.output
        assert "Average: 1.50" in result.output

    def test_sparkline_scale(self):
        assert _sparkline([0.0, 3.0]) == "▁█"
        assert _sparkline([]) == ""


class TestProfile:
    def test_set_and_show(self, runner, tmp_path):
        image = tmp_path / "me.png"
        image.write_bytes(b"\x89PNG")
        result = invoke(runner, "profile", "set", "--name", "Alice", "--avatar", str(image))
        assert result.exit_code == 0, result.output

        result = invoke(runner, "profile", "show")
        assert "Alice" in result.output
        assert "Avatar: set" in result.output

    def test_unreadable_avatar_fails_cleanly(self, runner, tmp_path):
        image = tmp_path / "me.png"
        image.write_bytes(b"\x89PNG")
        with patch("pathlib.Path.read_bytes", side_effect=PermissionError("denied")):
            result = invoke(runner, "profile", "set", "--name", "Alice", "--avatar", str(image))
        assert result.exit_code == 1
        assert "Error: denied" in result.output

    def test_show_empty(self, runner):
        result = invoke(runner, "profile", "show")
        assert "(not set)" in result.output
        assert "Avatar: none" in result.output


class TestEntriesWithoutMood:
    @pytest.fixture
    def legacy(self, config):
        root = Path(config.data_dir) / "entries"
        root.mkdir(parents=True)
        (root / "2024-01-05.val").write_text('{"title": "A", "text": "x"}', encoding="utf-8")

    def test_listed_and_shown(self, runner, legacy):
        assert "A" in invoke(runner, "list").output
        assert "(no mood)" in invoke(runner, "show", "2024-01-05").output
        shown = json.loads(invoke(runner, "show", "2024-01-05", "--json").output)
        assert shown["mood"] is None
        assert shown["class"] is None

    def test_left_out_of_chart(self, runner, legacy):
        assert "No entries yet." in invoke(runner, "chart").output

    def test_edit_defaults_mood(self, runner, legacy):
        result = invoke(runner, "edit", "2024-01-05", "-t", "B")
        assert result.exit_code == 0, result.output
        edited = json.loads(invoke(runner, "show", "2024-01-05", "--json").output)
        assert edited["mood"] == 1.5
