"""Tests for the guardian CLI commands using Typer's CliRunner."""

import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from guardian_system.cli import main as cli_main
from guardian_system.data_management.schemas import PolicyConfig

runner = CliRunner()

COCOMELON_ID = "UCBnZ16ahKA2DZ_T5W0FPUXg"


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Render tables wide enough that cells never wrap."""
    monkeypatch.setattr(cli_main, "console", Console(width=200))


@pytest.fixture
def items_file(tmp_path):
    items = [
        {
            "id": "partner-item",
            "title": "ABC Song",
            "source_id": COCOMELON_ID,
            "source_name": "Cocomelon",
            "duration": 180,
        },
        {"id": "adult-item", "title": "Funny video 18+ only", "source_name": "Random Uploads"},
        {
            "id": "plain-item",
            "title": "Harbour walk at dawn, part one of a calm town tour",
            "duration": 500,
        },
    ]
    path = tmp_path / "items.json"
    path.write_text(json.dumps(items), encoding="utf-8")
    return path


class TestEvaluateCommand:
    """Tests for `guardian evaluate`."""

    def test_allowed_items_listed(self, items_file):
        result = runner.invoke(cli_main.app, ["evaluate", str(items_file), "--tier", "UNDER_8"])

        assert result.exit_code == 0
        assert "Verdicts for Kids Under 8" in result.output
        assert "partner-item" in result.output
        assert "adult-item" not in result.output
        assert "1 of 3 items allowed" in result.output

    def test_show_blocked(self, items_file):
        result = runner.invoke(
            cli_main.app, ["evaluate", str(items_file), "--tier", "UNDER_8", "--show-blocked"]
        )

        assert result.exit_code == 0
        assert "adult-item" in result.output
        assert "Blocked: Contains inappropriate content for Kids Under 8" in result.output

    def test_unrestricted_tier(self, items_file):
        result = runner.invoke(cli_main.app, ["evaluate", str(items_file), "--tier", "all"])

        assert result.exit_code == 0
        assert "3 of 3 items allowed" in result.output

    def test_unknown_tier_warns(self, items_file):
        result = runner.invoke(cli_main.app, ["evaluate", str(items_file), "--tier", "teen"])

        assert result.exit_code == 0
        assert "Unknown tier 'teen', using Kids Under 5" in result.output

    def test_invalid_items(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"title": "no id"}]), encoding="utf-8")

        result = runner.invoke(cli_main.app, ["evaluate", str(path)])

        assert result.exit_code == 1
        assert "Invalid content items" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(cli_main.app, ["evaluate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read" in result.output


class TestRankCommand:
    """Tests for `guardian rank`."""

    def test_rank_unrestricted(self, items_file):
        result = runner.invoke(cli_main.app, ["rank", str(items_file), "--tier", "ALL"])

        assert result.exit_code == 0
        assert "Ranked for All Ages" in result.output
        assert result.output.index("partner-item") < result.output.index("plain-item")
        assert "3 of 3 items passed" in result.output

    def test_rank_strict(self, items_file):
        result = runner.invoke(cli_main.app, ["rank", str(items_file), "-t", "UNDER_5"])

        assert result.exit_code == 0
        assert "1 of 3 items passed" in result.output


class TestInfoCommands:
    """Tests for `guardian tiers`, `status` and `version`."""

    def test_tiers(self):
        result = runner.invoke(cli_main.app, ["tiers"])

        assert result.exit_code == 0
        assert "UNDER_10" in result.output
        assert "Kids Under 5" in result.output
        assert "unrestricted" in result.output
        assert "10 min" in result.output

    def test_status(self):
        result = runner.invoke(cli_main.app, ["status"])

        assert result.exit_code == 0
        assert "Guardian Engine 1.0.0" in result.output
        assert "builtin-1" in result.output
        assert "Trusted Channel Rule" in result.output

    def test_status_with_policy_file(self, tmp_path, monkeypatch):
        path = tmp_path / "policy.json"
        path.write_text(PolicyConfig.default().updated(version="family-2").model_dump_json(), encoding="utf-8")
        monkeypatch.setattr(cli_main.settings, "policy_path", str(path))

        result = runner.invoke(cli_main.app, ["status"])

        assert result.exit_code == 0
        assert "family-2" in result.output

    def test_broken_policy_file(self, tmp_path, monkeypatch):
        path = tmp_path / "policy.json"
        path.write_text("{}", encoding="utf-8")
        monkeypatch.setattr(cli_main.settings, "policy_path", str(path))

        result = runner.invoke(cli_main.app, ["status"])

        assert result.exit_code == 1
        assert "Could not load policy" in result.output

    def test_version(self):
        result = runner.invoke(cli_main.app, ["version"])

        assert result.exit_code == 0
        assert "Guardian Engine" in result.output
        assert "Version: 1.0.0" in result.output
