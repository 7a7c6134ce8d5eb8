"""Tests for the command line interface (main.py)."""

import pytest
from typer.testing import CliRunner

from config.settings import load_config
from main import app

runner = CliRunner()


class TestScenariosCommand:
    def test_runs_both_presets(self):
        result = runner.invoke(app, ["scenarios"])
        assert result.exit_code == 0, result.output
        assert "Scenario 1" in result.output
        assert "Scenario 2" in result.output
        assert "Player 1 wins with Royal Flush" in result.output
        assert "Player 1 wins with One Pair" in result.output


class TestEvaluateCommand:
    def test_custom_showdown(self):
        result = runner.invoke(
            app,
            ["evaluate", "--board", "Qh Jh Th 5h 2c", "--hand", "Ah Kh", "--hand", "2d 7c"],
        )
        assert result.exit_code == 0, result.output
        assert "Player 1 wins with Royal Flush" in result.output

    def test_split_pot(self):
        result = runner.invoke(
            app,
            ["evaluate", "-b", "Ah Kh Qh Jh Th", "-p", "2c 3d", "-p", "4c 5d"],
        )
        assert result.exit_code == 0, result.output
        assert "split the pot" in result.output

    def test_duplicate_card_fails(self):
        result = runner.invoke(
            app,
            ["evaluate", "--board", "Qh Jh Th 5h 2c", "--hand", "Qh Kh"],
        )
        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_bad_card_fails(self):
        result = runner.invoke(
            app,
            ["evaluate", "--board", "Qh Jh Th 5h 2x", "--hand", "Ah Kh"],
        )
        assert result.exit_code == 1
        assert "Invalid input" in result.output


class TestDealAndSimulate:
    def test_deal(self):
        result = runner.invoke(app, ["deal", "--players", "4", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert "Player 4" in result.output

    def test_deal_rejects_player_count(self):
        result = runner.invoke(app, ["deal", "--players", "1"])
        assert result.exit_code == 1

    def test_simulate(self):
        result = runner.invoke(
            app,
            ["simulate", "--deals", "25", "--players", "3", "--seed", "2", "--no-progress"],
        )
        assert result.exit_code == 0, result.output
        assert "Results by Seat" in result.output
        assert "Split pots" in result.output


class TestConfigCommands:
    def test_init_config(self, tmp_path):
        path = tmp_path / "showdown.yaml"
        result = runner.invoke(app, ["init-config", str(path)])
        assert result.exit_code == 0, result.output
        assert load_config(path).simulation.num_players == 2

        again = runner.invoke(app, ["init-config", str(path)])
        assert again.exit_code == 1

    def test_config_option(self, tmp_path):
        path = tmp_path / "showdown.yaml"
        path.write_text("evaluation:\n  max_workers: 3\nlogging:\n  level: INFO\n")
        result = runner.invoke(app, ["--config", str(path), "info"])
        assert result.exit_code == 0, result.output
        assert "Max workers" in result.output
        assert "3" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "info"])
        assert result.exit_code == 1

    @pytest.mark.parametrize(
        "content",
        [
            "evaluation: [unclosed\n",
            "logging:\n  level: LOUD\n",
            "evaluation:\n  max_workers: four\n",
            "foo\n",
        ],
    )
    def test_bad_config_exits_cleanly(self, tmp_path, content):
        path = tmp_path / "showdown.yaml"
        path.write_text(content)
        result = runner.invoke(app, ["--config", str(path), "scenarios"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Could not load config" in result.output
