"""
CLI tests: argument parsing and the demo/inspect commands.
"""

import logging

import pytest

import cli
from config.settings import Settings


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.setenv("TRACE_EVENTS", "false")
    yield
    logging.getLogger().handlers.clear()


class TestParser:
    def test_demo_arguments(self):
        args = cli.build_parser().parse_args(["demo", "--add", "5", "--add", "2", "--threshold", "3"])

        assert args.command == "demo"
        assert args.add == [5, 2]
        assert args.threshold == 3

    def test_no_command(self):
        args = cli.build_parser().parse_args([])

        assert args.command is None


class TestCommands:
    def test_demo_prints_events_score_and_query(self, capsys):
        cli.main(["demo", "--add", "5", "--threshold", "3"])

        out = capsys.readouterr().out
        assert "ScoreChanged" in out
        assert "Score: 5" in out
        assert "Above 3: True" in out

    def test_demo_defaults_to_single_add(self, capsys):
        cli.main(["demo"])

        assert "Score: 1" in capsys.readouterr().out

    def test_inspect_lists_components(self, capsys):
        cli.main(["inspect"])

        out = capsys.readouterr().out
        assert "ScoreModel" in out
        assert "ScoreSystem" in out
        assert "ScoreStorage" in out
        assert "ScoreChanged" in out

    def test_no_command_prints_help(self, capsys):
        cli.main([])

        assert "usage" in capsys.readouterr().out.lower()


class TestSettings:
    def test_trace_events_lowers_event_bus_level(self, monkeypatch):
        monkeypatch.setenv("TRACE_EVENTS", "true")

        cli.setup_logging(Settings())

        assert logging.getLogger("core.event_bus").level == logging.DEBUG
        logging.getLogger("core.event_bus").setLevel(logging.NOTSET)
