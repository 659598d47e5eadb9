"""Command line entry point tests."""

import io
import json
import logging

import pytest

from matchmaker import cli


@pytest.fixture(autouse=True)
def restore_log_handlers():
    """cli() points the logger at the captured stderr; put the old handlers back."""
    logger = logging.getLogger("matchmaker")
    saved = list(logger.handlers)
    yield
    logger.handlers = saved


def test_argument_input(valid_input, capsys):
    code = cli.cli([json.dumps(valid_input)])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["assignment_result"]["assigned_persona"] == "Alien Parasite"


def test_stdin_input(valid_input, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(valid_input)))

    assert cli.cli([]) == 0
    assert "image_generation_prompt" in capsys.readouterr().out


def test_dash_reads_stdin(valid_input, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(valid_input)))

    assert cli.cli(["-"]) == 0


def test_malformed_json(capsys):
    assert cli.cli(["{nope"]) == 1

    err = json.loads(capsys.readouterr().err)
    assert err["error"].startswith("Failed to process input: ")


def test_pipeline_failure_prints_error(capsys):
    assert cli.cli([json.dumps({"timeOfDay": "night"})]) == 1

    out = json.loads(capsys.readouterr().out)
    assert out["error"].startswith("Validation failed: Expected exactly 5 attributes, but received 1")


def test_empty_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("   "))

    assert cli.cli([]) == 1
    assert "no JSON input given" in capsys.readouterr().err


def test_main_returns_output_or_error(valid_input):
    assert json.loads(cli.main(valid_input))["assignment_result"]["assigned_persona"] == "Alien Parasite"
    assert json.loads(cli.main(None)) == {"error": "Validation failed: Input is null or undefined"}
