"""Tests for the command-line interface."""

import json

import pytest

from bean_match.cli import main

SCENARIO_ARGS = [
    "Blueberry, Honey, Clean finish",
    "--level1",
    "Fruity",
    "--level2",
    "Berry",
    "--level3",
    "Blueberry",
    "--sweetness",
    "4",
    "--finish",
    "2",
]


def test_cli_json_output(capsys):
    exit_code = main(SCENARIO_ARGS + ["--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"total": 60, "flavorScore": 56, "sensoryScore": 67, "highMatch": False}


def test_cli_json_details(capsys):
    exit_code = main(SCENARIO_ARGS + ["--json", "--details"])

    assert exit_code == 0
    details = json.loads(capsys.readouterr().out)["details"]
    assert details["matchedFlavors"] == ["blueberry"]
    assert details["unmatchedFlavors"] == ["Fruity"]


def test_cli_formatted_output(capsys):
    exit_code = main(SCENARIO_ARGS + ["--details"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Total:" in out
    assert "60%" in out
    assert "Suggestions:" in out


def test_cli_rejects_out_of_range_rating(capsys):
    exit_code = main(["Heavy body", "--body", "9"])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_rejects_unknown_taxonomy(capsys):
    exit_code = main(["Heavy body", "--taxonomy-version", "v42"])

    assert exit_code == 1
    assert "v42" in capsys.readouterr().err


def test_cli_rejects_unknown_mouthfeel():
    with pytest.raises(SystemExit):
        main(["Heavy body", "--mouthfeel", "Oily"])
