"""Tests for the offline scoring CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from skydeal_pipeline.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def duffel_response(
    tmp_path, make_duffel_offer, make_duffel_slice, make_duffel_segment
):
    seg = make_duffel_segment
    offers = [
        make_duffel_offer("off_400", "400"),
        make_duffel_offer("off_100", "100"),
        make_duffel_offer(
            "off_250",
            "250",
            [make_duffel_slice([seg("MAD", "LIS", "TP"), seg("LIS", "BCN", "TP")])],
        ),
        {"id": "off_bad"},
    ]
    path = tmp_path / "duffel.json"
    path.write_text(json.dumps({"data": {"offers": offers}}), encoding="utf-8")
    return path


def test_score_json_output(runner, duffel_response):
    result = runner.invoke(
        cli, ["score", str(duffel_response), "--source", "duffel", "--json-output"]
    )

    assert result.exit_code == 0, result.output
    body = json.loads(result.stdout)
    assert [o["id"] for o in body["offers"]] == ["off_100", "off_250", "off_400"]
    assert [f["offer_id"] for f in body["failures"]] == ["off_bad"]
    assert body["price_stats"]["min"] == 100
    assert body["price_stats"]["mean"] == 250


def test_score_filters_and_sorts(runner, duffel_response):
    result = runner.invoke(
        cli,
        [
            "score", str(duffel_response), "--source", "DUFFEL",
            "--max-stops", "0", "--sort", "deal_score", "--json-output",
        ],
    )

    assert result.exit_code == 0, result.output
    ids = [o["id"] for o in json.loads(result.stdout)["offers"]]
    assert ids == ["off_100", "off_400"]


def test_score_airline_filter(runner, duffel_response):
    result = runner.invoke(
        cli,
        ["score", str(duffel_response), "--source", "duffel", "--airline", "tp",
         "--json-output"],
    )
    ids = [o["id"] for o in json.loads(result.stdout)["offers"]]
    assert ids == ["off_250"]


def test_score_text_output(runner, duffel_response):
    result = runner.invoke(cli, ["score", str(duffel_response), "--source", "duffel"])

    assert result.exit_code == 0, result.output
    assert "Found 3 offer(s)" in result.stdout
    assert "MAD→LIS / LIS→BCN" in result.stdout
    assert "Price min 100.00" in result.stdout


def test_score_no_offers(runner, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"data": []}), encoding="utf-8")
    result = runner.invoke(cli, ["score", str(path), "--source", "amadeus"])
    assert result.exit_code == 0
    assert "No flights found." in result.stdout


def test_score_rejects_unknown_source(runner, duffel_response):
    result = runner.invoke(cli, ["score", str(duffel_response), "--source", "kiwi"])
    assert result.exit_code != 0


def test_airport_search(runner):
    result = runner.invoke(cli, ["airport", "MAD"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0].strip().startswith("MAD |")
