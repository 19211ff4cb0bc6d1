"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chartjs_wrapper.cli import app

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "points.csv"
    path.write_text("x,y,name,group\n1,2,a,keep\n2,4,b,keep\n3,5,c,keep\n4,4,d,keep\n9,0,e,drop\n", encoding="utf-8")
    return path


def test_chart_writes_json_config(csv_file: Path, tmp_path: Path) -> None:
    """A .json output receives the configuration document."""

    output = tmp_path / "chart.json"

    result = runner.invoke(
        app,
        ["chart", str(csv_file), "--x", "x", "--y", "y", "--type", "bar", "--title", "Points", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(output.read_text(encoding="utf-8"))
    (dataset,) = document["data"]["datasets"]
    assert dataset["type"] == "bar"
    assert dataset["label"] == "y"
    assert dataset["data"][0] == {"x": 1, "y": 2}
    assert document["options"]["plugins"]["title"]["text"] == ["Points"]


def test_chart_with_regression_and_filter(csv_file: Path, tmp_path: Path) -> None:
    """--regression adds the fitted line; --filter drops rows first."""

    output = tmp_path / "fit.json"

    result = runner.invoke(
        app,
        ["chart", str(csv_file), "--x", "x", "--y", "y", "--regression", "--filter", "group:keep", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert "R² = 0.5158" in result.output
    labels = [dataset["label"] for dataset in json.loads(output.read_text(encoding="utf-8"))["data"]["datasets"]]
    assert labels == ["y", "y regression(R^2 = 0.5158)"]


def test_chart_writes_html_page(csv_file: Path, tmp_path: Path) -> None:
    """A .html output receives a standalone page."""

    output = tmp_path / "chart.html"

    result = runner.invoke(app, ["chart", str(csv_file), "--x", "name", "--y", "y", "--tooltip", "group", "-o", str(output)])

    assert result.exit_code == 0, result.output
    content = output.read_text(encoding="utf-8")
    assert "<canvas id=\"chart-" in content
    assert '"tooltip":"keep"' in content


def test_chart_rejects_unknown_output_format(csv_file: Path, tmp_path: Path) -> None:
    """Only .html and .json outputs are supported."""

    result = runner.invoke(app, ["chart", str(csv_file), "--x", "x", "--y", "y", "-o", str(tmp_path / "chart.png")])

    assert result.exit_code != 0


def test_chart_reports_missing_columns(csv_file: Path, tmp_path: Path) -> None:
    """Data errors exit with status 1 and a message."""

    result = runner.invoke(app, ["chart", str(csv_file), "--x", "x", "--y", "nope", "-o", str(tmp_path / "c.json")])

    assert result.exit_code == 1
    assert "Columns not found" in result.output


def test_fit_prints_summary_table(csv_file: Path) -> None:
    """fit prints slope, intercept and R²."""

    result = runner.invoke(app, ["fit", str(csv_file), "--x", "x", "--y", "y", "--filter", "group:keep"])

    assert result.exit_code == 0, result.output
    assert "0.7" in result.output
    assert "0.5158" in result.output


def test_value_types_lists_registrations() -> None:
    """value-types shows each registered type with its axis category."""

    result = runner.invoke(app, ["value-types", "--time-policy", "epoch_millis"])

    assert result.exit_code == 0, result.output
    assert "epoch_millis" in result.output
    assert "datetime.datetime" in result.output
    assert "calendar.Month" in result.output
