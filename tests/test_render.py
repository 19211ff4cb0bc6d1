"""Tests for the HTML rendering sink."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from chartjs_wrapper import config as settings
from chartjs_wrapper.charts import ChartConfig, ChartRenderer, ChartType, Size, ValueTypeRegistry


def _chart(registry: ValueTypeRegistry, label: str = "s"):
    return (
        ChartConfig(registry=registry)
        .add_series(ChartType.LINE, label, [(1, 2), (3, 4)])
        .build(Size.pixels(600), Size.percent(50))
    )


@pytest.mark.unit
def test_fragment_embeds_canvas_and_config(registry: ValueTypeRegistry) -> None:
    """The fragment targets its canvas and carries the JSON document."""

    chart = _chart(registry)

    html = ChartRenderer().to_html(chart)

    assert f'<canvas id="{chart.target_id}"></canvas>' in html
    assert "width: 600px; height: 50%;" in html
    match = re.search(r"new Chart\(document.getElementById\(\"[^\"]+\"\), (.*)\);", html)
    assert match is not None
    assert json.loads(match.group(1)) == chart.config.to_wire()


@pytest.mark.unit
def test_script_closing_tags_in_labels_are_escaped(registry: ValueTypeRegistry) -> None:
    """Labels cannot terminate the script block early."""

    html = ChartRenderer().to_html(_chart(registry, label="</script><b>x</b>"))

    assert "</script><b>" not in html
    assert "<\\/script>" in html


@pytest.mark.unit
def test_page_loads_chartjs_and_adapter() -> None:
    """Standalone pages load Chart.js and the date adapter."""

    page = ChartRenderer().page("Sales & costs", "<div>body</div>")

    assert f'<script src="{settings.CHARTJS_URL}"></script>' in page
    assert f'<script src="{settings.DATE_ADAPTER_URL}"></script>' in page
    assert "<title>Sales &amp; costs</title>" in page
    assert "<div>body</div>" in page


@pytest.mark.integration
def test_export_writes_one_page_with_every_chart(registry: ValueTypeRegistry, tmp_path: Path) -> None:
    """export() writes all charts into a single HTML file."""

    charts = [_chart(registry), _chart(registry)]
    target = tmp_path / "charts.html"

    ChartRenderer().export(charts, target, title="Report")

    content = target.read_text(encoding="utf-8")
    assert content.startswith("<!DOCTYPE html>")
    for chart in charts:
        assert chart.target_id in content
