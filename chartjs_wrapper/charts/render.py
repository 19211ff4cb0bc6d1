"""HTML rendering of built charts through jinja2 templates."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, Template, select_autoescape
from markupsafe import Markup

from .. import config
from .common import Size

if TYPE_CHECKING:
    from .options import ChartConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Chart:
    """A configuration bound to a canvas element."""

    target_id: str
    width: Size
    height: Size
    config: ChartConfig


class ChartRenderer:
    """
    Renders charts into HTML fragments and standalone pages.

    The configuration JSON is embedded verbatim in a script block; Chart.js
    and the date adapter are loaded from the configured CDN URLs.
    """

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("chartjs_wrapper", "templates"),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._template_cache: dict[str, Template] = {}

    def load_template(self, template_name: str) -> Template:
        if template_name not in self._template_cache:
            self._template_cache[template_name] = self.env.get_template(template_name)
        return self._template_cache[template_name]

    def to_html(self, chart: Chart) -> str:
        """
        Render one chart as an HTML fragment.

        Raises:
            FormatError: If the configuration cannot be serialized.
        """
        # Keep "</script>" inside string values from closing the script block
        config_json = chart.config.to_json().replace("</", "<\\/")
        return self.load_template("chart.html.j2").render(
            target_id=chart.target_id,
            width=chart.width.to_wire(),
            height=chart.height.to_wire(),
            config_json=Markup(config_json),
        )

    def page(self, title: str, body: str) -> str:
        """Wrap rendered fragments into a standalone HTML page."""
        return self.load_template("page.html.j2").render(
            title=title,
            body=Markup(body),
            chartjs_url=config.CHARTJS_URL,
            adapter_url=config.DATE_ADAPTER_URL,
        )

    def export(self, charts: Iterable[Chart], filepath: str | Path, title: str = "Charts") -> None:
        """
        Write charts to a standalone HTML file.

        Args:
            charts: Charts to render, in page order.
            filepath: Destination file path.
            title: Page title.
        """
        body = "\n".join(self.to_html(chart) for chart in charts)
        Path(filepath).write_text(self.page(title, body), encoding="utf-8")
        logger.info("Wrote %s", filepath)
