"""
Infrastructure adapter: in-memory dashboard page → IListSurface.

Holds what the page currently shows (list rows, timestamp text and the chart
canvas) and renders it to HTML with Jinja2. All writes come from the single
event loop, so the rows are swapped as one tuple and never mutated in place.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.domain.entities.market_data import CoinRow
from src.domain.ports.dashboard_surface_port import IListSurface
from src.infrastructure.charting.plotly_canvas import PlotlyChartCanvas

_TEMPLATES_DIR = Path(__file__).parent / "templates"


class DashboardSurface(IListSurface):
    def __init__(self, canvas: PlotlyChartCanvas, refresh_seconds: int = 10) -> None:
        self._canvas = canvas
        self._refresh_seconds = refresh_seconds
        self._rows: tuple[CoinRow, ...] = ()
        self._timestamp: Optional[str] = None
        self._env = Environment(
            loader=FileSystemLoader(_TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
        )

    @property
    def rows(self) -> tuple[CoinRow, ...]:
        return self._rows

    @property
    def timestamp(self) -> Optional[str]:
        return self._timestamp

    def replace_rows(self, rows: list[CoinRow]) -> None:
        self._rows = tuple(rows)

    def set_timestamp(self, text: str) -> None:
        self._timestamp = text

    def render_page(self) -> str:
        template = self._env.get_template("dashboard.html")
        return template.render(
            rows=self._rows,
            timestamp=self._timestamp,
            chart_html=self._canvas.to_html(),
            refresh_seconds=self._refresh_seconds,
        )
