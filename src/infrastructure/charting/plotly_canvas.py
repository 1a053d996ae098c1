"""
Infrastructure adapter: plotly → IChartCanvas.

The canvas owns exactly one go.Figure for the lifetime of the process. The
first draw builds it; later draws replace the series data in place, so
re-invoking the chart cycle never accumulates figures.
"""

from typing import Optional

import plotly.graph_objects as go

from src.domain.entities.chart_spec import ChartSpec
from src.domain.ports.chart_canvas_port import IChartCanvas


class PlotlyChartCanvas(IChartCanvas):
    """Line chart bound to a single HTML element id."""

    def __init__(self, element_id: str = "btcChart") -> None:
        self._element_id = element_id
        self._figure: Optional[go.Figure] = None

    @property
    def handle(self) -> Optional[go.Figure]:
        return self._figure

    def draw(self, spec: ChartSpec) -> None:
        if self._figure is None:
            self._figure = self._build(spec)
            return
        self._figure.update_traces(x=spec.labels, y=spec.prices, name=spec.title)
        self._figure.update_yaxes(range=_padded_range(spec.prices))

    def to_json(self) -> Optional[str]:
        if self._figure is None:
            return None
        return self._figure.to_json()

    def to_html(self) -> str:
        """HTML fragment for embedding in the dashboard page ('' before the first draw)."""
        if self._figure is None:
            return ""
        return self._figure.to_html(
            full_html=False,
            include_plotlyjs="cdn",
            div_id=self._element_id,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _build(spec: ChartSpec) -> go.Figure:
        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=spec.labels,
            y=spec.prices,
            name=spec.title,
            mode="lines+markers",
            line=dict(
                color=spec.line_color,
                width=spec.line_width,
                shape="spline",
                smoothing=spec.tension,
            ),
            marker=dict(
                size=spec.point_radius * 2,
                color=spec.line_color,
                line=dict(color=spec.point_border_color, width=1),
            ),
            fill="tozeroy",
            fillcolor=spec.fill_color,
        ))
        fig.update_layout(
            showlegend=spec.show_legend,
            hovermode="x unified",
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)",
            margin=dict(l=40, r=10, t=10, b=30),
            xaxis=dict(
                type="category",
                showgrid=False,
                tickfont=dict(color=spec.tick_color),
            ),
            yaxis=dict(
                showgrid=True,
                gridcolor=spec.grid_color,
                tickfont=dict(color=spec.tick_color),
                range=_padded_range(spec.prices),
            ),
        )
        return fig


def _padded_range(prices: list[float]) -> Optional[list[float]]:
    # Fixed range keeps the area fill from dragging the axis down to zero.
    if not prices:
        return None
    low, high = min(prices), max(prices)
    pad = (high - low) * 0.1 or abs(high) * 0.01 or 1.0
    return [low - pad, high + pad]
