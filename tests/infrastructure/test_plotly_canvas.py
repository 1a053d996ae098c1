"""Tests for the plotly chart canvas"""

import json

from src.domain.entities.chart_spec import ChartSpec
from src.infrastructure.charting.plotly_canvas import PlotlyChartCanvas

LABELS = ["1/3", "2/3", "3/3", "4/3", "5/3", "6/3", "7/3"]


def _spec(prices):
    return ChartSpec(title="BTC Price (USD)", labels=LABELS, prices=prices)


class TestPlotlyChartCanvas:
    def test_nothing_before_first_draw(self):
        canvas = PlotlyChartCanvas()
        assert canvas.handle is None
        assert canvas.to_json() is None
        assert canvas.to_html() == ""

    def test_first_draw_builds_single_series(self):
        canvas = PlotlyChartCanvas()
        canvas.draw(_spec([100.0 + i for i in range(7)]))

        fig = canvas.handle
        assert len(fig.data) == 1
        trace = fig.data[0]
        assert list(trace.x) == LABELS
        assert list(trace.y) == [100.0 + i for i in range(7)]
        assert trace.line.color == "#3b82f6"
        assert trace.fillcolor == "rgba(59,130,246,0.1)"
        assert fig.layout.showlegend is False
        assert fig.layout.hovermode == "x unified"
        assert fig.layout.xaxis.showgrid is False
        assert fig.layout.yaxis.gridcolor == "#334155"

    def test_redraw_updates_the_same_figure(self):
        canvas = PlotlyChartCanvas()
        canvas.draw(_spec([1.0] * 7))
        first = canvas.handle

        canvas.draw(_spec([2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]))

        assert canvas.handle is first
        assert len(first.data) == 1
        assert list(first.data[0].y) == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]

    def test_y_range_brackets_prices(self):
        canvas = PlotlyChartCanvas()
        canvas.draw(_spec([10.0, 20.0, 15.0, 12.0, 18.0, 11.0, 19.0]))

        low, high = canvas.handle.layout.yaxis.range
        assert low < 10.0 and high > 20.0

    def test_html_targets_element_id(self):
        canvas = PlotlyChartCanvas(element_id="btcChart")
        canvas.draw(_spec([1.0] * 7))

        assert 'id="btcChart"' in canvas.to_html()
        assert json.loads(canvas.to_json())["data"][0]["name"] == "BTC Price (USD)"
