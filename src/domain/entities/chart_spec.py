"""
Domain entity describing the single price chart to draw.
Zero external dependencies: pure Python dataclass only.

The style values are fixed; only the labels and prices change per draw.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartSpec:
    title: str
    labels: list[str]
    prices: list[float]

    line_color: str = "#3b82f6"
    fill_color: str = "rgba(59,130,246,0.1)"
    line_width: int = 3
    point_radius: int = 4
    point_border_color: str = "white"
    tension: float = 0.2
    show_legend: bool = False
    grid_color: str = "#334155"
    tick_color: str = "#94a3b8"
