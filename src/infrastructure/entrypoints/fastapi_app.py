"""
FastAPI entry point: dashboard server.

This module is the Composition Root: it wires the HTTP adapters, renderers and
use cases, and hands the two cycles to DashboardScheduler. The scheduler and
the shared httpx.AsyncClient live for exactly as long as the app (lifespan).

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --port 8000
or
    python -m src.infrastructure.entrypoints.fastapi_app
"""

import dataclasses
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

load_dotenv()

from src.application.rendering.chart_renderer import PriceChartRenderer  # noqa: E402
from src.application.rendering.list_renderer import MarketListRenderer  # noqa: E402
from src.application.services.dashboard_scheduler import DashboardScheduler  # noqa: E402
from src.application.use_cases.load_price_chart import LoadPriceChartUseCase  # noqa: E402
from src.application.use_cases.refresh_market_list import RefreshMarketListUseCase  # noqa: E402
from src.domain.ports.candlestick_port import ICandlestickProvider  # noqa: E402
from src.domain.ports.market_data_port import IMarketDataProvider  # noqa: E402
from src.infrastructure.charting.plotly_canvas import PlotlyChartCanvas  # noqa: E402
from src.infrastructure.market_data.binance_adapter import BinanceCandlestickProvider  # noqa: E402
from src.infrastructure.market_data.coincap_adapter import CoinCapMarketDataProvider  # noqa: E402
from src.infrastructure.web.dashboard_surface import DashboardSurface  # noqa: E402

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class CoinRowModel(BaseModel):
    icon: str
    icon_class: str
    name: str
    market_cap: str
    price: str
    change: str
    change_class: str


class MarketSnapshot(BaseModel):
    timestamp: str | None = None
    rows: list[CoinRowModel]


def create_app(
    market_provider: Optional[IMarketDataProvider] = None,
    candle_provider: Optional[ICandlestickProvider] = None,
    start_scheduler: bool = True,
) -> FastAPI:
    """Build the dashboard app.

    Args:
        market_provider: Overrides the CoinCap adapter (e.g. a fake in tests).
        candle_provider: Overrides the Binance adapter.
        start_scheduler: When False the lifespan opens no client and runs no
                         cycles; the surface stays empty until written to.
    """
    canvas = PlotlyChartCanvas()
    surface = DashboardSurface(
        canvas, refresh_seconds=int(DashboardScheduler.MARKET_INTERVAL_SECONDS)
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not start_scheduler:
            yield
            return

        async with httpx.AsyncClient(
            timeout=float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))
        ) as client:
            markets = market_provider or CoinCapMarketDataProvider(
                client,
                base_url=os.environ.get(
                    "COINCAP_API_URL", CoinCapMarketDataProvider.DEFAULT_BASE_URL
                ),
            )
            candles = candle_provider or BinanceCandlestickProvider(
                client,
                base_url=os.environ.get(
                    "BINANCE_API_URL", BinanceCandlestickProvider.DEFAULT_BASE_URL
                ),
            )
            refresh_uc = RefreshMarketListUseCase(markets, MarketListRenderer(surface))
            chart_uc = LoadPriceChartUseCase(candles, PriceChartRenderer(canvas))
            scheduler = DashboardScheduler(refresh_uc.execute, chart_uc.execute)
            app.state.scheduler = scheduler

            scheduler.start()
            try:
                yield
            finally:
                await scheduler.stop()

    app = FastAPI(title="Crypto Market Dashboard", lifespan=lifespan)
    app.state.surface = surface
    app.state.canvas = canvas

    @app.get("/", response_class=HTMLResponse)
    async def dashboard_page():
        return HTMLResponse(surface.render_page())

    @app.get("/api/market", response_model=MarketSnapshot)
    async def market_snapshot():
        return MarketSnapshot(
            timestamp=surface.timestamp,
            rows=[CoinRowModel(**dataclasses.asdict(row)) for row in surface.rows],
        )

    @app.get("/api/chart")
    async def chart_figure():
        """The plotly figure as JSON; 404 until the chart has been drawn once."""
        figure_json = canvas.to_json()
        if figure_json is None:
            raise HTTPException(status_code=404, detail="Chart not drawn yet.")
        return Response(content=figure_json, media_type="application/json")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get("DASHBOARD_HOST", "0.0.0.0"),
        port=int(os.environ.get("DASHBOARD_PORT", "8000")),
    )
