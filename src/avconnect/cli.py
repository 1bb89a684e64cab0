# SPDX-License-Identifier: Apache-2.0
"""Command line access to the Alpha Vantage connector."""

from __future__ import annotations

import asyncio
import logging
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from avconnect.domain.entities import HistoryRequest, Instrument, SearchRequest
from avconnect.domain.market_data import MarketDataError
from avconnect.domain.value_objects import AssetKind, Interval, Range
from avconnect.infrastructure import connector_registry
from avconnect.infrastructure.connector import AlphaVantageConnector
from avconnect.infrastructure.vendor import REGISTRY_KEY

app = typer.Typer(
    add_completion=False,
    help="Alpha Vantage quotes, history, search and earnings in the canonical model",
)
console = Console()


def _fail(message: str, cause: Exception) -> NoReturn:
    console.print(f"❌ {escape(message)}", style="red")
    raise typer.Exit(1) from cause


def _build_connector() -> AlphaVantageConnector:
    """Resolve the connector through the registry and configure it from the environment."""
    connector_cls = connector_registry.get(REGISTRY_KEY)
    try:
        return connector_cls.from_settings()
    except ValidationError as e:
        _fail(f"Configuration error: {e.errors()[0]['msg']}", e)


def _run(coro):
    try:
        return asyncio.run(coro)
    except MarketDataError as e:
        _fail(str(e), e)


def _money(value) -> str:
    return "-" if value is None else str(value.amount)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def quote(symbol: str = typer.Argument(..., help="Equity symbol, e.g. AAPL")):
    """Show the latest quote for a symbol."""
    instrument = _instrument(symbol, AssetKind.EQUITY)
    connector = _build_connector()
    q = _run(connector.quote(instrument))

    console.print(f"📈 {escape(str(q.symbol))}")
    console.print(f"  price:          {_money(q.price)}")
    console.print(f"  previous close: {_money(q.previous_close)}")


@app.command()
def history(
    symbol: str = typer.Argument(..., help="Symbol, e.g. AAPL, EUR/USD or BTC"),
    kind: AssetKind = typer.Option(AssetKind.EQUITY, "--kind", "-k", case_sensitive=False),
    interval: Interval = typer.Option(Interval.D1, "--interval", "-i"),
    range_: Range = typer.Option(Range.M1, "--range", "-r"),
    adjust: bool = typer.Option(True, "--adjust/--no-adjust", help="Request adjusted prices"),
    limit: int = typer.Option(20, "--limit", "-l", help="Number of most recent candles to show"),
):
    """Fetch OHLCV history for an equity, currency pair or crypto asset."""
    instrument = _instrument(symbol, kind)
    try:
        request = HistoryRequest.try_from_range(range_, interval, auto_adjust=adjust)
    except MarketDataError as e:
        _fail(str(e), e)

    connector = _build_connector()
    response = _run(connector.history(instrument, request))

    table = Table(title=escape(f"{instrument.symbol} {interval.value} (adjusted={response.adjusted})"))
    for column in ("time (UTC)", "open", "high", "low", "close", "volume"):
        table.add_column(column)
    for candle in response.candles[-limit:]:
        table.add_row(
            candle.ts.strftime("%Y-%m-%d %H:%M"),
            _money(candle.open),
            _money(candle.high),
            _money(candle.low),
            _money(candle.close),
            "-" if candle.volume is None else str(candle.volume),
        )
    console.print(table)
    console.print(f"{len(response.candles)} candles, {len(response.actions)} dividends")


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text search, e.g. 'micro'"),
    kind: Optional[AssetKind] = typer.Option(None, "--kind", "-k", case_sensitive=False),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1),
):
    """Search instruments by name or symbol."""
    try:
        request = SearchRequest(query=query, kind=kind, limit=limit)
    except MarketDataError as e:
        _fail(str(e), e)

    connector = _build_connector()
    response = _run(connector.search(request))

    if not response.results:
        console.print("No matches")
        return

    table = Table(title=escape(f"Matches for '{query}'"))
    for column in ("symbol", "kind", "name", "exchange"):
        table.add_column(column)
    for result in response.results:
        table.add_row(
            escape(result.symbol.value),
            result.kind.value,
            escape(result.name or "-"),
            result.exchange.value if result.exchange else "-",
        )
    console.print(table)


@app.command()
def earnings(symbol: str = typer.Argument(..., help="Equity symbol, e.g. IBM")):
    """Show quarterly EPS, actual against estimate."""
    instrument = _instrument(symbol, AssetKind.EQUITY)
    connector = _build_connector()
    result = _run(connector.earnings(instrument))

    table = Table(title=escape(f"{instrument.symbol} quarterly EPS"))
    for column in ("period", "actual", "estimate"):
        table.add_column(column)
    for row in result.quarterly_eps:
        table.add_row(str(row.period), _money(row.actual), _money(row.estimate))
    console.print(table)
    console.print(f"{len(result.yearly)} fiscal years, {len(result.quarterly)} quarters")


def _instrument(symbol: str, kind: AssetKind) -> Instrument:
    try:
        return Instrument.from_symbol(symbol, kind)
    except MarketDataError as e:
        _fail(str(e), e)


if __name__ == "__main__":
    app()
