"""
Dashboard aggregation for the commodity market simulator.

Combines the simulated current prices and price history with the analytics
indicators into the figures the dashboard displays: per-commodity
volatility, moving averages, market efficiency and price spreads, plus a
cross-city overview of current prices. Nothing here renders; the
presentation layer consumes the returned models.
"""

import logging
from typing import Dict, List, Optional, Sequence

import pandas as pd

import common.config as defaults
from common.models import (
    City,
    Commodity,
    CommodityStats,
    DashboardData,
    HistoricalPoint,
    Level,
    MarketOverview,
    MarketSnapshot,
    PriceRange,
    series_key,
)
from common.utils.indicators import (
    efficiency,
    mean,
    moving_average,
    price_spread,
    volatility,
)

from .market import MarketDataSimulator, get_default_simulator

logger = logging.getLogger(__name__)

SERIES_COLUMNS = [
    series_key(city, commodity) for city in City for commodity in Commodity
]


def history_to_frame(history: Sequence[HistoricalPoint]) -> pd.DataFrame:
    """Converts the price history into a date-indexed DataFrame."""
    if not history:
        return pd.DataFrame(
            columns=SERIES_COLUMNS, index=pd.DatetimeIndex([], name="date")
        )
    df = pd.DataFrame([point.model_dump() for point in history])
    df["date"] = pd.to_datetime(df["date"])
    return df.set_index("date")[SERIES_COLUMNS]


def classify_volatility(value: float) -> Level:
    """Labels a volatility figure (KES standard deviation)."""
    if value < defaults.DEFAULT_VOLATILITY_LOW_THRESHOLD:
        return Level.LOW
    if value < defaults.DEFAULT_VOLATILITY_HIGH_THRESHOLD:
        return Level.MODERATE
    return Level.HIGH


def classify_efficiency(value: float) -> Level:
    """Labels a market efficiency score between 0 and 1."""
    if value > defaults.DEFAULT_EFFICIENCY_HIGH_THRESHOLD:
        return Level.HIGH
    if value > defaults.DEFAULT_EFFICIENCY_MODERATE_THRESHOLD:
        return Level.MODERATE
    return Level.LOW


def _find_snapshot(
    snapshots: Sequence[MarketSnapshot], city: City
) -> Optional[MarketSnapshot]:
    return next((s for s in snapshots if s.city == city), None)


def calculate_price_spreads(
    snapshots: Sequence[MarketSnapshot],
) -> Dict[Commodity, float]:
    """Current Nairobi vs. Mombasa price difference for each commodity."""
    spreads = {commodity: 0.0 for commodity in Commodity}
    if len(snapshots) < 2:
        return spreads

    nairobi = _find_snapshot(snapshots, City.NAIROBI)
    mombasa = _find_snapshot(snapshots, City.MOMBASA)
    if nairobi is None or mombasa is None:
        return spreads

    for commodity in Commodity:
        spreads[commodity] = price_spread(
            nairobi.price_for(commodity), mombasa.price_for(commodity)
        )
    return spreads


def calculate_market_overview(
    snapshots: Sequence[MarketSnapshot],
) -> Optional[MarketOverview]:
    """Average, highest and lowest current price per commodity across cities."""
    if not snapshots:
        return None

    ranges = {}
    for commodity in Commodity:
        prices = [s.price_for(commodity) for s in snapshots]
        highest = max(prices)
        lowest = min(prices)
        ranges[commodity] = PriceRange(
            average=mean(prices),
            maximum=highest,
            minimum=lowest,
            spread=highest - lowest,
        )
    return MarketOverview(ranges=ranges, last_updated=snapshots[0].last_updated)


def calculate_commodity_stats(
    history: Sequence[HistoricalPoint],
    snapshots: Sequence[MarketSnapshot],
    commodity: Commodity,
    short_period: int = defaults.DEFAULT_SHORT_MA_PERIOD,
    long_period: int = defaults.DEFAULT_LONG_MA_PERIOD,
) -> CommodityStats:
    """
    Computes the analytics panel figures for one commodity.

    Volatility and moving averages run over the daily average of the two
    cities. Efficiency compares the Nairobi and Mombasa series directly.
    """
    spread = calculate_price_spreads(snapshots)[commodity]
    if not history:
        return CommodityStats(
            commodity=commodity,
            spread=spread,
            short_period=short_period,
            long_period=long_period,
        )

    df = history_to_frame(history)
    nairobi = df[series_key(City.NAIROBI, commodity)].tolist()
    mombasa = df[series_key(City.MOMBASA, commodity)].tolist()
    averaged = [(n + m) / 2 for n, m in zip(nairobi, mombasa)]

    price_volatility = volatility(averaged)
    market_efficiency = efficiency(nairobi, mombasa)
    stats = CommodityStats(
        commodity=commodity,
        volatility=price_volatility,
        moving_average_short=moving_average(averaged, short_period),
        moving_average_long=moving_average(averaged, long_period),
        efficiency=market_efficiency,
        spread=spread,
        volatility_level=classify_volatility(price_volatility),
        efficiency_level=classify_efficiency(market_efficiency),
        short_period=short_period,
        long_period=long_period,
    )
    logger.debug(f"{commodity.value} stats: {stats.model_dump()}")
    return stats


def build_dashboard(simulator: Optional[MarketDataSimulator] = None) -> DashboardData:
    """Generates current prices and history, then computes all analytics."""
    simulator = simulator or get_default_simulator()
    snapshots: List[MarketSnapshot] = simulator.generate_snapshot()
    history: List[HistoricalPoint] = simulator.generate_history()

    stats = {
        commodity: calculate_commodity_stats(history, snapshots, commodity)
        for commodity in Commodity
    }
    logger.info(
        f"Dashboard built: {len(snapshots)} snapshots, {len(history)} history points"
    )
    return DashboardData(
        snapshots=snapshots,
        history=history,
        overview=calculate_market_overview(snapshots),
        stats=stats,
    )
