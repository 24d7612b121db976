# tests/common/test_models.py

import datetime as dt

import pytest
from pydantic import ValidationError

from common.config import DEFAULT_LONG_MA_PERIOD, DEFAULT_SHORT_MA_PERIOD
from common.models import (
    City,
    Commodity,
    CommodityStats,
    HistoricalPoint,
    Level,
    MarketSnapshot,
    PriceSnapshot,
    series_key,
)

NOW = dt.datetime(2026, 10, 17, 9, 30)


def _snapshot(**overrides) -> MarketSnapshot:
    data = dict(
        city=City.NAIROBI,
        maize_price=4500,
        maize_change=0.0,
        beans_price=8670,
        beans_change=2.0,
        last_updated=NOW,
    )
    data.update(overrides)
    return MarketSnapshot(**data)


def test_market_snapshot_valid():
    """Tests that a valid MarketSnapshot can be created from plain values."""
    snapshot = _snapshot(city="Mombasa")

    assert snapshot.city is City.MOMBASA
    assert snapshot.maize_price == 4500.0
    assert snapshot.price_for(Commodity.BEANS) == 8670
    assert snapshot.change_for(Commodity.BEANS) == 2.0


def test_market_snapshot_unknown_city():
    """Tests that MarketSnapshot rejects a city outside the tracked set."""
    with pytest.raises(ValidationError):
        _snapshot(city="Kisumu")


def test_market_snapshot_negative_price():
    """Tests that negative prices are rejected."""
    with pytest.raises(ValidationError):
        _snapshot(maize_price=-1)


def test_market_snapshot_quotes():
    """Tests splitting a city record into per-commodity observations."""
    quotes = _snapshot().quotes()

    assert [q.commodity for q in quotes] == [Commodity.MAIZE, Commodity.BEANS]
    assert all(isinstance(q, PriceSnapshot) for q in quotes)
    assert all(q.city is City.NAIROBI and q.timestamp == NOW for q in quotes)
    assert quotes[1].price == 8670
    assert quotes[1].change == 2.0


def test_market_snapshot_str():
    """Tests the display string uses formatted currency and signed changes."""
    text = str(_snapshot())

    assert text == "Nairobi: Maize=KES 4,500 (+0.0%), Beans=KES 8,670 (+2.0%)"


def test_historical_point_price_lookup():
    """Tests looking up a single price by city and commodity."""
    point = HistoricalPoint(
        date=dt.date(2026, 10, 17),
        nairobi_maize=4480,
        nairobi_beans=8510,
        mombasa_maize=4190,
        mombasa_beans=8230,
    )

    assert point.price(City.MOMBASA, Commodity.BEANS) == 8230
    assert point.price(City.NAIROBI, Commodity.MAIZE) == 4480
    assert point.model_dump()["date"] == dt.date(2026, 10, 17)


def test_historical_point_missing_field():
    """Tests that every city/commodity price is required."""
    with pytest.raises(ValidationError):
        HistoricalPoint(
            date=dt.date(2026, 10, 17),
            nairobi_maize=4480,
            nairobi_beans=8510,
            mombasa_maize=4190,
        )  # type: ignore


def test_series_key():
    """Tests the flat field naming used by history points and frames."""
    assert series_key(City.NAIROBI, Commodity.MAIZE) == "nairobi_maize"
    assert series_key(City.MOMBASA, Commodity.BEANS) == "mombasa_beans"


def test_commodity_stats_defaults():
    """Tests default analytics values and periods."""
    stats = CommodityStats(commodity=Commodity.MAIZE)

    assert stats.volatility == 0.0
    assert stats.efficiency == 0.0
    assert stats.volatility_level is Level.LOW
    assert stats.short_period == DEFAULT_SHORT_MA_PERIOD
    assert stats.long_period == DEFAULT_LONG_MA_PERIOD


def test_commodity_stats_efficiency_bounds():
    """Tests that efficiency outside [0, 1] is rejected."""
    with pytest.raises(ValidationError):
        CommodityStats(commodity=Commodity.BEANS, efficiency=1.5)
