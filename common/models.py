# common/models.py

import datetime as dt
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .config import DEFAULT_LONG_MA_PERIOD, DEFAULT_SHORT_MA_PERIOD
from .utils.formatting import format_currency, format_percent

# --- Shared Enums ---


class City(str, Enum):
    """Markets tracked by the simulator."""

    NAIROBI = "Nairobi"
    MOMBASA = "Mombasa"


class Commodity(str, Enum):
    """Commodities tracked by the simulator."""

    MAIZE = "Maize"
    BEANS = "Beans"


class Level(str, Enum):
    """Qualitative label attached to volatility and efficiency figures."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


def series_key(city: City, commodity: Commodity) -> str:
    """Returns the flat field name for a city/commodity pair, e.g. 'nairobi_maize'."""
    return f"{city.value.lower()}_{commodity.value.lower()}"


# --- Price Models ---


class PriceSnapshot(BaseModel):
    """A single commodity price observed in a single city."""

    city: City
    commodity: Commodity
    price: float = Field(ge=0)
    change: float  # Percent vs. base price, one decimal place
    timestamp: dt.datetime


class MarketSnapshot(BaseModel):
    """
    Current prices for one city. Both commodities share the generation
    timestamp.
    """

    city: City
    maize_price: float = Field(ge=0)
    maize_change: float
    beans_price: float = Field(ge=0)
    beans_change: float
    last_updated: dt.datetime

    def price_for(self, commodity: Commodity) -> float:
        if commodity == Commodity.MAIZE:
            return self.maize_price
        return self.beans_price

    def change_for(self, commodity: Commodity) -> float:
        if commodity == Commodity.MAIZE:
            return self.maize_change
        return self.beans_change

    def quotes(self) -> List[PriceSnapshot]:
        """Splits the record into one PriceSnapshot per commodity."""
        return [
            PriceSnapshot(
                city=self.city,
                commodity=commodity,
                price=self.price_for(commodity),
                change=self.change_for(commodity),
                timestamp=self.last_updated,
            )
            for commodity in Commodity
        ]

    def __str__(self):
        """Returns a display string, e.g. 'Nairobi: Maize=KES 4,500 (+0.0%), ...'."""
        maize_f = format_currency(self.maize_price)
        beans_f = format_currency(self.beans_price)
        return (
            f"{self.city.value}: Maize={maize_f} ({format_percent(self.maize_change)}), "
            f"Beans={beans_f} ({format_percent(self.beans_change)})"
        )


class HistoricalPoint(BaseModel):
    """Prices for all four city/commodity pairs on one calendar day."""

    date: dt.date
    nairobi_maize: float = Field(ge=0)
    nairobi_beans: float = Field(ge=0)
    mombasa_maize: float = Field(ge=0)
    mombasa_beans: float = Field(ge=0)

    def price(self, city: City, commodity: Commodity) -> float:
        return getattr(self, series_key(city, commodity))


# --- Analytics Models ---


class CommodityStats(BaseModel):
    """Analytics for one commodity across both markets."""

    commodity: Commodity
    volatility: float = 0.0
    moving_average_short: float = 0.0
    moving_average_long: float = 0.0
    efficiency: float = Field(default=0.0, ge=0.0, le=1.0)
    spread: float = 0.0
    volatility_level: Level = Level.LOW
    efficiency_level: Level = Level.LOW
    short_period: int = Field(default=DEFAULT_SHORT_MA_PERIOD, gt=0)
    long_period: int = Field(default=DEFAULT_LONG_MA_PERIOD, gt=0)


class PriceRange(BaseModel):
    """Cross-city summary of current prices for one commodity."""

    average: float
    maximum: float
    minimum: float
    spread: float


class MarketOverview(BaseModel):
    """Current price ranges keyed by commodity."""

    ranges: Dict[Commodity, PriceRange]
    last_updated: Optional[dt.datetime] = None


class DashboardData(BaseModel):
    """Everything the presentation layer needs from one refresh."""

    snapshots: List[MarketSnapshot]
    history: List[HistoricalPoint]
    overview: Optional[MarketOverview] = None
    stats: Dict[Commodity, CommodityStats]
