"""Simulates maize and beans prices for the Nairobi and Mombasa markets."""

import datetime as dt
import logging
import math
import random
from typing import Callable, Dict, List, Optional

import common.config as defaults
from common.models import (
    City,
    Commodity,
    HistoricalPoint,
    MarketSnapshot,
    series_key,
)

from .seed_prices import BASE_PRICES, VOLATILITY

logger = logging.getLogger(__name__)

# Zero-argument callable returning floats in [0, 1), e.g. random.Random(42).random
UniformSource = Callable[[], float]
Clock = Callable[[], dt.datetime]


def standard_normal(uniform: UniformSource) -> float:
    """Draws one standard-normal sample using the Box-Muller transform."""
    u1 = 1.0 - uniform()  # (0, 1] so the log is always defined
    u2 = uniform()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def price_fluctuation(
    center: float, volatility: float, floor: float, uniform: UniformSource
) -> float:
    """
    Randomly fluctuates a price around `center`.

    Args:
        center: The price to fluctuate around.
        volatility: Fractional scale of the fluctuation (0.15 = 15%).
        floor: Lowest value the result may take. Values below are floored,
            never reflected.
        uniform: Source of uniform random numbers.
    """
    fluctuation = standard_normal(uniform) * volatility * center
    return max(center + fluctuation, floor)


def round_price(value: float, floor: float) -> int:
    """Rounds half up to whole currency units without crossing the floor."""
    return max(math.floor(value + 0.5), math.ceil(floor))


def price_change(price: float, base_price: float) -> float:
    """
    Percent change of `price` relative to `base_price`, to one decimal place.

    A non-zero move too small to show at one decimal is reported as +/-0.1 so
    the sign always agrees with the direction of the move.
    """
    if base_price == 0:
        return 0.0
    if price == base_price:
        return 0.0
    change = round((price - base_price) / base_price * 100, 1)
    if change == 0:
        return math.copysign(0.1, price - base_price)
    return change


def trend_factor(
    day_index: int, total_days: int, rate: float = defaults.DEFAULT_TREND_RATE
) -> float:
    """
    Linear drift multiplier for a day in the history window.

    `day_index` 0 is the oldest day. The most recent day is exactly 1.0 and
    each day further back is `rate` lower.
    """
    return 1.0 - rate * (total_days - 1 - day_index)


def seasonal_factor(
    day_index: int,
    total_days: int,
    amplitude: float = defaults.DEFAULT_SEASONAL_AMPLITUDE,
) -> float:
    """
    One full sine cycle across the window, scaled to +/- `amplitude`.

    The phase is measured in days before today, so today is exactly 1.0.
    """
    days_ago = total_days - 1 - day_index
    return 1.0 + amplitude * math.sin(2.0 * math.pi * days_ago / total_days)


class MarketDataSimulator:
    """Generates simulated current and historical commodity prices."""

    def __init__(
        self,
        base_prices: Optional[Dict[Commodity, Dict[City, float]]] = None,
        volatility: Optional[Dict[Commodity, float]] = None,
        random_source: Optional[UniformSource] = None,
        clock: Optional[Clock] = None,
        history_days: int = defaults.DEFAULT_HISTORY_DAYS,
    ):
        """
        Initializes the market data simulator.

        Args:
            base_prices: Reference price per commodity and city. Defaults to
                the KES per 90kg bag seed table.
            volatility: Fractional volatility per commodity.
            random_source: Uniform [0, 1) generator. Defaults to a generator
                seeded from MARKET_SIM_SEED when set, else `random.random`.
            clock: Returns the current time. Defaults to `datetime.now`.
            history_days: Number of trailing days in the historical series.
        """
        if history_days <= 0:
            raise ValueError(f"history_days must be positive, got {history_days}")

        self.base_prices = base_prices if base_prices is not None else BASE_PRICES
        self.volatility = volatility if volatility is not None else VOLATILITY
        if random_source is None:
            seed = defaults.get_random_seed()
            random_source = (
                random.Random(seed).random if seed is not None else random.random
            )
        self.random_source: UniformSource = random_source
        self.clock: Clock = clock or dt.datetime.now
        self.history_days = history_days

    def _generate_price(self, center: float, volatility: float, base: float) -> int:
        """Fluctuates `center` and rounds it, floored relative to `base`."""
        floor = base * defaults.DEFAULT_PRICE_FLOOR_RATIO
        raw = price_fluctuation(center, volatility, floor, self.random_source)
        return round_price(raw, floor)

    def generate_snapshot(self) -> List[MarketSnapshot]:
        """Returns one freshly fluctuated price record per city."""
        now = self.clock()
        snapshots = []
        for city in City:
            prices = {}
            changes = {}
            for commodity in Commodity:
                base = self.base_prices[commodity][city]
                price = self._generate_price(base, self.volatility[commodity], base)
                prices[commodity] = price
                changes[commodity] = price_change(price, base)
            snapshots.append(
                MarketSnapshot(
                    city=city,
                    maize_price=prices[Commodity.MAIZE],
                    maize_change=changes[Commodity.MAIZE],
                    beans_price=prices[Commodity.BEANS],
                    beans_change=changes[Commodity.BEANS],
                    last_updated=now,
                )
            )
            logger.debug(
                f"{city.value}: maize={prices[Commodity.MAIZE]} "
                f"({changes[Commodity.MAIZE]:+.1f}%), beans={prices[Commodity.BEANS]} "
                f"({changes[Commodity.BEANS]:+.1f}%)"
            )
        return snapshots

    def generate_history(self) -> List[HistoricalPoint]:
        """
        Returns one point per day for the trailing window, oldest first,
        ending today. Prices follow a slight upward trend and a seasonal
        cycle, with half the live volatility.
        """
        today = self.clock().date()
        total_days = self.history_days
        scale = defaults.DEFAULT_HISTORY_VOLATILITY_SCALE
        history = []
        for day_index in range(total_days):
            day = today - dt.timedelta(days=total_days - 1 - day_index)
            shape = trend_factor(day_index, total_days) * seasonal_factor(
                day_index, total_days
            )
            prices = {}
            for city in City:
                for commodity in Commodity:
                    base = self.base_prices[commodity][city]
                    prices[series_key(city, commodity)] = self._generate_price(
                        base * shape, self.volatility[commodity] * scale, base
                    )
            history.append(HistoricalPoint(date=day, **prices))
        logger.info(f"Generated {total_days} days of price history ending {today}")
        return history


_default_simulator: Optional[MarketDataSimulator] = None


def get_default_simulator() -> MarketDataSimulator:
    """Returns the shared simulator, built on first use."""
    global _default_simulator
    if _default_simulator is None:
        _default_simulator = MarketDataSimulator()
    return _default_simulator


def reset_default_simulator() -> None:
    """Discards the shared simulator so the next call rebuilds it."""
    global _default_simulator
    _default_simulator = None


def generate_snapshot() -> List[MarketSnapshot]:
    """Current prices from the shared default simulator."""
    return get_default_simulator().generate_snapshot()


def generate_history() -> List[HistoricalPoint]:
    """Trailing price history from the shared default simulator."""
    return get_default_simulator().generate_history()
