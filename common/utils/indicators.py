import math
from typing import Sequence


def mean(prices: Sequence[float]) -> float:
    """Arithmetic mean, or 0.0 for an empty series."""
    if not prices:
        return 0.0
    return sum(prices) / len(prices)


def moving_average(prices: Sequence[float], period: int) -> float:
    """
    Trailing moving average over the last `period` prices.

    When fewer than `period` prices are available, the mean of the whole
    series is returned instead. The series must not be empty.

    Raises:
        ValueError: if `period` is not positive.
    """
    if period <= 0:
        raise ValueError(f"Moving average period must be positive, got {period}")
    if len(prices) < period:
        return sum(prices) / len(prices)
    price_slice = prices[-period:]
    return sum(price_slice) / period


def _sum_squared_deviations(prices: Sequence[float], center: float) -> float:
    return sum((p - center) ** 2 for p in prices)


def volatility(prices: Sequence[float]) -> float:
    """Population standard deviation of the prices (0.0 below two points)."""
    if len(prices) < 2:
        return 0.0
    center = sum(prices) / len(prices)
    variance = _sum_squared_deviations(prices, center) / len(prices)
    return math.sqrt(variance)


def efficiency(prices_a: Sequence[float], prices_b: Sequence[float]) -> float:
    """
    Market efficiency as the absolute Pearson correlation of two price series.

    1.0 means the two markets move in perfect lockstep, 0.0 means no linear
    relationship. Series of unequal length, fewer than two points, or with
    zero variance all score 0.0.
    """
    n = len(prices_a)
    if n != len(prices_b) or n < 2:
        return 0.0

    mean_a = sum(prices_a) / n
    mean_b = sum(prices_b) / n

    covariance = sum((a - mean_a) * (b - mean_b) for a, b in zip(prices_a, prices_b))
    denominator = math.sqrt(
        _sum_squared_deviations(prices_a, mean_a)
        * _sum_squared_deviations(prices_b, mean_b)
    )
    if denominator == 0:
        return 0.0

    return min(1.0, abs(covariance / denominator))


def price_spread(price_a: float, price_b: float) -> float:
    """Absolute price difference between two markets."""
    return abs(price_a - price_b)
