"""Base prices and volatility coefficients for the market simulator."""

from typing import Dict

from common.models import City, Commodity

# Typical market prices in KES per 90kg bag
# Nairobi trades higher on demand, Mombasa lower on port proximity
BASE_PRICES: Dict[Commodity, Dict[City, float]] = {
    Commodity.MAIZE: {
        City.NAIROBI: 4500.0,
        City.MOMBASA: 4200.0,
    },
    Commodity.BEANS: {
        City.NAIROBI: 8500.0,
        City.MOMBASA: 8200.0,
    },
}

# Fractional volatility per commodity (beans swing more than maize)
VOLATILITY: Dict[Commodity, float] = {
    Commodity.MAIZE: 0.15,
    Commodity.BEANS: 0.20,
}
