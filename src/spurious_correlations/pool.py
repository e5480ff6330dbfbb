"""The pool of query specifications pairs are drawn from.

``DEFAULT_POOL`` mixes every provider so most pairs cross sources. A JSON
file of spec mappings (``Settings.pool_file``) can replace it::

    [
        {"provider": "wp", "title": "Corgi"},
        {"provider": "usgs_quakes", "min_magnitude": 5.0}
    ]
"""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

from spurious_correlations.schemas import (
    CoinGeckoSpec,
    DiseaseShSpec,
    ExchangeRateSpec,
    OpenAlexSpec,
    OpenMeteoSpec,
    QuerySpec,
    UsgsQuakesSpec,
    WikipediaSpec,
    WorldBankSpec,
    parse_spec,
)

_ARTICLES = [
    "Nicolas Cage", "Beekeeping", "Quantum entanglement", "Banana bread",
    "Cryptozoology", "Pineapple", "Pokémon", "Gasoline",
    "Corgi", "Blockchain", "Astrology", "Astronomy",
    "Loch Ness Monster", "Cat", "Unidentified flying object", "Sourdough",
    "Peanut butter", "Lightning", "Kombucha", "Crop circle",
    "Artificial intelligence", "Toilet paper", "Roller coaster", "Knitting",
    "Flat Earth", "Vaccination", "Trombone", "Supernova",
    "Guitar", "Volcano", "Llama", "Meme",
    "Minecraft", "Kale", "TikTok", "Chess",
    "Hamster", "Mars", "Zombie", "Quantum computing",
]  # fmt: skip

_WEATHER = [
    ("London precipitation", 51.5074, -0.1278, "precipitation_sum"),
    ("Seattle precipitation", 47.6062, -122.3321, "precipitation_sum"),
    ("Phoenix max temp", 33.4484, -112.0740, "temperature_2m_max"),
    ("Reykjavik max wind", 64.1466, -21.9426, "windspeed_10m_max"),
    ("Singapore precipitation", 1.3521, 103.8198, "precipitation_sum"),
    ("Cairo max temp", 30.0444, 31.2357, "temperature_2m_max"),
    ("Tokyo precipitation", 35.6762, 139.6503, "precipitation_sum"),
    ("Sydney max wind", -33.8688, 151.2093, "windspeed_10m_max"),
    ("Mumbai precipitation", 19.0760, 72.8777, "precipitation_sum"),
    ("São Paulo precipitation", -23.5505, -46.6333, "precipitation_sum"),
]

_FX = [("USD", "EUR"), ("USD", "JPY"), ("GBP", "USD"), ("EUR", "CHF"), ("AUD", "USD")]

_COINS = [
    ("bitcoin", "Bitcoin"),
    ("ethereum", "Ethereum"),
    ("dogecoin", "Dogecoin"),
    ("shiba-inu", "Shiba Inu"),
    ("litecoin", "Litecoin"),
]

_TOPICS = [
    "zombie", "kombucha", "banana bread", "ufology", "corgi",
    "sourdough", "volcano", "astrology", "meme", "quantum entanglement",
]  # fmt: skip

_COVID = [
    ("USA", "cases"), ("United Kingdom", "cases"), ("India", "cases"), ("Japan", "cases"),
    ("Brazil", "cases"), ("USA", "deaths"), ("United Kingdom", "deaths"), ("India", "deaths"),
]  # fmt: skip

_QUAKE_MAGNITUDES = [5.0, 6.0, 4.5]

_INDICATORS = [
    ("USA", "SP.POP.TOTL", "USA population"),
    ("JPN", "SP.POP.TOTL", "Japan population"),
    ("IND", "SP.POP.TOTL", "India population"),
    ("BRA", "SP.POP.TOTL", "Brazil population"),
    ("USA", "NY.GDP.PCAP.CD", "USA GDP per capita (current US$)"),
    ("USA", "EN.ATM.CO2E.PC", "USA CO₂ emissions (t per capita)"),
    ("USA", "IT.NET.USER.ZS", "USA Internet users (%)"),
    ("ZAF", "SP.POP.TOTL", "South Africa population"),
    ("AUS", "SP.POP.TOTL", "Australia population"),
]

DEFAULT_POOL: tuple[QuerySpec, ...] = (
    *(WikipediaSpec(title=title) for title in _ARTICLES),
    *(OpenMeteoSpec(label=name, lat=lat, lon=lon, variable=v) for name, lat, lon, v in _WEATHER),
    *(ExchangeRateSpec(base=base, symbol=symbol) for base, symbol in _FX),
    *(CoinGeckoSpec(coin_id=coin, vs_currency="usd", coin_name=name) for coin, name in _COINS),
    *(OpenAlexSpec(query=topic) for topic in _TOPICS),
    *(DiseaseShSpec(country=country, field=field) for country, field in _COVID),
    *(UsgsQuakesSpec(min_magnitude=m) for m in _QUAKE_MAGNITUDES),
    *(WorldBankSpec(country=c, indicator=i, label=label) for c, i, label in _INDICATORS),
)


def load_pool(path: Path) -> list[QuerySpec]:
    """Read a JSON array of spec mappings.

    Raises:
        ValueError: The file is not a JSON array.
        pydantic.ValidationError: An entry is not a valid spec.
    """
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        msg = f"Pool file must contain a JSON array: {path}"
        raise ValueError(msg)
    return [parse_spec(entry) for entry in raw]
