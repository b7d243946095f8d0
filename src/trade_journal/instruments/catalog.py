"""Static instrument catalog with symbol lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from trade_journal.types import Category, Instrument

_FX = Category.FOREX
_CMD = Category.COMMODITIES
_STK = Category.STOCKS
_IDX = Category.INDICES
_CRY = Category.CRYPTO

# (symbol, name, category, pip_value, pip_size, contract_size)
_INSTRUMENT_ROWS: tuple[tuple[str, str, Category, float, float, float], ...] = (
    # Major forex
    ("EUR/USD", "Euro / US Dollar", _FX, 10, 0.0001, 100_000),
    ("GBP/USD", "British Pound / US Dollar", _FX, 10, 0.0001, 100_000),
    ("USD/JPY", "US Dollar / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("USD/CHF", "US Dollar / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("AUD/USD", "Australian Dollar / US Dollar", _FX, 10, 0.0001, 100_000),
    ("USD/CAD", "US Dollar / Canadian Dollar", _FX, 10, 0.0001, 100_000),
    ("NZD/USD", "New Zealand Dollar / US Dollar", _FX, 10, 0.0001, 100_000),
    # Minor forex
    ("EUR/GBP", "Euro / British Pound", _FX, 10, 0.0001, 100_000),
    ("EUR/JPY", "Euro / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("GBP/JPY", "British Pound / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("AUD/JPY", "Australian Dollar / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("CHF/JPY", "Swiss Franc / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("CAD/JPY", "Canadian Dollar / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("EUR/AUD", "Euro / Australian Dollar", _FX, 10, 0.0001, 100_000),
    ("GBP/AUD", "British Pound / Australian Dollar", _FX, 10, 0.0001, 100_000),
    ("EUR/CAD", "Euro / Canadian Dollar", _FX, 10, 0.0001, 100_000),
    ("GBP/CAD", "British Pound / Canadian Dollar", _FX, 10, 0.0001, 100_000),
    ("AUD/CAD", "Australian Dollar / Canadian Dollar", _FX, 10, 0.0001, 100_000),
    ("NZD/CAD", "New Zealand Dollar / Canadian Dollar", _FX, 10, 0.0001, 100_000),
    ("EUR/CHF", "Euro / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("GBP/CHF", "British Pound / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("AUD/CHF", "Australian Dollar / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("CAD/CHF", "Canadian Dollar / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("NZD/CHF", "New Zealand Dollar / Swiss Franc", _FX, 10, 0.0001, 100_000),
    ("NZD/JPY", "New Zealand Dollar / Japanese Yen", _FX, 10, 0.01, 100_000),
    ("GBP/NZD", "British Pound / New Zealand Dollar", _FX, 10, 0.0001, 100_000),
    ("EUR/NZD", "Euro / New Zealand Dollar", _FX, 10, 0.0001, 100_000),
    ("AUD/NZD", "Australian Dollar / New Zealand Dollar", _FX, 10, 0.0001, 100_000),
    # Exotic forex
    ("USD/SEK", "US Dollar / Swedish Krona", _FX, 10, 0.0001, 100_000),
    ("USD/NOK", "US Dollar / Norwegian Krone", _FX, 10, 0.0001, 100_000),
    ("USD/DKK", "US Dollar / Danish Krone", _FX, 10, 0.0001, 100_000),
    ("USD/PLN", "US Dollar / Polish Zloty", _FX, 10, 0.0001, 100_000),
    ("USD/CZK", "US Dollar / Czech Koruna", _FX, 10, 0.0001, 100_000),
    ("USD/HUF", "US Dollar / Hungarian Forint", _FX, 10, 0.01, 100_000),
    ("USD/TRY", "US Dollar / Turkish Lira", _FX, 10, 0.0001, 100_000),
    ("USD/ZAR", "US Dollar / South African Rand", _FX, 10, 0.0001, 100_000),
    ("USD/MXN", "US Dollar / Mexican Peso", _FX, 10, 0.0001, 100_000),
    ("USD/SGD", "US Dollar / Singapore Dollar", _FX, 10, 0.0001, 100_000),
    ("USD/HKD", "US Dollar / Hong Kong Dollar", _FX, 10, 0.0001, 100_000),
    ("USD/CNH", "US Dollar / Chinese Yuan Offshore", _FX, 10, 0.0001, 100_000),
    # Metals
    ("XAU/USD", "Gold / US Dollar", _CMD, 0.1, 0.1, 1),
    ("XAG/USD", "Silver / US Dollar", _CMD, 5, 0.01, 5_000),
    ("XPT/USD", "Platinum / US Dollar", _CMD, 1, 0.1, 50),
    ("XPD/USD", "Palladium / US Dollar", _CMD, 1, 0.1, 100),
    ("XCU/USD", "Copper / US Dollar", _CMD, 25, 0.0001, 25_000),
    # Energy
    ("WTI/USD", "West Texas Intermediate Oil", _CMD, 10, 0.01, 1_000),
    ("BRENT/USD", "Brent Crude Oil", _CMD, 10, 0.01, 1_000),
    ("NGAS/USD", "Natural Gas", _CMD, 10, 0.001, 10_000),
    # Agriculture
    ("WHEAT/USD", "Wheat", _CMD, 12.5, 0.25, 5_000),
    ("CORN/USD", "Corn", _CMD, 12.5, 0.25, 5_000),
    ("SOYBEAN/USD", "Soybeans", _CMD, 12.5, 0.25, 5_000),
    ("SUGAR/USD", "Sugar", _CMD, 11.2, 0.01, 112_000),
    ("COFFEE/USD", "Coffee", _CMD, 3.75, 0.05, 37_500),
    ("COCOA/USD", "Cocoa", _CMD, 10, 1, 10),
    ("COTTON/USD", "Cotton", _CMD, 5, 0.01, 50_000),
    # US stocks
    ("AAPL", "Apple Inc.", _STK, 1, 0.01, 100),
    ("MSFT", "Microsoft Corporation", _STK, 1, 0.01, 100),
    ("GOOGL", "Alphabet Inc. Class A", _STK, 1, 0.01, 100),
    ("AMZN", "Amazon.com Inc.", _STK, 1, 0.01, 100),
    ("TSLA", "Tesla Inc.", _STK, 1, 0.01, 100),
    ("META", "Meta Platforms Inc.", _STK, 1, 0.01, 100),
    ("NVDA", "NVIDIA Corporation", _STK, 1, 0.01, 100),
    ("NFLX", "Netflix Inc.", _STK, 1, 0.01, 100),
    ("AMD", "Advanced Micro Devices", _STK, 1, 0.01, 100),
    ("INTC", "Intel Corporation", _STK, 1, 0.01, 100),
    ("CRM", "Salesforce Inc.", _STK, 1, 0.01, 100),
    ("ORCL", "Oracle Corporation", _STK, 1, 0.01, 100),
    ("ADBE", "Adobe Inc.", _STK, 1, 0.01, 100),
    ("PYPL", "PayPal Holdings Inc.", _STK, 1, 0.01, 100),
    ("DIS", "The Walt Disney Company", _STK, 1, 0.01, 100),
    ("UBER", "Uber Technologies Inc.", _STK, 1, 0.01, 100),
    ("SPOT", "Spotify Technology S.A.", _STK, 1, 0.01, 100),
    ("ZOOM", "Zoom Video Communications", _STK, 1, 0.01, 100),
    ("SQ", "Block Inc.", _STK, 1, 0.01, 100),
    ("SHOP", "Shopify Inc.", _STK, 1, 0.01, 100),
    # Banking & finance
    ("JPM", "JPMorgan Chase & Co.", _STK, 1, 0.01, 100),
    ("BAC", "Bank of America Corp.", _STK, 1, 0.01, 100),
    ("WFC", "Wells Fargo & Company", _STK, 1, 0.01, 100),
    ("GS", "Goldman Sachs Group Inc.", _STK, 1, 0.01, 100),
    ("MS", "Morgan Stanley", _STK, 1, 0.01, 100),
    ("V", "Visa Inc.", _STK, 1, 0.01, 100),
    ("MA", "Mastercard Inc.", _STK, 1, 0.01, 100),
    # Healthcare & pharma
    ("JNJ", "Johnson & Johnson", _STK, 1, 0.01, 100),
    ("PFE", "Pfizer Inc.", _STK, 1, 0.01, 100),
    ("MRNA", "Moderna Inc.", _STK, 1, 0.01, 100),
    ("ABBV", "AbbVie Inc.", _STK, 1, 0.01, 100),
    # Indices
    ("SPX500", "S&P 500 Index", _IDX, 25, 0.25, 50),
    ("NAS100", "NASDAQ 100 Index", _IDX, 20, 0.25, 20),
    ("DJI30", "Dow Jones Industrial Average", _IDX, 5, 1, 5),
    ("UK100", "FTSE 100 Index", _IDX, 10, 0.5, 10),
    ("GER40", "DAX 40 Index", _IDX, 25, 0.5, 25),
    ("FRA40", "CAC 40 Index", _IDX, 10, 0.5, 10),
    ("JPN225", "Nikkei 225 Index", _IDX, 5, 5, 5),
    ("AUS200", "ASX 200 Index", _IDX, 25, 1, 25),
    ("HK50", "Hang Seng Index", _IDX, 10, 1, 10),
    # Crypto
    ("BTC/USD", "Bitcoin / US Dollar", _CRY, 1, 1, 1),
    ("ETH/USD", "Ethereum / US Dollar", _CRY, 1, 0.01, 1),
    ("LTC/USD", "Litecoin / US Dollar", _CRY, 1, 0.01, 1),
    ("XRP/USD", "Ripple / US Dollar", _CRY, 1, 0.0001, 1),
    ("ADA/USD", "Cardano / US Dollar", _CRY, 1, 0.0001, 1),
    ("DOT/USD", "Polkadot / US Dollar", _CRY, 1, 0.001, 1),
    ("LINK/USD", "Chainlink / US Dollar", _CRY, 1, 0.001, 1),
    ("BCH/USD", "Bitcoin Cash / US Dollar", _CRY, 1, 0.01, 1),
    ("BNB/USD", "Binance Coin / US Dollar", _CRY, 1, 0.01, 1),
    ("SOL/USD", "Solana / US Dollar", _CRY, 1, 0.001, 1),
)

ALL_CATEGORIES = "All"


class UnknownInstrumentError(KeyError):
    """Raised by strict catalog access for a symbol that is not listed."""


class InstrumentCatalog(Mapping[str, Instrument]):
    """Read-only symbol -> instrument table."""

    def __init__(self, instruments: Iterable[Instrument]) -> None:
        by_symbol: dict[str, Instrument] = {}
        for instrument in instruments:
            if instrument.symbol in by_symbol:
                raise ValueError(f"duplicate_instrument_symbol: {instrument.symbol}")
            if instrument.pip_size <= 0 or instrument.pip_value <= 0:
                raise ValueError(f"non_positive_pip_constants: {instrument.symbol}")
            by_symbol[instrument.symbol] = instrument
        self._by_symbol = MappingProxyType(by_symbol)

    def __getitem__(self, symbol: str) -> Instrument:
        return self._by_symbol[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_symbol)

    def __len__(self) -> int:
        return len(self._by_symbol)

    def lookup(self, symbol: str) -> Instrument | None:
        """Resolve a symbol, returning None when it is not listed."""
        return self._by_symbol.get(symbol)

    def get_strict(self, symbol: str) -> Instrument:
        """Resolve a symbol or raise UnknownInstrumentError."""
        instrument = self._by_symbol.get(symbol)
        if instrument is None:
            raise UnknownInstrumentError(symbol)
        return instrument

    def search(
        self,
        term: str = "",
        category: Category | str | None = None,
    ) -> list[Instrument]:
        """Filter by case-insensitive symbol/name substring and category."""
        needle = term.lower()
        wanted = _coerce_category(category)
        return [
            instrument
            for instrument in self._by_symbol.values()
            if (needle in instrument.symbol.lower() or needle in instrument.name.lower())
            and (wanted is None or instrument.category == wanted)
        ]

    def categories(self) -> list[Category]:
        """Distinct categories in catalog order."""
        seen: list[Category] = []
        for instrument in self._by_symbol.values():
            if instrument.category not in seen:
                seen.append(instrument.category)
        return seen

    def symbols(self) -> list[str]:
        return list(self._by_symbol)


def _coerce_category(category: Category | str | None) -> Category | None:
    if category is None or category == ALL_CATEGORIES:
        return None
    if isinstance(category, Category):
        return category
    for member in Category:
        if member.value.lower() == category.lower():
            return member
    raise ValueError(f"unknown_category: {category}")


CATALOG = InstrumentCatalog(
    Instrument(
        symbol=symbol,
        name=name,
        category=category,
        pip_value=float(pip_value),
        pip_size=float(pip_size),
        contract_size=float(contract_size),
    )
    for symbol, name, category, pip_value, pip_size, contract_size in _INSTRUMENT_ROWS
)


def lookup(symbol: str) -> Instrument | None:
    """Resolve a symbol against the built-in catalog."""
    return CATALOG.lookup(symbol)


def get_strict(symbol: str) -> Instrument:
    """Resolve a symbol against the built-in catalog or raise."""
    return CATALOG.get_strict(symbol)


def search(term: str = "", category: Category | str | None = None) -> list[Instrument]:
    return CATALOG.search(term, category)


def categories() -> list[Category]:
    return CATALOG.categories()


def symbols() -> list[str]:
    return CATALOG.symbols()
