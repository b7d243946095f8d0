from __future__ import annotations

import pytest

from trade_journal.instruments import catalog
from trade_journal.types import Category, Instrument


def test_lookup_known_and_unknown() -> None:
    eurusd = catalog.lookup("EUR/USD")
    assert eurusd is not None
    assert eurusd.category is Category.FOREX
    assert eurusd.pip_size == 0.0001
    assert eurusd.pip_value == 10
    assert catalog.lookup("eur/usd") is None
    assert catalog.lookup("DOGE/USD") is None


def test_get_raises_for_unknown_symbol() -> None:
    with pytest.raises(catalog.UnknownInstrumentError):
        catalog.get_strict("DOGE/USD")


def test_pip_constants_positive_and_symbols_unique() -> None:
    symbols = catalog.symbols()
    assert len(symbols) == len(set(symbols)) == len(catalog.CATALOG)
    for symbol in symbols:
        instrument = catalog.CATALOG[symbol]
        assert instrument.pip_size > 0
        assert instrument.pip_value > 0


def test_forex_pip_sizes_follow_quote_convention() -> None:
    for instrument in catalog.search(category=Category.FOREX):
        if instrument.symbol.endswith("/JPY") or instrument.symbol == "USD/HUF":
            assert instrument.pip_size == 0.01, instrument.symbol
        else:
            assert instrument.pip_size == 0.0001, instrument.symbol


def test_stocks_quote_in_cents() -> None:
    stocks = catalog.search(category="Stocks")
    assert stocks
    assert all(stock.pip_size == 0.01 for stock in stocks)


def test_search_by_term_and_category() -> None:
    jpy = catalog.search("jpy")
    assert {i.symbol for i in jpy} >= {"USD/JPY", "EUR/JPY", "GBP/JPY"}
    assert all(i.category is Category.FOREX for i in jpy)

    # Name matches count too: "Goldman Sachs" contains "gold".
    gold = catalog.search("gold", "All")
    assert [i.symbol for i in gold] == ["XAU/USD", "GS"]
    assert [i.symbol for i in catalog.search("xau")] == ["XAU/USD"]

    assert catalog.search("apple", Category.CRYPTO) == []
    assert len(catalog.search()) == len(catalog.CATALOG)


def test_search_rejects_unknown_category() -> None:
    with pytest.raises(ValueError):
        catalog.search("", "Bonds")


def test_categories_in_catalog_order() -> None:
    assert catalog.categories() == [
        Category.FOREX,
        Category.COMMODITIES,
        Category.STOCKS,
        Category.INDICES,
        Category.CRYPTO,
    ]


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        catalog.CATALOG["NEW"] = catalog.CATALOG["EUR/USD"]  # type: ignore[index]


def test_catalog_rejects_duplicates_and_bad_constants() -> None:
    eurusd = catalog.get_strict("EUR/USD")
    with pytest.raises(ValueError):
        catalog.InstrumentCatalog([eurusd, eurusd])
    broken = Instrument(
        symbol="BAD",
        name="Bad",
        category=Category.FOREX,
        pip_value=10,
        pip_size=0,
        contract_size=1,
    )
    with pytest.raises(ValueError):
        catalog.InstrumentCatalog([broken])


def test_module_and_catalog_strict_access_agree() -> None:
    assert catalog.CATALOG.get("DOGE/USD") is None
    with pytest.raises(catalog.UnknownInstrumentError):
        catalog.CATALOG.get_strict("DOGE/USD")
    assert catalog.get_strict("AAPL") is catalog.CATALOG.get_strict("AAPL")
