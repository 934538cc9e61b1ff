"""
Общие фикстуры: рынки курсов и единицы валют.
"""

from decimal import Decimal
from fractions import Fraction
from pathlib import Path

import pytest

from currency_units import generate_market, load_currencylayer_market, load_fixer_market, parse_unit

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "exchange_markets"


# =============================================================================
# RATE FEEDS
# =============================================================================


@pytest.fixture(scope="session")
def fixer_market():
    """fixer.io, 2020-11-01, база EUR"""
    return load_fixer_market(FIXTURES_DIR / "2020-11-01_fixer.json")


@pytest.fixture(scope="session")
def currencylayer_market():
    """currencylayer, 2020-11-25, источник USD"""
    return load_currencylayer_market(FIXTURES_DIR / "2020-11-25_currencylayer.json")


# =============================================================================
# LITERAL MARKETS
# =============================================================================


@pytest.fixture
def market_27nov2020():
    """Курсы на 27.11.2020 в обоих направлениях"""
    return generate_market(
        [
            (("EUR", "USD"), 1.19536),
            (("USD", "EUR"), 0.836570),
            (("EUR", "GBP"), 1.11268),
            (("GBP", "EUR"), 0.898734),
            (("USD", "CAD"), 1.29849),
            (("CAD", "USD"), 0.770125),
            (("USD", "BRL"), 5.33897),
            (("BRL", "USD"), 0.187302),
        ]
    )


@pytest.fixture
def rational_market():
    return generate_market(
        {
            ("EUR", "USD"): Fraction(119536, 100000),
            ("USD", "EUR"): Fraction(83657, 100000),
        }
    )


@pytest.fixture
def decimal_market():
    return generate_market(
        {
            ("EUR", "USD"): Decimal("1.19536"),
            ("USD", "EUR"): Decimal("0.836570"),
        }
    )


@pytest.fixture
def brlgbp_timeseries():
    """Годовые курсы BRL → GBP, 2011-2020"""
    return {
        "2011-01-01": generate_market((("BRL", "GBP"), 0.38585)),
        "2012-01-01": generate_market((("BRL", "GBP"), 0.34587)),
        "2013-01-01": generate_market((("BRL", "GBP"), 0.29998)),
        "2014-01-01": generate_market((("BRL", "GBP"), 0.25562)),
        "2015-01-02": generate_market((("BRL", "GBP"), 0.24153)),
        "2016-01-03": generate_market((("BRL", "GBP"), 0.17093)),
        "2017-01-02": generate_market((("BRL", "GBP"), 0.24888)),
        "2018-01-02": generate_market((("BRL", "GBP"), 0.22569)),
        "2019-01-04": generate_market((("BRL", "GBP"), 0.21082)),
        "2020-01-04": generate_market((("BRL", "GBP"), 0.18784)),
    }


# =============================================================================
# UNITS
# =============================================================================


@pytest.fixture
def u():
    """Разбор строки единицы в реестре по умолчанию"""
    return parse_unit
