"""
Тесты Conversion Engine

Проверяет:
1. Тождественную конверсию (Q == B) при любом содержимом рынка
2. Прямой и обратный режимы (±1)
3. Кросс-курсы через pivot-валюту (±2)
4. Сохранение представления чисел (Fraction, Decimal)
5. Детерминированные ошибки RateNotFound без переключения режима
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from currency_units import ExchangeMarket, RateNotFound, ResolutionMode, UnsupportedDimension
from currency_units.conversion import convert, find_pivot, pivot_candidates, resolve_rate
from currency_units.core.domain import generate_market


class TestIdentity:
    """Тесты тождественной конверсии"""

    def test_same_unit_returns_input(self, u) -> None:
        """Q == B: величина возвращается без изменений даже на пустом рынке"""
        amount = 5 * u("EUR")
        assert convert(amount, u("EUR"), ExchangeMarket()) is amount

    def test_same_currency_ignores_missing_rates(self, u, market_27nov2020) -> None:
        """Рынок без пары (JPY,JPY) не мешает тождественной конверсии"""
        amount = 3.5 * u("JPY")
        result = convert(amount, u("JPY"), market_27nov2020, mode=-2)
        assert result.magnitude == 3.5
        assert result.unit == u("JPY")

    def test_same_currency_rescales_prefix(self, u) -> None:
        """Та же валюта с другим префиксом: только пересчёт масштаба"""
        result = convert(2 * u("kEUR"), u("EUR"), ExchangeMarket())
        assert result.magnitude == 2000
        assert result.unit == u("EUR")


class TestDirectModes:
    """Тесты режимов 1 и -1"""

    def test_direct_rate(self, u, market_27nov2020) -> None:
        """1 EUR → USD по прямому курсу"""
        result = convert(1 * u("EUR"), u("USD"), market_27nov2020)
        assert result.magnitude == 1.19536
        assert result.unit == u("USD")

    def test_direct_inverse_rate(self, u, market_27nov2020) -> None:
        """1 USD → EUR обращением курса (EUR,USD)"""
        result = convert(1 * u("USD"), u("EUR"), market_27nov2020, mode=-1)
        assert result.magnitude == 1 / 1.19536
        assert result.magnitude == pytest.approx(0.8365680631776201, rel=1e-15)

    def test_direct_uses_stored_reverse_quote(self, u, market_27nov2020) -> None:
        """mode=1 для USD → EUR берёт (USD,EUR), а не обращение (EUR,USD)"""
        result = convert(1 * u("USD"), u("EUR"), market_27nov2020)
        assert result.magnitude == 0.836570

    def test_duality_without_reverse_key(self, u) -> None:
        """Без ключа (B,A) обратный режим даёт 1/r"""
        market = generate_market((("GBP", "CHF"), 1.25))
        forward = convert(1 * u("GBP"), u("CHF"), market)
        backward = convert(1 * u("CHF"), u("GBP"), market, mode=-1)
        assert forward.magnitude == 1.25
        assert backward.magnitude == pytest.approx(0.8)

    def test_magnitude_scales_linearly(self, u, market_27nov2020) -> None:
        result = convert(250 * u("EUR"), u("GBP"), market_27nov2020)
        assert result.magnitude == pytest.approx(250 * 1.11268)

    def test_prefixed_units(self, u, fixer_market) -> None:
        """2 MEUR → kBRL"""
        result = convert(2 * u("MEUR"), u("kBRL"), fixer_market)
        assert result.unit == u("kBRL")
        assert result.magnitude == pytest.approx(13371.196, rel=1e-12)

    def test_fixer_direct(self, u, fixer_market) -> None:
        result = convert(1 * u("EUR"), u("BRL"), fixer_market)
        assert result.magnitude == 6.685598

    def test_fixer_inverse(self, u, fixer_market) -> None:
        result = convert(1 * u("BRL"), u("EUR"), fixer_market, mode=-1)
        assert result.magnitude == pytest.approx(0.149575251159283, rel=1e-12)

    def test_currencylayer(self, u, currencylayer_market) -> None:
        assert convert(1 * u("USD"), u("CAD"), currencylayer_market).magnitude == 1.30045
        result = convert(2 * u("hUSD"), u("BRL"), currencylayer_market)
        assert result.magnitude == pytest.approx(1064.8188, rel=1e-12)


class TestCrossModes:
    """Тесты кросс-курсов (режимы 2 и -2)"""

    def test_cross_via_pivot(self, u, market_27nov2020) -> None:
        """EUR → CAD через USD: r(EUR,USD) * r(USD,CAD)"""
        result = convert(1 * u("EUR"), u("CAD"), market_27nov2020, mode=2)
        assert result.magnitude == 1.19536 * 1.29849
        assert result.magnitude == pytest.approx(1.5521630064, rel=1e-12)

    def test_cross_inverse_via_pivot(self, u, market_27nov2020) -> None:
        """CAD → EUR через обратные ноги (USD,CAD) и (EUR,USD)"""
        result = convert(1 * u("CAD"), u("EUR"), market_27nov2020, mode=-2)
        assert result.magnitude == 1 / (1.29849 * 1.19536)
        assert result.magnitude == 0.6442622301116068

    def test_cross_inverse_rational_exact(self, u) -> None:
        """mode=-2 на точных курсах даёт точную дробь"""
        market = generate_market(
            {("USD", "CAD"): Fraction(129849, 100000), ("EUR", "USD"): Fraction(119536, 100000)}
        )
        result = convert(1 * u("CAD"), u("EUR"), market, mode=-2)
        assert result.magnitude == Fraction(10**10, 129849 * 119536)

    def test_cross_inverse_decimal(self, u) -> None:
        market = generate_market(
            {("USD", "CAD"): Decimal("1.29849"), ("EUR", "USD"): Decimal("1.19536")}
        )
        result = convert(1 * u("CAD"), u("EUR"), market, mode=-2)
        assert isinstance(result.magnitude, Decimal)
        assert result.magnitude == Decimal(1) / (Decimal("1.29849") * Decimal("1.19536"))

    def test_cross_scaled_amount(self, u, market_27nov2020) -> None:
        direct_legs = convert(1000 * u("CAD"), u("BRL"), market_27nov2020, mode=2)
        inverse_legs = convert(1000 * u("CAD"), u("BRL"), market_27nov2020, mode=-2)
        assert direct_legs.magnitude == pytest.approx(4111.674271249999, rel=1e-12)
        assert inverse_legs.magnitude == pytest.approx(4111.6768608248185, rel=1e-12)

    def test_cross_inverse_ignores_direct_legs(self, u, market_27nov2020) -> None:
        """mode=-2 всегда использует обратные ноги, даже если прямые есть"""
        a = convert(1000 * u("CAD"), u("BRL"), market_27nov2020, mode=2)
        b = convert(1000 * u("CAD"), u("BRL"), market_27nov2020, mode=-2)
        assert a.magnitude != b.magnitude

    def test_composition_formula(self, u) -> None:
        market = generate_market({("NOK", "SEK"): 1.02, ("SEK", "DKK"): 0.65})
        result = convert(40 * u("NOK"), u("DKK"), market, mode=2)
        assert result.magnitude == pytest.approx(40 * 1.02 * 0.65)


class TestPivotSelection:
    """Тесты выбора pivot-валюты"""

    @pytest.fixture
    def two_pivot_market(self):
        return generate_market(
            {
                ("EUR", "USD"): 1.2,
                ("USD", "JPY"): 104.0,
                ("EUR", "GBP"): 0.9,
                ("GBP", "JPY"): 138.0,
            }
        )

    def test_candidates_sorted(self, two_pivot_market) -> None:
        assert pivot_candidates(two_pivot_market, "EUR", "JPY") == ["GBP", "USD"]

    def test_first_candidate_wins(self, u, two_pivot_market) -> None:
        """Из нескольких pivot выбирается первый по порядку кодов"""
        assert find_pivot(two_pivot_market, "EUR", "JPY") == "GBP"
        result = convert(1 * u("EUR"), u("JPY"), two_pivot_market, mode=2)
        assert result.magnitude == pytest.approx(0.9 * 138.0)

    def test_inverse_candidates(self, two_pivot_market) -> None:
        assert pivot_candidates(two_pivot_market, "JPY", "EUR", inverse=True) == ["GBP", "USD"]

    def test_no_pivot(self, two_pivot_market) -> None:
        assert find_pivot(two_pivot_market, "JPY", "EUR") is None

    def test_resolution_reports_legs(self, two_pivot_market) -> None:
        resolution = resolve_rate(two_pivot_market, "EUR", "JPY", mode=2)
        assert resolution.pivot == "GBP"
        assert [leg.as_tuple() for leg in resolution.legs] == [("EUR", "GBP"), ("GBP", "JPY")]
        assert resolution.mode == ResolutionMode.CROSS


class TestNumericFidelity:
    """Тесты сохранения представления чисел"""

    def test_rational_rate_stays_rational(self, u, rational_market) -> None:
        result = convert(3 * u("EUR"), u("USD"), rational_market)
        assert isinstance(result.magnitude, Fraction)
        assert result.magnitude == Fraction(3 * 119536, 100000)

    def test_rational_inverse_stays_rational(self, u, rational_market) -> None:
        result = convert(1 * u("USD"), u("EUR"), rational_market, mode=-1)
        assert result.magnitude == Fraction(100000, 119536)

    def test_decimal_rate_stays_decimal(self, u, decimal_market) -> None:
        result = convert(2 * u("EUR"), u("USD"), decimal_market)
        assert isinstance(result.magnitude, Decimal)
        assert result.magnitude == Decimal("2.39072")

    def test_decimal_inverse_stays_decimal(self, u, decimal_market) -> None:
        result = convert(1 * u("USD"), u("EUR"), decimal_market, mode=-1)
        assert isinstance(result.magnitude, Decimal)

    def test_float_magnitude_forces_float(self, u, rational_market) -> None:
        """float-величина продвигает результат к float"""
        result = convert(2.0 * u("EUR"), u("USD"), rational_market)
        assert isinstance(result.magnitude, float)
        assert result.magnitude == pytest.approx(2.39072)

    def test_decimal_magnitude_with_rational_rate(self, u, rational_market) -> None:
        """Decimal + Fraction → Decimal"""
        result = convert(Decimal("2") * u("EUR"), u("USD"), rational_market)
        assert isinstance(result.magnitude, Decimal)
        assert result.magnitude == Decimal("2.39072")

    def test_rational_with_prefix(self, u, rational_market) -> None:
        result = convert(1 * u("kEUR"), u("USD"), rational_market)
        assert result.magnitude == Fraction(119536, 100)


class TestFailures:
    """Тесты ошибок"""

    def test_direct_missing_key(self, u, market_27nov2020) -> None:
        """mode=1 без (Q,B): RateNotFound, без попытки обращения"""
        with pytest.raises(RateNotFound) as exc_info:
            convert(1 * u("CAD"), u("EUR"), market_27nov2020)
        assert exc_info.value.pair == ("CAD", "EUR")
        assert exc_info.value.mode == 1
        assert exc_info.value.missing == (("CAD", "EUR"),)

    def test_direct_never_inverts(self, u) -> None:
        """Рынок содержит только (B,Q): mode=1 всё равно падает"""
        market = generate_market((("USD", "EUR"), 0.83657))
        with pytest.raises(RateNotFound):
            convert(1 * u("EUR"), u("USD"), market)

    def test_fixer_direct_missing(self, u, fixer_market) -> None:
        with pytest.raises(RateNotFound):
            convert(1 * u("BRL"), u("EUR"), fixer_market)

    def test_fixer_cross_missing(self, u, fixer_market) -> None:
        with pytest.raises(RateNotFound, match="pivot"):
            convert(1 * u("BRL"), u("CAD"), fixer_market, mode=2)

    def test_inverse_missing(self, u, market_27nov2020) -> None:
        with pytest.raises(RateNotFound) as exc_info:
            convert(1 * u("CAD"), u("EUR"), market_27nov2020, mode=-1)
        assert exc_info.value.missing == (("EUR", "CAD"),)

    def test_no_pivot_legs(self, u) -> None:
        market = generate_market({("EUR", "USD"): 1.19536, ("USD", "GBP"): 0.75})
        with pytest.raises(RateNotFound):
            convert(1 * u("CAD"), u("BRL"), market, mode=2)
        with pytest.raises(RateNotFound):
            convert(1 * u("CAD"), u("BRL"), market, mode=-2)

    def test_cross_reports_missing_legs(self, u) -> None:
        """Для ±2 ошибка перечисляет отсутствующие ноги кандидатов"""
        market = generate_market({("CAD", "USD"): 0.770125, ("EUR", "USD"): 1.19536})
        with pytest.raises(RateNotFound, match="no pivot currency") as exc_info:
            convert(1 * u("CAD"), u("BRL"), market, mode=2)
        assert exc_info.value.missing == (("CAD", "EUR"), ("EUR", "BRL"), ("USD", "BRL"))
        assert "(USD,BRL)" in str(exc_info.value)

    def test_cross_inverse_reports_missing_legs(self, u) -> None:
        market = generate_market({("USD", "CAD"): 1.29849})
        with pytest.raises(RateNotFound) as exc_info:
            convert(1 * u("CAD"), u("EUR"), market, mode=-2)
        assert exc_info.value.missing == (("EUR", "USD"),)
        assert exc_info.value.mode == -2

    def test_rate_not_found_is_value_error(self, u) -> None:
        with pytest.raises(ValueError):
            convert(1 * u("CAD"), u("BRL"), ExchangeMarket())

    def test_invalid_mode(self, u, market_27nov2020) -> None:
        with pytest.raises(ValueError, match="mode must be one of"):
            convert(1 * u("EUR"), u("USD"), market_27nov2020, mode=3)

    def test_non_currency_unit(self, u, market_27nov2020) -> None:
        with pytest.raises(UnsupportedDimension):
            convert(1 * u("km"), u("m"), market_27nov2020)
