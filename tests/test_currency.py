"""
Test suite for currency module

Tests Money value semantics, Decimal handling and currency lookup.
"""

import pytest
from decimal import Decimal

from bank_account.currency import (
    Money, Currency, decimal_from_string, validate_decimal_precision
)


class TestCurrency:
    """Test Currency enum"""

    def test_currency_attributes(self):
        """Test code and precision of currencies"""
        assert Currency.EUR.code == "EUR"
        assert Currency.EUR.precision == 2
        assert Currency.JPY.precision == 0
        assert str(Currency.USD) == "USD"

    def test_from_code(self):
        """Test resolving currencies from ISO codes"""
        assert Currency.from_code("EUR") is Currency.EUR
        assert Currency.from_code(" usd ") is Currency.USD

    def test_from_code_unknown(self):
        """Test unknown or empty codes are rejected"""
        with pytest.raises(ValueError, match="Unknown currency code"):
            Currency.from_code("XYZ")

        with pytest.raises(ValueError):
            Currency.from_code("  ")

    def test_minor_currencies(self):
        """Test ISO codes beyond the major currencies resolve"""
        assert Currency.from_code("SEK").precision == 2
        assert Currency.from_code("nok") is Currency.NOK
        assert Currency.from_code("AUD").code == "AUD"
        assert Currency.from_code("KWD").precision == 3
        assert Currency.from_code("KRW").precision == 0

        money = Money.of("10", "SEK")
        assert money.amount == Decimal('10')
        assert money.to_string() == "10 SEK"


class TestMoney:
    """Test Money class operations"""

    def test_money_creation(self):
        """Test Money keeps full precision"""
        money = Money(Decimal('100.555'), Currency.USD)
        assert money.amount == Decimal('100.555')
        assert money.currency == Currency.USD

    def test_money_converts_non_decimal_amounts(self):
        """Test int and float amounts become Decimal"""
        assert Money(200, Currency.EUR).amount == Decimal('200')
        assert Money(0.1, Currency.EUR).amount == Decimal('0.1')

    def test_money_rejects_bad_currency(self):
        """Test a plain string is not accepted as currency"""
        with pytest.raises(ValueError):
            Money(Decimal('1'), "EUR")

    def test_money_rejects_non_finite(self):
        """Test infinite and NaN amounts are rejected"""
        for value in ('Infinity', '-Infinity', 'NaN', 'sNaN'):
            with pytest.raises(ValueError, match="finite"):
                Money(Decimal(value), Currency.EUR)

        with pytest.raises(ValueError, match="finite"):
            Money(float('inf'), Currency.EUR)

    def test_money_rejects_invalid_amount(self):
        """Test unparseable amounts raise ValueError"""
        with pytest.raises(ValueError, match="Invalid money amount"):
            Money("abc", Currency.EUR)

    def test_money_of(self):
        """Test the loose constructor"""
        money = Money.of("1 000,50", "eur")
        assert money == Money(Decimal('1000.50'), Currency.EUR)

        assert Money.of(200, Currency.USD).amount == Decimal('200')

    def test_money_is_immutable(self):
        """Test Money cannot be changed after creation"""
        money = Money(Decimal('10'), Currency.EUR)
        with pytest.raises(AttributeError):
            money.amount = Decimal('20')

    def test_add_and_subtract(self):
        """Test add and subtract return new values"""
        balance = Money(Decimal('1000'), Currency.EUR)
        amount = Money(Decimal('200'), Currency.EUR)

        assert balance.add(amount) == Money(Decimal('1200'), Currency.EUR)
        assert balance.subtract(amount) == Money(Decimal('800'), Currency.EUR)
        # Original untouched
        assert balance.amount == Decimal('1000')

    def test_add_does_not_check_currency(self):
        """Test arithmetic keeps the receiver's currency"""
        eur = Money(Decimal('1000'), Currency.EUR)
        usd = Money(Decimal('200'), Currency.USD)

        result = eur.subtract(usd)
        assert result.amount == Decimal('800')
        assert result.currency == Currency.EUR

    def test_amount_may_be_negative(self):
        """Test Money itself carries no sign restriction"""
        money = Money(Decimal('-50.25'), Currency.USD)
        assert money.is_negative()
        assert not money.is_positive()
        assert not money.is_zero()

    def test_money_state_checks(self):
        """Test Money state checking methods"""
        assert Money(Decimal('0.00'), Currency.USD).is_zero()
        assert Money(Decimal('100.50'), Currency.USD).is_positive()

    def test_rounded(self):
        """Test rounding to the currency minor unit"""
        assert Money(Decimal('100.555'), Currency.USD).rounded().amount == Decimal('100.56')
        assert Money(Decimal('100.5'), Currency.JPY).rounded().amount == Decimal('101')

    def test_to_string(self):
        """Test display format"""
        assert Money(Decimal(200), Currency.EUR).to_string() == "200 EUR"
        assert str(Money(Decimal('12.50'), Currency.USD)) == "12.50 USD"


class TestDecimalHelpers:
    """Test decimal parsing and precision helpers"""

    def test_decimal_from_string(self):
        """Test common number formats"""
        assert decimal_from_string("1234.56") == Decimal('1234.56')
        assert decimal_from_string("1,234.56") == Decimal('1234.56')
        assert decimal_from_string("12,50") == Decimal('12.50')
        assert decimal_from_string("1,234") == Decimal('1234')
        assert decimal_from_string("-200") == Decimal('-200')
        assert decimal_from_string("€ 99.99") == Decimal('99.99')

    def test_decimal_from_string_european_thousands(self):
        """Test the last separator is the decimal one when both appear"""
        assert decimal_from_string("1.234,56") == Decimal('1234.56')
        assert decimal_from_string("1.234.567,89") == Decimal('1234567.89')
        assert decimal_from_string("1,234,567.89") == Decimal('1234567.89')
        assert decimal_from_string("1,234,567") == Decimal('1234567')

    def test_decimal_from_string_invalid(self):
        """Test garbage input raises ValueError"""
        with pytest.raises(ValueError):
            decimal_from_string("")

        with pytest.raises(ValueError):
            decimal_from_string("abc")

    def test_validate_decimal_precision(self):
        """Test rounding uses ROUND_HALF_UP"""
        assert validate_decimal_precision(Decimal('2.345'), Currency.EUR) == Decimal('2.35')
        assert validate_decimal_precision(Decimal('2.5'), Currency.JPY) == Decimal('3')
