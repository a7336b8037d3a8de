"""
Currency and Money Module

Handles ISO 4217 currency codes and the Money value type used by accounts
and their operation history. NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from dataclasses import dataclass
from typing import Union
from enum import Enum
import re

# Set global decimal context for financial precision
getcontext().prec = 28


class Currency(Enum):
    """ISO 4217 Currency Codes with minor-unit precision"""
    AED = ("AED", 2)
    AFN = ("AFN", 2)
    ALL = ("ALL", 2)
    AMD = ("AMD", 2)
    ANG = ("ANG", 2)
    AOA = ("AOA", 2)
    ARS = ("ARS", 2)
    AUD = ("AUD", 2)
    AWG = ("AWG", 2)
    AZN = ("AZN", 2)
    BAM = ("BAM", 2)
    BBD = ("BBD", 2)
    BDT = ("BDT", 2)
    BGN = ("BGN", 2)
    BHD = ("BHD", 3)
    BIF = ("BIF", 0)
    BMD = ("BMD", 2)
    BND = ("BND", 2)
    BOB = ("BOB", 2)
    BRL = ("BRL", 2)
    BSD = ("BSD", 2)
    BTN = ("BTN", 2)
    BWP = ("BWP", 2)
    BYN = ("BYN", 2)
    BZD = ("BZD", 2)
    CAD = ("CAD", 2)
    CDF = ("CDF", 2)
    CHF = ("CHF", 2)
    CLP = ("CLP", 0)
    CNY = ("CNY", 2)
    COP = ("COP", 2)
    CRC = ("CRC", 2)
    CUP = ("CUP", 2)
    CVE = ("CVE", 2)
    CZK = ("CZK", 2)
    DJF = ("DJF", 0)
    DKK = ("DKK", 2)
    DOP = ("DOP", 2)
    DZD = ("DZD", 2)
    EGP = ("EGP", 2)
    ERN = ("ERN", 2)
    ETB = ("ETB", 2)
    EUR = ("EUR", 2)
    FJD = ("FJD", 2)
    FKP = ("FKP", 2)
    GBP = ("GBP", 2)
    GEL = ("GEL", 2)
    GHS = ("GHS", 2)
    GIP = ("GIP", 2)
    GMD = ("GMD", 2)
    GNF = ("GNF", 0)
    GTQ = ("GTQ", 2)
    GYD = ("GYD", 2)
    HKD = ("HKD", 2)
    HNL = ("HNL", 2)
    HTG = ("HTG", 2)
    HUF = ("HUF", 2)
    IDR = ("IDR", 2)
    ILS = ("ILS", 2)
    INR = ("INR", 2)
    IQD = ("IQD", 3)
    IRR = ("IRR", 2)
    ISK = ("ISK", 0)
    JMD = ("JMD", 2)
    JOD = ("JOD", 3)
    JPY = ("JPY", 0)
    KES = ("KES", 2)
    KGS = ("KGS", 2)
    KHR = ("KHR", 2)
    KMF = ("KMF", 0)
    KPW = ("KPW", 2)
    KRW = ("KRW", 0)
    KWD = ("KWD", 3)
    KYD = ("KYD", 2)
    KZT = ("KZT", 2)
    LAK = ("LAK", 2)
    LBP = ("LBP", 2)
    LKR = ("LKR", 2)
    LRD = ("LRD", 2)
    LSL = ("LSL", 2)
    LYD = ("LYD", 3)
    MAD = ("MAD", 2)
    MDL = ("MDL", 2)
    MGA = ("MGA", 2)
    MKD = ("MKD", 2)
    MMK = ("MMK", 2)
    MNT = ("MNT", 2)
    MOP = ("MOP", 2)
    MRU = ("MRU", 2)
    MUR = ("MUR", 2)
    MVR = ("MVR", 2)
    MWK = ("MWK", 2)
    MXN = ("MXN", 2)
    MYR = ("MYR", 2)
    MZN = ("MZN", 2)
    NAD = ("NAD", 2)
    NGN = ("NGN", 2)
    NIO = ("NIO", 2)
    NOK = ("NOK", 2)
    NPR = ("NPR", 2)
    NZD = ("NZD", 2)
    OMR = ("OMR", 3)
    PAB = ("PAB", 2)
    PEN = ("PEN", 2)
    PGK = ("PGK", 2)
    PHP = ("PHP", 2)
    PKR = ("PKR", 2)
    PLN = ("PLN", 2)
    PYG = ("PYG", 0)
    QAR = ("QAR", 2)
    RON = ("RON", 2)
    RSD = ("RSD", 2)
    RUB = ("RUB", 2)
    RWF = ("RWF", 0)
    SAR = ("SAR", 2)
    SBD = ("SBD", 2)
    SCR = ("SCR", 2)
    SDG = ("SDG", 2)
    SEK = ("SEK", 2)
    SGD = ("SGD", 2)
    SHP = ("SHP", 2)
    SLE = ("SLE", 2)
    SOS = ("SOS", 2)
    SRD = ("SRD", 2)
    SSP = ("SSP", 2)
    STN = ("STN", 2)
    SYP = ("SYP", 2)
    SZL = ("SZL", 2)
    THB = ("THB", 2)
    TJS = ("TJS", 2)
    TMT = ("TMT", 2)
    TND = ("TND", 3)
    TOP = ("TOP", 2)
    TRY = ("TRY", 2)
    TTD = ("TTD", 2)
    TWD = ("TWD", 2)
    TZS = ("TZS", 2)
    UAH = ("UAH", 2)
    UGX = ("UGX", 0)
    USD = ("USD", 2)
    UYU = ("UYU", 2)
    UZS = ("UZS", 2)
    VES = ("VES", 2)
    VND = ("VND", 0)
    VUV = ("VUV", 0)
    WST = ("WST", 2)
    XAF = ("XAF", 0)
    XCD = ("XCD", 2)
    XOF = ("XOF", 0)
    XPF = ("XPF", 0)
    YER = ("YER", 2)
    ZAR = ("ZAR", 2)
    ZMW = ("ZMW", 2)
    ZWL = ("ZWL", 2)

    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Resolve a currency from its ISO code, case-insensitively"""
        if not isinstance(code, str) or not code.strip():
            raise ValueError("Currency code must be a non-empty string")
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown currency code: {code!r}") from None


@dataclass(frozen=True)
class Money:
    """
    Immutable money value: an amount and its currency.

    The amount keeps full Decimal precision and carries no sign restriction;
    sign rules belong to the operations that use it.
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        if not isinstance(self.currency, Currency):
            raise ValueError("Money.currency must be a Currency")
        if isinstance(self.amount, bool):
            raise TypeError("Money.amount must be a number")
        if not isinstance(self.amount, Decimal):
            # Go through str() so floats keep their printed value
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValueError(f"Invalid money amount: {self.amount!r}") from None
        if not self.amount.is_finite():
            raise ValueError(f"Money amount must be finite, got {self.amount}")

    @classmethod
    def of(cls, amount: Union[Decimal, int, str], currency: Union[Currency, str]) -> 'Money':
        """Build Money from a loose amount and a Currency or currency code"""
        if isinstance(currency, str):
            currency = Currency.from_code(currency)
        if isinstance(amount, str):
            amount = decimal_from_string(amount)
        return cls(amount, currency)

    def add(self, other: 'Money') -> 'Money':
        """Return a new Money with other's amount added. Currency is not checked."""
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        """Return a new Money with other's amount removed. Currency is not checked."""
        return Money(self.amount - other.amount, self.currency)

    def rounded(self) -> 'Money':
        """Round to the currency's minor unit"""
        return Money(validate_decimal_precision(self.amount, self.currency), self.currency)

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.amount == Decimal('0')

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.amount < Decimal('0')

    def to_string(self) -> str:
        """Format for display, e.g. ``200 EUR``"""
        return f"{self.amount} {self.currency.code}"

    def __str__(self) -> str:
        return self.to_string()


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Remove currency symbols and whitespace
    clean_value = re.sub(r'[^\d.,\-+]', '', value.strip())

    # Handle comma as decimal separator (European format)
    if ',' in clean_value and '.' in clean_value:
        # Both present - the last one is the decimal separator
        if clean_value.rfind(',') > clean_value.rfind('.'):
            clean_value = clean_value.replace('.', '').replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')
    elif clean_value.count(',') > 1:
        clean_value = clean_value.replace(',', '')
    elif ',' in clean_value:
        parts = clean_value.split(',')
        if len(parts[1]) <= 2:
            clean_value = clean_value.replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal") from None


def validate_decimal_precision(value: Decimal, currency: Currency) -> Decimal:
    """Round a decimal to the currency's precision"""
    return value.quantize(
        Decimal('0.1') ** currency.precision,
        rounding=ROUND_HALF_UP
    )
