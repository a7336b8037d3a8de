"""
Bank Account

A single-currency bank account with Decimal money, deposit and withdrawal
rules, and an in-memory audit trail of every operation.
"""

from .currency import Currency, Money
from .accounts import Account
from .operations import Operation, OperationType
from .exceptions import (
    AccountOperationError,
    AmountToWithdrawHigherThanBalance,
    DifferentCurrencyOperation,
    NegativeDepositAmount,
)

__version__ = "1.0.0"
