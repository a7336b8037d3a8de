"""
Account Module

A single account holding a balance and the append-only history of the
deposits and withdrawals applied to it.
"""

from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple
import logging
import threading

from .currency import Money, Currency
from .config import BankAccountConfig, get_config
from .display import LineSink, LoggingSink, START_MARKER, END_MARKER
from .exceptions import (
    AccountOperationError,
    AmountToWithdrawHigherThanBalance,
    DifferentCurrencyOperation,
    NegativeDepositAmount,
)
from .logging_config import log_action
from .operations import Operation, OperationType

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Account:
    """
    Bank account with a fixed currency.

    Deposits and withdrawals validate their input, update the balance and
    record an Operation. A rejected call leaves the balance and history
    untouched.
    """

    def __init__(
        self,
        balance: Money,
        operations: Optional[Iterable[Operation]] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        config: Optional[BankAccountConfig] = None
    ):
        if not isinstance(balance, Money):
            raise TypeError("Account balance must be Money")

        self._balance = balance
        self._operations: List[Operation] = list(operations) if operations is not None else []
        self._clock = clock or _utc_now
        self._config = config or get_config()
        self._lock = threading.RLock()

    @classmethod
    def open(cls, balance: Money, **kwargs) -> 'Account':
        """Open an account with an empty history"""
        return cls(balance, **kwargs)

    @classmethod
    def from_history(cls, balance: Money, operations: Iterable[Operation], **kwargs) -> 'Account':
        """
        Rebuild an account from a balance and an existing history.

        Raises:
            ValueError: If a recorded balance is not in the account currency
        """
        operations = list(operations)
        for operation in operations:
            if operation.balance.currency != balance.currency:
                raise ValueError(
                    f"Operation balance in {operation.balance.currency.code} "
                    f"does not match account currency {balance.currency.code}"
                )
        return cls(balance, operations, **kwargs)

    @property
    def balance(self) -> Money:
        return self._balance

    @property
    def currency(self) -> Currency:
        return self._balance.currency

    @property
    def operations(self) -> Tuple[Operation, ...]:
        """History in the order operations were applied"""
        with self._lock:
            return tuple(self._operations)

    def deposit(self, amount: Money) -> Money:
        """
        Add money to the balance.

        Args:
            amount: Money to deposit, in the account currency

        Returns:
            The new balance

        Raises:
            NegativeDepositAmount: If the amount is below zero
            DifferentCurrencyOperation: If the currency differs from the account's
        """
        self._require_money(amount)
        with self._lock:
            try:
                if amount.is_negative():
                    raise NegativeDepositAmount()
                if amount.currency != self._balance.currency:
                    raise DifferentCurrencyOperation()
            except AccountOperationError as e:
                self._log_rejection(OperationType.DEPOSIT, amount, e)
                raise

            return self._apply(OperationType.DEPOSIT, amount, self._balance.add(amount))

    def withdraw(self, amount: Money) -> Money:
        """
        Remove money from the balance.

        The currency is only checked when ``check_withdraw_currency`` is set,
        and then after the balance check.

        Args:
            amount: Money to withdraw

        Returns:
            The new balance

        Raises:
            AmountToWithdrawHigherThanBalance: If the amount exceeds the balance
            DifferentCurrencyOperation: If currency checking is enabled and the
                currency differs from the account's
        """
        self._require_money(amount)
        with self._lock:
            try:
                if self._balance.amount < amount.amount:
                    raise AmountToWithdrawHigherThanBalance()
                if (self._config.check_withdraw_currency
                        and amount.currency != self._balance.currency):
                    raise DifferentCurrencyOperation()
            except AccountOperationError as e:
                self._log_rejection(OperationType.WITHDRAW, amount, e)
                raise

            return self._apply(OperationType.WITHDRAW, amount, self._balance.subtract(amount))

    def statement_lines(self) -> List[str]:
        """Lines emitted by ``display_operations``, start and end markers included"""
        return [START_MARKER] + [str(op) for op in self.operations] + [END_MARKER]

    def display_operations(self, sink: Optional[LineSink] = None) -> None:
        """Emit the operation statement line by line"""
        if sink is None:
            sink = LoggingSink(logging.getLogger(self._config.display_logger_name))
        for line in self.statement_lines():
            sink(line)

    def _apply(self, op_type: OperationType, amount: Money, new_balance: Money) -> Money:
        # Caller holds the lock
        operation = Operation(
            timestamp=self._clock(),
            money=amount,
            type=op_type,
            balance=new_balance,
        )
        self._operations.append(operation)
        self._balance = new_balance

        log_action(
            logger, "debug",
            f"{op_type.value} of {amount.to_string()} applied, balance {new_balance.to_string()}",
            action=op_type.value.lower(),
            resource="account",
            extra={"amount": str(amount.amount), "currency": amount.currency.code,
                   "balance": str(new_balance.amount)}
        )
        return new_balance

    def _log_rejection(self, op_type: OperationType, amount: Money, error: AccountOperationError) -> None:
        log_action(
            logger, "warning",
            f"{op_type.value} of {amount.to_string()} rejected: {error.message}",
            action=op_type.value.lower(),
            resource="account",
            extra={"error": type(error).__name__, "balance": str(self._balance.amount)}
        )

    @staticmethod
    def _require_money(amount) -> None:
        if not isinstance(amount, Money):
            raise TypeError(f"Expected Money, got {type(amount).__name__}")

    def __repr__(self) -> str:
        return f"Account(balance={self._balance.to_string()!r}, operations={len(self._operations)})"
