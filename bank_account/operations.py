"""
Operation Records Module

Immutable audit records of deposits and withdrawals. Each record keeps the
amount moved and a snapshot of the balance right after the operation, and
renders to (and parses from) a single display line.
"""

from datetime import datetime, timezone
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict
from enum import Enum
import re

from .currency import Money, Currency

DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LINE_PATTERN = re.compile(
    r"^Operation\[date=(?P<date>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}), "
    r"amount of operation=(?P<amount>\S+) (?P<currency>[A-Z]{3}), "
    r"type of operation=(?P<type>[A-Z]+), "
    r"balance after operation=(?P<balance>\S+) (?P<balance_currency>[A-Z]{3})\]$"
)


class OperationType(Enum):
    """Kinds of balance movement"""
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"

    def __str__(self) -> str:
        return self.value


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Operation:
    """
    One deposit or withdrawal.

    ``money`` is the amount moved and ``balance`` the account balance after
    the operation was applied.
    """
    timestamp: datetime
    money: Money
    type: OperationType
    balance: Money

    def __post_init__(self):
        if not isinstance(self.timestamp, datetime):
            raise ValueError("Operation.timestamp must be a datetime")
        if not isinstance(self.money, Money) or not isinstance(self.balance, Money):
            raise ValueError("Operation.money and Operation.balance must be Money")
        if not isinstance(self.type, OperationType):
            raise ValueError("Operation.type must be an OperationType")
        object.__setattr__(self, 'timestamp', _as_utc(self.timestamp))

    @property
    def is_deposit(self) -> bool:
        return self.type == OperationType.DEPOSIT

    @property
    def is_withdrawal(self) -> bool:
        return self.type == OperationType.WITHDRAW

    def __str__(self) -> str:
        return (
            "Operation["
            f"date={self.timestamp.strftime(DISPLAY_DATE_FORMAT)}"
            f", amount of operation={self.money.to_string()}"
            f", type of operation={self.type.value}"
            f", balance after operation={self.balance.to_string()}"
            "]"
        )

    @classmethod
    def parse(cls, line: str) -> 'Operation':
        """Rebuild an Operation from its display line"""
        return parse_operation_line(line)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary with string amounts"""
        return {
            'timestamp': self.timestamp.isoformat(),
            'amount': str(self.money.amount),
            'currency': self.money.currency.code,
            'type': self.type.value,
            'balance': str(self.balance.amount),
            'balance_currency': self.balance.currency.code,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Operation':
        """Create Operation from dictionary produced by ``to_dict``"""
        timestamp = data['timestamp']
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        return cls(
            timestamp=timestamp,
            money=Money(data['amount'], Currency.from_code(data['currency'])),
            type=OperationType(data['type']),
            balance=Money(data['balance'], Currency.from_code(data['balance_currency'])),
        )


def parse_operation_line(line: str) -> Operation:
    """
    Parse a line rendered by ``str(operation)``.

    The display format has second precision and no zone, so the returned
    timestamp is UTC with microseconds dropped.

    Raises:
        ValueError: If the line is not an operation display line
    """
    match = _LINE_PATTERN.match(line.strip())
    if not match:
        raise ValueError(f"Not an operation line: {line!r}")

    try:
        amount = Decimal(match['amount'])
        balance = Decimal(match['balance'])
    except InvalidOperation:
        raise ValueError(f"Invalid amount in operation line: {line!r}") from None

    try:
        op_type = OperationType(match['type'])
    except ValueError:
        raise ValueError(f"Unknown operation type: {match['type']!r}") from None

    return Operation(
        timestamp=datetime.strptime(match['date'], DISPLAY_DATE_FORMAT).replace(tzinfo=timezone.utc),
        money=Money(amount, Currency.from_code(match['currency'])),
        type=op_type,
        balance=Money(balance, Currency.from_code(match['balance_currency'])),
    )
