"""
Pydantic schemas for exporting and importing account history
"""

from datetime import datetime
from typing import List, TYPE_CHECKING
from pydantic import BaseModel, Field

from .currency import Money, Currency
from .operations import Operation, OperationType

if TYPE_CHECKING:
    from .accounts import Account


class MoneyModel(BaseModel):
    amount: str = Field(..., description="Decimal amount as string")
    currency: str = Field(..., description="Currency code (USD, EUR, etc.)")

    def to_money(self) -> Money:
        return Money(self.amount, Currency.from_code(self.currency))

    @classmethod
    def from_money(cls, money: Money) -> 'MoneyModel':
        return cls(amount=str(money.amount), currency=money.currency.code)


class OperationModel(BaseModel):
    timestamp: datetime
    money: MoneyModel
    type: str = Field(..., description="DEPOSIT or WITHDRAW")
    balance: MoneyModel = Field(..., description="Balance after the operation")

    def to_operation(self) -> Operation:
        return Operation(
            timestamp=self.timestamp,
            money=self.money.to_money(),
            type=OperationType(self.type),
            balance=self.balance.to_money(),
        )

    @classmethod
    def from_operation(cls, operation: Operation) -> 'OperationModel':
        return cls(
            timestamp=operation.timestamp,
            money=MoneyModel.from_money(operation.money),
            type=operation.type.value,
            balance=MoneyModel.from_money(operation.balance),
        )


class AccountSnapshot(BaseModel):
    """Balance plus full operation history"""
    balance: MoneyModel
    operations: List[OperationModel] = Field(default_factory=list)

    @classmethod
    def from_account(cls, account: 'Account') -> 'AccountSnapshot':
        return cls(
            balance=MoneyModel.from_money(account.balance),
            operations=[OperationModel.from_operation(op) for op in account.operations],
        )

    def to_account(self, **kwargs) -> 'Account':
        from .accounts import Account

        return Account.from_history(
            self.balance.to_money(),
            [op.to_operation() for op in self.operations],
            **kwargs
        )
