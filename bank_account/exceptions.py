"""
Account operation errors.

Each error carries a fixed message.
"""


class AccountOperationError(Exception):
    """Base class for rejected deposits and withdrawals"""

    message = "Account operation rejected"

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))


class NegativeDepositAmount(AccountOperationError):
    """Raised when a deposit amount is below zero"""

    message = "Could not add negative amount to balance"


class DifferentCurrencyOperation(AccountOperationError):
    """Raised when an operation's currency differs from the account currency"""

    message = "Operation currency should be the same of the account"


class AmountToWithdrawHigherThanBalance(AccountOperationError):
    """Raised when a withdrawal exceeds the current balance"""

    message = "Amount to withdraw is higher than current balance"
