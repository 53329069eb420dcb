"""Custom exception hierarchy for bank-ledger."""


class BankLedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class EntityNotFoundError(BankLedgerError):
    """Raised when a referenced entity does not exist."""


class ClientNotFoundError(EntityNotFoundError):
    """Raised when no client is registered under the given CPF."""

    def __init__(self, cpf: str) -> None:
        super().__init__(f"Client {cpf} not found")
        self.cpf = cpf


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account is registered under the given number."""

    def __init__(self, number: str) -> None:
        super().__init__(f"Account {number} not found")
        self.number = number


class EntityExistsError(BankLedgerError):
    """Raised when registering an entity whose key is already taken."""


class ClientAlreadyExistsError(EntityExistsError):
    """Raised when a client with the same CPF is already registered."""

    def __init__(self, cpf: str) -> None:
        super().__init__(f"Client {cpf} already registered")
        self.cpf = cpf


class AccountAlreadyExistsError(EntityExistsError):
    """Raised when an account with the same number is already registered."""

    def __init__(self, number: str) -> None:
        super().__init__(f"Account {number} already registered")
        self.number = number


class InvalidClientError(BankLedgerError):
    """Raised when an account is registered without an owner."""

    def __init__(self, message: str = "Account has no owning client") -> None:
        super().__init__(message)


class InvalidEntityStateError(BankLedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class InsufficientBalanceError(InvalidEntityStateError):
    """Raised when a debit requires more than the account balance."""

    def __init__(self, number: str, balance: float) -> None:
        super().__init__(
            f"Insufficient balance in account {number} for debit or transfer "
            f"(balance: {balance:.2f})"
        )
        self.number = number
        self.balance = balance


class InvalidAccountKindError(InvalidEntityStateError):
    """Raised when an operation does not apply to the account's kind."""

    def __init__(self, number: str, kind: str, operation: str) -> None:
        super().__init__(f"Account {number} of kind {kind} does not support {operation}")
        self.number = number
        self.kind = kind
        self.operation = operation


class CapacityExceededError(BankLedgerError):
    """Raised when inserting into a fixed-capacity store that is full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Store is full (capacity: {capacity})")
        self.capacity = capacity


class ConfigurationError(BankLedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(BankLedgerError):
    """Raised when a sink operation fails."""
