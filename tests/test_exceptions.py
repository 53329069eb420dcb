"""Tests for custom exception hierarchy."""

from bank_ledger.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    BankLedgerError,
    CapacityExceededError,
    ClientAlreadyExistsError,
    ClientNotFoundError,
    ConfigurationError,
    EntityExistsError,
    EntityNotFoundError,
    InsufficientBalanceError,
    InvalidAccountKindError,
    InvalidClientError,
    InvalidEntityStateError,
    SinkError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(BankLedgerError("test"), Exception)

    def test_not_found_errors(self) -> None:
        for err in (ClientNotFoundError("111"), AccountNotFoundError("A1")):
            assert isinstance(err, EntityNotFoundError)
            assert isinstance(err, BankLedgerError)

    def test_already_exists_errors(self) -> None:
        for err in (ClientAlreadyExistsError("111"), AccountAlreadyExistsError("A1")):
            assert isinstance(err, EntityExistsError)
            assert isinstance(err, BankLedgerError)

    def test_state_errors(self) -> None:
        assert isinstance(InsufficientBalanceError("A1", 10.0), InvalidEntityStateError)
        assert isinstance(
            InvalidAccountKindError("A1", "CHECKING", "bonus"), InvalidEntityStateError
        )

    def test_other_errors_are_bank_ledger_errors(self) -> None:
        assert isinstance(InvalidClientError(), BankLedgerError)
        assert isinstance(CapacityExceededError(100), BankLedgerError)
        assert isinstance(ConfigurationError("test"), BankLedgerError)
        assert isinstance(SinkError("test"), BankLedgerError)


class TestExceptionPayload:
    """Errors carry the key that triggered them."""

    def test_client_errors_carry_cpf(self) -> None:
        assert ClientNotFoundError("111").cpf == "111"
        assert ClientAlreadyExistsError("111").cpf == "111"

    def test_account_errors_carry_number(self) -> None:
        assert AccountNotFoundError("A1").number == "A1"
        assert AccountAlreadyExistsError("A1").number == "A1"

    def test_insufficient_balance_carries_balance(self) -> None:
        err = InsufficientBalanceError("A1", 100.0)
        assert err.number == "A1"
        assert err.balance == 100.0
        assert "A1" in str(err)

    def test_capacity_carries_capacity(self) -> None:
        err = CapacityExceededError(100)
        assert err.capacity == 100
        assert str(err) == "Store is full (capacity: 100)"

    def test_exception_message(self) -> None:
        assert str(ClientNotFoundError("111")) == "Client 111 not found"
        assert str(AccountAlreadyExistsError("A1")) == "Account A1 already registered"

    def test_invalid_account_kind_message(self) -> None:
        err = InvalidAccountKindError("A1", "CHECKING", "bonus")
        assert err.kind == "CHECKING"
        assert err.operation == "bonus"
        assert str(err) == "Account A1 of kind CHECKING does not support bonus"
