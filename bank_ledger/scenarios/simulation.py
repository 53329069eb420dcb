"""Ledger simulation: populate a bank and drive random traffic through it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from bank_ledger.exceptions import CapacityExceededError, InsufficientBalanceError
from bank_ledger.facade import Bank
from bank_ledger.generators import AccountGenerator, ClientGenerator
from bank_ledger.models import AccountKind

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outcome counters of a simulation run."""

    clients: int = 0
    accounts: int = 0
    clients_rejected: int = 0
    accounts_rejected: int = 0
    operations: dict[str, int] = field(default_factory=dict)
    insufficient_balance: int = 0

    def count(self, operation: str) -> None:
        self.operations[operation] = self.operations.get(operation, 0) + 1


class LedgerSimulation:
    """Generate clients and accounts, then apply random ledger operations.

    Operations are drawn by weight: credits and debits dominate, followed by
    transfers, with occasional interest and bonus application. Debits and
    transfers that the source account cannot cover are counted, not fatal.
    """

    OPERATIONS = ["credit", "debit", "transfer", "interest", "bonus"]
    OPERATION_WEIGHTS = [0.35, 0.30, 0.25, 0.05, 0.05]

    AMOUNT_RANGE = (1.0, 2000.0)

    def __init__(
        self,
        bank: Bank,
        num_clients: int = 20,
        accounts_per_client: tuple[int, int] = (1, 2),
        num_operations: int = 200,
        interest_rate: float = 0.005,
        seed: int | None = None,
    ) -> None:
        """Initialize the simulation.

        Parameters
        ----------
        bank : Bank
            Bank to populate and operate on.
        num_clients : int
            Number of clients to register.
        accounts_per_client : tuple[int, int]
            Min and max accounts opened per client.
        num_operations : int
            Number of ledger operations to attempt.
        interest_rate : float
            Rate used for interest operations on savings accounts.
        seed : int | None
            Random seed for reproducibility.
        """
        self.bank = bank
        self.num_clients = num_clients
        self.accounts_per_client = accounts_per_client
        self.num_operations = num_operations
        self.interest_rate = interest_rate

        self._client_gen = ClientGenerator(seed=seed)
        self._account_gen = AccountGenerator(seed=seed)
        if seed is not None:
            random.seed(seed)

    def run(self) -> SimulationResult:
        """Populate the bank and run the operations.

        Returns
        -------
        SimulationResult
            Counters of what happened.
        """
        logger.info(
            "Starting ledger simulation: %d clients, %d operations",
            self.num_clients,
            self.num_operations,
        )
        result = SimulationResult()
        self._populate(result)

        numbers = [account.number for account in self.bank.list_accounts()]
        if numbers:
            for _ in range(self.num_operations):
                self._apply_random_operation(numbers, result)

        logger.info(
            "Simulation finished: %d clients, %d accounts, %d operations, %d rejected debits",
            result.clients,
            result.accounts,
            sum(result.operations.values()),
            result.insufficient_balance,
        )
        return result

    def _populate(self, result: SimulationResult) -> None:
        for client in self._client_gen.generate_batch(self.num_clients):
            try:
                self.bank.register_client(client)
            except CapacityExceededError:
                logger.warning("Client store full, skipping client %s", client.cpf)
                result.clients_rejected += 1
                continue
            result.clients += 1

            num_accounts = random.randint(*self.accounts_per_client)
            for account in self._account_gen.generate_for_client(client, num_accounts):
                try:
                    self.bank.register_account(account)
                except CapacityExceededError:
                    logger.warning("Account store full, skipping account %s", account.number)
                    result.accounts_rejected += 1
                    continue
                result.accounts += 1

    def _apply_random_operation(self, numbers: list[str], result: SimulationResult) -> None:
        operation = random.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]
        number = random.choice(numbers)
        amount = round(random.uniform(*self.AMOUNT_RANGE), 2)

        try:
            if operation == "credit":
                self.bank.credit(number, amount)
            elif operation == "debit":
                self.bank.debit(number, amount)
            elif operation == "transfer":
                self.bank.transfer(number, random.choice(numbers), amount)
            elif operation == "interest":
                if self.bank.find_account(number).kind != AccountKind.SAVINGS:
                    return
                self.bank.apply_interest(number, self.interest_rate)
            else:
                if self.bank.find_account(number).kind != AccountKind.BONUS:
                    return
                self.bank.apply_bonus(number)
        except InsufficientBalanceError:
            result.insufficient_balance += 1
            return
        result.count(operation)
