"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError

CLIENT_BACKENDS = ("map", "array")


@dataclass
class StoreConfig:
    """Repository backend configuration."""

    client_backend: str = "map"
    client_capacity: int = 100
    account_capacity: int = 100


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class SimulationConfig:
    """Configuration for a ledger simulation run."""

    num_clients: int = 20
    accounts_per_client: tuple[int, int] = (1, 2)
    num_operations: int = 200
    interest_rate: float = 0.005


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    store: StoreConfig = field(default_factory=StoreConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check configuration values.

        Raises
        ------
        ConfigurationError
            If a backend name or a capacity is invalid.
        """
        if self.store.client_backend not in CLIENT_BACKENDS:
            raise ConfigurationError(
                f"Unknown client store {self.store.client_backend!r}, "
                f"expected one of {', '.join(CLIENT_BACKENDS)}"
            )
        if self.store.client_capacity <= 0:
            raise ConfigurationError(
                f"Client capacity must be positive, got {self.store.client_capacity}"
            )
        if self.store.account_capacity <= 0:
            raise ConfigurationError(
                f"Account capacity must be positive, got {self.store.account_capacity}"
            )
        low, high = self.simulation.accounts_per_client
        if low < 0 or high < low:
            raise ConfigurationError(
                f"Invalid accounts per client range {self.simulation.accounts_per_client}"
            )

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        try:
            store = StoreConfig(
                client_backend=os.getenv("CLIENT_STORE", "map").lower(),
                client_capacity=int(os.getenv("CLIENT_CAPACITY", "100")),
                account_capacity=int(os.getenv("ACCOUNT_CAPACITY", "100")),
            )

            output = OutputConfig(
                json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
                pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
            )

            simulation = SimulationConfig(
                num_clients=int(os.getenv("SIM_CLIENTS", "20")),
                num_operations=int(os.getenv("SIM_OPERATIONS", "200")),
                interest_rate=float(os.getenv("SIM_INTEREST_RATE", "0.005")),
            )

            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric environment value: {exc}") from exc

        return cls(
            store=store,
            output=output,
            simulation=simulation,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
