#!/usr/bin/env python3
"""Run a ledger simulation and export the resulting snapshot.

This script builds a Bank from environment configuration (overridable with
flags), registers synthetic clients and accounts, applies random credits,
debits and transfers, and writes the final clients/accounts either to the
console or to JSON files.
"""

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import CLIENT_BACKENDS, LedgerConfig
from bank_ledger.exceptions import BankLedgerError
from bank_ledger.facade import Bank
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.scenarios import LedgerSimulation
from bank_ledger.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line flags."""
    parser = argparse.ArgumentParser(
        description="Simulate ledger traffic against an in-memory bank",
    )
    parser.add_argument("--clients", type=int, default=None, help="Clients to register")
    parser.add_argument("--operations", type=int, default=None, help="Operations to apply")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--client-store",
        choices=CLIENT_BACKENDS,
        default=None,
        help="Client repository backend",
    )
    parser.add_argument(
        "--account-capacity",
        type=int,
        default=None,
        help="Account store capacity (default: 100)",
    )
    parser.add_argument(
        "--output",
        choices=["console", "json"],
        default="console",
        help="Where to write the final snapshot",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="JSON output directory")
    parser.add_argument("--log-level", default=None, help="Log level")
    parser.add_argument("--log-format", choices=["standard", "json"], default=None)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> LedgerConfig:
    """Merge command line flags over the environment configuration."""
    config = LedgerConfig.from_env()
    if args.clients is not None:
        config.simulation.num_clients = args.clients
    if args.operations is not None:
        config.simulation.num_operations = args.operations
    if args.seed is not None:
        config.seed = args.seed
    if args.client_store is not None:
        config.store.client_backend = args.client_store
    if args.account_capacity is not None:
        config.store.account_capacity = args.account_capacity
    if args.output_dir is not None:
        config.output.json_output_dir = args.output_dir
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return a process exit code."""
    args = parse_args(argv)

    try:
        config = build_config(args)
        setup_logging(level=config.log_level, format_type=config.log_format)
        bank = Bank.from_config(config)
    except BankLedgerError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    sim = config.simulation
    start = time.perf_counter()
    result = LedgerSimulation(
        bank,
        num_clients=sim.num_clients,
        accounts_per_client=sim.accounts_per_client,
        num_operations=sim.num_operations,
        interest_rate=sim.interest_rate,
        seed=config.seed,
    ).run()
    elapsed = time.perf_counter() - start

    try:
        if args.output == "json":
            sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
        else:
            sink = ConsoleSink(pretty=True, max_records=10)
        sink.write_batch("clients", bank.list_clients())
        sink.write_batch("accounts", bank.list_accounts())
        sink.close()
    except BankLedgerError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    logger.info("=" * 60)
    logger.info("Simulation summary (%.2fs)", elapsed)
    for name, count in bank.summary().items():
        logger.info("  %s: %d", name, count)
    for operation, count in sorted(result.operations.items()):
        logger.info("  %s: %d", operation, count)
    logger.info("  rejected (insufficient balance): %d", result.insufficient_balance)
    logger.info("  clients skipped (store full): %d", result.clients_rejected)
    logger.info("  accounts skipped (store full): %d", result.accounts_rejected)
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
