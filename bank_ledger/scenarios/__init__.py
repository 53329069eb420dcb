"""Scenarios that exercise a bank end to end."""

from bank_ledger.scenarios.simulation import LedgerSimulation, SimulationResult

__all__ = ["LedgerSimulation", "SimulationResult"]
