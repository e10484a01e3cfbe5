"""Ledger abstractions consumed by the pool, and in-memory implementations."""

from cpamm.ledger.interfaces import Ledger, ShareLedger
from cpamm.ledger.memory import InMemoryLedger, InMemoryShareLedger

__all__ = [
    "Ledger",
    "ShareLedger",
    "InMemoryLedger",
    "InMemoryShareLedger",
]
