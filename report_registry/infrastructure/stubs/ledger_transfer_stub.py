"""Ledger transfer stub for development and testing.

This module provides an in-memory implementation of LedgerTransferProtocol
that records every settled transfer so tests can assert on fee movement.

Developer Golden Rules:
1. FAIL LOUD - Refused transfers raise TransferFailedError
2. NO PARTIAL MOVES - A refused transfer leaves balances and history untouched
3. TEST ISOLATION - Reset state between tests
"""

from __future__ import annotations

from dataclasses import dataclass

from report_registry.application.ports.ledger_transfer import LedgerTransferProtocol
from report_registry.domain.errors.ledger import TransferFailedError


@dataclass(frozen=True)
class LedgerTransfer:
    """A settled transfer recorded by the stub."""

    amount: int
    sender: str
    recipient: str


class LedgerTransferStub(LedgerTransferProtocol):
    """In-memory ledger for testing.

    Simulates a ledger with:
    - History of settled transfers
    - Optional per-principal balances (unlimited funds when not tracked)
    - Availability toggle for testing ledger outages

    Usage:
        ledger = LedgerTransferStub()
        ledger.transfer(500, "ST1TEST", "ST2TEST")
        assert ledger.transfers == [LedgerTransfer(500, "ST1TEST", "ST2TEST")]

        # Track balances; overdrafts are refused
        ledger = LedgerTransferStub(balances={"ST1TEST": 100})

        # Simulate the ledger refusing everything
        ledger.set_available(False)
    """

    def __init__(self, balances: dict[str, int] | None = None) -> None:
        """Initialize the stub.

        Args:
            balances: Starting balances. When None, balances are not
                tracked and every sender has unlimited funds.
        """
        self._balances: dict[str, int] | None = (
            dict(balances) if balances is not None else None
        )
        self._transfers: list[LedgerTransfer] = []
        self._available: bool = True

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Move amount from sender to recipient.

        Raises:
            TransferFailedError: If the ledger is unavailable, the amount
                is negative, or the sender's tracked balance is too low.
        """
        if not self._available:
            raise TransferFailedError(amount, sender, recipient, "ledger unavailable")
        if amount < 0:
            raise TransferFailedError(amount, sender, recipient, "negative amount")

        if self._balances is not None:
            available = self._balances.get(sender, 0)
            if available < amount:
                raise TransferFailedError(
                    amount,
                    sender,
                    recipient,
                    f"insufficient balance ({available} available)",
                )
            self._balances[sender] = available - amount
            self._balances[recipient] = self._balances.get(recipient, 0) + amount

        self._transfers.append(LedgerTransfer(amount, sender, recipient))

    # ========================================
    # Test helper methods
    # ========================================

    @property
    def transfers(self) -> list[LedgerTransfer]:
        """Settled transfers in order (copy)."""
        return list(self._transfers)

    def balance_of(self, principal: str) -> int | None:
        """Get a tracked balance.

        Returns:
            The balance, or None when balances are not tracked.
        """
        if self._balances is None:
            return None
        return self._balances.get(principal, 0)

    def set_balance(self, principal: str, amount: int) -> None:
        """Set a principal's balance, enabling balance tracking if needed."""
        if self._balances is None:
            self._balances = {}
        self._balances[principal] = amount

    def set_available(self, available: bool) -> None:
        """Set ledger availability.

        Args:
            available: False makes every transfer raise TransferFailedError.
        """
        self._available = available

    def reset(self) -> None:
        """Reset all state for test isolation.

        Clears history, stops tracking balances, restores availability.
        """
        self._balances = None
        self._transfers.clear()
        self._available = True
