"""Ledger transfer port.

The registry charges a submission fee by moving funds from the submitter
to the authority. How funds move is outside the registry; this port is
the whole contract.

Rules for implementations:
1. ATOMIC - A transfer either completes or raises; no partial moves
2. FAIL LOUD - Raise TransferFailedError, never return a failure flag
3. SYNCHRONOUS - The call returns only once the transfer is settled
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LedgerTransferProtocol(Protocol):
    """Protocol for ledger transfer adapters.

    Implementations may move funds on a chain, in a database, or in
    memory for testing.

    Methods:
        transfer: Move an amount from one principal to another
    """

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Move amount from sender to recipient.

        Args:
            amount: Non-negative amount to move.
            sender: Principal the amount is drawn from.
            recipient: Principal receiving the amount.

        Raises:
            TransferFailedError: If the ledger refused the transfer.
        """
        ...
