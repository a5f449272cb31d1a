"""Ledger transfer errors."""

from __future__ import annotations

from typing import Any

from report_registry.domain.errors.registry import (
    RegistryErrorCode,
    RegistryOperationError,
)


class TransferFailedError(RegistryOperationError):
    """Raised by a ledger transfer port when funds could not be moved.

    When raised during submission the whole submission is abandoned:
    no report is stored and no hash is indexed.

    HTTP Status: 402 Payment Required

    Attributes:
        amount: Amount that was to be transferred.
        sender: Principal the amount was drawn from.
        recipient: Principal the amount was destined for.
        reason: Why the ledger refused the transfer.
    """

    code = RegistryErrorCode.TRANSFER_FAILED
    title = "Transfer Failed"
    http_status = 402

    def __init__(
        self,
        amount: int,
        sender: str,
        recipient: str,
        reason: str = "ledger rejected transfer",
    ) -> None:
        """Initialize the error.

        Args:
            amount: Amount that was to be transferred.
            sender: Principal the amount was drawn from.
            recipient: Principal the amount was destined for.
            reason: Why the ledger refused the transfer.
        """
        self.amount = amount
        self.sender = sender
        self.recipient = recipient
        self.reason = reason
        super().__init__(
            f"Transfer of {amount} from {sender} to {recipient} failed: {reason}"
        )

    def problem_extensions(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "sender": self.sender,
            "recipient": self.recipient,
        }
