"""Infrastructure stubs for development and testing.

Available stubs:
- LedgerTransferStub: In-memory ledger recording fee transfers, with
  optional balances and an availability toggle
- CallerIdentityStub: Settable current caller

WARNING: These stubs are NOT for production use.
"""

from report_registry.infrastructure.stubs.caller_identity_stub import (
    DEFAULT_CALLER,
    CallerIdentityStub,
)
from report_registry.infrastructure.stubs.ledger_transfer_stub import (
    LedgerTransfer,
    LedgerTransferStub,
)

__all__: list[str] = [
    "CallerIdentityStub",
    "DEFAULT_CALLER",
    "LedgerTransfer",
    "LedgerTransferStub",
]
