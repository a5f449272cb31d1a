"""Application ports - interfaces the registry engine consumes.

Ports:
- TimeAuthorityProtocol: Current time for report timestamps
- LedgerTransferProtocol: Submission fee transfers
- CallerIdentityProtocol: Identity of the invoking caller
"""

from report_registry.application.ports.caller_identity import CallerIdentityProtocol
from report_registry.application.ports.ledger_transfer import LedgerTransferProtocol
from report_registry.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "CallerIdentityProtocol",
    "LedgerTransferProtocol",
    "TimeAuthorityProtocol",
]
