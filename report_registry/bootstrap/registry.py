"""Bootstrap wiring for report registry dependencies.

Ports default to the in-memory stubs and the system clock. A host
process replaces them with real adapters through the set_* helpers
before the first call to get_report_registry_service().
"""

from __future__ import annotations

from report_registry.application.ports.caller_identity import CallerIdentityProtocol
from report_registry.application.ports.ledger_transfer import LedgerTransferProtocol
from report_registry.application.ports.time_authority import TimeAuthorityProtocol
from report_registry.application.services.report_registry_service import (
    ReportRegistryService,
)
from report_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from report_registry.config.registry_config import RegistryConfig
from report_registry.infrastructure.stubs.caller_identity_stub import (
    CallerIdentityStub,
)
from report_registry.infrastructure.stubs.ledger_transfer_stub import (
    LedgerTransferStub,
)

_registry_config: RegistryConfig | None = None
_ledger_transfer: LedgerTransferProtocol | None = None
_caller_identity: CallerIdentityProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_report_registry_service: ReportRegistryService | None = None


def get_registry_config() -> RegistryConfig:
    """Get registry configuration, read from the environment on first use."""
    global _registry_config
    if _registry_config is None:
        _registry_config = RegistryConfig.from_environment()
    return _registry_config


def get_ledger_transfer() -> LedgerTransferProtocol:
    """Get ledger transfer instance."""
    global _ledger_transfer
    if _ledger_transfer is None:
        _ledger_transfer = LedgerTransferStub()
    return _ledger_transfer


def get_caller_identity() -> CallerIdentityProtocol:
    """Get caller identity instance."""
    global _caller_identity
    if _caller_identity is None:
        _caller_identity = CallerIdentityStub()
    return _caller_identity


def get_time_authority() -> TimeAuthorityProtocol:
    """Get time authority instance."""
    global _time_authority
    if _time_authority is None:
        _time_authority = TimeAuthorityService()
    return _time_authority


def get_report_registry_service() -> ReportRegistryService:
    """Get the report registry engine, wiring it on first use."""
    global _report_registry_service
    if _report_registry_service is None:
        _report_registry_service = ReportRegistryService(
            ledger=get_ledger_transfer(),
            caller_identity=get_caller_identity(),
            time_authority=get_time_authority(),
            config=get_registry_config(),
        )
    return _report_registry_service


def set_registry_config(config: RegistryConfig) -> None:
    """Set registry configuration (for testing or host wiring)."""
    global _registry_config
    _registry_config = config


def set_ledger_transfer(ledger: LedgerTransferProtocol) -> None:
    """Set ledger transfer instance (for testing or host wiring)."""
    global _ledger_transfer
    _ledger_transfer = ledger


def set_caller_identity(caller_identity: CallerIdentityProtocol) -> None:
    """Set caller identity instance (for testing or host wiring)."""
    global _caller_identity
    _caller_identity = caller_identity


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set time authority instance (for testing or host wiring)."""
    global _time_authority
    _time_authority = time_authority


def reset_registry_dependencies() -> None:
    """Reset all registry singletons (for testing)."""
    global _registry_config
    global _ledger_transfer
    global _caller_identity
    global _time_authority
    global _report_registry_service
    _registry_config = None
    _ledger_transfer = None
    _caller_identity = None
    _time_authority = None
    _report_registry_service = None


__all__ = [
    "get_caller_identity",
    "get_ledger_transfer",
    "get_registry_config",
    "get_report_registry_service",
    "get_time_authority",
    "reset_registry_dependencies",
    "set_caller_identity",
    "set_ledger_transfer",
    "set_registry_config",
    "set_time_authority",
]
