"""
Pytest configuration and shared fixtures for report registry tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Time-dependent tests use FakeTimeAuthority, never the system clock
- Fee movement is asserted through LedgerTransferStub.transfers
"""

import pytest

from report_registry.application.services.report_registry_service import (
    ReportRegistryService,
)
from report_registry.config.registry_config import RegistryConfig
from report_registry.infrastructure.stubs.caller_identity_stub import (
    CallerIdentityStub,
)
from report_registry.infrastructure.stubs.ledger_transfer_stub import (
    LedgerTransferStub,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

SUBMITTER = "ST1TEST"
AUTHORITY = "ST2TEST"
OTHER_CALLER = "ST3FAKE"
REPORT_HASH = b"a" * 32


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from report_registry import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a frozen clock at 2026-01-01T00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def ledger() -> LedgerTransferStub:
    """Provide an empty in-memory ledger with unlimited funds."""
    return LedgerTransferStub()


@pytest.fixture
def caller_identity() -> CallerIdentityStub:
    """Provide a caller identity acting as the default submitter."""
    return CallerIdentityStub(SUBMITTER)


@pytest.fixture
def registry_config() -> RegistryConfig:
    """Provide the default registry configuration."""
    return RegistryConfig()


@pytest.fixture
def registry(
    ledger: LedgerTransferStub,
    caller_identity: CallerIdentityStub,
    fake_time_authority: FakeTimeAuthority,
    registry_config: RegistryConfig,
) -> ReportRegistryService:
    """Provide a registry with no authority configured."""
    return ReportRegistryService(
        ledger=ledger,
        caller_identity=caller_identity,
        time_authority=fake_time_authority,
        config=registry_config,
    )


@pytest.fixture
def authorized_registry(registry: ReportRegistryService) -> ReportRegistryService:
    """Provide a registry whose authority is ST2TEST."""
    registry.set_authority(AUTHORITY)
    return registry
