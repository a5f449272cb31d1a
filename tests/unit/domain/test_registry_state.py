"""Unit tests for RegistryState."""

from datetime import datetime, timezone

import pytest

from report_registry.domain.models.registry_state import (
    RegistrySnapshot,
    RegistryState,
)
from report_registry.domain.models.report import Report, ReportStatus, ReportUpdate

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _report(report_id: int, report_hash: bytes) -> Report:
    return Report(
        id=report_id,
        report_hash=report_hash,
        title="Report",
        description="Description",
        timestamp=NOW,
        submitter="ST1TEST",
        stake_amount=10,
    )


class TestRegistryStateDefaults:
    """Tests for the initial state."""

    def test_defaults(self) -> None:
        """Test a fresh state has no authority and no reports."""
        state = RegistryState()

        assert state.authority is None
        assert state.submission_fee == 500
        assert state.max_reports == 10_000
        assert state.report_counter == 0
        assert not state.authority_configured
        assert not state.at_capacity


class TestAssignAuthority:
    """Tests for assign_authority."""

    def test_assigns_once(self) -> None:
        """Test the authority can be assigned once."""
        state = RegistryState()
        state.assign_authority("ST2TEST")

        assert state.authority_configured
        with pytest.raises(ValueError):
            state.assign_authority("ST9OTHER")
        assert state.authority == "ST2TEST"


class TestInsertReport:
    """Tests for insert_report."""

    def test_inserts_and_indexes(self) -> None:
        """Test both maps and the counter move together."""
        state = RegistryState()

        state.insert_report(_report(0, b"a"))
        state.insert_report(_report(1, b"b"))

        assert state.report_counter == 2
        assert set(state.reports) == {0, 1}
        assert state.reports_by_hash == {b"a": 0, b"b": 1}

    def test_rejects_out_of_order_id(self) -> None:
        """Test ids must equal the counter."""
        state = RegistryState()

        with pytest.raises(ValueError):
            state.insert_report(_report(1, b"a"))
        assert state.report_counter == 0
        assert state.reports == {}

    def test_rejects_indexed_hash(self) -> None:
        """Test a hash cannot be indexed twice."""
        state = RegistryState()
        state.insert_report(_report(0, b"a"))

        with pytest.raises(ValueError):
            state.insert_report(_report(1, b"a"))
        assert state.report_counter == 1
        assert state.reports_by_hash == {b"a": 0}

    def test_at_capacity(self) -> None:
        """Test at_capacity once the counter reaches max_reports."""
        state = RegistryState(max_reports=1)
        state.insert_report(_report(0, b"a"))

        assert state.at_capacity


class TestReplaceReport:
    """Tests for replace_report."""

    def test_replaces(self) -> None:
        """Test an edited copy overwrites the stored report."""
        state = RegistryState()
        state.insert_report(_report(0, b"a"))

        state.replace_report(state.reports[0].with_status(ReportStatus.VERIFIED, NOW))

        assert state.reports[0].status == ReportStatus.VERIFIED

    def test_rejects_changed_hash(self) -> None:
        """Test immutable fields are protected."""
        state = RegistryState()
        state.insert_report(_report(0, b"a"))

        with pytest.raises(ValueError):
            state.replace_report(_report(0, b"z"))

    def test_rejects_missing(self) -> None:
        """Test replacing an unknown report."""
        with pytest.raises(KeyError):
            RegistryState().replace_report(_report(0, b"a"))


class TestRecordUpdateAndSnapshot:
    """Tests for record_update and snapshot."""

    def test_record_update_overwrites(self) -> None:
        """Test one audit record is kept per report."""
        state = RegistryState()
        for title in ("First", "Second"):
            state.record_update(
                ReportUpdate(
                    report_id=0,
                    updated_title=title,
                    updated_description="Description",
                    update_timestamp=NOW,
                    updater="ST1TEST",
                )
            )

        assert len(state.report_updates) == 1
        assert state.report_updates[0].updated_title == "Second"

    def test_snapshot(self) -> None:
        """Test the snapshot copies configuration and counter."""
        state = RegistryState(authority="ST2TEST", submission_fee=5, max_reports=9)
        state.insert_report(_report(0, b"a"))

        assert state.snapshot() == RegistrySnapshot(
            authority="ST2TEST", submission_fee=5, max_reports=9, report_count=1
        )
