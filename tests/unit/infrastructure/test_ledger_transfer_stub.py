"""Unit tests for LedgerTransferStub."""

import pytest

from report_registry.application.ports.ledger_transfer import LedgerTransferProtocol
from report_registry.domain.errors import TransferFailedError
from report_registry.infrastructure.stubs.ledger_transfer_stub import (
    LedgerTransfer,
    LedgerTransferStub,
)


class TestLedgerTransferStub:
    """Tests for LedgerTransferStub."""

    def test_satisfies_port(self) -> None:
        """Test the stub implements the ledger port."""
        assert isinstance(LedgerTransferStub(), LedgerTransferProtocol)

    def test_records_transfers_in_order(self) -> None:
        """Test settled transfers are recorded in order."""
        ledger = LedgerTransferStub()

        ledger.transfer(500, "ST1TEST", "ST2TEST")
        ledger.transfer(0, "ST3FAKE", "ST2TEST")

        assert ledger.transfers == [
            LedgerTransfer(500, "ST1TEST", "ST2TEST"),
            LedgerTransfer(0, "ST3FAKE", "ST2TEST"),
        ]

    def test_transfers_is_a_copy(self) -> None:
        """Test callers cannot mutate the history."""
        ledger = LedgerTransferStub()
        ledger.transfer(1, "ST1TEST", "ST2TEST")

        ledger.transfers.clear()

        assert len(ledger.transfers) == 1

    def test_untracked_balances(self) -> None:
        """Test balances are None when not tracked."""
        assert LedgerTransferStub().balance_of("ST1TEST") is None

    def test_tracked_balances_move(self) -> None:
        """Test a transfer debits the sender and credits the recipient."""
        ledger = LedgerTransferStub(balances={"ST1TEST": 800})

        ledger.transfer(500, "ST1TEST", "ST2TEST")

        assert ledger.balance_of("ST1TEST") == 300
        assert ledger.balance_of("ST2TEST") == 500

    def test_insufficient_balance(self) -> None:
        """Test an overdraft is refused without side effects."""
        ledger = LedgerTransferStub(balances={"ST1TEST": 100})

        with pytest.raises(TransferFailedError) as exc_info:
            ledger.transfer(500, "ST1TEST", "ST2TEST")

        assert "insufficient balance" in exc_info.value.reason
        assert ledger.balance_of("ST1TEST") == 100
        assert ledger.transfers == []

    def test_set_balance_enables_tracking(self) -> None:
        """Test set_balance switches on balance tracking."""
        ledger = LedgerTransferStub()
        ledger.set_balance("ST1TEST", 10)

        with pytest.raises(TransferFailedError):
            ledger.transfer(11, "ST1TEST", "ST2TEST")
        assert ledger.balance_of("ST3FAKE") == 0

    def test_negative_amount_refused(self) -> None:
        """Test negative amounts are refused."""
        with pytest.raises(TransferFailedError, match="negative amount"):
            LedgerTransferStub().transfer(-1, "ST1TEST", "ST2TEST")

    def test_unavailable(self) -> None:
        """Test an unavailable ledger refuses every transfer."""
        ledger = LedgerTransferStub()
        ledger.set_available(False)

        with pytest.raises(TransferFailedError, match="ledger unavailable"):
            ledger.transfer(1, "ST1TEST", "ST2TEST")

        ledger.set_available(True)
        ledger.transfer(1, "ST1TEST", "ST2TEST")
        assert len(ledger.transfers) == 1

    def test_reset(self) -> None:
        """Test reset clears history, balances and availability."""
        ledger = LedgerTransferStub(balances={"ST1TEST": 5})
        ledger.transfer(5, "ST1TEST", "ST2TEST")
        ledger.set_available(False)

        ledger.reset()

        assert ledger.transfers == []
        assert ledger.balance_of("ST1TEST") is None
        ledger.transfer(1000, "ST1TEST", "ST2TEST")
