"""Report registry engine.

ReportRegistryService owns the RegistryState and exposes every registry
operation: authority/fee/capacity configuration, report submission,
content and status edits, and reads.

Each public call is one atomic step, evaluated under a single lock:

    validate inputs and authorization -> at most one ledger transfer
    -> mutate state -> return

Every check for an operation runs before the ledger is touched or the
state is written, so a rejected call leaves nothing behind. A refused
fee transfer raises before the report is stored, so submission is all
or nothing.

Submission check order is fixed and callers rely on it when an input
breaks several rules at once:
    1. capacity  2. hash  3. title  4. description  5. stake
    6. duplicate hash  7. authority configured
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
from uuid import uuid4

import structlog
from structlog import get_logger

from report_registry.application.ports.caller_identity import CallerIdentityProtocol
from report_registry.application.ports.ledger_transfer import LedgerTransferProtocol
from report_registry.application.ports.time_authority import TimeAuthorityProtocol
from report_registry.config.registry_config import (
    DEFAULT_REGISTRY_CONFIG,
    RegistryConfig,
)
from report_registry.domain.errors import (
    AuthorityAlreadySetError,
    AuthorityNotVerifiedError,
    CapacityInvalidError,
    InvalidHashError,
    InvalidStakeError,
    MaxReportsExceededError,
    NotAuthorizedError,
    RegistryOperationError,
    ReportAlreadyExistsError,
    ReportNotFoundError,
)
from report_registry.domain.models.registry_state import (
    RegistrySnapshot,
    RegistryState,
)
from report_registry.domain.models.report import (
    Report,
    ReportStatus,
    ReportUpdate,
    check_description,
    check_title,
)

logger = get_logger(__name__)

_HASH_TYPES = (bytes, bytearray, memoryview)


def _hash_for_log(report_hash: object) -> str:
    if isinstance(report_hash, _HASH_TYPES):
        return bytes(report_hash).hex()
    return repr(report_hash)


class ReportRegistryService:
    """Authority-gated registry of content-addressed reports.

    The service ensures:
    1. Report ids are assigned densely from 0 and never reused
    2. A report hash is registered at most once
    3. The report count never exceeds capacity through submission
    4. No transfer or write happens unless every check passes
    5. The authority, once set, is never changed

    Authorization policy:
        By default fee, capacity and status changes only require that an
        authority is configured; the authority is treated as a separate
        verifying party that fronts these calls. With
        RegistryConfig.enforce_authority_caller the caller must also be
        the authority itself.

    Example:
        >>> service = ReportRegistryService(
        ...     ledger=LedgerTransferStub(),
        ...     caller_identity=CallerIdentityStub("ST1TEST"),
        ...     time_authority=TimeAuthorityService(),
        ... )
        >>> service.set_authority("ST2TEST")
        >>> report_id = service.submit(b"a" * 32, "Report1", "Description1", 100)
        >>> service.get_report(report_id).status
        <ReportStatus.PENDING: 'pending'>
    """

    def __init__(
        self,
        ledger: LedgerTransferProtocol,
        caller_identity: CallerIdentityProtocol,
        time_authority: TimeAuthorityProtocol,
        config: RegistryConfig = DEFAULT_REGISTRY_CONFIG,
        state: RegistryState | None = None,
    ) -> None:
        """Initialize the registry engine.

        Args:
            ledger: Port used to charge the submission fee.
            caller_identity: Port naming the caller of each operation.
            time_authority: Port supplying report timestamps.
            config: Initial fee/capacity, burn identity and caller policy.
            state: Existing state to operate on. When omitted a fresh
                state is created from the config's initial values.
        """
        self._ledger = ledger
        self._caller_identity = caller_identity
        self._time = time_authority
        self._config = config
        if state is None:
            state = RegistryState(
                submission_fee=config.initial_submission_fee,
                max_reports=config.initial_max_reports,
            )
        self._state = state
        self._lock = threading.Lock()

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @contextmanager
    def _operation(self, name: str, **context: Any) -> Iterator[Any]:
        """Serialize one registry operation and log its rejection.

        Binds an operation_id for every log line emitted inside the
        operation. Rejections are logged with their error code and
        re-raised unchanged.
        """
        with self._lock, structlog.contextvars.bound_contextvars(
            operation_id=str(uuid4()), operation=name
        ):
            log = logger.bind(**context)
            try:
                yield log
            except RegistryOperationError as exc:
                log.warning(
                    "registry_operation_rejected",
                    error_code=int(exc.code),
                    error=exc.title,
                    detail=str(exc),
                )
                raise

    def _require_authority(self, operation: str) -> str:
        authority = self._state.authority
        if authority is None:
            raise AuthorityNotVerifiedError(operation)
        return authority

    def _require_authority_caller(self, authority: str, operation: str) -> None:
        """Enforce the caller policy for privileged operations."""
        if not self._config.enforce_authority_caller:
            return
        caller = self._caller_identity.current_caller()
        if caller != authority:
            raise NotAuthorizedError(caller, f"only the authority may {operation}")

    # =========================================================================
    # Configuration operations
    # =========================================================================

    def set_authority(self, identity: str) -> None:
        """Configure the registry authority (one-time bootstrap).

        Args:
            identity: The identity that receives fees and classifies reports.

        Raises:
            NotAuthorizedError: If identity is the reserved burn identity.
            AuthorityAlreadySetError: If an authority is already configured.
        """
        with self._operation("set_authority", identity=identity) as log:
            if identity == self._config.burn_identity:
                raise NotAuthorizedError(
                    identity, "the burn identity cannot be the authority"
                )
            if self._state.authority is not None:
                raise AuthorityAlreadySetError(self._state.authority)

            self._state.assign_authority(identity)
            log.info("authority_configured")

    def set_submission_fee(self, fee: int) -> None:
        """Replace the fee charged per submission.

        Args:
            fee: New non-negative fee.

        Raises:
            AuthorityNotVerifiedError: If no authority is configured.
            NotAuthorizedError: If caller enforcement is on and the caller
                is not the authority.
            InvalidStakeError: If fee is negative.
        """
        with self._operation("set_submission_fee", fee=fee) as log:
            authority = self._require_authority("set the submission fee")
            self._require_authority_caller(authority, "set the submission fee")
            if fee < 0:
                raise InvalidStakeError(fee, field_name="submission_fee")

            previous = self._state.submission_fee
            self._state.submission_fee = fee
            log.info("submission_fee_changed", previous_fee=previous)

    def set_max_reports(self, max_reports: int) -> None:
        """Replace the report capacity.

        Lowering the capacity below the current report count is allowed;
        it only blocks further submissions.

        Args:
            max_reports: New positive capacity.

        Raises:
            AuthorityNotVerifiedError: If no authority is configured.
            NotAuthorizedError: If caller enforcement is on and the caller
                is not the authority.
            CapacityInvalidError: If max_reports is not positive.
        """
        with self._operation("set_max_reports", max_reports=max_reports) as log:
            authority = self._require_authority("set the report capacity")
            self._require_authority_caller(authority, "set the report capacity")
            if max_reports <= 0:
                raise CapacityInvalidError(max_reports)

            previous = self._state.max_reports
            self._state.max_reports = max_reports
            if max_reports < self._state.report_counter:
                log.warning(
                    "capacity_below_report_count",
                    report_count=self._state.report_counter,
                )
            log.info("max_reports_changed", previous_max_reports=previous)

    # =========================================================================
    # Report lifecycle operations
    # =========================================================================

    def submit(
        self,
        report_hash: bytes,
        title: str,
        description: str,
        stake_amount: int,
    ) -> int:
        """Register a new report and charge the submission fee.

        The fee moves from the caller to the authority through the ledger
        port. If the ledger refuses, nothing is stored.

        Args:
            report_hash: Non-empty bytes-like content fingerprint, unique
                in the registry.
            title: 1..max_title_length characters.
            description: 1..max_description_length characters.
            stake_amount: Non-negative stake recorded with the report.

        Returns:
            The new report id (the report count before the call).

        Raises:
            MaxReportsExceededError: Registry is at capacity.
            InvalidHashError: report_hash is empty or not a bytes-like value.
            InvalidTitleError: title is empty or too long.
            InvalidDescriptionError: description is empty or too long.
            InvalidStakeError: stake_amount is negative.
            ReportAlreadyExistsError: report_hash is already registered.
            AuthorityNotVerifiedError: No authority is configured.
            TransferFailedError: The ledger refused the fee transfer.
        """
        with self._operation(
            "submit",
            report_hash=_hash_for_log(report_hash),
            stake_amount=stake_amount,
        ) as log:
            state = self._state
            if state.at_capacity:
                raise MaxReportsExceededError(state.report_counter, state.max_reports)
            if not isinstance(report_hash, _HASH_TYPES):
                raise InvalidHashError(
                    f"Report hash must be bytes, got {type(report_hash).__name__}"
                )
            report_hash = bytes(report_hash)
            if not report_hash:
                raise InvalidHashError()
            check_title(title, self._config.max_title_length)
            check_description(description, self._config.max_description_length)
            if stake_amount < 0:
                raise InvalidStakeError(stake_amount)
            existing_id = state.reports_by_hash.get(report_hash)
            if existing_id is not None:
                raise ReportAlreadyExistsError(report_hash, existing_id)
            authority = self._require_authority("submit a report")

            caller = self._caller_identity.current_caller()
            report = Report(
                id=state.report_counter,
                report_hash=report_hash,
                title=title,
                description=description,
                timestamp=self._time.now(),
                submitter=caller,
                status=ReportStatus.PENDING,
                stake_amount=stake_amount,
            )

            fee = state.submission_fee
            self._ledger.transfer(fee, caller, authority)

            state.insert_report(report)
            log.info(
                "report_submitted",
                report_id=report.id,
                submitter=caller,
                fee=fee,
            )
            return report.id

    def update_content(
        self,
        report_id: int,
        title: str,
        description: str,
    ) -> Report:
        """Replace a report's title and description.

        Only the original submitter may edit content. The edit is also
        recorded as the report's ReportUpdate audit record.

        Args:
            report_id: The report to edit.
            title: New title.
            description: New description.

        Returns:
            The edited report.

        Raises:
            ReportNotFoundError: No report has this id.
            NotAuthorizedError: Caller is not the submitter.
            InvalidTitleError: title is empty or too long.
            InvalidDescriptionError: description is empty or too long.
        """
        with self._operation("update_content", report_id=report_id) as log:
            report = self._state.reports.get(report_id)
            if report is None:
                raise ReportNotFoundError(report_id)
            caller = self._caller_identity.current_caller()
            if caller != report.submitter:
                raise NotAuthorizedError(
                    caller, f"only the submitter may edit report {report_id}"
                )
            check_title(title, self._config.max_title_length)
            check_description(description, self._config.max_description_length)

            now = self._time.now()
            updated = report.with_content(title, description, now)
            self._state.replace_report(updated)
            self._state.record_update(
                ReportUpdate(
                    report_id=report_id,
                    updated_title=title,
                    updated_description=description,
                    update_timestamp=now,
                    updater=caller,
                )
            )
            log.info("report_content_updated", updater=caller)
            return updated

    def update_status(self, report_id: int, status: ReportStatus | str) -> Report:
        """Reclassify a report.

        Any of pending, verified and rejected may follow any other,
        including itself.

        Args:
            report_id: The report to reclassify.
            status: A ReportStatus or its string value.

        Returns:
            The reclassified report.

        Raises:
            ReportNotFoundError: No report has this id.
            AuthorityNotVerifiedError: No authority is configured.
            NotAuthorizedError: Caller enforcement is on and the caller is
                not the authority.
            InvalidStatusError: status is not a known report status.
        """
        with self._operation(
            "update_status", report_id=report_id, status=str(status)
        ) as log:
            report = self._state.reports.get(report_id)
            if report is None:
                raise ReportNotFoundError(report_id)
            authority = self._require_authority("update report status")
            self._require_authority_caller(authority, "update report status")
            new_status = ReportStatus.parse(status)

            updated = report.with_status(new_status, self._time.now())
            self._state.replace_report(updated)
            log.info(
                "report_status_updated",
                previous_status=report.status.value,
                new_status=new_status.value,
            )
            return updated

    # =========================================================================
    # Read operations
    # =========================================================================

    def get_report(self, report_id: int) -> Report | None:
        """Return the report with this id, or None if there is none."""
        with self._lock:
            return self._state.reports.get(report_id)

    def get_report_count(self) -> int:
        """Return the number of reports ever created."""
        with self._lock:
            return self._state.report_counter

    def get_report_update(self, report_id: int) -> ReportUpdate | None:
        """Return the latest content edit record of a report, if any."""
        with self._lock:
            return self._state.report_updates.get(report_id)

    def get_report_id_by_hash(self, report_hash: bytes) -> int | None:
        """Return the id of the report registered under a hash, if any."""
        if not isinstance(report_hash, _HASH_TYPES):
            return None
        with self._lock:
            return self._state.reports_by_hash.get(bytes(report_hash))

    def get_configuration(self) -> RegistrySnapshot:
        """Return the current authority, fee, capacity and report count."""
        with self._lock:
            return self._state.snapshot()
