"""Registry state model.

RegistryState is the durable data owned by the registry engine: the
configuration values, the report counter, and the three maps
(id -> Report, hash -> id, id -> ReportUpdate).

State Invariants:
- report_counter equals the number of reports ever created, and the
  report ids are exactly 0..report_counter-1
- reports_by_hash holds exactly one entry per report and maps onto
  existing ids
- authority is never cleared or reassigned once set

RegistryState does no validation of its own beyond the invariants
above; the engine checks every rule before calling a mutator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from report_registry.domain.models.report import Report, ReportUpdate

DEFAULT_SUBMISSION_FEE: int = 500
DEFAULT_MAX_REPORTS: int = 10_000


@dataclass(frozen=True)
class RegistrySnapshot:
    """Read-only view of the registry configuration and counter.

    Attributes:
        authority: Configured authority identity, or None.
        submission_fee: Amount charged per submission.
        max_reports: Capacity bound on reports ever created.
        report_count: Reports created so far.
    """

    authority: str | None
    submission_fee: int
    max_reports: int
    report_count: int


@dataclass
class RegistryState:
    """Mutable registry state.

    Attributes:
        authority: Configured authority identity, None until set.
        submission_fee: Amount charged per submission.
        max_reports: Capacity bound on reports ever created.
        report_counter: Next id to assign.
        reports: Reports keyed by id.
        reports_by_hash: Report ids keyed by report hash.
        report_updates: Latest content edit record keyed by report id.
    """

    authority: str | None = None
    submission_fee: int = DEFAULT_SUBMISSION_FEE
    max_reports: int = DEFAULT_MAX_REPORTS
    report_counter: int = 0
    reports: dict[int, Report] = field(default_factory=dict)
    reports_by_hash: dict[bytes, int] = field(default_factory=dict)
    report_updates: dict[int, ReportUpdate] = field(default_factory=dict)

    @property
    def authority_configured(self) -> bool:
        return self.authority is not None

    @property
    def at_capacity(self) -> bool:
        return self.report_counter >= self.max_reports

    def assign_authority(self, identity: str) -> None:
        """Set the authority identity.

        Raises:
            ValueError: If an authority is already set.
        """
        if self.authority is not None:
            raise ValueError(f"Authority already assigned: {self.authority}")
        self.authority = identity

    def insert_report(self, report: Report) -> None:
        """Store a new report, index its hash and advance the counter.

        Args:
            report: Report whose id equals the current report_counter.

        Raises:
            ValueError: If the id is not the next id or the hash is
                already indexed.
        """
        if report.id != self.report_counter:
            raise ValueError(
                f"Report id {report.id} does not match next id {self.report_counter}"
            )
        if report.report_hash in self.reports_by_hash:
            raise ValueError(f"Hash already indexed: {report.report_hash.hex()}")
        self.reports[report.id] = report
        self.reports_by_hash[report.report_hash] = report.id
        self.report_counter += 1

    def replace_report(self, report: Report) -> None:
        """Overwrite an existing report with an edited copy.

        Raises:
            KeyError: If the report does not exist.
            ValueError: If the edit changed the hash, submitter or stake.
        """
        current = self.reports[report.id]
        if (
            current.report_hash != report.report_hash
            or current.submitter != report.submitter
            or current.stake_amount != report.stake_amount
        ):
            raise ValueError(f"Immutable fields of report {report.id} changed")
        self.reports[report.id] = report

    def record_update(self, update: ReportUpdate) -> None:
        """Upsert the content edit record for a report."""
        self.report_updates[update.report_id] = update

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            authority=self.authority,
            submission_fee=self.submission_fee,
            max_reports=self.max_reports,
            report_count=self.report_counter,
        )
