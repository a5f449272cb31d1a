"""Domain models for the report registry."""

from report_registry.domain.models.registry_state import (
    DEFAULT_MAX_REPORTS,
    DEFAULT_SUBMISSION_FEE,
    RegistrySnapshot,
    RegistryState,
)
from report_registry.domain.models.report import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_MAX_TITLE_LENGTH,
    Report,
    ReportStatus,
    ReportUpdate,
    check_description,
    check_title,
)

__all__: list[str] = [
    "DEFAULT_MAX_DESCRIPTION_LENGTH",
    "DEFAULT_MAX_REPORTS",
    "DEFAULT_MAX_TITLE_LENGTH",
    "DEFAULT_SUBMISSION_FEE",
    "RegistrySnapshot",
    "RegistryState",
    "Report",
    "ReportStatus",
    "ReportUpdate",
    "check_description",
    "check_title",
]
