"""Application services for the report registry."""

from report_registry.application.services.report_registry_service import (
    ReportRegistryService,
)
from report_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)

__all__: list[str] = ["ReportRegistryService", "TimeAuthorityService"]
