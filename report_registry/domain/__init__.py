"""
Domain layer - Pure registry logic for the report registry.

This layer contains:
- Domain models (Report, ReportUpdate, RegistryState)
- Domain exceptions and tagged registry error codes

CRITICAL: This layer must NOT import from application, infrastructure,
or bootstrap. Only stdlib and typing imports are allowed.
"""

from report_registry.domain.errors import RegistryErrorCode, RegistryOperationError
from report_registry.domain.exceptions import RegistryError

__all__: list[str] = [
    "RegistryError",
    "RegistryErrorCode",
    "RegistryOperationError",
]
