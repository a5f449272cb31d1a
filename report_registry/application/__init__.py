"""
Application layer - Use cases and orchestration for the report registry.

This layer contains:
- The registry engine (ReportRegistryService)
- Application services (TimeAuthorityService)
- Port definitions (interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure, bootstrap
"""
