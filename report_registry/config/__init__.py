"""Configuration module for the report registry.

Available Configurations:
- RegistryConfig: Initial fee and capacity, burn identity, caller policy
"""

from report_registry.config.registry_config import (
    DEFAULT_BURN_IDENTITY,
    DEFAULT_REGISTRY_CONFIG,
    STRICT_REGISTRY_CONFIG,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__ = [
    "RegistryConfig",
    "DEFAULT_BURN_IDENTITY",
    "DEFAULT_REGISTRY_CONFIG",
    "STRICT_REGISTRY_CONFIG",
    "TEST_REGISTRY_CONFIG",
]
