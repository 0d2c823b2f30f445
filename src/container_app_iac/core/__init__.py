"""Core utilities shared by the infrastructure stacks."""

from container_app_iac.core.logging import get_logger, configure_logging
from container_app_iac.core.errors import (
    ContainerAppIaCError,
    ConfigurationError,
    WiringError,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    # Errors
    "ContainerAppIaCError",
    "ConfigurationError",
    "WiringError",
]
