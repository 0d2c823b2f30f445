"""Configuration models for the infrastructure program."""

from container_app_iac.models.settings import (
    CONFIG_KEYS,
    LogLevel,
    StackSettings,
    StackVariant,
)

__all__ = [
    "CONFIG_KEYS",
    "LogLevel",
    "StackSettings",
    "StackVariant",
]
