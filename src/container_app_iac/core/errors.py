"""Exception classes raised while declaring the infrastructure."""

from typing import Any, Optional


class ContainerAppIaCError(Exception):
    """Base exception for errors raised by this program.

    Provider and engine failures are not wrapped; only problems detected
    before a resource is handed to the engine use this hierarchy.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(ContainerAppIaCError):
    """Stack configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        value: Any = None,
        **kwargs,
    ):
        super().__init__(message, error_code="CONFIGURATION", **kwargs)
        self.key = key
        self.value = value
        self.details.update({
            "key": key,
            "value": value,
        })


class WiringError(ContainerAppIaCError):
    """A resource references something that is not declared."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        reference: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="WIRING", **kwargs)
        self.resource = resource
        self.reference = reference
        self.details.update({
            "resource": resource,
            "reference": reference,
        })
