"""Stack configuration schema."""

from enum import Enum
from typing import Optional

import pulumi
from pydantic import BaseModel, Field, ValidationError, field_validator

from container_app_iac.core.errors import ConfigurationError


class StackVariant(str, Enum):
    """Which set of resources a stack declares."""

    API = "api"
    API_WITH_STORAGE = "api_with_storage"


class LogLevel(str, Enum):
    """Log levels accepted by the ``logLevel`` config key."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Settings field -> Pulumi config key. ``resourcegroupname`` is required and
# handled separately.
CONFIG_KEYS = {
    "resource_group_name": "resourcegroupname",
    "variant": "variant",
    "log_retention_days": "logRetentionDays",
    "image_name": "imageName",
    "image_tag": "imageTag",
    "build_context": "buildContext",
    "image_platform": "imagePlatform",
    "target_port": "targetPort",
    "log_level": "logLevel",
    "log_json": "logJson",
}


class StackSettings(BaseModel):
    """Settings for one deployment of the container app stack."""

    resource_group_name: str = Field(
        ..., min_length=1, max_length=90, description="Resource group logical name"
    )
    variant: StackVariant = Field(StackVariant.API, description="Resources to declare")

    # Log Analytics
    workspace_sku: str = Field("PerGB2018", description="Log Analytics pricing tier")
    log_retention_days: int = Field(30, ge=30, le=730, description="Log retention")

    # Container registry and image
    registry_sku: str = Field("Basic", description="Container registry SKU")
    admin_user_enabled: bool = Field(True, description="Enable registry admin user")
    image_name: str = Field("api.container.app.api", min_length=1, description="Repository name")
    image_tag: str = Field("v1.0.0", min_length=1, max_length=128, description="Image tag")
    build_context: str = Field("../", min_length=1, description="Docker build context path")
    image_platform: str = Field("linux/amd64", description="Target build platform")

    # Container app
    container_name: str = Field("myapp", description="Container name inside the app")
    target_port: int = Field(80, ge=1, le=65535, description="Ingress target port")
    external_ingress: bool = Field(True, description="Expose ingress publicly")
    registry_secret_name: str = Field("pwd", description="Secret holding the registry password")

    # Storage account
    storage_sku: str = Field("Standard_LRS", description="Storage account SKU")
    storage_kind: str = Field("StorageV2", description="Storage account kind")

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, description="Program log level")
    log_json: bool = Field(False, description="Render logs as JSON")

    @field_validator("resource_group_name")
    @classmethod
    def validate_resource_group_name(cls, value: str) -> str:
        allowed = set("-_.()")
        if any(not (ch.isalnum() or ch in allowed) for ch in value):
            raise ValueError(
                "may only contain letters, digits, '-', '_', '.', '(' and ')'"
            )
        if value.endswith("."):
            raise ValueError("must not end with '.'")
        return value

    @field_validator("image_name")
    @classmethod
    def validate_image_name(cls, value: str) -> str:
        if value != value.lower() or ":" in value or " " in value:
            raise ValueError("must be a lowercase repository name without a tag")
        return value

    @property
    def with_storage(self) -> bool:
        return self.variant == StackVariant.API_WITH_STORAGE

    def image_reference(self, login_server: str) -> str:
        """Full image reference in the registry for this stack's image."""
        return f"{login_server}/{self.image_name}:{self.image_tag}"

    @classmethod
    def from_pulumi_config(cls, config: Optional[pulumi.Config] = None) -> "StackSettings":
        """Load settings from the current stack's Pulumi configuration.

        A missing ``resourcegroupname`` raises Pulumi's ``ConfigMissingError``.
        Any value that fails validation raises ConfigurationError naming the
        config key.
        """
        config = config or pulumi.Config()
        values = {"resource_group_name": config.require("resourcegroupname")}
        for field_name, key in CONFIG_KEYS.items():
            if field_name in values:
                continue
            raw = config.get(key)
            if raw is not None:
                values[field_name] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else ""
            key = CONFIG_KEYS.get(field_name, field_name)
            raise ConfigurationError(
                f"Invalid value for config key '{key}': {error['msg']}",
                key=key,
                value=values.get(field_name),
            ) from e
