"""Pulumi program entry point for the API container app."""

from typing import Dict

import pulumi
from pulumi_azure_native import resources

from container_app_iac.core.logging import configure_logging, get_logger
from container_app_iac.models import StackSettings

from infra.stacks.api_stack import ApiStack
from infra.stacks.monitoring_stack import MonitoringStack
from infra.stacks.registry_stack import RegistryStack
from infra.stacks.storage_stack import StorageStack

logger = get_logger(__name__)


def build_program(settings: StackSettings) -> Dict[str, pulumi.Output]:
    """Declare every resource for ``settings`` and return the stack outputs."""
    # Resource group named directly from config
    resource_group = resources.ResourceGroup(settings.resource_group_name)

    # Monitoring stack (Log Analytics)
    monitoring_stack = MonitoringStack("monitoring", resource_group, settings)

    # Registry stack (container registry, image build and push)
    registry_stack = RegistryStack("registry", resource_group, settings)

    # API stack (managed environment, container app)
    api_stack = ApiStack(
        "api",
        resource_group,
        monitoring_stack=monitoring_stack,
        registry_stack=registry_stack,
        settings=settings,
    )

    outputs = {"Url": api_stack.url}

    if settings.with_storage:
        storage_stack = StorageStack("storage", resource_group, settings)
        outputs["PrimaryStorageKey"] = storage_stack.primary_key

    logger.info(
        "program_declared",
        resource_group=settings.resource_group_name,
        variant=settings.variant.value,
        outputs=sorted(outputs),
    )
    return outputs


def main() -> None:
    settings = StackSettings.from_pulumi_config()
    configure_logging(level=settings.log_level.value, json_format=settings.log_json)

    for name, value in build_program(settings).items():
        pulumi.export(name, value)


if __name__ == "__main__":
    main()
