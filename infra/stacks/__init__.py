"""Pulumi component stacks for the container app deployment."""

from infra.stacks.monitoring_stack import MonitoringStack
from infra.stacks.registry_stack import RegistryStack
from infra.stacks.storage_stack import StorageStack
from infra.stacks.api_stack import ApiStack

__all__ = ["MonitoringStack", "RegistryStack", "StorageStack", "ApiStack"]
