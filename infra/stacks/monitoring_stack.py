"""Monitoring stack for the Log Analytics workspace."""

import pulumi
from pulumi_azure_native import operationalinsights, resources

from container_app_iac import projection
from container_app_iac.core.logging import get_logger
from container_app_iac.models import StackSettings

logger = get_logger(__name__)


class MonitoringStack(pulumi.ComponentResource):
    """Stack for application log collection.

    Creates:
    - Log Analytics workspace
    - Projection of the workspace's primary shared key
    """

    def __init__(
        self,
        name: str,
        resource_group: resources.ResourceGroup,
        settings: StackSettings,
        opts: pulumi.ResourceOptions = None,
    ) -> None:
        super().__init__("containerappiac:stacks:MonitoringStack", name, None, opts)
        child_opts = pulumi.ResourceOptions(parent=self)

        self.workspace = operationalinsights.Workspace(
            "loganalytics",
            resource_group_name=resource_group.name,
            sku=operationalinsights.WorkspaceSkuArgs(name=settings.workspace_sku),
            retention_in_days=settings.log_retention_days,
            opts=child_opts,
        )

        # Keys can only be listed once the workspace exists.
        shared_keys = operationalinsights.get_shared_keys_output(
            resource_group_name=resource_group.name,
            workspace_name=self.workspace.name,
        )

        self.customer_id = self.workspace.customer_id
        self.shared_key = projection.primary_shared_key(shared_keys)

        logger.info(
            "monitoring_stack_declared",
            stack=name,
            sku=settings.workspace_sku,
            retention_days=settings.log_retention_days,
        )

        self.register_outputs({
            "workspace_name": self.workspace.name,
            "customer_id": self.customer_id,
        })
