"""Storage stack for the storage account."""

import pulumi
from pulumi_azure_native import resources, storage

from container_app_iac import projection
from container_app_iac.core.logging import get_logger
from container_app_iac.models import StackSettings

logger = get_logger(__name__)


class StorageStack(pulumi.ComponentResource):
    """Stack for storage infrastructure.

    Creates a general purpose storage account and exposes its first access
    key as a secret output.
    """

    def __init__(
        self,
        name: str,
        resource_group: resources.ResourceGroup,
        settings: StackSettings,
        opts: pulumi.ResourceOptions = None,
    ) -> None:
        super().__init__("containerappiac:stacks:StorageStack", name, None, opts)
        child_opts = pulumi.ResourceOptions(parent=self)

        self.account = storage.StorageAccount(
            "apisa",
            resource_group_name=resource_group.name,
            sku=storage.SkuArgs(name=settings.storage_sku),
            kind=settings.storage_kind,
            opts=child_opts,
        )

        account_keys = storage.list_storage_account_keys_output(
            resource_group_name=resource_group.name,
            account_name=self.account.name,
        )
        self.primary_key = projection.primary_storage_key(account_keys)

        logger.info(
            "storage_stack_declared",
            stack=name,
            sku=settings.storage_sku,
            kind=settings.storage_kind,
        )

        self.register_outputs({
            "account_name": self.account.name,
        })
