"""Registry stack for the container registry and application image."""

import pulumi
import pulumi_docker as docker
from pulumi_azure_native import containerregistry, resources

from container_app_iac import projection
from container_app_iac.core.logging import get_logger
from container_app_iac.models import StackSettings

logger = get_logger(__name__)


class RegistryStack(pulumi.ComponentResource):
    """Stack for the container registry.

    Creates:
    - Azure Container Registry with the admin user enabled
    - Docker image built locally and pushed with the admin credentials
    """

    def __init__(
        self,
        name: str,
        resource_group: resources.ResourceGroup,
        settings: StackSettings,
        opts: pulumi.ResourceOptions = None,
    ) -> None:
        super().__init__("containerappiac:stacks:RegistryStack", name, None, opts)
        child_opts = pulumi.ResourceOptions(parent=self)

        self.registry = containerregistry.Registry(
            "registry",
            resource_group_name=resource_group.name,
            sku=containerregistry.SkuArgs(name=settings.registry_sku),
            admin_user_enabled=settings.admin_user_enabled,
            opts=child_opts,
        )

        credentials = containerregistry.list_registry_credentials_output(
            resource_group_name=resource_group.name,
            registry_name=self.registry.name,
        )

        self.login_server = self.registry.login_server
        self.username = projection.admin_username(credentials)
        self.password = projection.admin_password(credentials)

        self.image = docker.Image(
            settings.image_name,
            image_name=self.login_server.apply(settings.image_reference),
            build=docker.DockerBuildArgs(
                context=settings.build_context,
                platform=settings.image_platform,
            ),
            registry=docker.RegistryArgs(
                server=self.login_server,
                username=self.username,
                password=self.password,
            ),
            opts=child_opts,
        )
        self.image_name = self.image.image_name

        logger.info(
            "registry_stack_declared",
            stack=name,
            sku=settings.registry_sku,
            image=settings.image_name,
            tag=settings.image_tag,
            build_context=settings.build_context,
        )

        self.register_outputs({
            "login_server": self.login_server,
            "image_name": self.image_name,
        })
