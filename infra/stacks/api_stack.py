"""API stack for the managed environment and container app."""

import pulumi
from pulumi_azure_native import app, resources

from container_app_iac import projection
from container_app_iac.core.logging import get_logger
from container_app_iac.models import StackSettings
from container_app_iac.wiring import ensure_registry_secrets

from infra.stacks.monitoring_stack import MonitoringStack
from infra.stacks.registry_stack import RegistryStack

logger = get_logger(__name__)


class ApiStack(pulumi.ComponentResource):
    """Stack for the API container app.

    Creates:
    - Managed environment shipping app logs to Log Analytics
    - Container app pulling the pushed image with registry admin credentials
    - Public HTTPS URL of the app's ingress
    """

    def __init__(
        self,
        name: str,
        resource_group: resources.ResourceGroup,
        monitoring_stack: MonitoringStack,
        registry_stack: RegistryStack,
        settings: StackSettings,
        opts: pulumi.ResourceOptions = None,
    ) -> None:
        super().__init__("containerappiac:stacks:ApiStack", name, None, opts)
        child_opts = pulumi.ResourceOptions(parent=self)

        self.environment = app.ManagedEnvironment(
            "env",
            resource_group_name=resource_group.name,
            app_logs_configuration=app.AppLogsConfigurationArgs(
                destination="log-analytics",
                log_analytics_configuration=app.LogAnalyticsConfigurationArgs(
                    customer_id=monitoring_stack.customer_id,
                    shared_key=monitoring_stack.shared_key,
                ),
            ),
            opts=child_opts,
        )

        # The registry password is only ever passed by secret reference.
        self.registries = [
            app.RegistryCredentialsArgs(
                server=registry_stack.login_server,
                username=registry_stack.username,
                password_secret_ref=settings.registry_secret_name,
            )
        ]
        self.secrets = [
            app.SecretArgs(
                name=settings.registry_secret_name,
                value=registry_stack.password,
            )
        ]
        ensure_registry_secrets(self.registries, self.secrets, resource="app")

        self.container_app = app.ContainerApp(
            "app",
            resource_group_name=resource_group.name,
            managed_environment_id=self.environment.id,
            configuration=app.ConfigurationArgs(
                ingress=app.IngressArgs(
                    external=settings.external_ingress,
                    target_port=settings.target_port,
                ),
                registries=self.registries,
                secrets=self.secrets,
            ),
            template=app.TemplateArgs(
                containers=[
                    app.ContainerArgs(
                        name=settings.container_name,
                        image=registry_stack.image_name,
                    )
                ],
            ),
            opts=child_opts,
        )

        self.url = projection.https_url(
            projection.ingress_fqdn(self.container_app.configuration)
        )

        logger.info(
            "api_stack_declared",
            stack=name,
            container=settings.container_name,
            target_port=settings.target_port,
            external=settings.external_ingress,
        )

        self.register_outputs({
            "url": self.url,
        })
