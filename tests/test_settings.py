"""Tests for stack configuration loading and validation."""

import pulumi
import pytest
from hypothesis import given
from hypothesis import strategies as st

from container_app_iac.core.errors import ConfigurationError
from container_app_iac.models import LogLevel, StackSettings, StackVariant


def stack_config(namespace, values):
    """A real ``pulumi.Config`` holding ``values`` under its own namespace.

    Each test uses a distinct namespace because runtime config is process-wide.
    """
    name = f"settings-{namespace}"
    pulumi.runtime.set_all_config({f"{name}:{key}": value for key, value in values.items()})
    return pulumi.Config(name)


class TestDefaults:
    """Tests for the values a bare configuration produces."""

    def test_defaults(self, stack_settings):
        assert stack_settings.variant == StackVariant.API
        assert stack_settings.workspace_sku == "PerGB2018"
        assert stack_settings.log_retention_days == 30
        assert stack_settings.registry_sku == "Basic"
        assert stack_settings.admin_user_enabled is True
        assert stack_settings.image_name == "api.container.app.api"
        assert stack_settings.image_tag == "v1.0.0"
        assert stack_settings.build_context == "../"
        assert stack_settings.container_name == "myapp"
        assert stack_settings.target_port == 80
        assert stack_settings.external_ingress is True
        assert stack_settings.registry_secret_name == "pwd"
        assert stack_settings.storage_sku == "Standard_LRS"
        assert stack_settings.storage_kind == "StorageV2"
        assert stack_settings.log_level == LogLevel.INFO

    def test_with_storage(self, stack_settings, storage_settings):
        assert stack_settings.with_storage is False
        assert storage_settings.with_storage is True

    def test_image_reference(self, stack_settings):
        ref = stack_settings.image_reference("registry1234.azurecr.io")
        assert ref == "registry1234.azurecr.io/api.container.app.api:v1.0.0"


class TestValidation:
    """Tests for field validation."""

    @pytest.mark.parametrize("name", ["", "rg.", "rg/api", "rg api", "a" * 91])
    def test_invalid_resource_group_name(self, name):
        with pytest.raises(ValueError):
            StackSettings(resource_group_name=name)

    @pytest.mark.parametrize("name", ["rg", "rg-api_test", "rg.(prod)", "a" * 90])
    def test_valid_resource_group_name(self, name):
        assert StackSettings(resource_group_name=name).resource_group_name == name

    @pytest.mark.parametrize("port", [0, 65536])
    def test_invalid_target_port(self, port):
        with pytest.raises(ValueError):
            StackSettings(resource_group_name="rg", target_port=port)

    @pytest.mark.parametrize("image", ["Api", "api:latest", "my api"])
    def test_invalid_image_name(self, image):
        with pytest.raises(ValueError):
            StackSettings(resource_group_name="rg", image_name=image)

    def test_retention_lower_bound(self):
        with pytest.raises(ValueError):
            StackSettings(resource_group_name="rg", log_retention_days=7)


class TestFromPulumiConfig:
    """Tests for loading settings from Pulumi configuration."""

    def test_requires_resource_group_name(self):
        config = stack_config("missing-rg", {})
        with pytest.raises(pulumi.ConfigMissingError):
            StackSettings.from_pulumi_config(config)

    def test_minimal_config(self):
        config = stack_config("minimal", {"resourcegroupname": "rg-api"})
        settings = StackSettings.from_pulumi_config(config)
        assert settings.resource_group_name == "rg-api"
        assert settings.variant == StackVariant.API

    def test_optional_keys_are_coerced(self):
        config = stack_config("coerced", {
            "resourcegroupname": "rg-api",
            "variant": "api_with_storage",
            "targetPort": "8080",
            "imageTag": "v2.1.0",
            "logJson": "true",
            "logLevel": "DEBUG",
        })
        settings = StackSettings.from_pulumi_config(config)
        assert settings.variant == StackVariant.API_WITH_STORAGE
        assert settings.target_port == 8080
        assert settings.image_tag == "v2.1.0"
        assert settings.log_json is True
        assert settings.log_level == LogLevel.DEBUG

    def test_invalid_value_names_config_key(self):
        config = stack_config("bad-port", {
            "resourcegroupname": "rg-api",
            "targetPort": "99999",
        })
        with pytest.raises(ConfigurationError) as exc_info:
            StackSettings.from_pulumi_config(config)
        assert exc_info.value.key == "targetPort"
        assert exc_info.value.value == "99999"

    def test_invalid_variant(self):
        config = stack_config("bad-variant", {
            "resourcegroupname": "rg-api",
            "variant": "everything",
        })
        with pytest.raises(ConfigurationError) as exc_info:
            StackSettings.from_pulumi_config(config)
        assert exc_info.value.key == "variant"

    def test_invalid_resource_group_name(self):
        config = stack_config("bad-rg", {"resourcegroupname": "rg."})
        with pytest.raises(ConfigurationError) as exc_info:
            StackSettings.from_pulumi_config(config)
        assert exc_info.value.key == "resourcegroupname"


resource_group_name_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.()"),
    min_size=1,
    max_size=90,
).filter(lambda s: not s.endswith("."))


@given(name=resource_group_name_strategy)
def test_allowed_resource_group_names_are_accepted(name):
    assert StackSettings(resource_group_name=name).resource_group_name == name


@given(
    prefix=resource_group_name_strategy,
    bad=st.sampled_from("/\\ #%&*+,;<=>?@[]^`{|}~"),
)
def test_disallowed_characters_are_rejected(prefix, bad):
    with pytest.raises(ValueError):
        StackSettings(resource_group_name=(prefix + bad)[-90:])


hostname_strategy = st.from_regex(r"[a-z][a-z0-9]{2,20}\.azurecr\.io", fullmatch=True)
repository_strategy = st.from_regex(r"[a-z][a-z0-9.\-]{0,30}", fullmatch=True)
tag_strategy = st.from_regex(r"v[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}", fullmatch=True)


@given(server=hostname_strategy, name=repository_strategy, tag=tag_strategy)
def test_image_reference_splits_back(server, name, tag):
    settings = StackSettings(resource_group_name="rg", image_name=name, image_tag=tag)
    ref = settings.image_reference(server)
    registry, _, rest = ref.partition("/")
    repository, _, parsed_tag = rest.rpartition(":")
    assert (registry, repository, parsed_tag) == (server, name, tag)
