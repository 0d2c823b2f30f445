"""Pytest configuration and shared fixtures."""

import pytest
from hypothesis import settings, Verbosity

from container_app_iac.models import StackSettings

settings.register_profile(
    "default",
    max_examples=100,
    deadline=5000,
    verbosity=Verbosity.normal,
)

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=10000,
    verbosity=Verbosity.quiet,
)

settings.load_profile("default")


@pytest.fixture
def stack_settings():
    """Settings for the default API-only deployment."""
    return StackSettings(resource_group_name="rg-api-test")


@pytest.fixture
def storage_settings():
    """Settings for the deployment that adds a storage account."""
    return StackSettings(resource_group_name="rg-api-test", variant="api_with_storage")
