"""Configuration-correctness checks for declared resource graphs."""

from typing import Any, Iterable, List

from container_app_iac.core.errors import WiringError
from container_app_iac.core.logging import get_logger
from container_app_iac.projection import read_field

logger = get_logger(__name__)


def unresolved_secret_refs(registries: Iterable[Any], secrets: Iterable[Any]) -> List[str]:
    """Registry ``password_secret_ref`` values that name no declared secret.

    Registries and secrets may be SDK ``*Args`` objects or plain dicts.
    """
    declared = {read_field(secret, "name") for secret in secrets}
    missing = []
    for registry in registries:
        ref = read_field(registry, "password_secret_ref")
        if ref is not None and ref not in declared:
            missing.append(ref)
    return missing


def ensure_registry_secrets(
    registries: Iterable[Any],
    secrets: Iterable[Any],
    resource: str = "container_app",
) -> None:
    """Raise WiringError when a registry points at an undeclared secret."""
    registries = list(registries)
    secrets = list(secrets)
    missing = unresolved_secret_refs(registries, secrets)
    if missing:
        logger.error(
            "registry_secret_unresolved",
            resource=resource,
            missing=missing,
        )
        raise WiringError(
            f"Registry secret reference '{missing[0]}' is not declared in the secrets of {resource}",
            resource=resource,
            reference=missing[0],
            details={"missing": missing},
        )
