"""Output projection helpers.

Resource attributes in Pulumi are deferred ``Output`` values. These helpers
project one resolved value into another, keeping the pure part of each
projection separate so it can be tested without the Pulumi runtime.
"""

from typing import Any, Optional

import pulumi


def read_field(value: Any, name: str) -> Any:
    """Read ``name`` from an SDK output type or a plain dict."""
    if value is None:
        return None
    if isinstance(value, dict) and name in value:
        return value[name]
    return getattr(value, name, None)


def format_https_url(fqdn: Optional[str]) -> str:
    # A missing FQDN still yields a string, as the exported Url is a string.
    return f"https://{fqdn or ''}"


def first_password(credentials: Any) -> Optional[str]:
    """Value of the first admin password in a registry credentials result."""
    passwords = read_field(credentials, "passwords") or []
    if not passwords:
        return None
    return read_field(passwords[0], "value")


def first_key(keys: Any) -> Optional[str]:
    """Value of the first key in a storage account keys result."""
    entries = read_field(keys, "keys") or []
    if not entries:
        return None
    return read_field(entries[0], "value")


def fqdn_of(configuration: Any) -> Optional[str]:
    """Ingress FQDN from a container app configuration, if ingress is set."""
    return read_field(read_field(configuration, "ingress"), "fqdn")


# Output-aware wrappers.

def https_url(fqdn: pulumi.Input[str]) -> pulumi.Output[str]:
    return pulumi.Output.from_input(fqdn).apply(format_https_url)


def ingress_fqdn(configuration: pulumi.Output[Any]) -> pulumi.Output[Optional[str]]:
    return configuration.apply(fqdn_of)


def admin_username(credentials: pulumi.Output[Any]) -> pulumi.Output[str]:
    return credentials.apply(lambda c: read_field(c, "username"))


def admin_password(credentials: pulumi.Output[Any]) -> pulumi.Output[str]:
    return pulumi.Output.secret(credentials.apply(first_password))


def primary_shared_key(keys: pulumi.Output[Any]) -> pulumi.Output[str]:
    return pulumi.Output.secret(keys.apply(lambda k: read_field(k, "primary_shared_key")))


def primary_storage_key(keys: pulumi.Output[Any]) -> pulumi.Output[str]:
    return pulumi.Output.secret(keys.apply(first_key))
