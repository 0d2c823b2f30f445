"""Azure Container Apps infrastructure declared with Pulumi."""

__version__ = "1.0.0"
