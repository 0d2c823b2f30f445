"""Pulumi program and component stacks."""
