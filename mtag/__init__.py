"""Namespaced semantic-version tags for monorepo releases."""

__version__ = "0.3.0"
