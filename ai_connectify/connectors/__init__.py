"""Connector registry."""

from .registry import AIRegistry, get_registry

__all__ = ["AIRegistry", "get_registry"]
