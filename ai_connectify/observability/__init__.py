"""Observability helpers."""

from .logging import ConnectorLogger

__all__ = ["ConnectorLogger"]
