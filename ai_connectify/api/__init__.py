"""Public entry point."""

from .client import AIConnectify

__all__ = ["AIConnectify"]
