"""HTTP layer for AI-Connectify."""

from .client import HttpClient

__all__ = ["HttpClient"]
