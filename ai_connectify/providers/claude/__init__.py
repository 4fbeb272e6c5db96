"""Anthropic Messages API connector."""

from .client import ClaudeClient
from .config import CONFIG
from .connector import Claude

__all__ = ["Claude", "ClaudeClient", "CONFIG"]
