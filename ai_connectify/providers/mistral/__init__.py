"""Mistral AI connector."""

from .client import MistralClient
from .config import CONFIG
from .connector import Mistral

__all__ = ["Mistral", "MistralClient", "CONFIG"]
