"""Cohere connector."""

from .client import CohereClient
from .config import CONFIG
from .connector import Cohere

__all__ = ["Cohere", "CohereClient", "CONFIG"]
