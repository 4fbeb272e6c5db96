"""OpenAI image generation connector."""

from .client import DALLEClient
from .config import CONFIG
from .connector import DALLE

__all__ = ["DALLE", "DALLEClient", "CONFIG"]
