"""OpenAI chat, audio, embeddings and fine-tuning connector."""

from .client import ChatGPTClient, OpenAIClient
from .config import CONFIG
from .connector import ChatGPT

__all__ = ["ChatGPT", "ChatGPTClient", "OpenAIClient", "CONFIG"]
