"""Data models for AI-Connectify."""

from .descriptors import ConnectorEntry, ProviderConfig, ProviderDescriptor
from .responses import FullResponse

__all__ = ["ConnectorEntry", "ProviderConfig", "ProviderDescriptor", "FullResponse"]
