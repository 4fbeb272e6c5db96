"""
Provider connectors and their registration table.

Adding a provider means adding its sub-package and one row to ``CONNECTORS``.
"""

from typing import Dict

from ..models.descriptors import ConnectorEntry
from . import chatgpt, claude, cohere, dalle, mistral, stability, tensorflow
from .base import BaseConnector, ConnectorClient

CONNECTORS: Dict[str, ConnectorEntry] = {
    "ChatGPT": ConnectorEntry(connector_class=chatgpt.ChatGPT, config=chatgpt.CONFIG),
    "Claude": ConnectorEntry(connector_class=claude.Claude, config=claude.CONFIG),
    "Cohere": ConnectorEntry(connector_class=cohere.Cohere, config=cohere.CONFIG),
    "DALLE": ConnectorEntry(connector_class=dalle.DALLE, config=dalle.CONFIG),
    "Mistral": ConnectorEntry(connector_class=mistral.Mistral, config=mistral.CONFIG),
    "Stability": ConnectorEntry(connector_class=stability.Stability, config=stability.CONFIG),
    "TensorFlow": ConnectorEntry(connector_class=tensorflow.TensorFlow, config=tensorflow.CONFIG),
}

__all__ = ["CONNECTORS", "BaseConnector", "ConnectorClient"]
