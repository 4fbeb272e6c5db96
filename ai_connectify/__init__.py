"""
AI-Connectify - one client for many generative-AI APIs.

Supports OpenAI (ChatGPT, DALLE), Anthropic (Claude), Cohere, Mistral,
Stability AI and a local TensorFlow wrapper.
"""

from .api.client import AIConnectify
from .connectors.registry import AIRegistry, get_registry
from .errors import AIConnectifyError
from .helpers.ids import generate_random_id
from .models import ConnectorEntry, FullResponse, ProviderConfig, ProviderDescriptor
from .providers.chatgpt import ChatGPT
from .providers.claude import Claude
from .providers.cohere import Cohere
from .providers.dalle import DALLE
from .providers.mistral import Mistral
from .providers.stability import Stability
from .providers.tensorflow import TensorFlow

__version__ = "0.1.0"

__all__ = [
    "AIConnectify",
    "AIConnectifyError",
    "AIRegistry",
    "get_registry",
    "generate_random_id",
    "ConnectorEntry",
    "FullResponse",
    "ProviderConfig",
    "ProviderDescriptor",
    "ChatGPT",
    "Claude",
    "Cohere",
    "DALLE",
    "Mistral",
    "Stability",
    "TensorFlow",
]
