"""Main entry point for AI-Connectify."""

from typing import Optional

from ..connectors.registry import AIRegistry, get_registry
from ..errors import AIConnectifyError


class AIConnectify:
    """
    Build a provider connector by name.

    Example:
        >>> ai = AIConnectify("ChatGPT", "sk-...")
        >>> await ai.connector.create_chat_completion([{"role": "user", "content": "Hi"}])
    """

    def __init__(self, ai: Optional[str] = None, api_key: Optional[str] = None,
                 registry: Optional[AIRegistry] = None):
        """
        Args:
            ai: Registered provider name (e.g. "ChatGPT", "Cohere")
            api_key: Provider API key; required unless the provider is local
            registry: Registry to resolve ``ai`` from; defaults to the process-wide one

        Raises:
            AIConnectifyError: Missing provider name, unknown provider, or
                missing API key for a provider that needs one
        """
        if not ai:
            raise AIConnectifyError("You must specify an AI to use")

        self.registry = registry if registry is not None else get_registry()
        descriptor = self.registry.get_ai(ai)

        if descriptor.api_key_required and not api_key:
            raise AIConnectifyError(f"API key is required for {ai}")

        self.ai = ai
        self.connector = descriptor.connector_class(api_key)

    async def aclose(self) -> None:
        await self.connector.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
