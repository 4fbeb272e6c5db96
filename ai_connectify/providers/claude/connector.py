"""Public Claude connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import ClaudeClient


class Claude(BaseConnector):
    client_class = ClaudeClient

    def set_anthropic_version(self, version: str) -> None:
        self.client.set_anthropic_version(version)

    async def create_message(self, messages: List[Dict[str, Any]],
                             model_id: str = "claude-3-5-sonnet-20240620", max_tokens: int = 1024,
                             new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_message(messages, model_id, max_tokens, new_config)

    async def create_message_batch(self, requests: List[Dict[str, Any]]):
        return await self.client.create_message_batch(requests)

    async def get_message_batch(self, message_batch_id: str):
        return await self.client.get_message_batch(message_batch_id)

    async def get_message_batch_results(self, message_batch_id: str):
        return await self.client.get_message_batch_results(message_batch_id)

    async def get_message_batch_list(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_message_batch_list(new_config)

    async def cancel_message_batch(self, message_batch_id: str):
        return await self.client.cancel_message_batch(message_batch_id)
