"""Public TensorFlow connector. No API key is needed."""

from typing import Any, Optional

from ..base import BaseConnector
from .client import TensorFlowClient


class TensorFlow(BaseConnector):
    client_class = TensorFlowClient
    api_key_required = False

    @property
    def tf(self) -> Any:
        return self.client.tf

    def is_available(self) -> bool:
        return self.client.is_available()

    async def call(self, method: str, *args, **kwargs) -> Any:
        """Call any TensorFlow function by dotted name, e.g. ``"math.reduce_sum"``."""
        return await self.client.call(method, *args, **kwargs)
