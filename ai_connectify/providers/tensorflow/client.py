"""Thin wrapper over a locally installed ``tensorflow`` module."""

import asyncio
import functools
import importlib.util
from threading import Lock
from typing import Any, Optional

from ...errors import AIConnectifyError
from ...helpers.validation import validate_string_input
from ...observability.logging import ConnectorLogger


class TensorFlowClient:
    """Loads TensorFlow on first use and dispatches calls to it."""

    ai_name = "TensorFlow"

    def __init__(self, api_key: Optional[str] = None):
        self.ai_api_key = api_key
        self.logger = ConnectorLogger("tensorflow")
        self._tf = None
        self._loading_lock = Lock()

    @property
    def tf(self) -> Any:
        """The ``tensorflow`` module, imported on first access."""
        with self._loading_lock:
            if self._tf is None:
                try:
                    self._tf = importlib.import_module("tensorflow")
                except ImportError as e:
                    raise AIConnectifyError(
                        "TensorFlow is not installed. Install it with: pip install ai-connectify[local]"
                    ) from e
                self.logger.info("TensorFlow loaded", version=getattr(self._tf, "__version__", None))
            return self._tf

    @tf.setter
    def tf(self, module: Any) -> None:
        self._tf = module

    def is_available(self) -> bool:
        if self._tf is not None:
            return True
        return importlib.util.find_spec("tensorflow") is not None

    def get_method(self, method: str):
        validate_string_input(method, "Cannot process the method name")
        target = self.tf
        for part in method.split("."):
            target = getattr(target, part, None)
            if target is None:
                break
        if target is None or not callable(target):
            raise AIConnectifyError(f"The method {method} is not available in TensorFlow")
        return target

    async def call(self, method: str, *args, **kwargs) -> Any:
        """Run ``tf.<method>(*args, **kwargs)`` in the default executor."""
        func = self.get_method(method)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    async def aclose(self) -> None:
        self._tf = None
