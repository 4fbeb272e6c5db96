"""Anthropic Messages and Message Batches client."""

from typing import Any, Dict, List, Optional

from ...config.constants import ANTHROPIC_BASE_URL, ANTHROPIC_BATCH_BETA, ANTHROPIC_VERSION
from ...helpers.payloads import parse_json_lines, strip_keys
from ...helpers.validation import (
    validate_array_input,
    validate_number_input,
    validate_string_input,
)
from ..base import ConnectorClient

BATCH_OPTIONS = {"headers": {"anthropic-beta": ANTHROPIC_BATCH_BETA}}


class ClaudeClient(ConnectorClient):
    ai_name = "Claude"
    base_url = ANTHROPIC_BASE_URL

    def __init__(self, api_key: Optional[str] = None, **kwargs):
        self.anthropic_version = ANTHROPIC_VERSION
        super().__init__(api_key, **kwargs)

    def _build_headers(self) -> Dict[str, str]:
        return {"x-api-key": self.ai_api_key, "anthropic-version": self.anthropic_version}

    def set_anthropic_version(self, version: str) -> None:
        validate_string_input(
            version, "The version is required to set the new anthropic-version request header"
        )
        self.anthropic_version = version
        self._rebuild_http_client()

    async def create_message(self, messages: List[Dict[str, Any]], model_id: str, max_tokens: int,
                             new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(model_id, "Cannot process the model ID")
        validate_number_input(max_tokens, "Cannot process the max tokens value")
        body = self._body(
            {"messages": messages, "model": model_id, "max_tokens": max_tokens}, new_config
        )
        with self.translate_errors():
            response = await self.http_request.post("/messages", body)
            return strip_keys(response, "usage")

    async def create_message_batch(self, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        validate_array_input(requests, "Cannot process the requests array")
        with self.translate_errors():
            return await self.http_request.post(
                "/messages/batches", {"requests": requests}, BATCH_OPTIONS
            )

    async def get_message_batch(self, message_batch_id: str) -> Dict[str, Any]:
        validate_string_input(message_batch_id, "Cannot process the message batch ID")
        with self.translate_errors():
            return await self.http_request.get(
                f"/messages/batches/{message_batch_id}", extra_options=BATCH_OPTIONS
            )

    async def get_message_batch_results(self, message_batch_id: str) -> List[Dict[str, Any]]:
        """Results come back as JSONL, one object per batch request."""
        validate_string_input(message_batch_id, "Cannot process the message batch ID")
        with self.translate_errors():
            response = await self.http_request.get(
                f"/messages/batches/{message_batch_id}/results", extra_options=BATCH_OPTIONS
            )
            return parse_json_lines(response)

    async def get_message_batch_list(self, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(
                "/messages/batches", params, extra_options=BATCH_OPTIONS
            )

    async def cancel_message_batch(self, message_batch_id: str) -> Dict[str, Any]:
        validate_string_input(message_batch_id, "Cannot process the message batch ID")
        with self.translate_errors():
            return await self.http_request.post(
                f"/messages/batches/{message_batch_id}/cancel", extra_options=BATCH_OPTIONS
            )
