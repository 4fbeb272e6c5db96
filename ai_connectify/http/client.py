"""
Request wrapper over ``httpx.AsyncClient``.

One ``HttpClient`` is bound to a base URL, a set of default headers and a
timeout. It is never mutated after construction: connectors that need new
headers build a new wrapper.
"""

from typing import Any, Dict, Mapping, NoReturn, Optional

import httpx

from ..config.settings import get_default_timeout_ms
from ..errors import AIConnectifyError
from ..models.responses import FullResponse
from ..observability.logging import ConnectorLogger

_TEXT_TYPES = ("text/", "application/x-ndjson", "application/jsonl",
               "application/x-jsonlines", "application/jsonlines")


class HttpClient:
    """Async HTTP request wrapper bound to one provider base URL."""

    def __init__(self, base_url: str, default_headers: Optional[Mapping[str, str]] = None,
                 timeout_ms: Optional[int] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 ai_name: str = "http"):
        self.base_url = base_url
        self.default_headers = dict(default_headers or {})
        self.timeout_ms = timeout_ms if timeout_ms is not None else get_default_timeout_ms()
        self.logger = ConnectorLogger(ai_name)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=self.default_headers,
            timeout=self.timeout_ms / 1000,
            transport=transport,
        )

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None,
                  extra_options: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._send("GET", endpoint, params=params, extra_options=extra_options)
        response.raise_for_status()
        return self._decode_body(response)

    async def get_full(self, endpoint: str, params: Optional[Mapping[str, Any]] = None,
                       extra_options: Optional[Dict[str, Any]] = None) -> FullResponse:
        """GET returning status, body and headers; HTTP errors do not raise."""
        response = await self._send("GET", endpoint, params=params, extra_options=extra_options)
        return self._full(response)

    async def post(self, endpoint: str, body: Any = None,
                   extra_options: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._send("POST", endpoint, json=body, extra_options=extra_options)
        response.raise_for_status()
        return self._decode_body(response)

    async def post_form(self, endpoint: str, data: Optional[Mapping[str, Any]] = None,
                        files: Optional[Mapping[str, Any]] = None,
                        extra_options: Optional[Dict[str, Any]] = None) -> FullResponse:
        """Multipart POST returning status, body and headers; HTTP errors do not raise."""
        response = await self._send("POST", endpoint, data=data, files=files,
                                    extra_options=extra_options)
        return self._full(response)

    async def patch(self, endpoint: str, body: Any = None,
                    extra_options: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._send("PATCH", endpoint, json=body, extra_options=extra_options)
        response.raise_for_status()
        return self._decode_body(response)

    async def delete(self, endpoint: str, extra_options: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._send("DELETE", endpoint, extra_options=extra_options)
        response.raise_for_status()
        return self._decode_body(response)

    def throw_error(self, message: str, cause: Optional[BaseException] = None) -> NoReturn:
        """Raise ``AIConnectifyError`` with ``message``, chained to ``cause``."""
        raise AIConnectifyError(message) from cause

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, endpoint: str,
                    extra_options: Optional[Dict[str, Any]] = None,
                    **kwargs) -> httpx.Response:
        options = dict(extra_options or {})
        # Per-call headers and params are merged over the ones given explicitly
        if "params" in options and kwargs.get("params"):
            kwargs["params"] = {**kwargs["params"], **options.pop("params")}
        for key, value in options.items():
            kwargs[key] = value
        kwargs = {k: v for k, v in kwargs.items() if v is not None}

        with self.logger.track_request(method, endpoint) as meta:
            response = await self._client.request(method, endpoint, **kwargs)
            meta['status'] = response.status_code
        return response

    def _full(self, response: httpx.Response) -> FullResponse:
        return FullResponse(
            status=response.status_code,
            data=self._decode_body(response),
            headers={k.lower(): v for k, v in response.headers.items()},
        )

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "").lower()
        if "json" in content_type and not any(t in content_type for t in _TEXT_TYPES[1:]):
            return response.json()
        if any(t in content_type for t in _TEXT_TYPES) or "event-stream" in content_type:
            return response.text
        return response.content
