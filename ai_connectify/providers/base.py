"""
Base classes shared by every provider.

``ConnectorClient`` owns the HTTP wrapper, the auth headers and the error
translation of one provider. ``BaseConnector`` is the public facade that
validates the API key and forwards calls to its client.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, NoReturn, Optional

import httpx

from ..errors import AIConnectifyError, ErrorMapper
from ..helpers.files import (
    build_artifact_path,
    read_upload,
    validate_and_return_path,
    write_artifact,
)
from ..helpers.ids import generate_random_id
from ..helpers.payloads import build_body
from ..helpers.validation import validate_key_string, validate_string_input
from ..http.client import HttpClient
from ..models.responses import FullResponse
from ..observability.logging import ConnectorLogger



class ConnectorClient(ABC):
    """
    Request translation for one provider.

    Subclasses set ``ai_name`` and ``base_url`` and build the auth headers.
    Optional headers set at runtime live in ``_extra_headers``; every change
    builds a new ``HttpClient`` and swaps the reference, so requests already
    in flight keep the wrapper they started with.
    """

    ai_name: str = ""
    base_url: str = ""

    def __init__(self, api_key: Optional[str] = None, timeout_ms: Optional[int] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.ai_api_key = api_key
        self.timeout_ms = timeout_ms
        self._transport = transport
        self._extra_headers: Dict[str, str] = {}
        self._retired_clients: List[HttpClient] = []
        self.logger = ConnectorLogger(self.ai_name.lower())
        self.http_request = self._create_http_client()

    @abstractmethod
    def _build_headers(self) -> Dict[str, str]:
        """Auth and content headers sent with every request."""

    @property
    def headers(self) -> Dict[str, str]:
        return {**self._build_headers(), **self._extra_headers}

    def _create_http_client(self) -> HttpClient:
        return HttpClient(
            self.base_url,
            self.headers,
            timeout_ms=self.timeout_ms,
            transport=self._transport,
            ai_name=self.ai_name.lower(),
        )

    def _set_header(self, name: str, value: str) -> None:
        self._extra_headers[name] = value
        self._rebuild_http_client()
        self.logger.debug("Header updated, request wrapper rebuilt", header=name)

    def _rebuild_http_client(self) -> None:
        # The old wrapper stays open until aclose(); requests in flight still use it
        self._retired_clients.append(self.http_request)
        self.http_request = self._create_http_client()

    def throw_error(self, error: Any) -> NoReturn:
        """
        Raise ``AIConnectifyError`` for a failed remote call.

        The message is ``"<AI NAME> ERROR => <status> - <provider message>"``.
        """
        status = ErrorMapper.get_status_code(error)
        message = ErrorMapper.extract_message(error)
        cause = error if isinstance(error, BaseException) else None
        self.http_request.throw_error(self._error_text(message, status), cause)

    def _error_text(self, message: str, status: Optional[int] = None) -> str:
        prefix = f"{self.ai_name.upper()} ERROR =>"
        return f"{prefix} {status} - {message}" if status is not None else f"{prefix} {message}"

    @contextmanager
    def translate_errors(self):
        """Turn HTTP, file, decoding and response-shape failures into ``AIConnectifyError``."""
        try:
            yield
        except AIConnectifyError:
            raise
        except (httpx.HTTPError, OSError, ValueError) as e:
            self.throw_error(e)
        except (KeyError, IndexError, TypeError) as e:
            # 2xx body without the expected field, or not JSON at all
            self.http_request.throw_error(
                self._error_text(f"Unexpected response format ({type(e).__name__}: {e})"), e
            )

    def _body(self, required: Mapping[str, Any], new_config: Optional[Mapping[str, Any]] = None,
              defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return build_body(required, new_config, defaults)

    def _check_full(self, response: FullResponse, expected: int = 200) -> FullResponse:
        if response.status != expected:
            self.throw_error(response)
        return response

    def _destination(self, destination_folder: Any) -> str:
        validate_string_input(destination_folder, "Cannot process the destination folder")
        return validate_and_return_path(destination_folder, "destination_folder")

    def _upload(self, file_path: Any, message: str):
        validate_string_input(file_path, message)
        return read_upload(file_path)

    def _save_artifact(self, folder: str, data: Any, extension: str,
                       name: Optional[str] = None, kind: str = "file") -> str:
        """Write ``data`` to ``<folder>/<name or random id>.<extension>`` and return the path."""
        path = build_artifact_path(folder, name or generate_random_id(), extension)
        size = write_artifact(path, data if data is not None else b"")
        self.logger.log_artifact(path, size, kind=kind)
        return path

    async def aclose(self) -> None:
        retired, self._retired_clients = self._retired_clients, []
        for client in retired:
            await client.aclose()
        await self.http_request.aclose()


class BaseConnector:
    """Public facade for one provider."""

    client_class = None
    api_key_required = True

    def __init__(self, api_key: Optional[str] = None, **client_options):
        if self.api_key_required or api_key is not None:
            validate_key_string(api_key, "A valid API key must be provided")
        self.client = self.client_class(api_key, **client_options)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
