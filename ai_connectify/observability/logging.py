"""
Structured logging utility for connectors.

Provides a consistent logging interface for every connector and for the HTTP
wrapper, with standard fields like provider, method, endpoint and request_id.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Optional


class ConnectorLogger:
    """Structured logger for connectors."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "chatgpt", "stability")
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"ai_connectify.connectors.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]
        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")
        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.debug(self._format_message(message, request_id=request_id, **kwargs))

    def info(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.info(self._format_message(message, request_id=request_id, **kwargs))

    def warning(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.warning(self._format_message(message, request_id=request_id, **kwargs))

    def error(self, message: str, request_id: Optional[str] = None,
              error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        self.logger.error(self._format_message(message, request_id=request_id, **kwargs))

    @contextmanager
    def track_request(self, method: str, endpoint: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.

        Args:
            method: HTTP verb (e.g., "GET", "POST")
            endpoint: Endpoint path relative to the base URL
            request_id: Optional request ID (generated if not provided)

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug(f"Starting {method} request", request_id=request_id, endpoint=endpoint)

        metadata = {
            'request_id': request_id,
            'method': method,
            'endpoint': endpoint,
            'start_time': start_time,
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.info(
                f"Completed {method} request",
                request_id=request_id,
                endpoint=endpoint,
                status=metadata.get('status'),
                duration_ms=int(duration * 1000),
            )
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {method} request",
                request_id=request_id,
                endpoint=endpoint,
                duration_ms=int(duration * 1000),
                error=e,
            )
            raise

    def log_artifact(self, path: str, size: int, kind: str = "file"):
        """Log a generated artifact written to disk."""
        self.info("Artifact written", kind=kind, path=path, bytes=size)
