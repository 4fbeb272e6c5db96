"""
Error types and error mapping for AI connectors.

Every failure surfaced by the library is an ``AIConnectifyError`` carrying a
human-readable message. ``ErrorMapper`` pulls status codes and provider
messages out of the different error shapes the HTTP layer can produce.
"""

from typing import Any, Optional

import httpx


class AIConnectifyError(Exception):
    """Single error type raised by the library."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ErrorMapper:
    """Extracts status codes and messages from HTTP-level errors."""

    @staticmethod
    def get_status_code(error: Any) -> Optional[int]:
        """
        Return the HTTP status code attached to an error, if any.

        Args:
            error: An httpx error, a FullResponse or any exception

        Returns:
            Optional[int]: The status code or None for transport failures
        """
        response = getattr(error, "response", None)
        if response is not None and hasattr(response, "status_code"):
            return response.status_code
        status = getattr(error, "status", None)
        if isinstance(status, int):
            return status
        status_code = getattr(error, "status_code", None)
        if isinstance(status_code, int):
            return status_code
        return None

    @staticmethod
    def get_payload(error: Any) -> Any:
        """Return the decoded response body attached to an error."""
        response = getattr(error, "response", None)
        if isinstance(response, httpx.Response):
            try:
                return response.json()
            except ValueError:
                return response.text or None
        # FullResponse-like envelopes carry the decoded body on ``data``
        if hasattr(error, "status") and hasattr(error, "data"):
            return error.data
        return None

    @staticmethod
    def message_from_payload(payload: Any) -> Optional[str]:
        """
        Find the provider message inside a decoded error body.

        Looks at ``error.message``, then ``message``, then the ``errors`` list.
        """
        if isinstance(payload, (bytes, bytearray)):
            payload = payload.decode("utf-8", errors="replace")
        if isinstance(payload, str):
            return payload.strip() or None
        if not isinstance(payload, dict):
            return None

        error_field = payload.get("error")
        if isinstance(error_field, dict) and error_field.get("message"):
            return str(error_field["message"])
        if isinstance(error_field, str) and error_field:
            return error_field
        if payload.get("message"):
            return str(payload["message"])
        errors = payload.get("errors")
        if isinstance(errors, (list, tuple)) and errors:
            return ", ".join(str(item) for item in errors)
        if isinstance(errors, str) and errors:
            return errors
        return None

    @staticmethod
    def extract_message(error: Any) -> str:
        """Best available message for an error."""
        message = ErrorMapper.message_from_payload(ErrorMapper.get_payload(error))
        if message:
            return message
        text = str(error) if error is not None else ""
        return text or "Unexpected request error"
