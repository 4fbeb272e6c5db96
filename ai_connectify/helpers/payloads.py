"""Request body builders and response reshaping helpers."""

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..errors import AIConnectifyError
from .validation import validate_mapping_input


def build_body(required: Mapping[str, Any],
               new_config: Optional[Mapping[str, Any]] = None,
               defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge a request body.

    Caller options override defaults, and explicitly named fields override both.
    """
    if new_config is None:
        new_config = {}
    validate_mapping_input(new_config, "Cannot process the configuration object")
    return {**(defaults or {}), **new_config, **required}


def build_form(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Multipart text fields; None values are dropped, others stringified."""
    form = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "true" if value else "false"
        elif isinstance(value, (dict, list)):
            form[key] = json.dumps(value)
        else:
            form[key] = str(value)
    return form


def strip_keys(payload: Any, *keys: str) -> Any:
    """Return a copy of a dict payload without ``keys``."""
    if not isinstance(payload, dict):
        return payload
    return {k: v for k, v in payload.items() if k not in keys}


def parse_json_lines(text: Any) -> List[Any]:
    """Parse JSONL or server-sent-event ``data:`` lines into a list of objects."""
    if text is None:
        return []
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    if isinstance(text, list):
        return text
    if isinstance(text, dict):
        return [text]

    items = []
    for line in _lines(text):
        if line.startswith("data:"):
            line = line[len("data:"):].strip()
        elif line.startswith(("event:", "id:", "retry:", ":")):
            continue
        if not line or line == "[DONE]":
            continue
        try:
            items.append(json.loads(line))
        except ValueError as e:
            raise AIConnectifyError(f"Cannot parse response line: {line[:80]}") from e
    return items


def _lines(text: str) -> Iterable[str]:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            yield stripped
