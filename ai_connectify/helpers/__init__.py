"""Shared helpers for connectors."""

from .files import build_artifact_path, read_upload, validate_and_return_path, write_artifact
from .ids import generate_random_id
from .payloads import build_body, build_form, parse_json_lines, strip_keys
from .validation import (
    validate_array_input,
    validate_key_string,
    validate_mapping_input,
    validate_number_input,
    validate_string_input,
)

__all__ = [
    "build_artifact_path",
    "read_upload",
    "validate_and_return_path",
    "write_artifact",
    "generate_random_id",
    "build_body",
    "build_form",
    "parse_json_lines",
    "strip_keys",
    "validate_array_input",
    "validate_key_string",
    "validate_mapping_input",
    "validate_number_input",
    "validate_string_input",
]
