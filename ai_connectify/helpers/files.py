"""Filesystem helpers for uploads and generated artifacts."""

import os
from pathlib import Path
from typing import Tuple, Union

from ..errors import AIConnectifyError


def validate_and_return_path(directory_path: str, variable_name: str) -> str:
    """
    Validate that a destination folder exists.

    Args:
        directory_path: Folder given by the caller, relative or absolute
        variable_name: Parameter name used in the error message

    Returns:
        str: The folder without trailing slashes, as the caller gave it

    Raises:
        AIConnectifyError: If the folder does not exist
    """
    if not isinstance(directory_path, str) or not directory_path.strip():
        raise AIConnectifyError(f"The '{variable_name}' path is invalid or doesn't exist")

    cleaned = directory_path.rstrip("/\\") or directory_path
    if not (Path.cwd() / cleaned).is_dir():
        raise AIConnectifyError(f"The '{variable_name}' path is invalid or doesn't exist")
    return cleaned


def build_artifact_path(folder: str, name: str, extension: str) -> str:
    """``./<folder>/<name>.<ext>`` for relative folders, as-is for absolute ones."""
    folder = folder.rstrip("/\\") or folder
    if os.path.isabs(folder):
        return f"{folder}/{name}.{extension}"
    if folder.startswith("./"):
        folder = folder[2:]
    return f"./{folder}/{name}.{extension}"


def write_artifact(path: str, data: Union[bytes, bytearray, str]) -> int:
    """Write bytes (or text) to ``path`` and return the number of bytes written."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    Path(path).write_bytes(bytes(data))
    return len(data)


def read_upload(file_path: str) -> Tuple[str, bytes]:
    """Read a local file for a multipart upload; returns (filename, content)."""
    path = Path(file_path)
    if not path.is_file():
        raise AIConnectifyError(f"The file '{file_path}' is invalid or doesn't exist")
    return path.name, path.read_bytes()
