"""Stability AI image, 3D and video connector."""

from .client import StabilityClient
from .config import CONFIG
from .connector import Stability

__all__ = ["Stability", "StabilityClient", "CONFIG"]
