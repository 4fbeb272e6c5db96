"""Local TensorFlow connector."""

from .client import TensorFlowClient
from .config import CONFIG
from .connector import TensorFlow

__all__ = ["TensorFlow", "TensorFlowClient", "CONFIG"]
