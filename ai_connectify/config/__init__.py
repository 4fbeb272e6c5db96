"""Configuration for AI-Connectify."""

from .constants import *  # noqa: F401,F403
from .settings import get_default_timeout_ms
