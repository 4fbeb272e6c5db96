"""Constants shared across connectors."""

# Provider base URLs
OPENAI_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1"
COHERE_BASE_URL = "https://api.cohere.com"
MISTRAL_BASE_URL = "https://api.mistral.ai/v1"
STABILITY_BASE_URL = "https://api.stability.ai/v2beta"

# Anthropic headers
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_BATCH_BETA = "message-batches-2024-09-24"

# HTTP
DEFAULT_TIMEOUT_MS = 10000
TIMEOUT_ENV_VAR = "AI_CONNECTIFY_TIMEOUT_MS"
API_KEY_ENV_VAR = "AI_CONNECTIFY_API_KEY"

# Random identifiers for written artifacts
RANDOM_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
RANDOM_ID_LENGTH = 16

# API keys, organization IDs and similar tokens
KEY_STRING_PATTERN = r"^[A-Za-z0-9\-_.+=]{16,256}$"

# Long-running generation jobs
GENERATION_RUNNING_MESSAGE = "Generation is still running, try again in 10 seconds"

__all__ = [
    "OPENAI_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "COHERE_BASE_URL",
    "MISTRAL_BASE_URL",
    "STABILITY_BASE_URL",
    "ANTHROPIC_VERSION",
    "ANTHROPIC_BATCH_BETA",
    "DEFAULT_TIMEOUT_MS",
    "TIMEOUT_ENV_VAR",
    "API_KEY_ENV_VAR",
    "RANDOM_ID_ALPHABET",
    "RANDOM_ID_LENGTH",
    "KEY_STRING_PATTERN",
    "GENERATION_RUNNING_MESSAGE",
]
