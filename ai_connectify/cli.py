"""CLI entry point for AI-Connectify."""

import argparse
import asyncio
import json
import os
import sys
from typing import Optional

from .api.client import AIConnectify
from .config.constants import API_KEY_ENV_VAR
from .connectors.registry import get_registry
from .errors import AIConnectifyError


def list_providers():
    """Print every registered provider."""
    registry = get_registry()
    print("Available AI connectors:")
    print("-" * 50)
    for name in registry.names():
        descriptor = registry.get_ai(name)
        key_note = "API key required" if descriptor.api_key_required else "no API key"
        print(f"{name} ({key_note})")


async def list_models(provider: str, api_key: Optional[str] = None) -> int:
    """Print the models a provider exposes."""
    api_key = api_key or os.getenv(API_KEY_ENV_VAR)
    try:
        ai = AIConnectify(provider, api_key)
    except AIConnectifyError as e:
        print(f"Error: {e}")
        return 1

    connector = ai.connector
    if not hasattr(connector, "get_models"):
        print(f"Error: {provider} does not expose a model list")
        return 1

    try:
        models = await connector.get_models()
        print(json.dumps(models, indent=2, default=str))
        return 0
    except AIConnectifyError as e:
        print(f"Error: {e}")
        return 1
    finally:
        await ai.aclose()


def main():
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="AI-Connectify CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('providers', help='List available AI connectors')

    models_parser = subparsers.add_parser('models', help='List the models of a provider')
    models_parser.add_argument('provider', help='Provider name (e.g., "ChatGPT", "Mistral")')
    models_parser.add_argument('--api-key', help=f'API key (defaults to ${API_KEY_ENV_VAR})')

    args = parser.parse_args()

    if args.command == 'providers':
        list_providers()
    elif args.command == 'models':
        sys.exit(asyncio.run(list_models(args.provider, args.api_key)))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
