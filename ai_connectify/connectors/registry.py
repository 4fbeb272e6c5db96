"""
Connector registry.

Maps provider names to their connector class and whether an API key is
required. The registry is built from the ``CONNECTORS`` table once and is
then only changed through ``register_ai``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Type, Union

from .. import providers
from ..errors import AIConnectifyError
from ..models.descriptors import ConnectorEntry, ProviderConfig, ProviderDescriptor

logger = logging.getLogger(__name__)

CONNECTORS_DIR = Path(providers.__file__).resolve().parent


class AIRegistry:
    """Registry of available AI connectors."""

    def __init__(self, connectors: Optional[Mapping[str, ConnectorEntry]] = None,
                 connectors_dir: Union[str, Path, None] = None):
        """
        Load and validate every connector.

        Args:
            connectors: Registration table; defaults to ``providers.CONNECTORS``
            connectors_dir: Directory holding the provider packages

        Raises:
            AIConnectifyError: If the directory is missing or any entry has an
                invalid config. One bad entry fails the whole registry.
        """
        self.connectors_dir = Path(connectors_dir) if connectors_dir is not None else CONNECTORS_DIR
        self._registered_ais: Dict[str, ProviderDescriptor] = {}
        self._load_ais(providers.CONNECTORS if connectors is None else connectors)

    def _load_ais(self, connectors: Mapping[str, ConnectorEntry]) -> None:
        if not self.connectors_dir.is_dir():
            raise AIConnectifyError("AI connectors directory not found")

        for name, entry in connectors.items():
            try:
                config = getattr(entry, "config", None)
                if not isinstance(config, ProviderConfig):
                    raise AIConnectifyError(f"Invalid or missing config for {name} service")
                self.register_ai(name, entry.connector_class, config.api_key_required)
            except (AIConnectifyError, ValueError, AttributeError) as e:
                raise AIConnectifyError(f"Failed to load AI module {name}: {e}") from e

        logger.debug("Loaded %d AI connectors: %s", len(self._registered_ais), ", ".join(self.names()))

    def register_ai(self, name: str, connector_class: Type, api_key_required: bool) -> None:
        """Insert or overwrite the descriptor for ``name``."""
        self._registered_ais[name] = ProviderDescriptor(
            name=name,
            connector_class=connector_class,
            api_key_required=api_key_required,
        )
        logger.debug("Registered AI connector %s (api_key_required=%s)", name, api_key_required)

    def get_ai(self, name: str) -> ProviderDescriptor:
        descriptor = self._registered_ais.get(name)
        if descriptor is None:
            raise AIConnectifyError(f"AI service {name} is not registered")
        return descriptor

    @property
    def registered_ais(self) -> Dict[str, ProviderDescriptor]:
        return dict(self._registered_ais)

    def names(self) -> List[str]:
        return sorted(self._registered_ais)

    def __contains__(self, name: object) -> bool:
        return name in self._registered_ais

    def __len__(self) -> int:
        return len(self._registered_ais)


@lru_cache(maxsize=None)
def get_registry() -> AIRegistry:
    """The process-wide registry, built on first use."""
    return AIRegistry()
