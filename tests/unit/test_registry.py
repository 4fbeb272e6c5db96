"""Unit tests for the connector registry and the top-level facade."""

import pytest

from ai_connectify import AIConnectify, AIConnectifyError, AIRegistry, get_registry
from ai_connectify.models.descriptors import ConnectorEntry, ProviderConfig, ProviderDescriptor
from ai_connectify.providers import CONNECTORS
from ai_connectify.providers.chatgpt import ChatGPT
from ai_connectify.providers.tensorflow import TensorFlow

ALL_PROVIDERS = ["ChatGPT", "Claude", "Cohere", "DALLE", "Mistral", "Stability", "TensorFlow"]


class DummyConnector:
    def __init__(self, api_key=None):
        self.api_key = api_key

    async def aclose(self):
        self.closed = True


class TestRegistry:
    """Registry loading and lookups."""

    def test_loads_every_provider(self):
        registry = AIRegistry()
        assert registry.names() == ALL_PROVIDERS

    def test_construction_is_repeatable(self):
        assert AIRegistry().names() == AIRegistry().names()

    def test_descriptor_fields(self):
        descriptor = AIRegistry().get_ai("ChatGPT")
        assert isinstance(descriptor, ProviderDescriptor)
        assert descriptor.name == "ChatGPT"
        assert descriptor.connector_class is ChatGPT
        assert descriptor.api_key_required is True

    def test_tensorflow_needs_no_key(self):
        assert AIRegistry().get_ai("TensorFlow").api_key_required is False

    def test_missing_directory(self, tmp_path):
        with pytest.raises(AIConnectifyError, match="^AI connectors directory not found$"):
            AIRegistry(connectors_dir=tmp_path / "missing")

    def test_invalid_config_fails_whole_registry(self):
        connectors = {
            "Good": ConnectorEntry(connector_class=DummyConnector, config=ProviderConfig(api_key_required=True)),
            "Broken": ConnectorEntry(connector_class=DummyConnector, config={"api_key_required": True}),
        }
        with pytest.raises(AIConnectifyError) as exc_info:
            AIRegistry(connectors)
        assert str(exc_info.value) == (
            "Failed to load AI module Broken: Invalid or missing config for Broken service"
        )

    def test_missing_config(self):
        connectors = {"Bare": ConnectorEntry(connector_class=DummyConnector)}
        with pytest.raises(AIConnectifyError, match="Invalid or missing config for Bare service"):
            AIRegistry(connectors)

    def test_config_requires_strict_bool(self):
        with pytest.raises(ValueError):
            ProviderConfig(api_key_required="yes")

    def test_get_unknown(self):
        with pytest.raises(AIConnectifyError, match="^AI service Gemini is not registered$"):
            AIRegistry().get_ai("Gemini")

    def test_register_overwrites(self):
        registry = AIRegistry()
        registry.register_ai("ChatGPT", DummyConnector, False)
        descriptor = registry.get_ai("ChatGPT")
        assert descriptor.connector_class is DummyConnector
        assert descriptor.api_key_required is False
        assert len(registry) == len(ALL_PROVIDERS)

    def test_registries_are_independent(self):
        registry = AIRegistry()
        registry.register_ai("Dummy", DummyConnector, False)
        assert "Dummy" in registry
        assert "Dummy" not in AIRegistry()

    def test_descriptors_are_immutable(self):
        descriptor = AIRegistry().get_ai("Cohere")
        with pytest.raises(ValueError):
            descriptor.api_key_required = False

    def test_registered_ais_is_a_copy(self):
        registry = AIRegistry()
        registry.registered_ais.pop("ChatGPT")
        assert "ChatGPT" in registry

    def test_process_registry_is_shared(self):
        assert get_registry() is get_registry()

    def test_table_entries_carry_configs(self):
        for name, entry in CONNECTORS.items():
            assert isinstance(entry.config, ProviderConfig), name


class TestAIConnectify:
    """Top-level facade."""

    def test_requires_ai_name(self):
        with pytest.raises(AIConnectifyError, match="^You must specify an AI to use$"):
            AIConnectify()

    def test_unknown_ai(self, api_key):
        with pytest.raises(AIConnectifyError, match="AI service Nope is not registered"):
            AIConnectify("Nope", api_key)

    def test_requires_api_key(self):
        with pytest.raises(AIConnectifyError, match="^API key is required for ChatGPT$"):
            AIConnectify("ChatGPT")

    def test_builds_connector(self, api_key):
        ai = AIConnectify("ChatGPT", api_key)
        assert isinstance(ai.connector, ChatGPT)
        assert ai.connector.client.ai_api_key == api_key

    def test_rejects_malformed_key(self):
        with pytest.raises(AIConnectifyError, match="A valid API key must be provided"):
            AIConnectify("Mistral", "short")

    def test_local_provider_without_key(self):
        ai = AIConnectify("TensorFlow")
        assert isinstance(ai.connector, TensorFlow)

    def test_injected_registry(self):
        registry = AIRegistry({})
        registry.register_ai("Dummy", DummyConnector, True)
        ai = AIConnectify("Dummy", "key", registry=registry)
        assert isinstance(ai.connector, DummyConnector)
        assert ai.connector.api_key == "key"

    @pytest.mark.asyncio
    async def test_async_context_closes_connector(self):
        registry = AIRegistry({})
        registry.register_ai("Dummy", DummyConnector, False)
        async with AIConnectify("Dummy", registry=registry) as ai:
            pass
        assert ai.connector.closed is True
