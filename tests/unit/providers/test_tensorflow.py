"""Unit tests for the TensorFlow connector."""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from ai_connectify.errors import AIConnectifyError
from ai_connectify.providers.tensorflow import TensorFlow


@pytest.fixture
def fake_tf():
    return SimpleNamespace(
        __version__="2.16.1",
        constant=Mock(return_value="tensor"),
        math=SimpleNamespace(reduce_sum=Mock(return_value=6)),
        version="not callable",
    )


@pytest.fixture
def tensorflow(fake_tf):
    connector = TensorFlow()
    connector.client.tf = fake_tf
    return connector


class TestTensorFlow:

    def test_no_api_key_needed(self):
        assert TensorFlow().client.ai_api_key is None

    def test_invalid_api_key_still_rejected(self):
        with pytest.raises(AIConnectifyError, match="A valid API key must be provided"):
            TensorFlow("bad")

    def test_tf_module_is_exposed(self, tensorflow, fake_tf):
        assert tensorflow.tf is fake_tf
        assert tensorflow.is_available() is True

    @pytest.mark.asyncio
    async def test_call_top_level(self, tensorflow, fake_tf):
        result = await tensorflow.call("constant", [1, 2, 3], dtype="float32")
        assert result == "tensor"
        fake_tf.constant.assert_called_once_with([1, 2, 3], dtype="float32")

    @pytest.mark.asyncio
    async def test_call_dotted_name(self, tensorflow, fake_tf):
        assert await tensorflow.call("math.reduce_sum", [1, 2, 3]) == 6

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["math.nope", "version", "unknown"])
    async def test_unknown_method(self, tensorflow, method):
        with pytest.raises(AIConnectifyError, match=f"The method {method} is not available in TensorFlow"):
            await tensorflow.call(method)

    @pytest.mark.asyncio
    async def test_method_name_required(self, tensorflow):
        with pytest.raises(AIConnectifyError, match="Cannot process the method name"):
            await tensorflow.call("")

    def test_missing_install(self):
        connector = TensorFlow()
        with patch("importlib.import_module", side_effect=ImportError("No module named 'tensorflow'")):
            with pytest.raises(AIConnectifyError, match=r"pip install ai-connectify\[local\]"):
                connector.tf

    def test_is_available_without_install(self):
        with patch("importlib.util.find_spec", return_value=None):
            assert TensorFlow().is_available() is False

    @pytest.mark.asyncio
    async def test_aclose_unloads(self, tensorflow):
        await tensorflow.aclose()
        assert tensorflow.client._tf is None
