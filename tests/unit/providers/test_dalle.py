"""Unit tests for the DALL-E connector."""

import pytest

from ai_connectify.errors import AIConnectifyError
from ai_connectify.providers.dalle import DALLE
from tests.helpers.http_mocks import assert_no_requests, make_full_response, make_status_error


@pytest.fixture
def dalle(api_key, mock_http):
    connector = DALLE(api_key)
    connector.client.http_request = mock_http
    return connector


class TestCreateImage:

    @pytest.mark.asyncio
    async def test_returns_data(self, dalle, mock_http):
        mock_http.post.return_value = {"created": 1, "data": [{"url": "https://img/1.png"}]}

        result = await dalle.create_image("A red fox", new_config={"size": "1024x1024"})

        assert result == [{"url": "https://img/1.png"}]
        mock_http.post.assert_awaited_once_with(
            "/images/generations", {"size": "1024x1024", "prompt": "A red fox", "model": "dall-e-3"}
        )

    @pytest.mark.asyncio
    async def test_invalid_prompt(self, dalle, mock_http):
        with pytest.raises(AIConnectifyError, match="Cannot process the prompt"):
            await dalle.create_image("   ")
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_error_uses_dalle_prefix(self, dalle, mock_http):
        mock_http.post.side_effect = make_status_error(400, {"error": {"message": "Invalid size"}})
        with pytest.raises(AIConnectifyError, match="^DALLE ERROR => 400 - Invalid size$"):
            await dalle.create_image("A red fox")


class TestImageEdits:

    @pytest.mark.asyncio
    async def test_edit_with_mask(self, dalle, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, {"data": [{"url": "u"}]})

        result = await dalle.create_image_edit("image.png", "Add a hat", new_config={"mask": "mask.png", "n": 2})

        assert result == [{"url": "u"}]
        call = mock_http.post_form.await_args
        assert call.args[0] == "/images/edits"
        assert call.kwargs["data"] == {"n": "2", "prompt": "Add a hat", "model": "dall-e-2"}
        assert call.kwargs["files"] == {
            "image": ("image.png", b"\x89PNG fake image"),
            "mask": ("mask.png", b"\x89PNG fake mask"),
        }

    @pytest.mark.asyncio
    async def test_edit_without_mask(self, dalle, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, {"data": []})
        await dalle.create_image_edit("image.png", "Add a hat")
        assert set(mock_http.post_form.await_args.kwargs["files"]) == {"image"}

    @pytest.mark.asyncio
    async def test_invalid_mask(self, dalle, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the image mask path"):
            await dalle.create_image_edit("image.png", "Add a hat", new_config={"mask": ""})
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_missing_image(self, dalle, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="nope.png"):
            await dalle.create_image_edit("nope.png", "Add a hat")
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_variation(self, dalle, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, {"data": [{"b64_json": "abc"}]})
        result = await dalle.create_image_variation("image.png")
        assert result == [{"b64_json": "abc"}]
        call = mock_http.post_form.await_args
        assert call.args[0] == "/images/variations"
        assert call.kwargs["data"] == {"model": "dall-e-2"}

    @pytest.mark.asyncio
    async def test_variation_error_status(self, dalle, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(
            400, {"error": {"message": "Uploaded image must be a PNG"}}
        )
        with pytest.raises(AIConnectifyError, match="^DALLE ERROR => 400 - Uploaded image must be a PNG$"):
            await dalle.create_image_variation("image.png")
