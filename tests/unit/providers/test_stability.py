"""Unit tests for the Stability connector."""

import os

import pytest

from ai_connectify.errors import AIConnectifyError
from ai_connectify.providers.stability import Stability
from tests.helpers.http_mocks import assert_no_requests, make_full_response

IMAGE = {"headers": {"Accept": "image/*"}}
JSON = {"headers": {"Accept": "application/json"}}
PNG_BYTES = b"\x89PNG generated"


@pytest.fixture
def stability(api_key, mock_http):
    connector = Stability(api_key)
    connector.client.http_request = mock_http
    return connector


def image_response(data=PNG_BYTES, status=200, content_type="image/png"):
    return make_full_response(status, data, {"content-type": content_type})


class TestStabilitySetup:

    def test_client_headers_rebuild_wrapper(self, api_key):
        connector = Stability(api_key)
        previous = connector.client.http_request

        connector.set_client_id("my-app")
        connector.set_client_user_id("user-42")
        connector.set_client_version("1.0")

        headers = connector.client.http_request.default_headers
        assert headers == {
            "Authorization": f"Bearer {api_key}",
            "stability-client-id": "my-app",
            "stability-client-user-id": "user-42",
            "stability-client-version": "1.0",
        }
        assert previous.default_headers == {"Authorization": f"Bearer {api_key}"}

    def test_client_version_required(self, api_key):
        with pytest.raises(AIConnectifyError, match="A valid client version must be provided"):
            Stability(api_key).set_client_version(" ")


class TestGenerate:

    @pytest.mark.asyncio
    async def test_generate_ultra_writes_image(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()

        result = await stability.generate_image_ultra("A lighthouse", "out", new_config={"seed": 5})

        path = result["image_path"]
        assert path.startswith("./out/") and path.endswith(".png")
        assert (workdir / path).read_bytes() == PNG_BYTES
        call = mock_http.post_form.await_args
        assert call.args[0] == "/stable-image/generate/ultra"
        assert call.kwargs["data"] == {"seed": "5", "prompt": "A lighthouse", "output_format": "png"}
        assert call.kwargs["files"] == {"none": ""}
        assert call.kwargs["extra_options"] == IMAGE

    @pytest.mark.asyncio
    async def test_generate_core_custom_format(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response(content_type="image/webp")
        result = await stability.generate_image_core("A lighthouse", "out/", "webp")
        assert result["image_path"].endswith(".webp")
        assert mock_http.post_form.await_args.args[0] == "/stable-image/generate/core"

    @pytest.mark.asyncio
    async def test_diffusion_image_to_image(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()

        await stability.generate_image_diffusion(
            "A lighthouse", "out", mode="image-to-image", new_config={"image": "image.png", "strength": 0.5}
        )

        call = mock_http.post_form.await_args
        assert call.args[0] == "/stable-image/generate/sd3"
        assert call.kwargs["files"] == {"image": ("image.png", b"\x89PNG fake image")}
        assert call.kwargs["data"] == {
            "strength": "0.5",
            "prompt": "A lighthouse",
            "model": "sd3.5-large",
            "mode": "image-to-image",
            "output_format": "png",
        }

    @pytest.mark.asyncio
    async def test_missing_destination(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="The 'destination_folder' path is invalid or doesn't exist"):
            await stability.generate_image_ultra("A lighthouse", "nowhere")
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_prompt_checked_before_destination(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the prompt"):
            await stability.generate_image_ultra("", "nowhere")

    @pytest.mark.asyncio
    async def test_rejected_request(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(
            403, {"name": "content_moderation", "errors": ["Your request was flagged"]},
            {"content-type": "application/json"},
        )
        with pytest.raises(AIConnectifyError, match="^STABILITY ERROR => 403 - Your request was flagged$"):
            await stability.generate_image_ultra("A lighthouse", "out")
        assert os.listdir(workdir / "out") == []


class TestUpscale:

    @pytest.mark.asyncio
    async def test_conservative(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()
        result = await stability.upscale_conservative("sharper", "image.png", "out")
        assert result["image_path"].endswith(".png")
        assert mock_http.post_form.await_args.kwargs["files"] == {"image": ("image.png", b"\x89PNG fake image")}

    @pytest.mark.asyncio
    async def test_fast(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()
        await stability.upscale_fast("image.png", "out", "jpeg")
        call = mock_http.post_form.await_args
        assert call.args[0] == "/stable-image/upscale/fast"
        assert call.kwargs["data"] == {"output_format": "jpeg"}

    @pytest.mark.asyncio
    async def test_creative_returns_id(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, {"id": "a6dc6c6e20acda010fe14d71f180658f"})

        result = await stability.upscale_creative("sharper", "image.png")

        assert result == {"image_id": "a6dc6c6e20acda010fe14d71f180658f"}
        call = mock_http.post_form.await_args
        assert call.args[0] == "/stable-image/upscale/creative"
        assert call.kwargs["extra_options"] == JSON

    @pytest.mark.asyncio
    async def test_creative_binary_body_instead_of_json(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response(b"\x00\x01")
        message = r"^STABILITY ERROR => Unexpected response format \(TypeError"
        with pytest.raises(AIConnectifyError, match=message) as exc_info:
            await stability.upscale_creative("sharper", "image.png")
        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.asyncio
    async def test_creative_result_still_running(self, stability, mock_http, workdir):
        mock_http.get_full.return_value = make_full_response(202, {"id": "abc", "status": "in-progress"})

        result = await stability.get_upscale_creative("abc", "out")

        assert result == {"status": "Generation is still running, try again in 10 seconds"}
        assert os.listdir(workdir / "out") == []
        mock_http.get_full.assert_awaited_once_with(
            "/stable-image/upscale/creative/result/abc", extra_options=IMAGE
        )

    @pytest.mark.asyncio
    async def test_creative_result_saved_by_id(self, stability, mock_http, workdir):
        mock_http.get_full.return_value = image_response(b"jpeg bytes", content_type="image/jpeg")

        result = await stability.get_upscale_creative("abc", "out")

        assert result == {"image_path": "./out/abc.jpeg"}
        assert (workdir / "out" / "abc.jpeg").read_bytes() == b"jpeg bytes"

    @pytest.mark.asyncio
    async def test_creative_result_not_found(self, stability, mock_http, workdir):
        mock_http.get_full.return_value = make_full_response(404, {"errors": ["generation not found"]})
        with pytest.raises(AIConnectifyError, match="^STABILITY ERROR => 404 - generation not found$"):
            await stability.get_upscale_creative("abc", "out")


class TestEdit:

    @pytest.mark.asyncio
    async def test_erase_with_mask(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()
        await stability.erase("image.png", "out", new_config={"mask": "mask.png", "grow_mask": 5})
        call = mock_http.post_form.await_args
        assert call.args[0] == "/stable-image/edit/erase"
        assert set(call.kwargs["files"]) == {"image", "mask"}
        assert call.kwargs["data"] == {"grow_mask": "5", "output_format": "png"}

    @pytest.mark.asyncio
    async def test_inpaint_invalid_mask(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the mask image path"):
            await stability.inpaint("a cat", "image.png", "out", new_config={"mask": 7})
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_outpaint_directions(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = image_response()
        await stability.outpaint("image.png", "out", {"left": 100, "down": 0})
        data = mock_http.post_form.await_args.kwargs["data"]
        assert data == {"left": "100", "down": "0", "output_format": "png"}

    @pytest.mark.asyncio
    async def test_outpaint_unknown_direction(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the direction 'sideways'"):
            await stability.outpaint("image.png", "out", {"sideways": 10})
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_outpaint_direction_value(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the left direction value"):
            await stability.outpaint("image.png", "out", {"left": "100"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, args, endpoint", [
        ("search_and_replace", ("a dog", "cat", "image.png", "out"), "/stable-image/edit/search-and-replace"),
        ("search_and_recolor", ("red", "car", "image.png", "out"), "/stable-image/edit/search-and-recolor"),
        ("remove_background", ("image.png", "out"), "/stable-image/edit/remove-background"),
        ("control_sketch", ("a castle", "image.png", "out"), "/stable-image/control/sketch"),
        ("control_structure", ("a castle", "image.png", "out"), "/stable-image/control/structure"),
        ("control_style", ("a castle", "image.png", "out"), "/stable-image/control/style"),
    ])
    async def test_image_endpoints(self, stability, mock_http, workdir, method, args, endpoint):
        mock_http.post_form.return_value = image_response()
        result = await getattr(stability, method)(*args)
        assert result["image_path"].startswith("./out/")
        assert mock_http.post_form.await_args.args[0] == endpoint

    @pytest.mark.asyncio
    async def test_missing_upload(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="missing.png"):
            await stability.remove_background("missing.png", "out")
        assert_no_requests(mock_http)


class TestThreeDAndVideo:

    @pytest.mark.asyncio
    async def test_stable_fast_3d(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, b"glTF binary", {"content-type": "model/gltf-binary"})

        result = await stability.stable_fast_3d("image.png", "out")

        path = result["model_path"]
        assert path.endswith(".glb")
        assert (workdir / path).read_bytes() == b"glTF binary"
        call = mock_http.post_form.await_args
        assert call.args[0] == "/3d/stable-fast-3d"
        assert call.kwargs["extra_options"] is None

    @pytest.mark.asyncio
    async def test_image_to_video_defaults(self, stability, mock_http, workdir):
        mock_http.post_form.return_value = make_full_response(200, {"id": "vid-1"})

        result = await stability.image_to_video("image.png")

        assert result == {"video_generated_id": "vid-1"}
        call = mock_http.post_form.await_args
        assert call.args[0] == "/image-to-video"
        assert call.kwargs["data"] == {"cfg_scale": "1.8", "motion_bucket_id": "127", "seed": "0"}
        assert call.kwargs["extra_options"] == JSON

    @pytest.mark.asyncio
    async def test_image_to_video_invalid_seed(self, stability, mock_http, workdir):
        with pytest.raises(AIConnectifyError, match="Cannot process the seed"):
            await stability.image_to_video("image.png", seed="0")
        assert_no_requests(mock_http)

    @pytest.mark.asyncio
    async def test_video_result_running_then_done(self, stability, mock_http, workdir):
        mock_http.get_full.side_effect = [
            make_full_response(202, {"status": "in-progress"}),
            make_full_response(200, b"mp4 bytes", {"content-type": "video/mp4"}),
        ]

        first = await stability.get_image_to_video("vid-1", "out")
        second = await stability.get_image_to_video("vid-1", "out")

        assert first == {"status": "Generation is still running, try again in 10 seconds"}
        assert second == {"video_path": "./out/vid-1.mp4"}
        assert (workdir / "out" / "vid-1.mp4").read_bytes() == b"mp4 bytes"
        assert mock_http.get_full.await_args.args[0] == "/image-to-video/result/vid-1"
