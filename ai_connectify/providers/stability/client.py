"""
Stability AI client.

Image endpoints answer with raw bytes when asked for ``image/*``; the bytes
are written to the destination folder under a random name and the path is
returned. Creative upscale and image-to-video are two-step jobs: a start
call returns an id, and a result call returns either a "still running"
status (HTTP 202) or the finished artifact (HTTP 200). No polling is done
here; callers retry on their own schedule.
"""

from typing import Any, Dict, Optional

from ...config.constants import GENERATION_RUNNING_MESSAGE, STABILITY_BASE_URL
from ...helpers.files import read_upload
from ...helpers.payloads import build_form
from ...helpers.validation import validate_number_input, validate_string_input
from ...models.responses import FullResponse
from ..base import ConnectorClient

IMAGE_OPTIONS = {"headers": {"Accept": "image/*"}}
VIDEO_OPTIONS = {"headers": {"Accept": "video/*"}}
JSON_OPTIONS = {"headers": {"Accept": "application/json"}}

# Forces multipart encoding when a request uploads no file
NO_FILES = {"none": ""}


class StabilityClient(ConnectorClient):
    ai_name = "Stability"
    base_url = STABILITY_BASE_URL

    def _build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.ai_api_key}"}

    def set_client_id(self, client_id: str) -> None:
        validate_string_input(client_id, "A valid client ID must be provided")
        self._set_header("stability-client-id", client_id)

    def set_client_user_id(self, user_id: str) -> None:
        validate_string_input(user_id, "A valid user ID must be provided")
        self._set_header("stability-client-user-id", user_id)

    def set_client_version(self, client_version: str) -> None:
        validate_string_input(client_version, "A valid client version must be provided")
        self._set_header("stability-client-version", client_version)

    # Generate

    async def generate_image_ultra(self, prompt: str, destination_folder: str, output_format: str,
                                   new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        return await self._image_operation("/stable-image/generate/ultra", fields, {}, folder, output_format)

    async def generate_image_core(self, prompt: str, destination_folder: str, output_format: str,
                                  new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        return await self._image_operation("/stable-image/generate/core", fields, {}, folder, output_format)

    async def generate_image_diffusion(self, prompt: str, destination_folder: str, model_id: str,
                                       mode: str, output_format: str,
                                       new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Stable Diffusion 3; for ``image-to-image`` pass ``image`` (a file path) in ``new_config``."""
        validate_string_input(prompt, "Cannot process the prompt")
        folder = self._destination(destination_folder)
        validate_string_input(model_id, "Cannot process the model ID")
        validate_string_input(mode, "Cannot process the mode")
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body(
            {"prompt": prompt, "model": model_id, "mode": mode, "output_format": output_format},
            new_config,
        )
        files = self._optional_files(fields, image="Cannot process the image path")
        return await self._image_operation("/stable-image/generate/sd3", fields, files, folder, output_format)

    # Upscale

    async def upscale_conservative(self, prompt: str, image_path: str, destination_folder: str,
                                   output_format: str,
                                   new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        return await self._image_operation(
            "/stable-image/upscale/conservative", fields, {"image": image_path}, folder, output_format
        )

    async def upscale_creative(self, prompt: str, image_path: str, output_format: str,
                               new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Start a creative upscale job and return its id."""
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(image_path, "Cannot process the image path")
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        response = await self._post_form(
            "/stable-image/upscale/creative", fields, {"image": image_path}, JSON_OPTIONS
        )
        with self.translate_errors():
            self._check_full(response)
            return {"image_id": response.data["id"]}

    async def get_upscale_creative(self, upscale_id: str, destination_folder: str) -> Dict[str, str]:
        """Fetch a creative upscale result, named after the job id."""
        validate_string_input(upscale_id, "Cannot process the upscale ID")
        folder = self._destination(destination_folder)
        with self.translate_errors():
            response = await self.http_request.get_full(
                f"/stable-image/upscale/creative/result/{upscale_id}", extra_options=IMAGE_OPTIONS
            )
            if response.status == 202:
                return {"status": GENERATION_RUNNING_MESSAGE}
            self._check_full(response)
            extension = _image_extension(response.content_type)
            path = self._save_artifact(folder, response.data, extension, name=upscale_id, kind="image")
        return {"image_path": path}

    async def upscale_fast(self, image_path: str, destination_folder: str, output_format: str) -> Dict[str, str]:
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        return await self._image_operation(
            "/stable-image/upscale/fast", {"output_format": output_format},
            {"image": image_path}, folder, output_format,
        )

    # Edit

    async def erase(self, image_path: str, destination_folder: str, output_format: str,
                    new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Erase masked areas; ``new_config["mask"]`` is read as a file path."""
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"output_format": output_format}, new_config)
        files = {"image": image_path, **self._optional_files(fields, mask="Cannot process the mask image path")}
        return await self._image_operation("/stable-image/edit/erase", fields, files, folder, output_format)

    async def inpaint(self, prompt: str, image_path: str, destination_folder: str, output_format: str,
                      new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        files = {"image": image_path, **self._optional_files(fields, mask="Cannot process the mask image path")}
        return await self._image_operation("/stable-image/edit/inpaint", fields, files, folder, output_format)

    async def outpaint(self, image_path: str, destination_folder: str, directions: Optional[Dict[str, int]],
                       output_format: str, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Extend an image; ``directions`` maps left/right/up/down to pixel counts."""
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        directions = directions or {}
        for side, value in directions.items():
            if side not in ("left", "right", "up", "down"):
                self.http_request.throw_error(f"Cannot process the direction '{side}'")
            validate_number_input(value, f"Cannot process the {side} direction value")
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({**directions, "output_format": output_format}, new_config)
        return await self._image_operation(
            "/stable-image/edit/outpaint", fields, {"image": image_path}, folder, output_format
        )

    async def search_and_replace(self, prompt: str, search_prompt: str, image_path: str,
                                 destination_folder: str, output_format: str,
                                 new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(search_prompt, "Cannot process the search prompt")
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body(
            {"prompt": prompt, "search_prompt": search_prompt, "output_format": output_format}, new_config
        )
        return await self._image_operation(
            "/stable-image/edit/search-and-replace", fields, {"image": image_path}, folder, output_format
        )

    async def search_and_recolor(self, prompt: str, select_prompt: str, image_path: str,
                                 destination_folder: str, output_format: str,
                                 new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(select_prompt, "Cannot process the select prompt")
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body(
            {"prompt": prompt, "select_prompt": select_prompt, "output_format": output_format}, new_config
        )
        return await self._image_operation(
            "/stable-image/edit/search-and-recolor", fields, {"image": image_path}, folder, output_format
        )

    async def remove_background(self, image_path: str, destination_folder: str,
                                output_format: str) -> Dict[str, str]:
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        return await self._image_operation(
            "/stable-image/edit/remove-background", {"output_format": output_format},
            {"image": image_path}, folder, output_format,
        )

    # Control

    async def control_sketch(self, prompt: str, image_path: str, destination_folder: str,
                             output_format: str, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        return await self._control("sketch", prompt, image_path, destination_folder, output_format, new_config)

    async def control_structure(self, prompt: str, image_path: str, destination_folder: str,
                                output_format: str, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        return await self._control("structure", prompt, image_path, destination_folder, output_format, new_config)

    async def control_style(self, prompt: str, image_path: str, destination_folder: str,
                            output_format: str, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        return await self._control("style", prompt, image_path, destination_folder, output_format, new_config)

    async def _control(self, kind: str, prompt: str, image_path: str, destination_folder: str,
                       output_format: str, new_config: Optional[Dict[str, Any]]) -> Dict[str, str]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        validate_string_input(output_format, "Cannot process the output format")
        fields = self._body({"prompt": prompt, "output_format": output_format}, new_config)
        return await self._image_operation(
            f"/stable-image/control/{kind}", fields, {"image": image_path}, folder, output_format
        )

    # 3D and video

    async def stable_fast_3d(self, image_path: str, destination_folder: str,
                             new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Build a 3D model from one image; the result is written as ``.glb``."""
        validate_string_input(image_path, "Cannot process the image path")
        folder = self._destination(destination_folder)
        fields = self._body({}, new_config)
        response = await self._post_form("/3d/stable-fast-3d", fields, {"image": image_path}, options=None)
        with self.translate_errors():
            self._check_full(response)
            path = self._save_artifact(folder, response.data, "glb", kind="model")
        return {"model_path": path}

    async def image_to_video(self, image_path: str, cfg_scale: float, motion_bucket_id: int, seed: int,
                             new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Start an image-to-video job and return its id."""
        validate_string_input(image_path, "Cannot process the image path")
        validate_number_input(cfg_scale, "Cannot process the cfg scale")
        validate_number_input(motion_bucket_id, "Cannot process the motion bucket ID")
        validate_number_input(seed, "Cannot process the seed")
        fields = self._body(
            {"cfg_scale": cfg_scale, "motion_bucket_id": motion_bucket_id, "seed": seed}, new_config
        )
        response = await self._post_form("/image-to-video", fields, {"image": image_path}, JSON_OPTIONS)
        with self.translate_errors():
            self._check_full(response)
            return {"video_generated_id": response.data["id"]}

    async def get_image_to_video(self, video_id: str, destination_folder: str) -> Dict[str, str]:
        """Fetch an image-to-video result, named after the job id."""
        validate_string_input(video_id, "Cannot process the video ID")
        folder = self._destination(destination_folder)
        with self.translate_errors():
            response = await self.http_request.get_full(
                f"/image-to-video/result/{video_id}", extra_options=VIDEO_OPTIONS
            )
            if response.status == 202:
                return {"status": GENERATION_RUNNING_MESSAGE}
            self._check_full(response)
            path = self._save_artifact(folder, response.data, "mp4", name=video_id, kind="video")
        return {"video_path": path}

    # Shared plumbing

    def _optional_files(self, fields: Dict[str, Any], **messages: str) -> Dict[str, str]:
        """Move file-path options (``image``, ``mask``) out of the form fields."""
        files = {}
        for name, message in messages.items():
            if name in fields:
                value = fields.pop(name)
                validate_string_input(value, message)
                files[name] = value
        return files

    async def _post_form(self, endpoint: str, fields: Dict[str, Any], files: Dict[str, str],
                         options: Optional[Dict[str, Any]] = IMAGE_OPTIONS) -> FullResponse:
        with self.translate_errors():
            uploads = {name: read_upload(path) for name, path in files.items()}
            return await self.http_request.post_form(
                endpoint, data=build_form(fields), files=uploads or NO_FILES,
                extra_options=options,
            )

    async def _image_operation(self, endpoint: str, fields: Dict[str, Any], files: Dict[str, str],
                               folder: str, output_format: str) -> Dict[str, str]:
        response = await self._post_form(endpoint, fields, files)
        with self.translate_errors():
            self._check_full(response)
            path = self._save_artifact(folder, response.data, output_format, kind="image")
        return {"image_path": path}


def _image_extension(content_type: str) -> str:
    if "jpeg" in content_type:
        return "jpeg"
    if "png" in content_type:
        return "png"
    return "webp"
