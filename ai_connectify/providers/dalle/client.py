"""DALL-E image endpoints of the OpenAI API."""

from typing import Any, Dict, List, Optional

from ...helpers.files import read_upload
from ...helpers.payloads import build_form
from ...helpers.validation import validate_string_input
from ..chatgpt.client import OpenAIClient


class DALLEClient(OpenAIClient):
    ai_name = "DALLE"

    async def create_image(self, prompt: str, model_id: str,
                           new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"prompt": prompt, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/images/generations", body)
            return response["data"]

    async def create_image_edit(self, image_path: str, prompt: str, model_id: str,
                                new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Edit an image; ``new_config["mask"]`` is read as a file path."""
        validate_string_input(image_path, "Cannot process the image path")
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(model_id, "Cannot process the model ID")
        fields = self._body({"prompt": prompt, "model": model_id}, new_config)
        mask_path = fields.pop("mask", None)
        if mask_path is not None:
            validate_string_input(mask_path, "Cannot process the image mask path")
        with self.translate_errors():
            files = {"image": read_upload(image_path)}
            if mask_path is not None:
                files["mask"] = read_upload(mask_path)
            return await self._post_images("/images/edits", fields, files)

    async def create_image_variation(self, image_path: str, model_id: str,
                                     new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        validate_string_input(image_path, "Cannot process the image path")
        validate_string_input(model_id, "Cannot process the model ID")
        fields = self._body({"model": model_id}, new_config)
        with self.translate_errors():
            files = {"image": read_upload(image_path)}
            return await self._post_images("/images/variations", fields, files)

    async def _post_images(self, endpoint: str, fields: Dict[str, Any],
                           files: Dict[str, Any]) -> List[Dict[str, Any]]:
        response = self._check_full(
            await self.http_request.post_form(endpoint, data=build_form(fields), files=files)
        )
        return response.data["data"]
