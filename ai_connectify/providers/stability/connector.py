"""Public Stability connector."""

from typing import Any, Dict, Optional

from ..base import BaseConnector
from .client import StabilityClient


class Stability(BaseConnector):
    client_class = StabilityClient

    def set_client_id(self, client_id: str) -> None:
        self.client.set_client_id(client_id)

    def set_client_user_id(self, user_id: str) -> None:
        self.client.set_client_user_id(user_id)

    def set_client_version(self, client_version: str) -> None:
        self.client.set_client_version(client_version)

    async def generate_image_ultra(self, prompt: str, destination_folder: str, output_format: str = "png",
                                   new_config: Optional[Dict[str, Any]] = None):
        return await self.client.generate_image_ultra(prompt, destination_folder, output_format, new_config)

    async def generate_image_core(self, prompt: str, destination_folder: str, output_format: str = "png",
                                  new_config: Optional[Dict[str, Any]] = None):
        return await self.client.generate_image_core(prompt, destination_folder, output_format, new_config)

    async def generate_image_diffusion(self, prompt: str, destination_folder: str,
                                       model_id: str = "sd3.5-large", mode: str = "text-to-image",
                                       output_format: str = "png",
                                       new_config: Optional[Dict[str, Any]] = None):
        return await self.client.generate_image_diffusion(
            prompt, destination_folder, model_id, mode, output_format, new_config
        )

    async def upscale_conservative(self, prompt: str, image_path: str, destination_folder: str,
                                   output_format: str = "png", new_config: Optional[Dict[str, Any]] = None):
        return await self.client.upscale_conservative(
            prompt, image_path, destination_folder, output_format, new_config
        )

    async def upscale_creative(self, prompt: str, image_path: str, output_format: str = "png",
                               new_config: Optional[Dict[str, Any]] = None):
        return await self.client.upscale_creative(prompt, image_path, output_format, new_config)

    async def get_upscale_creative(self, upscale_id: str, destination_folder: str):
        return await self.client.get_upscale_creative(upscale_id, destination_folder)

    async def upscale_fast(self, image_path: str, destination_folder: str, output_format: str = "png"):
        return await self.client.upscale_fast(image_path, destination_folder, output_format)

    async def erase(self, image_path: str, destination_folder: str, output_format: str = "png",
                    new_config: Optional[Dict[str, Any]] = None):
        return await self.client.erase(image_path, destination_folder, output_format, new_config)

    async def inpaint(self, prompt: str, image_path: str, destination_folder: str, output_format: str = "png",
                      new_config: Optional[Dict[str, Any]] = None):
        return await self.client.inpaint(prompt, image_path, destination_folder, output_format, new_config)

    async def outpaint(self, image_path: str, destination_folder: str,
                       directions: Optional[Dict[str, int]] = None, output_format: str = "png",
                       new_config: Optional[Dict[str, Any]] = None):
        return await self.client.outpaint(image_path, destination_folder, directions, output_format, new_config)

    async def search_and_replace(self, prompt: str, search_prompt: str, image_path: str,
                                 destination_folder: str, output_format: str = "png",
                                 new_config: Optional[Dict[str, Any]] = None):
        return await self.client.search_and_replace(
            prompt, search_prompt, image_path, destination_folder, output_format, new_config
        )

    async def search_and_recolor(self, prompt: str, select_prompt: str, image_path: str,
                                 destination_folder: str, output_format: str = "png",
                                 new_config: Optional[Dict[str, Any]] = None):
        return await self.client.search_and_recolor(
            prompt, select_prompt, image_path, destination_folder, output_format, new_config
        )

    async def remove_background(self, image_path: str, destination_folder: str, output_format: str = "png"):
        return await self.client.remove_background(image_path, destination_folder, output_format)

    async def control_sketch(self, prompt: str, image_path: str, destination_folder: str,
                             output_format: str = "png", new_config: Optional[Dict[str, Any]] = None):
        return await self.client.control_sketch(prompt, image_path, destination_folder, output_format, new_config)

    async def control_structure(self, prompt: str, image_path: str, destination_folder: str,
                                output_format: str = "png", new_config: Optional[Dict[str, Any]] = None):
        return await self.client.control_structure(
            prompt, image_path, destination_folder, output_format, new_config
        )

    async def control_style(self, prompt: str, image_path: str, destination_folder: str,
                            output_format: str = "png", new_config: Optional[Dict[str, Any]] = None):
        return await self.client.control_style(prompt, image_path, destination_folder, output_format, new_config)

    async def stable_fast_3d(self, image_path: str, destination_folder: str,
                             new_config: Optional[Dict[str, Any]] = None):
        return await self.client.stable_fast_3d(image_path, destination_folder, new_config)

    async def image_to_video(self, image_path: str, cfg_scale: float = 1.8, motion_bucket_id: int = 127,
                             seed: int = 0, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.image_to_video(image_path, cfg_scale, motion_bucket_id, seed, new_config)

    async def get_image_to_video(self, video_id: str, destination_folder: str):
        return await self.client.get_image_to_video(video_id, destination_folder)
