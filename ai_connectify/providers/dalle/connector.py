"""Public DALL-E connector."""

from typing import Any, Dict, Optional

from ..base import BaseConnector
from .client import DALLEClient


class DALLE(BaseConnector):
    client_class = DALLEClient

    def set_organization_id(self, organization_id: str) -> None:
        self.client.set_organization_id(organization_id)

    def set_project_id(self, project_id: str) -> None:
        self.client.set_project_id(project_id)

    async def get_models(self):
        return await self.client.get_models()

    async def get_model(self, model_id: str):
        return await self.client.get_model(model_id)

    async def create_image(self, prompt: str, model_id: str = "dall-e-3",
                           new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_image(prompt, model_id, new_config)

    async def create_image_edit(self, image_path: str, prompt: str, model_id: str = "dall-e-2",
                                new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_image_edit(image_path, prompt, model_id, new_config)

    async def create_image_variation(self, image_path: str, model_id: str = "dall-e-2",
                                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_image_variation(image_path, model_id, new_config)
