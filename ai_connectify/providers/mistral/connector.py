"""Public Mistral connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import MistralClient


class Mistral(BaseConnector):
    client_class = MistralClient

    async def get_models(self):
        return await self.client.get_models()

    async def get_model(self, model_id: str):
        return await self.client.get_model(model_id)

    async def delete_fine_tuned_model(self, fine_tuned_model_id: str):
        return await self.client.delete_fine_tuned_model(fine_tuned_model_id)

    async def create_chat_completion(self, messages: List[Dict[str, Any]],
                                     model_id: str = "mistral-small-latest",
                                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_chat_completion(messages, model_id, new_config)

    async def fim_completion(self, prompt: str, model_id: str = "codestral-latest",
                             new_config: Optional[Dict[str, Any]] = None):
        return await self.client.fim_completion(prompt, model_id, new_config)

    async def agents_completion(self, messages: List[Dict[str, Any]], agent_id: str,
                                new_config: Optional[Dict[str, Any]] = None):
        return await self.client.agents_completion(messages, agent_id, new_config)

    async def embeddings(self, input: Any, model_id: str = "mistral-embed",
                         new_config: Optional[Dict[str, Any]] = None):
        return await self.client.embeddings(input, model_id, new_config)

    async def get_fine_tuning_jobs(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuning_jobs(new_config)

    async def get_fine_tuning_job(self, fine_tuning_job_id: str):
        return await self.client.get_fine_tuning_job(fine_tuning_job_id)

    async def create_fine_tuning_job(self, hyperparameters: Dict[str, Any],
                                     model_id: str = "open-mistral-7b",
                                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_fine_tuning_job(hyperparameters, model_id, new_config)

    async def start_fine_tuning_job(self, fine_tuning_job_id: str):
        return await self.client.start_fine_tuning_job(fine_tuning_job_id)

    async def cancel_fine_tuning_job(self, fine_tuning_job_id: str):
        return await self.client.cancel_fine_tuning_job(fine_tuning_job_id)

    async def update_fine_tuned_model(self, fine_tuned_model_id: str,
                                      new_config: Optional[Dict[str, Any]] = None):
        return await self.client.update_fine_tuned_model(fine_tuned_model_id, new_config)

    async def archive_fine_tuned_model(self, fine_tuned_model_id: str):
        return await self.client.archive_fine_tuned_model(fine_tuned_model_id)

    async def unarchive_fine_tuned_model(self, fine_tuned_model_id: str):
        return await self.client.unarchive_fine_tuned_model(fine_tuned_model_id)
