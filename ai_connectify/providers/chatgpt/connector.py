"""Public ChatGPT connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import ChatGPTClient


class ChatGPT(BaseConnector):
    """OpenAI chat, audio, embeddings, moderation and fine-tuning."""

    client_class = ChatGPTClient

    def set_organization_id(self, organization_id: str) -> None:
        self.client.set_organization_id(organization_id)

    def set_project_id(self, project_id: str) -> None:
        self.client.set_project_id(project_id)

    async def get_models(self):
        return await self.client.get_models()

    async def get_model(self, model_id: str):
        return await self.client.get_model(model_id)

    async def delete_fine_tuned_model(self, model_id: str):
        return await self.client.delete_fine_tuned_model(model_id)

    async def create_chat_completion(self, messages: List[Dict[str, Any]],
                                     model_id: str = "gpt-3.5-turbo",
                                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_chat_completion(messages, model_id, new_config)

    async def create_embeddings(self, input: Any, model_id: str = "text-embedding-3-small",
                                new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_embeddings(input, model_id, new_config)

    async def create_moderation(self, input: Any, model_id: str = "omni-moderation-latest"):
        return await self.client.create_moderation(input, model_id)

    async def create_speech(self, input: str, destination_folder: str, model_id: str = "tts-1",
                            response_format: str = "mp3", voice: str = "alloy",
                            new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_speech(
            input, destination_folder, model_id, response_format, voice, new_config
        )

    async def create_transcription(self, file_path: str, model_id: str = "whisper-1",
                                   new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_transcription(file_path, model_id, new_config)

    async def create_translation(self, file_path: str, model_id: str = "whisper-1",
                                 new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_translation(file_path, model_id, new_config)

    async def create_fine_tuning_job(self, training_file_id: str, model_id: str = "gpt-4o-mini-2024-07-18",
                                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_fine_tuning_job(training_file_id, model_id, new_config)

    async def get_fine_tuning_jobs(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuning_jobs(new_config)

    async def get_fine_tuning_job(self, fine_tuning_job_id: str):
        return await self.client.get_fine_tuning_job(fine_tuning_job_id)

    async def cancel_fine_tuning_job(self, fine_tuning_job_id: str):
        return await self.client.cancel_fine_tuning_job(fine_tuning_job_id)

    async def get_fine_tuning_job_events(self, fine_tuning_job_id: str,
                                         new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuning_job_events(fine_tuning_job_id, new_config)

    async def get_fine_tuning_job_checkpoints(self, fine_tuning_job_id: str,
                                              new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuning_job_checkpoints(fine_tuning_job_id, new_config)
