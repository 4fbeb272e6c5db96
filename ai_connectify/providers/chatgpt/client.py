"""
OpenAI API client.

``OpenAIClient`` carries the auth and organization/project headers shared by
the OpenAI based connectors; ``ChatGPTClient`` adds the text, audio,
embedding and fine-tuning endpoints.
"""

from typing import Any, Dict, List, Optional

from ...config.constants import OPENAI_BASE_URL
from ...helpers.payloads import build_form, strip_keys
from ...helpers.validation import (
    validate_array_input,
    validate_key_string,
    validate_string_input,
)
from ..base import ConnectorClient


class OpenAIClient(ConnectorClient):
    """Base for clients talking to ``api.openai.com``."""

    ai_name = "ChatGPT"
    base_url = OPENAI_BASE_URL

    def _build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.ai_api_key}"}

    def set_organization_id(self, organization_id: str) -> None:
        validate_key_string(organization_id, "A valid Organization ID must be provided")
        self._set_header("OpenAI-Organization", organization_id)

    def set_project_id(self, project_id: str) -> None:
        validate_key_string(project_id, "A valid Project ID must be provided")
        self._set_header("OpenAI-Project", project_id)

    async def get_models(self) -> List[Dict[str, Any]]:
        with self.translate_errors():
            response = await self.http_request.get("/models")
            return response["data"]

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            return await self.http_request.get(f"/models/{model_id}")


class ChatGPTClient(OpenAIClient):
    """Chat, audio, embeddings, moderation and fine-tuning endpoints."""

    async def delete_fine_tuned_model(self, model_id: str) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            return await self.http_request.delete(f"/models/{model_id}")

    async def create_chat_completion(self, messages: List[Dict[str, Any]], model_id: str,
                                     new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"messages": messages, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/chat/completions", body)
            return strip_keys(response, "usage")

    async def create_embeddings(self, input: Any, model_id: str,
                                new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"input": input, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/embeddings", body)
            return response["data"]

    async def create_moderation(self, input: Any, model_id: str) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            return await self.http_request.post("/moderations", {"input": input, "model": model_id})

    async def create_speech(self, input: str, destination_folder: str, model_id: str,
                            response_format: str, voice: str,
                            new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Synthesize speech and write it to ``destination_folder``."""
        validate_string_input(input, "Cannot process the input text")
        folder = self._destination(destination_folder)
        validate_string_input(model_id, "Cannot process the model ID")
        validate_string_input(response_format, "Cannot process the response format")
        validate_string_input(voice, "Cannot process the voice")
        body = self._body(
            {"input": input, "model": model_id, "response_format": response_format, "voice": voice},
            new_config,
        )
        with self.translate_errors():
            audio = await self.http_request.post("/audio/speech", body)
            path = self._save_artifact(folder, audio, response_format, kind="audio")
        return {"audio_path": path}

    async def create_transcription(self, file_path: str, model_id: str,
                                   new_config: Optional[Dict[str, Any]] = None) -> str:
        return await self._audio_to_text("/audio/transcriptions", file_path, model_id, new_config)

    async def create_translation(self, file_path: str, model_id: str,
                                 new_config: Optional[Dict[str, Any]] = None) -> str:
        return await self._audio_to_text("/audio/translations", file_path, model_id, new_config)

    async def _audio_to_text(self, endpoint: str, file_path: str, model_id: str,
                             new_config: Optional[Dict[str, Any]]) -> str:
        validate_string_input(file_path, "Cannot process the file path")
        validate_string_input(model_id, "Cannot process the model ID")
        fields = self._body({"model": model_id}, new_config)
        with self.translate_errors():
            filename, content = self._upload(file_path, "Cannot process the file path")
            response = await self.http_request.post_form(
                endpoint, data=build_form(fields), files={"file": (filename, content)}
            )
            self._check_full(response)
            if isinstance(response.data, dict):
                return response.data.get("text")
            return response.data

    async def create_fine_tuning_job(self, training_file_id: str, model_id: str,
                                     new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(training_file_id, "Cannot process the training file ID")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"training_file": training_file_id, "model": model_id}, new_config)
        with self.translate_errors():
            return await self.http_request.post("/fine_tuning/jobs", body)

    async def get_fine_tuning_jobs(self, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get("/fine_tuning/jobs", params)

    async def get_fine_tuning_job(self, fine_tuning_job_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        with self.translate_errors():
            return await self.http_request.get(f"/fine_tuning/jobs/{fine_tuning_job_id}")

    async def cancel_fine_tuning_job(self, fine_tuning_job_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        with self.translate_errors():
            return await self.http_request.post(f"/fine_tuning/jobs/{fine_tuning_job_id}/cancel")

    async def get_fine_tuning_job_events(self, fine_tuning_job_id: str,
                                         new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(f"/fine_tuning/jobs/{fine_tuning_job_id}/events", params)

    async def get_fine_tuning_job_checkpoints(self, fine_tuning_job_id: str,
                                              new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(
                f"/fine_tuning/jobs/{fine_tuning_job_id}/checkpoints", params
            )
