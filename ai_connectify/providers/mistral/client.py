"""Mistral chat, FIM, agents, embeddings and fine-tuning client."""

from typing import Any, Dict, List, Optional

from ...config.constants import MISTRAL_BASE_URL
from ...helpers.payloads import strip_keys
from ...helpers.validation import validate_array_input, validate_string_input
from ..base import ConnectorClient


class MistralClient(ConnectorClient):
    ai_name = "Mistral"
    base_url = MISTRAL_BASE_URL

    def _build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.ai_api_key}"}

    async def get_models(self) -> List[Dict[str, Any]]:
        with self.translate_errors():
            response = await self.http_request.get("/models")
            return response["data"]

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            return await self.http_request.get(f"/models/{model_id}")

    async def delete_fine_tuned_model(self, fine_tuned_model_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuned_model_id, "Cannot process the fine-tuned model ID")
        with self.translate_errors():
            return await self.http_request.delete(f"/models/{fine_tuned_model_id}")

    async def create_chat_completion(self, messages: List[Dict[str, Any]], model_id: str,
                                     new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"messages": messages, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/chat/completions", body)
            return strip_keys(response, "usage")

    async def fim_completion(self, prompt: str, model_id: str,
                             new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fill-in-the-middle completion; pass ``suffix`` through ``new_config``."""
        validate_string_input(prompt, "Cannot process the prompt")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"prompt": prompt, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/fim/completions", body)
            return strip_keys(response, "usage")

    async def agents_completion(self, messages: List[Dict[str, Any]], agent_id: str,
                                new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(agent_id, "Cannot process the agent ID")
        body = self._body({"messages": messages, "agent_id": agent_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/agents/completions", body)
            return strip_keys(response, "usage")

    async def embeddings(self, input: Any, model_id: str,
                         new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"input": input, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/embeddings", body)
            return response["data"]

    async def get_fine_tuning_jobs(self, new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        params = self._body({}, new_config)
        with self.translate_errors():
            response = await self.http_request.get("/fine_tuning/jobs", params)
            return response["data"]

    async def get_fine_tuning_job(self, fine_tuning_job_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        with self.translate_errors():
            return await self.http_request.get(f"/fine_tuning/jobs/{fine_tuning_job_id}")

    async def create_fine_tuning_job(self, hyperparameters: Dict[str, Any], model_id: str,
                                     new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"hyperparameters": hyperparameters, "model": model_id}, new_config)
        with self.translate_errors():
            return await self.http_request.post("/fine_tuning/jobs", body)

    async def start_fine_tuning_job(self, fine_tuning_job_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        with self.translate_errors():
            return await self.http_request.post(f"/fine_tuning/jobs/{fine_tuning_job_id}/start")

    async def cancel_fine_tuning_job(self, fine_tuning_job_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuning_job_id, "Cannot process the fine-tuning job ID")
        with self.translate_errors():
            return await self.http_request.post(f"/fine_tuning/jobs/{fine_tuning_job_id}/cancel")

    async def update_fine_tuned_model(self, fine_tuned_model_id: str,
                                      new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(fine_tuned_model_id, "Cannot process the fine-tuned model ID")
        body = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.patch(f"/fine_tuning/models/{fine_tuned_model_id}", body)

    async def archive_fine_tuned_model(self, fine_tuned_model_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuned_model_id, "Cannot process the fine-tuned model ID")
        with self.translate_errors():
            return await self.http_request.post(f"/fine_tuning/models/{fine_tuned_model_id}/archive")

    async def unarchive_fine_tuned_model(self, fine_tuned_model_id: str) -> Dict[str, Any]:
        validate_string_input(fine_tuned_model_id, "Cannot process the fine-tuned model ID")
        with self.translate_errors():
            return await self.http_request.delete(f"/fine_tuning/models/{fine_tuned_model_id}/archive")
