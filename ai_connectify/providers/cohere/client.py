"""
Cohere API client.

Covers chat, embeddings, rerank, classification, tokenization, embed jobs,
datasets, connectors and fine-tuned models. Most responses carry a ``meta``
block with billing details that is stripped before returning.
"""

from typing import Any, Dict, List, Optional

from ...config.constants import COHERE_BASE_URL
from ...helpers.payloads import build_form, parse_json_lines, strip_keys
from ...helpers.validation import validate_array_input, validate_string_input
from ..base import ConnectorClient

FINETUNED_MODELS = "/v1/finetuning/finetuned-models"


class CohereClient(ConnectorClient):
    ai_name = "Cohere"
    base_url = COHERE_BASE_URL

    def _build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"bearer {self.ai_api_key}"}

    def set_client_name(self, client_name: str) -> None:
        validate_string_input(client_name, "Cannot process the client name")
        self._set_header("X-Client-Name", client_name)

    async def check_api_key(self) -> Dict[str, Any]:
        with self.translate_errors():
            return await self.http_request.post("/v1/check-api-key")

    # Chat and text endpoints

    async def chat(self, messages: List[Dict[str, Any]], model_id: str,
                   new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"messages": messages, "stream": False, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/v2/chat", body)
            return strip_keys(response, "meta")

    async def chat_with_streaming(self, messages: List[Dict[str, Any]], model_id: str,
                                  new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Streamed chat, collected into the list of events the server sent."""
        validate_array_input(messages, "Cannot process the messages array")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body(
            {"messages": messages, "stream": True, "model": model_id},
            new_config,
            defaults={"response_format": {"type": "json_object"}},
        )
        with self.translate_errors():
            response = await self.http_request.post("/v2/chat", body)
            return parse_json_lines(response)

    async def embed(self, texts: List[str], model_id: str, input_type: str,
                    embedding_types: List[str],
                    new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_array_input(texts, "Cannot process the texts array")
        validate_string_input(model_id, "Cannot process the model ID")
        validate_string_input(input_type, "Cannot process the input type")
        validate_array_input(embedding_types, "Cannot process the embedding types")
        body = self._body(
            {"texts": texts, "model": model_id, "input_type": input_type,
             "embedding_types": embedding_types},
            new_config,
        )
        with self.translate_errors():
            response = await self.http_request.post("/v2/embed", body)
            return strip_keys(response, "meta")

    async def rerank(self, query: str, documents: List[Any], model_id: str,
                     new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(query, "Cannot process the query")
        validate_array_input(documents, "Cannot process the documents array")
        validate_string_input(model_id, "Cannot process the model ID")
        body = self._body({"query": query, "documents": documents, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/v2/rerank", body)
            return strip_keys(response, "meta")

    async def classify(self, inputs: List[str], examples: Optional[List[Dict[str, Any]]], model_id: str,
                       new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Classify ``inputs``; ``examples`` may be empty when using a fine-tuned model."""
        validate_array_input(inputs, "Cannot process the inputs array")
        validate_string_input(model_id, "Cannot process the model ID")
        examples = examples if examples is not None else []
        if examples:
            validate_array_input(examples, "Cannot process the examples array")
        body = self._body({"inputs": inputs, "examples": examples, "model": model_id}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/v1/classify", body)
            return strip_keys(response, "meta")

    async def tokenize(self, text: str, model_id: str) -> Dict[str, Any]:
        validate_string_input(text, "Cannot process the text")
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            response = await self.http_request.post("/v1/tokenize", {"text": text, "model": model_id})
            return strip_keys(response, "meta")

    async def detokenize(self, tokens: List[int], model_id: str) -> Dict[str, Any]:
        validate_array_input(tokens, "Cannot process the tokens array")
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            response = await self.http_request.post("/v1/detokenize", {"tokens": tokens, "model": model_id})
            return strip_keys(response, "meta")

    # Models

    async def get_models(self, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get("/v1/models", params)

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        validate_string_input(model_id, "Cannot process the model ID")
        with self.translate_errors():
            return await self.http_request.get(f"/v1/models/{model_id}")

    # Embed jobs

    async def get_embed_jobs(self) -> List[Dict[str, Any]]:
        with self.translate_errors():
            response = await self.http_request.get("/v1/embed-jobs")
            return response["embed_jobs"]

    async def get_embed_job(self, embed_job_id: str) -> Dict[str, Any]:
        validate_string_input(embed_job_id, "Cannot process the embed job ID")
        with self.translate_errors():
            response = await self.http_request.get(f"/v1/embed-jobs/{embed_job_id}")
            return strip_keys(response, "meta")

    async def create_embed_job(self, dataset_id: str, model_id: str, input_type: str,
                               new_config: Optional[Dict[str, Any]] = None) -> str:
        validate_string_input(dataset_id, "Cannot process the dataset ID")
        validate_string_input(model_id, "Cannot process the model ID")
        validate_string_input(input_type, "Cannot process the input type")
        body = self._body(
            {"model": model_id, "dataset_id": dataset_id, "input_type": input_type}, new_config
        )
        with self.translate_errors():
            response = await self.http_request.post("/v1/embed-jobs", body)
            return response["job_id"]

    async def cancel_embed_job(self, embed_job_id: str) -> Dict[str, str]:
        validate_string_input(embed_job_id, "Cannot process the embed job ID")
        with self.translate_errors():
            await self.http_request.post(f"/v1/embed-jobs/{embed_job_id}/cancel")
        return {"embed_job_id": embed_job_id, "status": "canceled"}

    # Datasets

    async def get_datasets(self, new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        params = self._body({}, new_config)
        with self.translate_errors():
            response = await self.http_request.get("/v1/datasets", params)
            return response["datasets"]

    async def get_dataset(self, dataset_id: str) -> Dict[str, Any]:
        validate_string_input(dataset_id, "Cannot process the dataset ID")
        with self.translate_errors():
            response = await self.http_request.get(f"/v1/datasets/{dataset_id}")
            return response["dataset"]

    async def get_dataset_usage(self) -> Dict[str, Any]:
        with self.translate_errors():
            return await self.http_request.get("/v1/datasets/usage")

    async def create_dataset(self, name: str, file_path: str, dataset_type: str,
                             new_config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        validate_string_input(name, "Cannot process the name")
        validate_string_input(file_path, "Cannot process the file path")
        validate_string_input(dataset_type, "Cannot process the type")
        # name and type travel as query parameters, the file as multipart data
        params = self._body({"name": name, "type": dataset_type}, new_config)
        with self.translate_errors():
            upload = self._upload(file_path, "Cannot process the file path")
            response = self._check_full(await self.http_request.post_form(
                "/v1/datasets",
                files={"data": upload},
                extra_options={"params": build_form(params)},
            ))
            return {"dataset_id": response.data["id"]}

    async def delete_dataset(self, dataset_id: str) -> Dict[str, str]:
        validate_string_input(dataset_id, "Cannot process the dataset ID")
        with self.translate_errors():
            await self.http_request.delete(f"/v1/datasets/{dataset_id}")
        return {"dataset_id": dataset_id, "status": "deleted"}

    # Connectors

    async def get_connectors(self, new_config: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        params = self._body({}, new_config)
        with self.translate_errors():
            response = await self.http_request.get("/v1/connectors", params)
            return response["connectors"]

    async def get_connector(self, connector_id: str) -> Dict[str, Any]:
        validate_string_input(connector_id, "Cannot process the connector ID")
        with self.translate_errors():
            response = await self.http_request.get(f"/v1/connectors/{connector_id}")
            return response["connector"]

    async def create_connector(self, name: str, url: str,
                               new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(name, "Cannot process the name")
        validate_string_input(url, "Cannot process the url")
        body = self._body({"name": name, "url": url}, new_config)
        with self.translate_errors():
            response = await self.http_request.post("/v1/connectors", body)
            return response["connector"]

    async def update_connector(self, connector_id: str,
                               new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(connector_id, "Cannot process the connector ID")
        body = self._body({}, new_config)
        with self.translate_errors():
            response = await self.http_request.patch(f"/v1/connectors/{connector_id}", body)
            return response["connector"]

    async def delete_connector(self, connector_id: str) -> Dict[str, str]:
        validate_string_input(connector_id, "Cannot process the connector ID")
        with self.translate_errors():
            await self.http_request.delete(f"/v1/connectors/{connector_id}")
        return {"connector_id": connector_id, "status": "deleted"}

    async def authorize_connector(self, connector_id: str,
                                  after_token_redirect: Optional[str] = None) -> Dict[str, Any]:
        validate_string_input(connector_id, "Cannot process the connector ID")
        options = None
        if after_token_redirect is not None:
            validate_string_input(after_token_redirect, "Cannot process the after token redirect URL")
            options = {"params": {"after_token_redirect": after_token_redirect}}
        with self.translate_errors():
            return await self.http_request.post(
                f"/v1/connectors/{connector_id}/oauth/authorize", extra_options=options
            )

    # Fine-tuned models

    async def get_fine_tuned_models(self, new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(FINETUNED_MODELS, params)

    async def get_fine_tuned_model(self, finetuned_model_id: str) -> Dict[str, Any]:
        validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
        with self.translate_errors():
            response = await self.http_request.get(f"{FINETUNED_MODELS}/{finetuned_model_id}")
            return response["finetuned_model"]

    async def get_fine_tuned_model_chronology(self, finetuned_model_id: str,
                                              new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(f"{FINETUNED_MODELS}/{finetuned_model_id}/events", params)

    async def get_fine_tuned_model_metrics(self, finetuned_model_id: str,
                                           new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
        params = self._body({}, new_config)
        with self.translate_errors():
            return await self.http_request.get(
                f"{FINETUNED_MODELS}/{finetuned_model_id}/training-step-metrics", params
            )

    async def create_fine_tuned_model(self, name: str, settings: Dict[str, Any],
                                      new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(name, "Cannot process the fine-tuned model name")
        body = self._body({"name": name, "settings": settings}, new_config)
        with self.translate_errors():
            response = await self.http_request.post(FINETUNED_MODELS, body)
            return response["finetuned_model"]

    async def update_fine_tuned_model(self, finetuned_model_id: str, name: str, settings: Dict[str, Any],
                                      new_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
        validate_string_input(name, "Cannot process the fine-tuned model name")
        body = self._body({"name": name, "settings": settings}, new_config)
        with self.translate_errors():
            response = await self.http_request.patch(f"{FINETUNED_MODELS}/{finetuned_model_id}", body)
            return response["finetuned_model"]

    async def delete_fine_tuned_model(self, finetuned_model_id: str) -> Dict[str, str]:
        validate_string_input(finetuned_model_id, "Cannot process the fine-tuned model ID")
        with self.translate_errors():
            await self.http_request.delete(f"{FINETUNED_MODELS}/{finetuned_model_id}")
        return {"finetuned_model_id": finetuned_model_id, "status": "deleted"}
