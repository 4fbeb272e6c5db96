"""Public Cohere connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import CohereClient


class Cohere(BaseConnector):
    client_class = CohereClient

    def set_client_name(self, client_name: str) -> None:
        self.client.set_client_name(client_name)

    async def check_api_key(self):
        return await self.client.check_api_key()

    async def chat(self, messages: List[Dict[str, Any]], model_id: str = "command-r-plus-08-2024",
                   new_config: Optional[Dict[str, Any]] = None):
        return await self.client.chat(messages, model_id, new_config)

    async def chat_with_streaming(self, messages: List[Dict[str, Any]],
                                  model_id: str = "command-r-plus-08-2024",
                                  new_config: Optional[Dict[str, Any]] = None):
        return await self.client.chat_with_streaming(messages, model_id, new_config)

    async def embed(self, texts: List[str], model_id: str = "embed-english-v3.0",
                    input_type: str = "search_document", embedding_types: Optional[List[str]] = None,
                    new_config: Optional[Dict[str, Any]] = None):
        if embedding_types is None:
            embedding_types = ["float"]
        return await self.client.embed(texts, model_id, input_type, embedding_types, new_config)

    async def rerank(self, query: str, documents: List[Any], model_id: str = "rerank-english-v3.0",
                     new_config: Optional[Dict[str, Any]] = None):
        return await self.client.rerank(query, documents, model_id, new_config)

    async def classify(self, inputs: List[str], examples: Optional[List[Dict[str, Any]]] = None,
                       model_id: str = "embed-english-light-v3.0",
                       new_config: Optional[Dict[str, Any]] = None):
        return await self.client.classify(inputs, examples, model_id, new_config)

    async def tokenize(self, text: str, model_id: str = "command"):
        return await self.client.tokenize(text, model_id)

    async def detokenize(self, tokens: List[int], model_id: str = "command"):
        return await self.client.detokenize(tokens, model_id)

    async def get_models(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_models(new_config)

    async def get_model(self, model_id: str):
        return await self.client.get_model(model_id)

    async def get_embed_jobs(self):
        return await self.client.get_embed_jobs()

    async def get_embed_job(self, embed_job_id: str):
        return await self.client.get_embed_job(embed_job_id)

    async def create_embed_job(self, dataset_id: str, model_id: str = "embed-english-light-v3.0",
                               input_type: str = "classification",
                               new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_embed_job(dataset_id, model_id, input_type, new_config)

    async def cancel_embed_job(self, embed_job_id: str):
        return await self.client.cancel_embed_job(embed_job_id)

    async def get_datasets(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_datasets(new_config)

    async def get_dataset(self, dataset_id: str):
        return await self.client.get_dataset(dataset_id)

    async def get_dataset_usage(self):
        return await self.client.get_dataset_usage()

    async def create_dataset(self, name: str, file_path: str, dataset_type: str = "embed-input",
                             new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_dataset(name, file_path, dataset_type, new_config)

    async def delete_dataset(self, dataset_id: str):
        return await self.client.delete_dataset(dataset_id)

    async def get_connectors(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_connectors(new_config)

    async def get_connector(self, connector_id: str):
        return await self.client.get_connector(connector_id)

    async def create_connector(self, name: str, url: str, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_connector(name, url, new_config)

    async def update_connector(self, connector_id: str, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.update_connector(connector_id, new_config)

    async def delete_connector(self, connector_id: str):
        return await self.client.delete_connector(connector_id)

    async def authorize_connector(self, connector_id: str, after_token_redirect: Optional[str] = None):
        return await self.client.authorize_connector(connector_id, after_token_redirect)

    async def get_fine_tuned_models(self, new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuned_models(new_config)

    async def get_fine_tuned_model(self, finetuned_model_id: str):
        return await self.client.get_fine_tuned_model(finetuned_model_id)

    async def get_fine_tuned_model_chronology(self, finetuned_model_id: str,
                                              new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuned_model_chronology(finetuned_model_id, new_config)

    async def get_fine_tuned_model_metrics(self, finetuned_model_id: str,
                                           new_config: Optional[Dict[str, Any]] = None):
        return await self.client.get_fine_tuned_model_metrics(finetuned_model_id, new_config)

    async def create_fine_tuned_model(self, name: str, settings: Dict[str, Any],
                                      new_config: Optional[Dict[str, Any]] = None):
        return await self.client.create_fine_tuned_model(name, settings, new_config)

    async def update_fine_tuned_model(self, finetuned_model_id: str, name: str, settings: Dict[str, Any],
                                      new_config: Optional[Dict[str, Any]] = None):
        return await self.client.update_fine_tuned_model(finetuned_model_id, name, settings, new_config)

    async def delete_fine_tuned_model(self, finetuned_model_id: str):
        return await self.client.delete_fine_tuned_model(finetuned_model_id)
