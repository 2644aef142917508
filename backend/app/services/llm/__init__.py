"""
LLM Provider Abstraction Layer

Provides a unified completion interface over the OpenAI Responses and
Chat Completions APIs with a model registry.
"""

from app.services.llm.client import CompletionClient, get_completion_client
from app.services.llm.registry import MODEL_REGISTRY, get_provider, list_models

__all__ = [
    "CompletionClient",
    "get_completion_client",
    "MODEL_REGISTRY",
    "get_provider",
    "list_models",
]
