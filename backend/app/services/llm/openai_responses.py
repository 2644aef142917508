"""
OpenAI Responses API Provider

Handles GPT-5.x models using the newer Responses API format:
- client.responses.create()
- input (not messages)
- response.output_text
"""

from openai import AsyncOpenAI

from app.core.config import get_settings
from app.services.llm.base import LLMProvider

settings = get_settings()


class OpenAIResponsesProvider(LLMProvider):
    """Provider for OpenAI Responses API (GPT-5.x models)."""

    provider_name = "openai_responses"

    def __init__(self, client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
        )

    async def complete(
        self,
        turns: list[dict],
        model: str,
        max_output_tokens: int | None = None,
    ) -> str:
        kwargs = {}
        if max_output_tokens is not None:
            kwargs["max_output_tokens"] = max_output_tokens

        response = await self.client.responses.create(
            model=model,
            input=turns,
            **kwargs,
        )
        return response.output_text
