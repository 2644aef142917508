"""
OpenAI Chat Completions API Provider

Handles GPT-4o, GPT-4o-mini, and other Chat Completions API models:
- client.chat.completions.create()
- messages (not input)
- response.choices[0].message.content
"""

from openai import AsyncOpenAI

from app.core.config import get_settings
from app.services.llm.base import LLMProvider

settings = get_settings()


class OpenAIChatProvider(LLMProvider):
    """Provider for OpenAI Chat Completions API (GPT-4o, GPT-4o-mini, etc.)."""

    provider_name = "openai_chat"

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
            kwargs["max_completion_tokens"] = max_output_tokens

        response = await self.client.chat.completions.create(
            model=model,
            messages=turns,
            **kwargs,
        )
        return response.choices[0].message.content or ""
