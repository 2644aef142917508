"""
Abstract base class for all LLM providers.

Each provider implements the API-specific translation layer.
Error mapping and model selection are handled by the completion client.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    provider_name: str = "base"

    @abstractmethod
    async def complete(
        self,
        turns: list[dict],
        model: str,
        max_output_tokens: int | None = None,
    ) -> str:
        """
        Submit role-tagged turns to the LLM and return the flattened output text.

        Args:
            turns: Ordered message dicts with "role" and "content"; system turns first
            model: The API model identifier (e.g., "gpt-5-nano", "gpt-4o")
            max_output_tokens: Optional cap on response tokens

        Returns:
            Raw text response from the LLM (may be empty)
        """
        ...
