"""
Completion Client

The one place the AI pipeline talks to the completion service:
- Picks the provider for a model id (or the configured default)
- Submits ordered role-tagged turns, system turns first
- Returns the flattened output text

No retries. SDK failures and empty output surface as UpstreamUnavailable.
The client holds no per-call state, so one instance is shared process-wide.
"""

import openai

from app.core.errors import UpstreamUnavailable
from app.services.llm.registry import get_provider, default_model_id


class CompletionClient:
    """Stateless adapter over the registered LLM providers."""

    async def complete(
        self,
        turns: list[dict],
        model_id: str | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """
        Run one completion.

        Args:
            turns: Ordered message dicts with "role" and "content"
            model_id: Optional model identifier; falls back to the configured default
            max_output_tokens: Optional cap on response tokens

        Returns:
            The output text

        Raises:
            UpstreamUnavailable: Transport, timeout or API error, or empty output
        """
        model_id = model_id or default_model_id()
        provider, api_model = get_provider(model_id)

        print(f"[LLM] model={model_id} provider={provider.provider_name} turns={len(turns)}")

        try:
            content = await provider.complete(
                turns=turns,
                model=api_model,
                max_output_tokens=max_output_tokens,
            )
        except openai.APIError as e:
            print(f"[LLM] Completion failed: {e}")
            raise UpstreamUnavailable(f"Completion service error: {e}") from e

        if not content:
            raise UpstreamUnavailable(
                f"Empty response from completion service ({provider.provider_name})"
            )

        print(f"[LLM] Content: {content[:200]}...")
        return content


# ── Singleton ─────────────────────────────────────────────────────────────────

_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """Get or create the completion client singleton."""
    global _client
    if _client is None:
        _client = CompletionClient()
    return _client
