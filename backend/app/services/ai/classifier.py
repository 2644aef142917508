"""
Context Category Classifier

Deterministic first: the ordered regex table decides whenever any pattern
matches. Only when nothing matches is the completion service asked to pick a
label, and its answer is returned as-is. Callers that need a real Category
resolve it with Category.from_label.
"""

from app.core.config import get_settings
from app.services.ai.categories import Category, match_category
from app.services.ai.language import detect_language
from app.services.ai.prompts import compile_classification_prompt
from app.services.llm.client import CompletionClient


def classify_with_patterns(prompt: str) -> Category:
    """Regex-only classification; OTHERS when no pattern matches."""
    language = detect_language(prompt)
    return match_category(prompt.strip().lower(), language)


async def classify_prompt(prompt: str, completion: CompletionClient) -> str:
    """
    Classify a prompt, falling back to the completion service.

    Args:
        prompt: Raw user prompt
        completion: Client used for the single fallback call

    Returns:
        A Category from the pattern table, or the fallback label verbatim

    Raises:
        UpstreamUnavailable: The fallback call failed
    """
    if not prompt.strip():
        return Category.OTHERS

    category = classify_with_patterns(prompt)
    print(f"[AI Classifier] Regex result: {category.value}")
    if category != Category.OTHERS:
        return category

    print("[AI Classifier] Regex failed, asking the completion service for a label")
    settings = get_settings()
    composed = compile_classification_prompt(prompt)
    label = await completion.complete(
        composed.to_turns(),
        model_id=settings.classifier_model or None,
    )
    print(f"[AI Classifier] Completion label: {label}")
    return label
