"""
Context Classification & Grounded Completion

Routes a tutoring prompt to the data it is about, grounds the completion in
that data, and grades writing and speaking submissions.
"""

from app.services.ai.categories import Category
from app.services.ai.classifier import classify_prompt, classify_with_patterns
from app.services.ai.context import ContextAssembler, build_context_map
from app.services.ai.language import LanguageProfile, detect_language
from app.services.ai.service import AIService

__all__ = [
    "Category",
    "classify_prompt",
    "classify_with_patterns",
    "ContextAssembler",
    "build_context_map",
    "LanguageProfile",
    "detect_language",
    "AIService",
]
