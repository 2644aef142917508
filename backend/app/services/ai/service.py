"""
AI Service

Caller-facing operations of the tutoring assistant:
- generate_text: plain completion, no grounding
- generate_text_with_context: detect language -> classify -> fetch context
  -> compose -> complete
- grade_writing_submission / grade_speaking_submission: rubric grading from
  the literal inputs, no classification or retrieval

Every call is request-scoped; a failure at any step aborts the request.
"""

from app.services.ai.classifier import classify_prompt
from app.services.ai.context import ContextAssembler
from app.services.ai.prompts import (
    compile_grounded_prompt,
    compile_writing_grading_prompt,
    compile_speaking_grading_prompt,
)
from app.services.llm.client import CompletionClient


class AIService:
    def __init__(self, completion: CompletionClient, context: ContextAssembler):
        self.completion = completion
        self.context = context

    async def generate_text(self, prompt: str) -> str:
        """Answer a prompt with no retrieved context."""
        return await self.completion.complete([{"role": "user", "content": prompt}])

    async def get_context_category(self, prompt: str) -> str:
        return await classify_prompt(prompt, self.completion)

    async def get_context(self, category: str, identity: str) -> str:
        return await self.context.get_context(category, identity)

    async def generate_text_with_context(self, prompt: str, identity: str) -> str:
        """
        Answer a prompt grounded in the requesting user's platform data.

        Args:
            prompt: Raw user prompt, sent unmodified as the user turn
            identity: Requesting user's id, used only as a provider lookup key

        Returns:
            The generated answer text
        """
        category = await self.get_context_category(prompt)
        context = await self.get_context(category, identity)
        composed = compile_grounded_prompt(prompt, context)
        print(f"[AI] System prompt: {composed.system[:200]}...")
        return await self.completion.complete(composed.to_turns())

    async def grade_writing_submission(self, submission: str, question: str) -> str:
        composed = compile_writing_grading_prompt(question, submission)
        return await self.completion.complete(composed.to_turns())

    async def grade_speaking_submission(self, question: str, answer: str) -> str:
        composed = compile_speaking_grading_prompt(question, answer)
        return await self.completion.complete(composed.to_turns())
