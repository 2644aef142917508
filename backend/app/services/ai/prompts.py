"""
Prompt Templates

Builds the instructions sent to the completion service. Every template is a
plain fill: the prompt, context, question and submission text are
interpolated verbatim.
"""

from pydantic import BaseModel

from app.core.config import get_settings
from app.services.ai.categories import FALLBACK_LABELS


class ComposedPrompt(BaseModel):
    """A system instruction plus an optional user turn, built fresh per request."""

    system: str
    user: str | None = None

    def to_turns(self) -> list[dict]:
        turns = [{"role": "system", "content": self.system}]
        if self.user is not None:
            turns.append({"role": "user", "content": self.user})
        return turns


def compile_classification_prompt(prompt: str) -> ComposedPrompt:
    """Ask for a single label from the reduced fallback set."""
    labels = "\n".join(f"- {label.value}" for label in FALLBACK_LABELS)
    system = (
        "Response with just the label, nothing else. "
        "Look at the user's prompt and label it as one of the following:\n"
        f"{labels}"
    )
    return ComposedPrompt(system=system, user=prompt)


def compile_grounded_prompt(prompt: str, context: str) -> ComposedPrompt:
    """
    Build the grounded Q&A prompt.

    Args:
        prompt: The user's original prompt, sent unmodified as the user turn
        context: Serialized context payload (or the no-context sentinel)
    """
    settings = get_settings()
    system = f"""You are a helpful assistant for an {settings.exam_name} tutoring platform "{settings.platform_name}".
You should use the context to answer the prompt in a concise manner and in the same language as the user's prompt.
Here is the context:
{context}"""
    return ComposedPrompt(system=system, user=prompt)


def compile_writing_grading_prompt(question: str, submission: str) -> ComposedPrompt:
    """Single grading instruction for a writing submission."""
    settings = get_settings()
    system = f"""You are a helpful teacher for an {settings.exam_name} tutoring platform "{settings.platform_name}".
You should grade the writing submission of the user and give feedback on it based on the {settings.exam_name} writing rubric.
Here is the question:
{question}
Here is the submission:
{submission}"""
    return ComposedPrompt(system=system)


def compile_speaking_grading_prompt(question: str, answer: str) -> ComposedPrompt:
    """Single grading instruction for a speaking answer or transcript."""
    settings = get_settings()
    system = f"""You are a helpful teacher for an {settings.exam_name} tutoring platform "{settings.platform_name}".
You should grade the speaking submission of the user and give feedback on it based on the {settings.exam_name} speaking rubric.
Here is the question:
{question}
Here is the answer:
{answer}"""
    return ComposedPrompt(system=system)
