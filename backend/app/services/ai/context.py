"""
Context Assembler

Maps every Category to the provider that grounds it. Categories without a
data source yet use NoContextProvider, which returns the configured
"no context" sentence; wiring a new source is a change to build_context_map.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

from app.core.config import get_settings
from app.services.ai.categories import Category
from app.services.ai.providers import UserDataProvider, ClassDataProvider


def serialize_context(data: Any) -> str:
    """Dump retrieved records as readable JSON text for the prompt."""
    return json.dumps(data, default=str, ensure_ascii=False)


class ContextProvider(ABC):
    @abstractmethod
    async def fetch(self, identity: str) -> str:
        ...


class NoContextProvider(ContextProvider):
    async def fetch(self, identity: str) -> str:
        return get_settings().no_context_message


class UserProfileContext(ContextProvider):
    def __init__(self, users: UserDataProvider):
        self.users = users

    async def fetch(self, identity: str) -> str:
        return serialize_context(await self.users.get_user(identity))


class ClassRosterContext(ContextProvider):
    def __init__(self, classes: ClassDataProvider):
        self.classes = classes

    async def fetch(self, identity: str) -> str:
        return serialize_context(await self.classes.get_user_classes(identity))


def build_context_map(
    users: UserDataProvider,
    classes: ClassDataProvider,
) -> dict[Category, ContextProvider]:
    no_context = NoContextProvider()
    return {
        Category.USER: UserProfileContext(users),
        Category.CLASS: ClassRosterContext(classes),
        Category.ASSIGNMENT: no_context,
        Category.SUBMISSION: no_context,
        Category.QUESTION_TEST: no_context,
        Category.FEEDBACK: no_context,
        Category.PROGRESS: no_context,
        Category.OTHERS: no_context,
    }


def build_no_context_map() -> dict[Category, ContextProvider]:
    """Every category answers from general knowledge; no data source is touched."""
    no_context = NoContextProvider()
    return {category: no_context for category in Category}


class ContextAssembler:
    """Fetches the context payload for a classified prompt."""

    def __init__(self, providers: dict[Category, ContextProvider]):
        missing = set(Category) - set(providers)
        if missing:
            names = ", ".join(sorted(c.value for c in missing))
            raise ValueError(f"No context provider for: {names}")
        self.providers = providers

    async def get_context(self, category: "Category | str", identity: str) -> str:
        """
        Return the serialized context for a category.

        Labels outside the Category set are treated as OTHERS.
        """
        resolved = Category.from_label(category)
        raw = category.value if isinstance(category, Category) else str(category)
        if resolved == Category.OTHERS and raw.strip().lower() != "others":
            print(f"[AI Context] Unrecognized label {category!r}, using no context")

        provider = self.providers[resolved]
        print(f"[AI Context] Getting context for: {resolved.value} ({type(provider).__name__})")
        return await provider.fetch(identity)
