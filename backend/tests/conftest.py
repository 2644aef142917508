import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.errors import MissingIdentityRecord
from app.services.ai.providers import UserDataProvider, ClassDataProvider


class FakeCompletion:
    """Records every call and answers from a queue of replies."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def complete(self, turns, model_id=None, max_output_tokens=None):
        self.calls.append({"turns": turns, "model_id": model_id})
        reply = self.replies.pop(0) if self.replies else "answer"
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeUsers(UserDataProvider):
    def __init__(self, records=None):
        self.records = records or {}
        self.calls = []

    async def get_user(self, identity):
        self.calls.append(identity)
        if identity not in self.records:
            raise MissingIdentityRecord(identity)
        return self.records[identity]


class FakeClasses(ClassDataProvider):
    def __init__(self, classes=None):
        self.classes = classes or {}
        self.calls = []

    async def get_user_classes(self, identity):
        self.calls.append(identity)
        return self.classes.get(identity, {"created": [], "enrolled": [], "teaching": []})


@pytest.fixture
def users():
    return FakeUsers(
        {
            "u-1": {
                "id": "u-1",
                "full_name": "Nguyễn Văn An",
                "role": "student",
                "student_profile": {"target_score": 7, "current_level": "B2"},
            }
        }
    )


@pytest.fixture
def classes():
    return FakeClasses(
        {
            "u-1": {
                "created": [],
                "enrolled": [{"id": "c-1", "name": "IELTS Writing Intensive", "member_count": 12}],
                "teaching": [],
            }
        }
    )
