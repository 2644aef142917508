import asyncio
from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base
from app.core.errors import MissingIdentityRecord
from app.models import Class, ClassMember, ClassTeacher, StudentProfile, TeacherProfile, User
from app.services.ai.providers import DatabaseClassProvider, DatabaseUserProvider


def _user(user_id, name, role):
    return User(id=user_id, full_name=name, email=f"{user_id}@idest.test", role=role)


def _class(class_id, name, creator, created_at):
    return Class(
        id=class_id,
        name=name,
        slug=class_id,
        description=f"{name} description",
        is_group=True,
        invite_code=f"{class_id}-code",
        schedule={"days": ["Mon", "Thu"], "time": "19:00"},
        created_by=creator,
        created_at=created_at,
    )


async def _seed(session: AsyncSession):
    session.add_all(
        [
            _user("student-1", "Trần Thị Bình", "student"),
            _user("teacher-1", "Jane Doe", "teacher"),
            _user("assistant-1", "Sam Lee", "teacher"),
        ]
    )
    await session.flush()
    session.add_all(
        [
            StudentProfile(user_id="student-1", target_score=7, current_level="B1"),
            TeacherProfile(
                user_id="teacher-1", degree="MA TESOL", specialization="Writing", bio="10 years"
            ),
            _class("writing", "Writing Task 2", "teacher-1", datetime(2025, 9, 1)),
            _class("speaking", "Speaking Club", "teacher-1", datetime(2025, 10, 1)),
        ]
    )
    await session.flush()
    session.add_all(
        [
            ClassMember(id="m-1", class_id="writing", student_id="student-1", status="active"),
            ClassTeacher(id="t-1", class_id="speaking", teacher_id="assistant-1", role="assistant"),
        ]
    )
    await session.commit()


def _run(tmp_path, scenario):
    async def main():
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'idest.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        try:
            async with session_factory() as session:
                await _seed(session)
            async with session_factory() as session:
                return await scenario(session)
        finally:
            await engine.dispose()

    return asyncio.run(main())


def test_user_provider_includes_profile(tmp_path):
    async def scenario(session):
        return await DatabaseUserProvider(session).get_user("student-1")

    user = _run(tmp_path, scenario)

    assert user["full_name"] == "Trần Thị Bình"
    assert user["student_profile"] == {"target_score": 7, "current_level": "B1"}
    assert "teacher_profile" not in user


def test_user_provider_teacher_profile(tmp_path):
    async def scenario(session):
        return await DatabaseUserProvider(session).get_user("teacher-1")

    user = _run(tmp_path, scenario)

    assert user["teacher_profile"]["specialization"] == "Writing"


def test_user_provider_missing_identity(tmp_path):
    async def scenario(session):
        return await DatabaseUserProvider(session).get_user("ghost")

    with pytest.raises(MissingIdentityRecord, match="ghost"):
        _run(tmp_path, scenario)


def test_class_provider_groups_by_relationship(tmp_path):
    async def scenario(session):
        provider = DatabaseClassProvider(session)
        return {
            who: await provider.get_user_classes(who)
            for who in ("student-1", "teacher-1", "assistant-1")
        }

    rosters = _run(tmp_path, scenario)

    student = rosters["student-1"]
    assert [c["name"] for c in student["enrolled"]] == ["Writing Task 2"]
    assert student["created"] == [] and student["teaching"] == []
    assert student["enrolled"][0]["member_count"] == 1
    assert student["enrolled"][0]["schedule"] == {"days": ["Mon", "Thu"], "time": "19:00"}

    teacher = rosters["teacher-1"]
    assert [c["name"] for c in teacher["created"]] == ["Speaking Club", "Writing Task 2"]

    assistant = rosters["assistant-1"]
    assert [c["id"] for c in assistant["teaching"]] == ["speaking"]
    assert assistant["teaching"][0]["teacher_count"] == 1


def test_class_provider_empty_for_unknown_user(tmp_path):
    async def scenario(session):
        return await DatabaseClassProvider(session).get_user_classes("ghost")

    assert _run(tmp_path, scenario) == {"created": [], "enrolled": [], "teaching": []}
