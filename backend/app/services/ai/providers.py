"""
Context Data Providers

Read-only lookups that ground answers in platform data. The abstract
classes describe what the context assembler needs; the database classes
serve them from the platform's tables.
"""

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import MissingIdentityRecord, UpstreamUnavailable
from app.models.user import User
from app.models.classroom import Class, ClassMember, ClassTeacher


class UserDataProvider(ABC):
    @abstractmethod
    async def get_user(self, identity: str) -> dict[str, Any]:
        """Return the identity's profile record; raise MissingIdentityRecord if absent."""
        ...


class ClassDataProvider(ABC):
    @abstractmethod
    async def get_user_classes(self, identity: str) -> dict[str, list[dict[str, Any]]]:
        """Return the classes the identity created, is enrolled in, or teaches."""
        ...


def _user_to_dict(user: User) -> dict[str, Any]:
    data = {
        "id": user.id,
        "full_name": user.full_name,
        "email": user.email,
        "role": user.role,
        "avatar_url": user.avatar_url,
        "is_active": user.is_active,
        "created_at": user.created_at,
    }
    if user.student_profile:
        data["student_profile"] = {
            "target_score": user.student_profile.target_score,
            "current_level": user.student_profile.current_level,
        }
    if user.teacher_profile:
        data["teacher_profile"] = {
            "degree": user.teacher_profile.degree,
            "specialization": user.teacher_profile.specialization,
            "bio": user.teacher_profile.bio,
        }
    return data


def _class_to_dict(cls: Class, member_count: int, teacher_count: int) -> dict[str, Any]:
    return {
        "id": cls.id,
        "name": cls.name,
        "slug": cls.slug,
        "description": cls.description,
        "is_group": cls.is_group,
        "schedule": cls.schedule,
        "created_by": cls.created_by,
        "created_at": cls.created_at,
        "member_count": member_count,
        "teacher_count": teacher_count,
    }


class DatabaseUserProvider(UserDataProvider):
    """Profile lookup against the User/StudentProfile/TeacherProfile tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, identity: str) -> dict[str, Any]:
        try:
            result = await self.db.execute(
                select(User)
                .where(User.id == identity)
                .options(
                    selectinload(User.student_profile),
                    selectinload(User.teacher_profile),
                )
            )
        except SQLAlchemyError as e:
            raise UpstreamUnavailable(f"Error fetching user by ID: {e}") from e

        user = result.scalar_one_or_none()
        if not user:
            raise MissingIdentityRecord(identity)
        return _user_to_dict(user)


class DatabaseClassProvider(ClassDataProvider):
    """Roster lookup against the Class/ClassMember/ClassTeacher tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _classes_where(self, condition) -> list[dict[str, Any]]:
        member_count = (
            select(func.count(ClassMember.id))
            .where(ClassMember.class_id == Class.id)
            .scalar_subquery()
        )
        teacher_count = (
            select(func.count(ClassTeacher.id))
            .where(ClassTeacher.class_id == Class.id)
            .scalar_subquery()
        )
        result = await self.db.execute(
            select(Class, member_count, teacher_count)
            .where(condition)
            .order_by(Class.created_at.desc())
        )
        return [_class_to_dict(cls, members, teachers) for cls, members, teachers in result.all()]

    async def get_user_classes(self, identity: str) -> dict[str, list[dict[str, Any]]]:
        enrolled_ids = select(ClassMember.class_id).where(ClassMember.student_id == identity)
        teaching_ids = select(ClassTeacher.class_id).where(ClassTeacher.teacher_id == identity)

        try:
            return {
                "created": await self._classes_where(Class.created_by == identity),
                "enrolled": await self._classes_where(Class.id.in_(enrolled_ids)),
                "teaching": await self._classes_where(Class.id.in_(teaching_ids)),
            }
        except SQLAlchemyError as e:
            raise UpstreamUnavailable(f"Error fetching classes for user: {e}") from e
