from datetime import datetime
from typing import Any
from sqlalchemy import DateTime, Boolean, Text, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Class(Base):
    __tablename__ = "Class"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    is_group: Mapped[bool] = mapped_column(Boolean, nullable=False)
    invite_code: Mapped[str] = mapped_column(Text, nullable=False)
    schedule: Mapped[Any] = mapped_column(JSON, nullable=False)
    created_by: Mapped[str] = mapped_column(
        Text, ForeignKey("User.id"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    # Relationships
    members: Mapped[list["ClassMember"]] = relationship(
        "ClassMember", back_populates="class_"
    )
    teachers: Mapped[list["ClassTeacher"]] = relationship(
        "ClassTeacher", back_populates="class_"
    )


class ClassMember(Base):
    __tablename__ = "ClassMember"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    class_id: Mapped[str] = mapped_column(
        Text, ForeignKey("Class.id", ondelete="CASCADE"), nullable=False
    )
    student_id: Mapped[str] = mapped_column(
        Text, ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[str] = mapped_column(Text, nullable=False)  # "active", "invited", ...
    joined_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    class_: Mapped["Class"] = relationship("Class", back_populates="members")


class ClassTeacher(Base):
    __tablename__ = "ClassTeacher"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    class_id: Mapped[str] = mapped_column(
        Text, ForeignKey("Class.id", ondelete="CASCADE"), nullable=False
    )
    teacher_id: Mapped[str] = mapped_column(
        Text, ForeignKey("User.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(Text, nullable=False)

    class_: Mapped["Class"] = relationship("Class", back_populates="teachers")
