from datetime import datetime
from sqlalchemy import String, DateTime, Boolean, Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


# Table names follow the platform's existing schema; this service only reads them.
class User(Base):
    __tablename__ = "User"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    # Relationships
    student_profile: Mapped["StudentProfile"] = relationship(
        "StudentProfile", back_populates="user", uselist=False
    )
    teacher_profile: Mapped["TeacherProfile"] = relationship(
        "TeacherProfile", back_populates="user", uselist=False
    )


class StudentProfile(Base):
    __tablename__ = "StudentProfile"

    user_id: Mapped[str] = mapped_column(
        Text, ForeignKey("User.id", ondelete="CASCADE"), primary_key=True
    )
    target_score: Mapped[int] = mapped_column(Integer, nullable=False)
    current_level: Mapped[str] = mapped_column(String(50), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="student_profile")


class TeacherProfile(Base):
    __tablename__ = "TeacherProfile"

    user_id: Mapped[str] = mapped_column(
        Text, ForeignKey("User.id", ondelete="CASCADE"), primary_key=True
    )
    degree: Mapped[str] = mapped_column(Text, nullable=False)
    specialization: Mapped[str] = mapped_column(Text, nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="teacher_profile")
