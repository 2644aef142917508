from app.models.user import User, StudentProfile, TeacherProfile
from app.models.classroom import Class, ClassMember, ClassTeacher

__all__ = [
    "User",
    "StudentProfile",
    "TeacherProfile",
    "Class",
    "ClassMember",
    "ClassTeacher",
]
