"""
Prompt Categories

The closed set of things a prompt can be "about", and the ordered pattern
table the classifier walks. Order matters: the first matching category wins,
so a prompt mentioning both a class and homework is always a Class prompt.
"""

import re
from enum import Enum

from app.services.ai.language import LanguageProfile


class Category(str, Enum):
    USER = "User"
    CLASS = "Class"
    ASSIGNMENT = "Assignment"
    SUBMISSION = "Submission"
    QUESTION_TEST = "Question/Test"
    FEEDBACK = "Feedback"
    PROGRESS = "Progress"
    OTHERS = "Others"

    @classmethod
    def from_label(cls, label: "str | Category") -> "Category":
        """
        Resolve a free-text label to a Category.

        Matching ignores surrounding whitespace, quotes and case. Anything that
        is not a known category resolves to OTHERS.
        """
        if isinstance(label, cls):
            return label
        cleaned = str(label).strip().strip('"').strip("'").strip().lower()
        for category in cls:
            if category.value.lower() == cleaned:
                return category
        return cls.OTHERS


# Labels the completion service may answer with when no pattern matches
FALLBACK_LABELS: tuple[Category, ...] = (Category.USER, Category.CLASS, Category.OTHERS)

# English inflections (classes, enrolled, submitting, ...)
_ENGLISH_SUFFIX = r"(?:s|es|ed|ing)?"


def _compile(english: list[str], vietnamese: list[str] | None = None) -> re.Pattern:
    alternatives = r"\b(?:" + "|".join(english) + r")" + _ENGLISH_SUFFIX + r"\b"
    if vietnamese:
        alternatives += r"|\b(?:" + "|".join(vietnamese) + r")\b"
    return re.compile(alternatives, re.IGNORECASE)


def _entry(category: Category, english: list[str], vietnamese: list[str]):
    # Vietnamese prompts often mix in English terms, so the secondary
    # pattern keeps the English vocabulary.
    return category, _compile(english), _compile(english, vietnamese)


# ── Pattern Table ─────────────────────────────────────────────────────────────
# (category, English pattern, Vietnamese pattern), checked top to bottom.

CATEGORY_PATTERNS: list[tuple[Category, re.Pattern, re.Pattern]] = [
    _entry(
        Category.USER,
        ["user", "student", "profile", "account", "login", "register", "signup",
         "authenticate", "role"],
        ["người dùng", "sinh viên", "học sinh", "hồ sơ", "tài khoản", "đăng nhập",
         "đăng ký", "xác thực", "quyền", "vai trò", "thông tin cá nhân"],
    ),
    _entry(
        Category.CLASS,
        ["class", "course", "subject", "lesson", "classroom", "schedule", "timetable",
         "enroll", "curriculum"],
        ["lớp", "khóa học", "môn học", "bài học", "phòng học", "lịch học",
         "thời khóa biểu", "đăng ký", "chương trình học", "giáo trình"],
    ),
    _entry(
        Category.ASSIGNMENT,
        ["assignment", "homework", "task", "project", "work", "due", "deadline",
         "submit", "upload"],
        ["bài tập", "nhiệm vụ", "dự án", "công việc", "hạn nộp", "thời hạn",
         "nộp bài", "tải lên", "giao bài"],
    ),
    _entry(
        Category.SUBMISSION,
        ["submit", "submission", "upload", r"turn.?in", r"hand.?in", "deliver",
         "file", "document"],
        ["nộp", "nộp bài", "tải lên", "gửi", "chuyển", "tệp", "tài liệu", "bài làm"],
    ),
    _entry(
        Category.QUESTION_TEST,
        ["question", "test", "quiz", "exam", "assessment", "evaluate", "answer",
         "score", "grade", "mark"],
        ["câu hỏi", "bài kiểm tra", "bài thi", "kỳ thi", "đánh giá", "chấm điểm",
         "trả lời", "điểm số", "điểm", "xếp loại"],
    ),
    _entry(
        Category.FEEDBACK,
        ["feedback", "comment", "review", "rating", "evaluation", "critique",
         "suggestion", "improvement"],
        ["phản hồi", "bình luận", "đánh giá", "nhận xét", "góp ý", "đề xuất",
         "cải thiện", "ý kiến"],
    ),
    _entry(
        Category.PROGRESS,
        ["progress", "tracking", "status", "completion", "percentage", "finished",
         "started", "ongoing"],
        ["tiến độ", "theo dõi", "trạng thái", "hoàn thành", "phần trăm", "kết thúc",
         "bắt đầu", "đang thực hiện", "quá trình"],
    ),
]


def match_category(normalized_prompt: str, language: LanguageProfile) -> Category:
    """
    Return the first category whose pattern matches, or OTHERS.

    Args:
        normalized_prompt: Trimmed, lowercased prompt
        language: Selects the English or Vietnamese pattern of each entry
    """
    for category, english, vietnamese in CATEGORY_PATTERNS:
        pattern = vietnamese if language == LanguageProfile.SECONDARY else english
        if pattern.search(normalized_prompt):
            return category
    return Category.OTHERS
