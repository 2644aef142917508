"""
Language Profile Detection

Decides whether a prompt is written in Vietnamese (the platform's secondary
language) so the classifier can pick the matching pattern table.
"""

import re
from enum import Enum


class LanguageProfile(str, Enum):
    PRIMARY = "primary"  # English
    SECONDARY = "secondary"  # Vietnamese


# Vietnamese-only letterforms (tone marks, horn/breve vowels, đ)
VIETNAMESE_CHARS = re.compile(
    r"[àáạảãâầấậẩẫăằắặẳẵèéẹẻẽêềếệểễìíịỉĩòóọỏõôồốộổỗơờớợởỡùúụủũưừứựửữỳýỵỷỹđ]",
    re.IGNORECASE,
)

# High-frequency function words plus tutoring-domain nouns
VIETNAMESE_WORDS = [
    "và", "của", "có", "không", "được", "này", "đó", "cho", "với", "từ",
    "trong", "trên", "về", "sau", "trước", "nếu", "như", "khi", "để", "làm",
    "thì", "sẽ", "đã", "đang", "bị", "bởi", "theo", "qua", "tại", "đến",
    "hay", "hoặc", "nhưng", "mà", "vì", "nên", "phải", "cần", "muốn", "thích",
    "biết", "hiểu", "học", "dạy", "sinh viên", "học sinh", "giáo viên", "thầy",
    "cô", "lớp", "môn", "bài", "kiểm tra", "thi", "điểm", "nộp", "làm bài",
]

VIETNAMESE_WORD_PATTERN = re.compile(
    r"\b(?:" + "|".join(VIETNAMESE_WORDS) + r")\b",
    re.IGNORECASE,
)


def is_vietnamese_prompt(prompt: str) -> bool:
    """True if the prompt has a Vietnamese letterform or a common Vietnamese word."""
    return bool(
        VIETNAMESE_CHARS.search(prompt) or VIETNAMESE_WORD_PATTERN.search(prompt)
    )


def detect_language(prompt: str) -> LanguageProfile:
    """Return the language profile used to select classification patterns."""
    if is_vietnamese_prompt(prompt):
        return LanguageProfile.SECONDARY
    return LanguageProfile.PRIMARY
