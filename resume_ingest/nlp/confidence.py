"""
Confidence scoring for structured extraction results.

The score summarizes how complete an extraction is, not how accurate it is.
"""

from typing import Final

from resume_ingest.data.models import StructuredContent

NAME_POINTS: Final[int] = 20
EMAIL_POINTS: Final[int] = 15
PHONE_POINTS: Final[int] = 10
EXPERIENCE_POINTS: Final[int] = 25
COMPLETE_EXPERIENCE_POINTS: Final[int] = 5
EDUCATION_POINTS: Final[int] = 15
COMPLETE_EDUCATION_POINTS: Final[int] = 5
SKILLS_POINTS: Final[int] = 10
RAW_TEXT_POINTS: Final[int] = 5

RAW_TEXT_MIN_LENGTH: Final[int] = 100
MAX_SCORE: Final[int] = 100


def calculate_confidence(content: StructuredContent) -> int:
    """
    Score a structured result in the closed range [0, 100].

    Additive: +20 name, +15 email, +10 phone, +25 any experience (+5 once if
    one has both company and position), +15 any education (+5 once if one has
    both school and degree), +10 any non-empty skill category, +5 when the raw
    text exceeds 100 characters. The raw sum can reach 110 and is clamped.
    """
    score = 0

    info = content.personal_info
    if info is not None:
        if info.name:
            score += NAME_POINTS
        if info.email:
            score += EMAIL_POINTS
        if info.phone:
            score += PHONE_POINTS

    if content.experience:
        score += EXPERIENCE_POINTS
        if any(exp.company and exp.position for exp in content.experience):
            score += COMPLETE_EXPERIENCE_POINTS

    if content.education:
        score += EDUCATION_POINTS
        if any(edu.school and edu.degree for edu in content.education):
            score += COMPLETE_EDUCATION_POINTS

    if content.skills is not None and content.skills.has_skills:
        score += SKILLS_POINTS

    if len(content.raw_text) > RAW_TEXT_MIN_LENGTH:
        score += RAW_TEXT_POINTS

    return max(0, min(score, MAX_SCORE))
