"""
Application-wide constants for Resume Ingest.

Keyword vocabularies used by the heuristic section parsers live here so they
can be tuned without touching parser logic. Chinese keywords come first; the
English equivalents follow.
"""

from typing import Final


# =============================================================================
# File Types
# =============================================================================

SUPPORTED_RESUME_TYPES: Final[tuple[str, ...]] = (
    "txt",
    "text",
    "md",
    "markdown",
    "pdf",
    "docx",
    "doc",
)

# Section names accepted by ParseOptions.skip_sections
SECTION_PERSONAL_INFO: Final[str] = "personal_info"
SECTION_EDUCATION: Final[str] = "education"
SECTION_EXPERIENCE: Final[str] = "experience"
SECTION_SKILLS: Final[str] = "skills"
SECTION_PROJECTS: Final[str] = "projects"

SECTION_NAMES: Final[tuple[str, ...]] = (
    SECTION_PERSONAL_INFO,
    SECTION_EDUCATION,
    SECTION_EXPERIENCE,
    SECTION_SKILLS,
    SECTION_PROJECTS,
)


# =============================================================================
# Task Lifecycle
# =============================================================================

PROCESSING_START_PROGRESS: Final[int] = 10
COMPLETED_PROGRESS: Final[int] = 100


# =============================================================================
# Contact Heuristics
# =============================================================================

# Name is searched only among the first lines of the document
NAME_SEARCH_LINES: Final[int] = 5


# =============================================================================
# Education Heuristics
# =============================================================================

EDUCATION_WINDOW: Final[int] = 5

EDUCATION_KEYWORDS: Final[tuple[str, ...]] = (
    "教育背景", "教育经历", "学历", "毕业", "大学", "学院", "专业",
    "education", "university", "college", "degree", "graduated", "major",
)

DEGREE_KEYWORDS: Final[tuple[str, ...]] = (
    "本科", "学士", "硕士", "博士", "专科",
    "Bachelor", "Master", "PhD", "Doctor", "Associate",
)


# =============================================================================
# Experience Heuristics
# =============================================================================

EXPERIENCE_WINDOW: Final[int] = 8

EXPERIENCE_KEYWORDS: Final[tuple[str, ...]] = (
    "工作经历", "工作经验", "职业经历", "任职", "工作",
    "work experience", "employment", "experience",
)

POSITION_KEYWORDS: Final[tuple[str, ...]] = (
    "工程师", "经理", "主管", "总监", "专员", "助理", "开发", "设计师",
    "Engineer", "Developer", "Manager", "Director", "Designer", "Analyst",
    "Consultant", "Intern",
)


# =============================================================================
# Project Heuristics
# =============================================================================

PROJECT_WINDOW: Final[int] = 6

PROJECT_KEYWORDS: Final[tuple[str, ...]] = (
    "项目经历", "项目经验", "参与项目", "负责项目",
    "project experience", "projects",
)

ROLE_KEYWORDS: Final[tuple[str, ...]] = (
    "负责人", "开发者", "架构师", "项目经理", "团队leader",
    "Project Manager", "Team Leader", "Tech Lead", "Architect", "Developer",
)


# =============================================================================
# Skills Heuristics
# =============================================================================

# Matched by case-sensitive substring containment
TECH_SKILLS: Final[tuple[str, ...]] = (
    "Java", "Python", "JavaScript", "Go", "C++", "C#", "PHP", "Ruby",
    "React", "Vue", "Angular", "Spring", "Django", "Flask",
    "MySQL", "PostgreSQL", "MongoDB", "Redis",
    "Docker", "Kubernetes", "Git", "Linux",
)

TECH_SKILL_CATEGORY: Final[str] = "技术技能"
TECH_SKILL_LEVEL: Final[str] = "熟练"
