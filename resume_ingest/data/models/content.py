"""
Structured resume content models.

Defines the extraction product: personal info, education, experience,
projects, skills, the recovered raw text, and parse metadata.
"""

from typing import Optional

from pydantic import Field

from .base import EmbeddedModel


class PersonalInfo(EmbeddedModel):
    """Personal and contact details."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    social_links: list[str] = Field(default_factory=list)
    avatar_url: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.phone or self.email)


class Education(EmbeddedModel):
    """An education entry."""

    school: Optional[str] = None
    degree: Optional[str] = None
    major: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None
    description: Optional[str] = None
    courses: list[str] = Field(default_factory=list)


class Experience(EmbeddedModel):
    """A work experience entry."""

    company: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    location: Optional[str] = None
    department: Optional[str] = None
    responsibilities: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class Project(EmbeddedModel):
    """A project entry."""

    name: Optional[str] = None
    role: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    technologies: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    company: Optional[str] = None


class SkillItem(EmbeddedModel):
    """A single skill with proficiency."""

    name: str
    level: Optional[str] = None
    years: Optional[int] = Field(default=None, ge=0)


class SkillCategory(EmbeddedModel):
    """A named group of skills."""

    category: str
    skills: list[SkillItem] = Field(default_factory=list)


class Skills(EmbeddedModel):
    """Skills grouped by category."""

    categories: list[SkillCategory] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)

    @property
    def has_skills(self) -> bool:
        """Check if any category holds at least one skill."""
        return any(category.skills for category in self.categories)


class ParseMetadata(EmbeddedModel):
    """Metadata about a parse run."""

    file_size: Optional[int] = None  # bytes
    page_count: Optional[int] = None
    parse_duration_ms: Optional[int] = None
    parser_version: Optional[str] = None
    confidence_score: int = Field(default=0, ge=0, le=100)
    warnings: list[str] = Field(default_factory=list)


class StructuredContent(EmbeddedModel):
    """Structured content extracted from a resume."""

    personal_info: Optional[PersonalInfo] = None
    education: list[Education] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: Optional[Skills] = None
    raw_text: str = ""
    metadata: ParseMetadata = Field(default_factory=ParseMetadata)
