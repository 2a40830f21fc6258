"""
Resume section parsers for extracting structured information.

Each parser is responsible for one section of the structured result
(personal info, education, experience, skills, projects).
"""

from .base import SectionParser, WindowedSectionParser
from .contact_parser import ContactParser
from .education_parser import EducationParser
from .experience_parser import ExperienceParser
from .projects_parser import ProjectsParser
from .skills_parser import SkillsParser

__all__ = [
    "SectionParser",
    "WindowedSectionParser",
    "ContactParser",
    "EducationParser",
    "ExperienceParser",
    "ProjectsParser",
    "SkillsParser",
]
