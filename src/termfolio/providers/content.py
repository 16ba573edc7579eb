"""
Built-in portfolio content and the YAML content-file loader.

Timeline, certifications and personal info are static. Fallback projects,
skills and profile are served when GitHub is unreachable and nothing is
cached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from termfolio.core.datamodels import (
    Certification,
    GitHubProfile,
    PersonalInfo,
    Project,
    Skill,
    TimelineEntry,
)

logger = logging.getLogger(__name__)


PERSONAL_INFO = PersonalInfo(
    name="Koneru Shritej",
    title="Computer Science Engineering Student",
    subtitle="2nd Year CSE",
    bio=(
        "I'm a 2nd-year Computer Science Engineering student from Vijayawada, "
        "Andhra Pradesh, focused on exploring software development through "
        "practical projects, including web applications, APIs, and "
        "system-oriented tools."
    ),
    email="mail4shritejkoneru@gmail.com",
    location="Vijayawada, Andhra Pradesh",
    linkedin="https://www.linkedin.com/in/shritej-koneru-560111324/",
    github="https://github.com/shritej-koneru",
)

FALLBACK_PROFILE = GitHubProfile(
    name=PERSONAL_INFO.name,
    bio=PERSONAL_INFO.bio,
    avatar_url="/images/avatar.png",
    html_url=PERSONAL_INFO.github or "https://github.com",
    public_repos=4,
    followers=0,
    location=PERSONAL_INFO.location,
)

FALLBACK_SKILLS = [
    Skill(id=1, category="Languages", name="C"),
    Skill(id=2, category="Languages", name="Python"),
    Skill(id=3, category="Languages", name="JavaScript"),
    Skill(id=4, category="Languages", name="TypeScript"),
    Skill(id=5, category="Frontend", name="React"),
    Skill(id=6, category="Frontend", name="HTML"),
    Skill(id=7, category="Frontend", name="CSS"),
    Skill(id=8, category="Backend", name="Node.js"),
    Skill(id=9, category="Tools", name="Git"),
    Skill(id=10, category="Concepts", name="Data Structures"),
    Skill(id=11, category="Concepts", name="Algorithms"),
]

FALLBACK_PROJECTS = [
    Project(
        id=1,
        title="Multi File Conversion",
        description=(
            "Convert files quickly and easily across formats. Upload single or "
            "multiple files, get smart format suggestions, and download "
            "converted files instantly."
        ),
        tech_stack=["TypeScript", "Shell", "CSS", "HTML", "Dockerfile", "JavaScript"],
        repo_url="https://github.com/shritej-koneru/multi-file-conversion",
        demo_url="https://multi-file-conversion.vercel.app",
        stars=0,
        language="TypeScript",
    ),
    Project(
        id=2,
        title="EquiAlert",
        description=(
            "A full-stack, dark-mode stock market web application focused on "
            "Indian stocks, with real-time tracking, market news, watchlists, "
            "and AI-powered insights through a chatbot interface."
        ),
        tech_stack=["TypeScript", "CSS", "HTML", "Python", "JavaScript"],
        repo_url="https://github.com/shritej-koneru/EquiAlert",
        stars=0,
        language="TypeScript",
    ),
    Project(
        id=3,
        title="FloatChatSAHE",
        description=(
            "An AI-powered conversational system for ARGO float data that lets "
            "users query, explore, and visualize oceanographic information "
            "using natural language."
        ),
        tech_stack=["JavaScript", "Python", "CSS", "HTML"],
        repo_url="https://github.com/shritej-koneru/FloatChatSAHE",
        stars=0,
        language="JavaScript",
    ),
    Project(
        id=4,
        title="Portfolio",
        description=(
            "Personal portfolio website showcasing projects, skills, and "
            "experience, with both GUI and terminal views."
        ),
        tech_stack=["TypeScript", "React", "CSS", "HTML"],
        repo_url="https://github.com/shritej-koneru/Portfolio",
        stars=0,
        language="TypeScript",
    ),
]

TIMELINE = [
    TimelineEntry(
        id=1,
        company="SPARC FOUNDATION",
        role="Campus Innovator · Internship",
        duration="Jan 2026 - Present",
        description=(
            "Working on ideation and execution of student-focused technical "
            "initiatives, collaborating across teams."
        ),
        start_date="2026-01-01",
    ),
    TimelineEntry(
        id=2,
        company="TechnoVate-SAHE",
        role="Ideate Station Executive",
        duration="Sep 2025 - Present",
        description=(
            "Managed the collection and initial screening of member "
            "suggestions, prioritizing innovative concepts. Facilitated "
            "brainstorming sessions to refine ideas into actionable proposals."
        ),
        start_date="2025-09-01",
    ),
    TimelineEntry(
        id=3,
        company="Velagapudi Ramakrishna Siddhartha Engineering College",
        role="Bachelor's in Computer Science Engineering",
        duration="2024 - 2028",
        description=(
            "Pursuing CSE degree with focus on software development "
            "fundamentals, data structures, algorithms, and practical "
            "application development."
        ),
        start_date="2024-07-01",
    ),
    TimelineEntry(
        id=4,
        company="Sri Chaitanya Junior College",
        role="Intermediate Education (MPC)",
        duration="2022 - 2024",
        description=(
            "Completed intermediate education with focus on Mathematics, "
            "Physics, and Chemistry."
        ),
        start_date="2022-06-01",
        end_date="2024-05-01",
    ),
    TimelineEntry(
        id=5,
        company="VPS Public School",
        role="Secondary Education",
        duration="2012 - 2022",
        description=(
            "Completed primary and secondary education. Built foundational "
            "knowledge in science, mathematics, and technology."
        ),
        start_date="2012-06-01",
        end_date="2022-05-01",
    ),
]

CERTIFICATIONS: list[Certification] = []


class PortfolioContent(BaseModel):
    """Static content, optionally overridden by a YAML file."""

    personal: PersonalInfo = Field(default_factory=lambda: PERSONAL_INFO.model_copy())
    timeline: list[TimelineEntry] = Field(default_factory=lambda: list(TIMELINE))
    certifications: list[Certification] = Field(default_factory=lambda: list(CERTIFICATIONS))


def load_content(path: Optional[Path | str] = None) -> PortfolioContent:
    """Load portfolio content from a YAML file.

    Sections missing from the file keep their built-in values. A missing
    or invalid file logs a warning and yields the built-in content.

    Example file:

        personal:
          name: Ada Lovelace
          title: Analyst
          bio: Notes on the Analytical Engine.
          email: ada@example.com
        certifications:
          - id: 1
            name: Engine Operator
            issuer: Babbage & Co.
            issue_date: "1843-09"
    """
    if path is None:
        return PortfolioContent()

    path = Path(path).expanduser()
    if not path.exists():
        logger.warning(f"Content file not found: {path}, using built-in content")
        return PortfolioContent()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        return PortfolioContent.model_validate(data)
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        logger.warning(f"Invalid content file {path} ({e}), using built-in content")
        return PortfolioContent()
