"""
PortfolioData - the read-only view of portfolio content used by commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from termfolio.core.datamodels import (
    Certification,
    GitHubProfile,
    PersonalInfo,
    Project,
    ProviderState,
    Skill,
    TimelineEntry,
)
from termfolio.core.exceptions import ProviderError
from termfolio.providers.base import DataProvider
from termfolio.providers.cache import FileCache
from termfolio.providers.content import (
    FALLBACK_PROFILE,
    FALLBACK_PROJECTS,
    FALLBACK_SKILLS,
    PERSONAL_INFO,
    load_content,
)
from termfolio.providers.github import GitHubClient

if TYPE_CHECKING:
    from termfolio.config import Config

logger = logging.getLogger(__name__)


@dataclass
class PortfolioData:
    """Bundle of providers, one per content category."""

    projects: DataProvider[Project]
    skills: DataProvider[Skill]
    timeline: DataProvider[TimelineEntry]
    certifications: DataProvider[Certification]
    profile: DataProvider[GitHubProfile]
    personal: PersonalInfo = field(default_factory=lambda: PERSONAL_INFO.model_copy())
    client: Optional[GitHubClient] = None

    def providers(self) -> list[DataProvider]:
        return [self.projects, self.skills, self.timeline, self.certifications, self.profile]

    def start(self, force: bool = False) -> None:
        """Kick off every provider in the background."""
        for provider in self.providers():
            provider.start(force=force)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until all providers resolve (or timeout per provider)."""
        return all(provider.wait(timeout) for provider in self.providers())

    def close(self) -> None:
        """Close the GitHub client, if any."""
        if self.client is not None:
            self.client.close()
            self.client = None

    # Zero-argument accessors handed to commands
    def get_projects(self) -> ProviderState:
        return self.projects()

    def get_skills(self) -> ProviderState:
        return self.skills()

    def get_timeline(self) -> ProviderState:
        return self.timeline()

    def get_certifications(self) -> ProviderState:
        return self.certifications()

    def get_profile(self) -> ProviderState:
        return self.profile()

    @classmethod
    def static(
        cls,
        projects: Optional[list[Project]] = None,
        skills: Optional[list[Skill]] = None,
        timeline: Optional[list[TimelineEntry]] = None,
        certifications: Optional[list[Certification]] = None,
        profile: Optional[GitHubProfile] = None,
        personal: Optional[PersonalInfo] = None,
    ) -> "PortfolioData":
        """Build an already-loaded bundle from in-memory records."""
        content = load_content()
        return cls(
            projects=DataProvider.static(
                "projects", Project, FALLBACK_PROJECTS if projects is None else projects),
            skills=DataProvider.static(
                "skills", Skill, FALLBACK_SKILLS if skills is None else skills),
            timeline=DataProvider.static(
                "timeline", TimelineEntry, content.timeline if timeline is None else timeline),
            certifications=DataProvider.static(
                "certifications", Certification,
                content.certifications if certifications is None else certifications),
            profile=DataProvider.static(
                "profile", GitHubProfile, [profile or FALLBACK_PROFILE]),
            personal=personal or content.personal,
        )


def _offline_loader():
    raise ProviderError("offline mode")


def build_portfolio(
    config: "Config",
    cache_dir: Optional[Path] = None,
    client: Optional[GitHubClient] = None,
) -> PortfolioData:
    """Create providers wired to GitHub, the file cache, and the content file.

    Providers are not started; call ``PortfolioData.start()``, and
    ``PortfolioData.close()`` when done.
    """
    cache = FileCache(cache_dir)
    ttl = float(config.get("cache_ttl_hours")) * 3600
    content = load_content(config.get("content_file"))

    if config.get("offline"):
        projects_loader = skills_loader = profile_loader = _offline_loader
    else:
        if client is None:
            client = GitHubClient(
                username=config.get("github_username"),
                token=config.get("github_token"),
                timeout=float(config.get("fetch_timeout")),
            )
        projects_loader = client.fetch_projects
        skills_loader = client.fetch_skills

        def profile_loader():
            return [client.fetch_profile()]

    return PortfolioData(
        projects=DataProvider(
            "github-projects", Project, projects_loader, FALLBACK_PROJECTS, cache, ttl),
        skills=DataProvider(
            "github-skills", Skill, skills_loader, FALLBACK_SKILLS, cache, ttl),
        timeline=DataProvider.static("timeline", TimelineEntry, content.timeline),
        certifications=DataProvider.static("certifications", Certification, content.certifications),
        profile=DataProvider(
            "github-profile", GitHubProfile, profile_loader, [FALLBACK_PROFILE], cache, ttl),
        personal=content.personal,
        client=client,
    )
