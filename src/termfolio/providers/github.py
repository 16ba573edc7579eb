"""
GitHub API client and repository-to-portfolio transforms.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

import httpx

from termfolio.core.datamodels import GitHubProfile, Project, Skill
from termfolio.core.exceptions import FetchError

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"

FRONTEND_LANGUAGES = {"JavaScript", "TypeScript", "HTML", "CSS"}

TOOL_SKILLS = [
    Skill(id=100, category="Tools", name="Git", level="Advanced"),
    Skill(id=101, category="Tools", name="GitHub", level="Advanced"),
    Skill(id=102, category="Tools", name="VS Code", level="Advanced"),
    Skill(id=103, category="Tools", name="npm", level="Intermediate"),
]

# (keywords, description) checked in order against the lowercased repo name
_DESCRIPTION_PATTERNS: list[tuple[tuple[str, ...], str]] = [
    (
        ("api", "backend", "server"),
        "Built a REST API focusing on data processing, endpoint design, and "
        "server-side logic. Chosen platform enabled rapid prototyping and "
        "practical problem-solving.",
    ),
    (
        ("convert", "converter", "transform"),
        "Built a file conversion tool focusing on format detection, batch "
        "processing, and client-side performance. Project explores practical "
        "system design using accessible platforms.",
    ),
    (
        ("stock", "finance", "market"),
        "Developed a financial data API with real-time processing, caching "
        "strategies, and analytics endpoints. Built to explore backend "
        "architecture and data handling patterns.",
    ),
    (
        ("equalizer", "audio", "music"),
        "Created an audio manipulation application focusing on DSP algorithms, "
        "waveform processing, and real-time visualization. Platform chosen for "
        "accessibility and iteration speed.",
    ),
    (
        ("portfolio", "website"),
        "Designed a responsive web application with modern UI/UX patterns, API "
        "integration, and optimized rendering. Built as part of exploring "
        "practical software development.",
    ),
    (
        ("bot", "automation"),
        "Built an automation tool focusing on task scheduling, API integration, "
        "and error handling. Explores system integration and practical "
        "problem-solving.",
    ),
]


class GitHubClient:
    """Thin synchronous client for the public GitHub REST API."""

    def __init__(
        self,
        username: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        base_url: str = GITHUB_API,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.username = username
        headers = {"Accept": "application/vnd.github.v3+json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET a path and decode JSON.

        Raises:
            FetchError: On transport errors or non-2xx responses.
        """
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise FetchError(f"GitHub request failed: {path}: {e}") from e

        if not response.is_success:
            error = FetchError(
                f"GitHub API error {response.status_code} for {path}",
                status_code=response.status_code,
            )
            if error.rate_limited:
                logger.warning("GitHub rate limit exceeded. Using fallback data.")
            raise error
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from GitHub for {path}") from e

    def fetch_profile(self) -> GitHubProfile:
        data = self._get_json(f"/users/{self.username}")
        logger.info(f"GitHub profile loaded: {data.get('login')}")
        return GitHubProfile.model_validate(data)

    def fetch_repos(self) -> list[dict[str, Any]]:
        data = self._get_json(
            f"/users/{self.username}/repos",
            params={"sort": "updated", "per_page": 100},
        )
        if not isinstance(data, list):
            raise FetchError("Unexpected repository listing from GitHub")
        return data

    def fetch_repo_languages(self, owner: str, repo: str) -> list[str]:
        """Languages used by a repository, or [] if unavailable."""
        try:
            data = self._get_json(f"/repos/{owner}/{repo}/languages")
        except FetchError as e:
            logger.debug(f"No languages for {owner}/{repo}: {e}")
            return []
        return list(data.keys()) if isinstance(data, dict) else []

    def fetch_projects(self) -> list[Project]:
        repos = self.fetch_repos()
        return repos_to_projects(repos, self.username, self.fetch_repo_languages)

    def fetch_skills(self) -> list[Skill]:
        return extract_skills(self.fetch_repos())


def format_title(repo_name: str) -> str:
    """'multi-file-conversion' -> 'Multi File Conversion'."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), repo_name.replace("-", " "))


def technical_description(repo_name: str, tech_stack: list[str]) -> str:
    """Generate a description for a repository that has none."""
    name = repo_name.lower()
    for keywords, description in _DESCRIPTION_PATTERNS:
        if any(keyword in name for keyword in keywords):
            return description

    primary = tech_stack[0] if tech_stack else "modern technologies"
    return (
        f"Built to explore practical problem-solving and system design using "
        f"{primary}. Platform chosen for simplicity and effective iteration."
    )


def repos_to_projects(repos, username, languages_for=None) -> list[Project]:
    """Convert GitHub repository payloads into projects.

    Forks, archived repositories and the profile README repository are
    skipped. ``languages_for(owner, repo)`` supplies the tech stack; without
    it only the primary language is used.
    """
    kept = [
        repo for repo in repos
        if not repo.get("fork")
        and not repo.get("archived")
        and repo.get("name", "").lower() != username.lower()
    ]

    projects = []
    for index, repo in enumerate(kept, start=1):
        languages: list[str] = []
        if languages_for is not None:
            owner = (repo.get("owner") or {}).get("login", username)
            languages = languages_for(owner, repo["name"])
        if not languages:
            languages = [repo["language"]] if repo.get("language") else ["Code"]

        projects.append(Project(
            id=index,
            title=format_title(repo["name"]),
            description=repo.get("description") or technical_description(repo["name"], languages),
            tech_stack=languages,
            repo_url=repo.get("html_url"),
            demo_url=repo.get("homepage") or None,
            stars=repo.get("stargazers_count"),
            language=repo.get("language"),
        ))
    return projects


def extract_skills(repos: list[dict[str, Any]]) -> list[Skill]:
    """One skill per distinct primary language, then the fixed tool skills."""
    languages: list[str] = []
    for repo in repos:
        lang = repo.get("language")
        if lang and lang not in languages:
            languages.append(lang)

    skills = [
        Skill(
            id=idx,
            category="Frontend" if lang in FRONTEND_LANGUAGES else "Backend",
            name=lang,
            level="Intermediate",
        )
        for idx, lang in enumerate(languages, start=1)
    ]
    return skills + [skill.model_copy() for skill in TOOL_SKILLS]
