#!/usr/bin/env python3
"""
Tests for the built-in terminal commands.
"""

import pytest

from termfolio.core import EntryKind
from termfolio.core.datamodels import (
    Certification,
    GitHubProfile,
    Project,
    Skill,
    TimelineEntry,
)
from termfolio.providers import DataProvider, PortfolioData
from termfolio.terminal import Dispatcher


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def projects():
    return [
        Project(id=1, title="Hybrid Portfolio", description="Dual-interface site.",
                tech_stack=["React", "TypeScript"], repo_url="https://github.com/u/portfolio",
                demo_url="https://portfolio.demo", stars=3, language="TypeScript"),
        Project(id=2, title="DevTools CLI", description="Scaffolds projects.",
                tech_stack=["Rust"], repo_url="https://github.com/u/cli"),
    ]


@pytest.fixture
def data(projects):
    return PortfolioData.static(
        projects=projects,
        skills=[
            Skill(id=1, category="Frontend", name="React"),
            Skill(id=2, category="Backend", name="Go"),
            Skill(id=3, category="Frontend", name="CSS"),
        ],
        timeline=[
            TimelineEntry(id=1, company="WebSolutions", role="Junior Developer",
                          duration="2018 - 2019", description="Legacy sites.", order=3),
            TimelineEntry(id=2, company="TechCorp Inc.", role="Senior Frontend Engineer",
                          duration="2021 - Present", description="Dashboard rebuild.", order=1),
            TimelineEntry(id=3, company="StartUp Lab", role="Software Developer",
                          duration="2019 - 2021", description="MERN apps.", order=2),
        ],
        certifications=[
            Certification(id=1, name="Cloud Practitioner", issuer="AWS", issue_date="2025-03",
                          credential_id="ABC123", credential_url="https://example.com/cred"),
        ],
        profile=GitHubProfile(name="Dev", bio="Builds things", html_url="https://github.com/dev",
                              public_repos=12, followers=5, location="Earth"),
    )


@pytest.fixture
def term(data):
    return Dispatcher(data)


def output(term, line):
    """Submit a line and return the resulting entry."""
    term.submit(line)
    return term.transcript[-1]


# ============================================================================
# help
# ============================================================================

class TestHelp:

    def test_lists_all_commands_in_order(self, term):
        entry = output(term, "help")
        assert entry.kind is EntryKind.OUTPUT
        listed = [line.split()[0] for line in entry.content.splitlines() if line.startswith("  ")]
        assert listed == ["about", "projects", "skills", "experience", "certifications",
                          "github", "contact", "history", "clear", "gui", "help"]
        assert "List featured projects" in entry.content

    def test_help_with_topic(self, term):
        entry = output(term, "help projects")
        assert entry.kind is EntryKind.OUTPUT
        assert "List featured projects" in entry.content
        assert "projects [n]" in entry.content

    def test_help_topic_case_insensitive(self, term):
        assert output(term, "HELP Projects").content == output(term, "help projects").content

    def test_help_alias_topic(self, term):
        entry = output(term, "help exit")
        assert "Switch to GUI mode" in entry.content

    def test_help_unknown_topic(self, term):
        entry = output(term, "help nosuchcommand")
        assert entry.kind is EntryKind.ERROR
        assert "nosuchcommand" in entry.content


# ============================================================================
# Content commands
# ============================================================================

class TestProjects:

    def test_list(self, term):
        entry = output(term, "projects")
        assert "Hybrid Portfolio" in entry.content
        assert "Stack: React, TypeScript" in entry.content
        assert "[repo] [demo]" in entry.content
        assert entry.content.index("Hybrid Portfolio") < entry.content.index("DevTools CLI")

    def test_detail(self, term):
        entry = output(term, "projects 1")
        assert entry.kind is EntryKind.OUTPUT
        assert "https://portfolio.demo" in entry.content
        assert "Stars:    3" in entry.content

    @pytest.mark.parametrize("arg", ["0", "3", "abc", "²", "-1"])
    def test_detail_invalid(self, term, arg):
        entry = output(term, f"projects {arg}")
        assert entry.kind is EntryKind.ERROR
        assert entry.content.startswith("projects: no project")
        assert "1 to 2" in entry.content


class TestSkills:

    def test_grouped_by_category(self, term):
        content = output(term, "skills").content
        assert content.index("FRONTEND") < content.index("BACKEND")
        frontend_line = content.splitlines()[1]
        assert "React" in frontend_line and "CSS" in frontend_line

    def test_loading(self, data):
        data.skills = DataProvider("github-skills", Skill, loader=lambda: [])
        assert output(Dispatcher(data), "skills").content == "Loading skills data..."


class TestExperience:

    def test_sorted_by_order(self, term):
        content = output(term, "experience").content
        assert content.index("TechCorp") < content.index("StartUp Lab") < content.index("WebSolutions")

    def test_timeline_alias(self, term):
        assert output(term, "timeline").content == output(term, "experience").content

    def test_without_order_keeps_provider_order(self):
        data = PortfolioData.static(timeline=[
            TimelineEntry(id=1, company="B Corp", role="r", duration="d", description="x"),
            TimelineEntry(id=2, company="A Corp", role="r", duration="d", description="x"),
        ])
        content = output(Dispatcher(data), "experience").content
        assert content.index("B Corp") < content.index("A Corp")

    def test_loading(self, data):
        data.timeline = DataProvider("timeline", TimelineEntry, loader=lambda: [])
        assert output(Dispatcher(data), "experience").content == "Loading experience data..."


class TestCertifications:

    def test_list(self, term):
        content = output(term, "certs").content
        assert "Cloud Practitioner" in content
        assert "AWS" in content
        assert "ABC123" in content

    def test_empty(self):
        data = PortfolioData.static(certifications=[])
        assert output(Dispatcher(data), "certifications").content == "No certifications listed yet."

    def test_loading(self, data):
        data.certifications = DataProvider("certifications", Certification, loader=lambda: [])
        assert output(Dispatcher(data), "certifications").content == "Loading certifications data..."


class TestInfoCommands:

    def test_about(self, term, data):
        content = output(term, "about").content
        assert data.personal.name in content
        assert data.personal.bio in content

    def test_contact(self, term, data):
        content = output(term, "contact").content
        assert data.personal.email in content
        assert "gui" in content

    def test_github(self, term):
        content = output(term, "github").content
        assert "Repositories: 12" in content
        assert "https://github.com/dev" in content

    def test_github_loading(self, data):
        data.profile = DataProvider("github-profile", GitHubProfile, loader=lambda: [])
        assert output(Dispatcher(data), "github").content == "Loading github data..."


class TestHistoryCommand:

    def test_lists_oldest_first(self, term):
        term.submit("about")
        term.submit("Skills")
        content = output(term, "history").content
        lines = content.splitlines()
        assert lines[0].endswith("about")
        assert lines[1].endswith("Skills")
        assert lines[2].endswith("history")
