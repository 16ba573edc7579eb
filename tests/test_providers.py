#!/usr/bin/env python3
"""
Tests for the file cache, data providers and portfolio content.
"""

import json
import time

import httpx
import pytest

from termfolio.config import Config
from termfolio.core import LOADING, Loaded, Project, Skill
from termfolio.core.exceptions import FetchError
from termfolio.providers import (
    DataProvider,
    FileCache,
    GitHubClient,
    build_portfolio,
    load_content,
)
from termfolio.providers.content import FALLBACK_PROJECTS, FALLBACK_SKILLS, PERSONAL_INFO, TIMELINE

DAY = 60 * 60 * 24


def _project(id, title):
    return Project(id=id, title=title, description="d", tech_stack=["Python"])


# ============================================================================
# FileCache Tests
# ============================================================================

class TestFileCache:

    @pytest.fixture
    def cache(self, tmp_path):
        return FileCache(tmp_path / "cache")

    def test_read_missing(self, cache):
        assert cache.read("github-projects-cache") is None

    def test_write_creates_dir(self, cache):
        assert not cache.cache_dir.exists()
        cache.write("github-projects-cache", [{"a": 1}], now=1000.0)
        record = cache.read("github-projects-cache")
        assert record.saved_at == 1000.0
        assert record.data == [{"a": 1}]

    def test_corrupt_entry_ignored(self, cache):
        cache.cache_dir.mkdir(parents=True)
        (cache.cache_dir / "bad-cache.json").write_text("{not json")
        assert cache.read("bad-cache") is None

    def test_missing_fields_ignored(self, cache):
        cache.cache_dir.mkdir(parents=True)
        (cache.cache_dir / "old-cache.json").write_text(json.dumps([1, 2]))
        assert cache.read("old-cache") is None

    def test_freshness(self, cache):
        record = cache.write("k", [], now=1000.0)
        assert FileCache.is_fresh(record, DAY, now=1000.0 + DAY - 1)
        assert not FileCache.is_fresh(record, DAY, now=1000.0 + DAY)

    def test_invalidate_and_clear(self, cache):
        cache.write("a", [])
        cache.write("b", [])
        cache.invalidate("a")
        assert cache.read("a") is None
        assert cache.clear() == 1
        assert cache.read("b") is None

    def test_clear_missing_dir(self, cache):
        assert cache.clear() == 0


# ============================================================================
# DataProvider Tests
# ============================================================================

class TestDataProvider:

    @pytest.fixture
    def cache(self, tmp_path):
        return FileCache(tmp_path)

    @pytest.fixture
    def fallback(self):
        return [_project(1, "Fallback")]

    def test_starts_loading(self, fallback):
        provider = DataProvider("github-projects", Project, loader=lambda: [], fallback=fallback)
        assert provider() is LOADING
        assert not provider.is_loaded

    def test_cache_key(self):
        assert DataProvider("github-projects", Project).cache_key == "github-projects-cache"

    def test_static_is_loaded(self, fallback):
        provider = DataProvider.static("projects", Project, fallback)
        assert provider() == Loaded(fallback)
        assert provider.wait(0)

    def test_fresh_cache_skips_fetch(self, cache, fallback):
        cache.write("github-projects-cache", [_project(7, "Cached").model_dump()])

        def loader():
            raise AssertionError("should not fetch")

        provider = DataProvider("github-projects", Project, loader, fallback, cache)
        items = provider.load()
        assert [p.title for p in items] == ["Cached"]
        assert provider() == Loaded(items)

    def test_fetch_and_cache(self, cache, fallback):
        provider = DataProvider(
            "github-projects", Project, lambda: [_project(1, "Live")], fallback, cache)
        provider.load()
        assert provider().items[0].title == "Live"
        record = cache.read("github-projects-cache")
        assert record.data[0]["title"] == "Live"

    def test_stale_cache_refetched(self, cache, fallback):
        cache.write("github-projects-cache", [_project(1, "Old").model_dump()],
                    now=time.time() - 2 * DAY)
        provider = DataProvider(
            "github-projects", Project, lambda: [_project(1, "New")], fallback, cache)
        assert provider.load()[0].title == "New"

    def test_stale_cache_used_on_failure(self, cache, fallback):
        cache.write("github-projects-cache", [_project(1, "Old").model_dump()],
                    now=time.time() - 2 * DAY)

        def loader():
            raise FetchError("rate limited", status_code=403)

        provider = DataProvider("github-projects", Project, loader, fallback, cache)
        assert provider.load()[0].title == "Old"

    def test_fallback_without_cache(self, cache, fallback):
        def loader():
            raise FetchError("offline")

        provider = DataProvider("github-projects", Project, loader, fallback, cache)
        assert provider.load() == fallback
        assert provider.is_loaded

    def test_invalid_cache_discarded(self, cache, fallback):
        cache.write("github-skills-cache", [{"unexpected": True}])
        provider = DataProvider(
            "github-skills", Skill, lambda: FALLBACK_SKILLS[:1], FALLBACK_SKILLS, cache)
        assert provider.load() == FALLBACK_SKILLS[:1]

    def test_invalid_cache_removed_when_fetch_fails(self, cache):
        cache.write("github-skills-cache", [{"unexpected": True}])

        def loader():
            raise FetchError("offline")

        provider = DataProvider("github-skills", Skill, loader, FALLBACK_SKILLS, cache)
        assert provider.load() == FALLBACK_SKILLS
        assert cache.read("github-skills-cache") is None

    def test_force_ignores_fresh_cache(self, cache, fallback):
        cache.write("github-projects-cache", [_project(1, "Cached").model_dump()])
        provider = DataProvider(
            "github-projects", Project, lambda: [_project(1, "Live")], fallback, cache)
        assert provider.load(force=True)[0].title == "Live"

    def test_start_resolves_in_background(self, fallback):
        provider = DataProvider("github-projects", Project, lambda: [_project(1, "Live")], fallback)
        provider.start()
        assert provider.wait(5)
        assert provider().items[0].title == "Live"

    def test_start_twice_is_noop(self, fallback):
        calls = []

        def loader():
            calls.append(1)
            return []

        provider = DataProvider("github-projects", Project, loader, fallback)
        provider.start()
        provider.wait(5)
        provider.start()
        assert len(calls) == 1

    def test_refresh_keeps_state_until_resolved(self, cache, fallback):
        provider = DataProvider.static("projects", Project, fallback)
        provider.loader = lambda: [_project(2, "Refreshed")]
        provider.refresh()
        provider._thread.join(5)
        assert provider().items[0].title == "Refreshed"


# ============================================================================
# Content Tests
# ============================================================================

class TestLoadContent:

    def test_defaults(self):
        content = load_content()
        assert content.personal == PERSONAL_INFO
        assert content.timeline == TIMELINE
        assert content.certifications == []

    def test_missing_file(self, tmp_path):
        assert load_content(tmp_path / "nope.yaml").timeline == TIMELINE

    def test_partial_override(self, tmp_path):
        path = tmp_path / "content.yaml"
        path.write_text(
            "certifications:\n"
            "  - id: 1\n"
            "    name: Engine Operator\n"
            "    issuer: Babbage & Co.\n"
            "    issue_date: '1843-09'\n"
        )
        content = load_content(path)
        assert content.certifications[0].issuer == "Babbage & Co."
        assert content.personal == PERSONAL_INFO

    @pytest.mark.parametrize("text", ["personal: [1, 2", "- just\n- a list\n", "timeline: 5\n"])
    def test_invalid_file(self, tmp_path, text):
        path = tmp_path / "content.yaml"
        path.write_text(text)
        assert load_content(path).timeline == TIMELINE


# ============================================================================
# build_portfolio Tests
# ============================================================================

class TestBuildPortfolio:

    def test_offline_uses_fallback(self, tmp_path):
        data = build_portfolio(Config(offline=True), cache_dir=tmp_path)
        data.start()
        assert data.wait(5)
        assert data.get_projects().items == FALLBACK_PROJECTS
        assert data.get_skills().items == FALLBACK_SKILLS
        assert data.get_timeline().items == TIMELINE

    def test_offline_prefers_cache(self, tmp_path):
        FileCache(tmp_path).write(
            "github-projects-cache", [_project(1, "Cached").model_dump()],
            now=time.time() - 30 * DAY)
        data = build_portfolio(Config(offline=True), cache_dir=tmp_path)
        data.start()
        data.wait(5)
        assert data.get_projects().items[0].title == "Cached"

    def test_provider_names(self, tmp_path):
        data = build_portfolio(Config(offline=True), cache_dir=tmp_path)
        assert data.projects.cache_key == "github-projects-cache"
        assert data.skills.cache_key == "github-skills-cache"
        assert data.profile.cache_key == "github-profile-cache"

    def test_close_releases_client(self, tmp_path):
        client = GitHubClient("octo-dev", transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json=[])))
        data = build_portfolio(Config(), cache_dir=tmp_path, client=client)
        assert data.client is client

        data.close()
        assert client._client.is_closed
        assert data.client is None
        data.close()
