"""
Data providers for termfolio.

Providers expose one content category each and resolve asynchronously
from GitHub, the file cache, or built-in fallback content.
"""

from termfolio.providers.base import DataProvider
from termfolio.providers.cache import CacheRecord, FileCache
from termfolio.providers.content import PortfolioContent, load_content
from termfolio.providers.github import GitHubClient, extract_skills, repos_to_projects
from termfolio.providers.portfolio import PortfolioData, build_portfolio

__all__ = [
    "DataProvider",
    "FileCache",
    "CacheRecord",
    "GitHubClient",
    "repos_to_projects",
    "extract_skills",
    "PortfolioContent",
    "load_content",
    "PortfolioData",
    "build_portfolio",
]
