"""Shared test fixtures for the storefront content proxy."""

import json
import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from content_proxy.common.config import SanitySettings, Settings
from content_proxy.signature import sign_params

TEST_SECRET = "hush-test-secret"


class FakeContentStore:
    """In-memory content store answering by the document type in the query."""

    def __init__(self, posts=None, authors=None, error=None):
        self.posts = posts or {}
        self.authors = authors if authors is not None else []
        self.error = error
        self.calls = []

    async def fetch(self, query, params=None):
        self.calls.append((query, dict(params or {})))
        if self.error is not None:
            raise self.error
        if '_type == "blog"' in query:
            return self.posts.get((params or {}).get("slug"))
        if '_type == "author"' in query:
            return self.authors
        return None


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the sample content directory."""
    return PROJECT_ROOT / "fixtures"


@pytest.fixture
def sample_blog_raw(fixtures_dir) -> dict:
    """Blog post record as returned by the content store."""
    with open(fixtures_dir / "sample_blog.json", encoding="utf-8") as f:
        return json.load(f)["result"]


@pytest.fixture
def sample_authors_raw(fixtures_dir) -> list:
    """Author list as returned by the content store."""
    with open(fixtures_dir / "sample_authors.json", encoding="utf-8") as f:
        return json.load(f)["result"]


@pytest.fixture
def settings() -> Settings:
    """Settings with a known secret and a dummy Sanity project."""
    return Settings(
        sanity=SanitySettings(project_id="test1234"),
        shopify_client_secret=TEST_SECRET,
    )


@pytest.fixture
def make_store():
    """Factory for FakeContentStore instances."""
    return FakeContentStore


@pytest.fixture
def fake_store(sample_blog_raw, sample_authors_raw) -> FakeContentStore:
    """Store holding two posts and three authors."""
    return FakeContentStore(
        posts={
            "mon-article": {"title": "Titre", "body": []},
            "creme-solaire": sample_blog_raw,
        },
        authors=sample_authors_raw,
    )


@pytest.fixture
def signed():
    """Sign query parameters with the test secret."""
    def _sign(**params: str) -> dict:
        return sign_params(params, TEST_SECRET)
    return _sign
