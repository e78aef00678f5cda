"""Content Fetcher: one query per call, typed records out."""

from __future__ import annotations

from pydantic import ValidationError

from content_proxy.common.errors import NotFoundError
from content_proxy.common.logging import setup_logging

from .client import ContentStore
from .models import Author, BlogPost
from .queries import AUTHOR_INDEX_QUERY, AUTHOR_LIST_QUERY, BLOG_POST_QUERY

logger = setup_logging(module_name="content_store.fetcher")


class ContentFetcher:
    """Turns content store replies into records the renderer can use.

    Usage:
        fetcher = ContentFetcher(SanityClient(settings.sanity))
        post = await fetcher.fetch_blog_post("mon-article")
    """

    def __init__(self, store: ContentStore):
        self.store = store

    async def fetch_blog_post(self, slug: str) -> BlogPost:
        """Fetch a single blog post by slug.

        Raises:
            NotFoundError: If no post matches or the record has no title.
        """
        raw = await self.store.fetch(BLOG_POST_QUERY, {"slug": slug})
        if not raw:
            raise NotFoundError(f"Post not found: {slug}")
        try:
            post = BlogPost.model_validate(raw)
        except ValidationError as e:
            raise NotFoundError(f"Post {slug} is incomplete") from e

        logger.info("Fetched post %s (%d blocks)", slug, len(post.body))
        return post

    async def fetch_authors(self) -> list[Author]:
        """Fetch every author, ordered by name, for the author grid.

        Authors without a name are skipped.

        Raises:
            NotFoundError: If no named author remains.
        """
        raw = await self.store.fetch(AUTHOR_LIST_QUERY)
        authors = self._parse_authors(raw)
        if not authors:
            raise NotFoundError("No authors found")

        logger.info("Fetched %d authors", len(authors))
        return authors

    async def fetch_author_index(self) -> list[Author]:
        """Fetch the author directory; may be empty."""
        raw = await self.store.fetch(AUTHOR_INDEX_QUERY)
        return self._parse_authors(raw)

    @staticmethod
    def _parse_authors(raw) -> list[Author]:
        authors = []
        for entry in raw or []:
            if not isinstance(entry, dict):
                continue
            author = Author.model_validate(entry)
            if not author.has_name:
                logger.warning("Skipping author %s without a name", author.id or "?")
                continue
            authors.append(author)
        return authors
