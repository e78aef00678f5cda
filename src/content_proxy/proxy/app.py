"""FastAPI application factory for the storefront content proxy.

Usage:
    uvicorn content_proxy.proxy.app:create_app --factory
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import FastAPI

from content_proxy.common.config import Settings
from content_proxy.common.logging import setup_logging
from content_proxy.content_store import ContentFetcher, ContentStore, SanityClient
from content_proxy.template_engine import TemplateRenderer

logger = setup_logging(module_name="proxy.app")


@dataclass(frozen=True)
class ProxyContext:
    """Process-wide, read-only collaborators shared by every request."""
    settings: Settings
    fetcher: ContentFetcher
    renderer: TemplateRenderer

    def is_list_mode(self, slug: str) -> bool:
        return slug in ("", self.settings.proxy.list_slug)

    async def render_slug(self, slug: str) -> str:
        """Fetch and render the page for a resolved slug.

        Raises:
            NotFoundError: If the content store has nothing to show.
            ContentStoreError: If the content store query fails.
        """
        if self.is_list_mode(slug):
            authors = await self.fetcher.fetch_authors()
            return self.renderer.render_author_list(authors)

        post = await self.fetcher.fetch_blog_post(slug)
        return self.renderer.render_blog_post(post)


def build_context(
    settings: Settings,
    store: Optional[ContentStore] = None,
) -> ProxyContext:
    """Wire the fetcher and renderer; defaults to the Sanity HTTP client."""
    if store is None:
        store = SanityClient(settings.sanity)
    return ProxyContext(
        settings=settings,
        fetcher=ContentFetcher(store),
        renderer=TemplateRenderer(),
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ContentStore] = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Explicit settings; loaded from config/env when omitted.
        store: Content store to query; a SanityClient when omitted.

    Raises:
        ValueError: If no Shopify client secret is configured.
    """
    from .routes import router

    settings = settings or Settings.load()
    if not settings.shopify_client_secret:
        raise ValueError("A Shopify client secret is required to verify requests")

    app = FastAPI(
        title="Storefront Content Proxy",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = build_context(settings, store)
    app.include_router(router)

    logger.info("Content proxy ready (dataset %s)", settings.sanity.dataset)
    return app
