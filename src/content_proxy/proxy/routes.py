"""Route Handler for the storefront app proxy.

Per request: verify the signature (401 on failure), resolve the slug, fetch
and render. Every failure after verification collapses to a plain 404; the
cause only goes to the log.

Routes:
- ``GET /api/shopify-proxy``: slug taken from the ``path_prefix`` parameter
- ``GET /api/shopify-proxy/{path}``: slug taken from the path segments
- ``GET /``: author directory
- ``GET /health``
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from content_proxy.common.logging import setup_logging
from content_proxy.signature import verify_signature

from .app import ProxyContext

logger = setup_logging(module_name="proxy.routes")

router = APIRouter()

UNAUTHORIZED_BODY = "Unauthorized"
NOT_FOUND_BODY = "Content not found"


def get_context(request: Request) -> ProxyContext:
    return request.app.state.context


def resolve_slug(path: Optional[str], path_prefix: Optional[str]) -> str:
    """Slug from the route path, else from ``path_prefix`` minus one leading slash."""
    if path:
        return path.strip("/")
    return (path_prefix or "").removeprefix("/")


async def handle_proxy_request(
    request: Request,
    context: ProxyContext,
    path: str = "",
) -> Response:
    params = request.query_params.multi_items()
    if not verify_signature(params, context.settings.shopify_client_secret):
        logger.warning("Rejected unsigned or badly signed request to %s", request.url.path)
        return PlainTextResponse(UNAUTHORIZED_BODY, status_code=401)

    slug = resolve_slug(path, request.query_params.get("path_prefix"))

    try:
        html = await context.render_slug(slug)
    except Exception:
        logger.exception("Shopify proxy error for slug %r", slug)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    proxy = context.settings.proxy
    return Response(
        content=html,
        status_code=200,
        media_type=proxy.content_type,
        headers={"Cache-Control": proxy.cache_control},
    )


@router.get("/api/shopify-proxy")
async def shopify_proxy_root(
    request: Request,
    context: ProxyContext = Depends(get_context),
) -> Response:
    return await handle_proxy_request(request, context)


@router.get("/api/shopify-proxy/{path:path}")
async def shopify_proxy_path(
    path: str,
    request: Request,
    context: ProxyContext = Depends(get_context),
) -> Response:
    return await handle_proxy_request(request, context, path)


@router.get("/")
async def author_index(context: ProxyContext = Depends(get_context)) -> Response:
    try:
        authors = await context.fetcher.fetch_author_index()
        html = context.renderer.render_author_index(authors)
    except Exception:
        logger.exception("Author index failed")
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return HTMLResponse(html)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
