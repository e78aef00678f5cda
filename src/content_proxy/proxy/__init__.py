# Route Handler
# FastAPI app, storefront proxy routes and CLI

from .app import ProxyContext, build_context, create_app
from .routes import handle_proxy_request, resolve_slug, router

__all__ = [
    "ProxyContext",
    "build_context",
    "create_app",
    "handle_proxy_request",
    "resolve_slug",
    "router",
]
