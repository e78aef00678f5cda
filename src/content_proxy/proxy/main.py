"""CLI entry point for the content proxy.

Usage:
    content-proxy serve --port 8000
    content-proxy render mon-article --output data/mon-article.html
    content-proxy render --input fixtures/sample_blog.json
    content-proxy sign path_prefix=/apps/blog shop=demo.myshopify.com
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from urllib.parse import urlencode

from content_proxy.common.config import Settings, get_shopify_client_secret
from content_proxy.common.errors import ContentProxyError
from content_proxy.common.logging import setup_logging
from content_proxy.signature import sign_params
from content_proxy.template_engine import TemplateRenderer, load_blog_post_from_json

from .app import build_context

logger = setup_logging(module_name="proxy.main")


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "content_proxy.proxy.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0


async def _render_html(args: argparse.Namespace) -> str:
    if args.input:
        post = load_blog_post_from_json(args.input)
        return TemplateRenderer().render_blog_post(post)

    settings = Settings.load(require_secret=False)
    context = build_context(settings)
    return await context.render_slug(args.slug)


def _render(args: argparse.Namespace) -> int:
    try:
        html = asyncio.run(_render_html(args))
    except (ContentProxyError, ValueError) as e:
        logger.error("Render failed: %s", e)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(html)
        logger.info("Saved page to %s", args.output)
    else:
        sys.stdout.write(html)
    return 0


def _parse_pair(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return key, val


def _sign(args: argparse.Namespace) -> int:
    secret = args.secret or get_shopify_client_secret()
    signed = sign_params(args.params, secret)
    print(urlencode(signed))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront content proxy")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=_serve)

    render = subparsers.add_parser("render", help="Render one page to a file or stdout")
    render.add_argument(
        "slug",
        nargs="?",
        default="",
        help="Post slug; empty or 'liste' renders the author list",
    )
    render.add_argument(
        "--input",
        type=Path,
        help="Render a blog post from a local JSON export instead of the store",
    )
    render.add_argument("--output", type=Path, help="Output path for the HTML document")
    render.set_defaults(func=_render)

    sign = subparsers.add_parser("sign", help="Print a signed query string")
    sign.add_argument("params", nargs="*", type=_parse_pair, help="key=value pairs")
    sign.add_argument("--secret", help="Shared secret (default: SHOPIFY_CLIENT_SECRET)")
    sign.set_defaults(func=_sign)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
