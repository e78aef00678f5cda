"""
Page Assembler for storefront content.
Wraps rendered content in complete HTML documents with inline styles.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from content_proxy.content_store.models import Author, BlogPost

from .blocks import BlockRenderer
from .environment import create_environment
from .formatting import format_french_date
from .models import HeroImage, PageContent
from .rich_text import is_safe_url

AUTHOR_LIST_TITLE = "Nos auteurs"
AUTHOR_INDEX_TITLE = "Auteurs — Audacem"


class TemplateRenderer:
    """
    Renders storefront pages using Jinja2 templates.

    Usage:
        renderer = TemplateRenderer()
        html = renderer.render_blog_post(post)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the template renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this package.
        """
        self.env = create_environment(templates_dir)
        self.blocks = BlockRenderer(self.env)

    def render_page(self, page: PageContent) -> str:
        """
        Assemble a complete article document.

        Args:
            page: Title, optional metadata and hero image, rendered content

        Returns:
            HTML document string
        """
        template = self.env.get_template("post.html")
        return template.render(**page.to_template_context())

    def render_blog_post(self, post: BlogPost) -> str:
        """
        Render a blog post: body blocks first, then the surrounding page.

        Args:
            post: Blog post fetched from the content store

        Returns:
            HTML document string
        """
        hero = None
        if post.main_photo_url and is_safe_url(post.main_photo_url):
            hero = HeroImage(url=post.main_photo_url, alt=post.hero_alt)

        page = PageContent(
            title=post.title,
            content_html=self.blocks.render(post.body),
            description=post.short_description or "",
            published_date=format_french_date(post.published_at),
            author_names=post.author_names,
            hero=hero,
        )
        return self.render_page(page)

    def render_author_list(self, authors: Sequence[Author]) -> str:
        """Render the author grid, one card per author in the given order."""
        template = self.env.get_template("authors.html")
        return template.render(title=AUTHOR_LIST_TITLE, authors=list(authors))

    def render_author_index(self, authors: Sequence[Author]) -> str:
        """Render the author directory with contact details."""
        template = self.env.get_template("author_index.html")
        return template.render(title=AUTHOR_INDEX_TITLE, authors=list(authors))


def render_blog_post(post: BlogPost) -> str:
    """
    Convenience function to render a blog post.

    Args:
        post: Blog post record

    Returns:
        Rendered HTML document
    """
    renderer = TemplateRenderer()
    return renderer.render_blog_post(post)


def load_blog_post_from_json(json_path: Path) -> BlogPost:
    """
    Load a blog post from a JSON export of the content store query result.

    Accepts either the bare record or a full API reply with a ``result`` key.

    Args:
        json_path: Path to the JSON file

    Returns:
        Validated BlogPost
    """
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "result" in data:
        data = data["result"]
    return BlogPost.model_validate(data)
