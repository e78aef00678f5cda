# Template Engine Module
# Block rendering and page assembly with Jinja2 templates

from .blocks import BLOCK_TEMPLATES, BlockRenderer
from .formatting import format_french_date
from .models import HeroImage, PageContent
from .renderer import TemplateRenderer, load_blog_post_from_json, render_blog_post
from .rich_text import portable_text_to_html

__all__ = [
    "BLOCK_TEMPLATES",
    "BlockRenderer",
    "format_french_date",
    "HeroImage",
    "PageContent",
    "TemplateRenderer",
    "load_blog_post_from_json",
    "render_blog_post",
    "portable_text_to_html",
]
