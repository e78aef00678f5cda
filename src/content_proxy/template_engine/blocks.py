"""Block Renderer: post body blocks to HTML, one template per block kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from jinja2 import Environment
from markupsafe import Markup

from content_proxy.content_store.models import BodyBlock

from .environment import create_environment
from .rich_text import portable_text_to_html

logger = logging.getLogger(__name__)

BLOCK_TEMPLATES: dict[str, str] = {
    "wysiwygBlock": "blocks/wysiwyg.html",
    "faqBlock": "blocks/faq.html",
    "ctaBlock": "blocks/cta.html",
    "quickAnswerBlock": "blocks/quick_answer.html",
}

# Kinds whose ``content`` is Portable Text
RICH_TEXT_KINDS = frozenset({"wysiwygBlock", "quickAnswerBlock"})


class BlockRenderer:
    """
    Renders a post body in its original order.

    Unknown block kinds contribute nothing; their siblings render normally.

    Usage:
        html = BlockRenderer().render(post.body)
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env = env or create_environment()

    def render(self, blocks: Iterable[BodyBlock]) -> Markup:
        return Markup("".join(self.render_block(block) for block in blocks))

    def render_block(self, block: BodyBlock) -> str:
        template_name = BLOCK_TEMPLATES.get(block.kind)
        if template_name is None:
            logger.debug("Skipping block of unknown kind %r", block.kind)
            return ""

        context = {"block": block}
        if block.kind in RICH_TEXT_KINDS:
            context["content_html"] = portable_text_to_html(block.content)
        return self.env.get_template(template_name).render(**context)
