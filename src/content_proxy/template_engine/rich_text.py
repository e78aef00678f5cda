"""Portable Text to HTML, rendered with portabletext-html.

Blocks are cleaned before rendering: entries other than text blocks are
skipped, unknown styles fall back to paragraphs, and marks without a known
decorator or link definition are dropped. The mark classes below escape
marked text and refuse links with unsafe schemes.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union
from urllib.parse import urlsplit

from markupsafe import Markup
from portabletext_html import PortableTextRenderer
from portabletext_html.constants import DECORATOR_MARKER_DEFINITIONS, STYLE_MAP
from portabletext_html.marker_definitions import (
    CodeMarkerDefinition,
    EmphasisMarkerDefinition,
    LinkMarkerDefinition,
    StrikeThroughMarkerDefinition,
    StrongMarkerDefinition,
    UnderlineMarkerDefinition,
)
from portabletext_html.types import Block
from portabletext_html.utils import get_list_tags

logger = logging.getLogger(__name__)

SAFE_URL_SCHEMES = ("", "http", "https", "mailto", "tel")
LIST_ITEMS = ("bullet", "number", "square")

PortableText = Union[Sequence[Mapping[str, Any]], Mapping[str, Any], None]


def is_safe_url(url: str) -> bool:
    """True for relative URLs and http(s), mailto and tel links."""
    try:
        scheme = urlsplit(url).scheme.lower()
    except ValueError:
        return False
    return scheme in SAFE_URL_SCHEMES


def _escape_text(text: str) -> str:
    return html.escape(text).replace("\n", "<br/>")


class _EscapedText:
    @classmethod
    def render_text(cls, span, marker, context) -> str:
        return _escape_text(span.text)


class StrongMark(_EscapedText, StrongMarkerDefinition):
    pass


class EmphasisMark(_EscapedText, EmphasisMarkerDefinition):
    pass


class CodeMark(_EscapedText, CodeMarkerDefinition):
    pass


class UnderlineMark(_EscapedText, UnderlineMarkerDefinition):
    pass


class StrikeThroughMark(_EscapedText, StrikeThroughMarkerDefinition):
    pass


class SafeLinkMark(_EscapedText, LinkMarkerDefinition):
    """Link annotation; unsafe or missing hrefs render the text alone."""

    @staticmethod
    def _href(marker: str, context: Block) -> Optional[str]:
        for definition in context.markDefs:
            if definition.get("_key") == marker:
                href = str(definition.get("href") or "").strip()
                return href if href and is_safe_url(href) else None
        return None

    @classmethod
    def render_prefix(cls, span, marker, context) -> str:
        href = cls._href(marker, context)
        return f'<a href="{html.escape(href)}">' if href else ""

    @classmethod
    def render_suffix(cls, span, marker, context) -> str:
        return "</a>" if cls._href(marker, context) else ""


MARK_DEFINITIONS = {
    "strong": StrongMark,
    "em": EmphasisMark,
    "code": CodeMark,
    "underline": UnderlineMark,
    "strike-through": StrikeThroughMark,
    "link": SafeLinkMark,
}


class ContentRenderer(PortableTextRenderer):
    """Renderer that keeps the custom marks inside list items and adds no wrapper."""

    def __init__(self, blocks: list[dict]) -> None:
        super().__init__(blocks, custom_marker_definitions=MARK_DEFINITIONS)
        self._wrapper_element = None

    def _render_list(self, node: Block, context: Optional[Block]) -> str:
        head, tail = get_list_tags(node.listItem)
        items = "".join(
            f"<li>{self._render_block(Block(**child, marker_definitions=MARK_DEFINITIONS), True)}</li>"
            for child in node.children
        )
        return f"{head}{items}{tail}"


def _clean_block(block: Mapping[str, Any], index: int) -> dict:
    links = [
        {"_type": "link", "_key": d["_key"], "href": d.get("href") or ""}
        for d in block.get("markDefs") or []
        if isinstance(d, Mapping) and d.get("_type") == "link" and d.get("_key")
    ]
    allowed = set(DECORATOR_MARKER_DEFINITIONS) | {d["_key"] for d in links}

    children = []
    for child in block.get("children") or []:
        if not isinstance(child, Mapping) or child.get("_type", "span") != "span":
            continue
        children.append({
            "_type": "span",
            "_key": child.get("_key"),
            "text": str(child.get("text") or ""),
            "marks": [m for m in child.get("marks") or [] if m in allowed],
        })

    style = block.get("style")
    cleaned = {
        "_type": "block",
        "_key": block.get("_key") or f"block-{index}",
        "style": style if style in STYLE_MAP else "normal",
        "markDefs": links,
        "children": children,
    }
    if block.get("listItem") in LIST_ITEMS:
        cleaned["listItem"] = block["listItem"]
        cleaned["level"] = block.get("level") or 1
    return cleaned


def portable_text_to_html(blocks: PortableText) -> Markup:
    """Convert a Portable Text value (one block or a list) to HTML."""
    if not blocks:
        return Markup("")
    if isinstance(blocks, Mapping):
        blocks = [blocks]

    cleaned = []
    for index, block in enumerate(blocks):
        if not isinstance(block, Mapping) or block.get("_type") != "block":
            kind = block.get("_type") if isinstance(block, Mapping) else type(block).__name__
            logger.debug("Skipping unsupported rich text entry %s", kind)
            continue
        cleaned.append(_clean_block(block, index))

    if not cleaned:
        return Markup("")
    return Markup(ContentRenderer(cleaned).render())
