"""
Data models for the page assembler.
"""

from dataclasses import dataclass, field
from typing import Optional

from markupsafe import Markup


@dataclass
class HeroImage:
    """Main image shown under the page title."""
    url: str
    alt: str = ""


@dataclass
class PageContent:
    """Everything the article page template needs."""
    title: str
    content_html: str = ""  # already rendered, inserted unescaped
    description: str = ""  # <meta name="description">
    published_date: str = ""  # formatted for display
    author_names: list[str] = field(default_factory=list)
    hero: Optional[HeroImage] = None

    @property
    def has_meta(self) -> bool:
        return bool(self.published_date or self.author_names)

    def to_template_context(self) -> dict:
        """Convert to flat dictionary for Jinja2 template rendering."""
        return {
            "title": self.title,
            "description": self.description,
            "published_date": self.published_date,
            "author_names": list(self.author_names),
            "has_meta": self.has_meta,
            "hero": self.hero,
            "content_html": Markup(self.content_html),
        }
