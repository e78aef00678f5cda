"""Content store records: authors, blog posts and their body blocks.

Field aliases match the GROQ projections in ``queries.py``. Records are frozen
snapshots; ``null`` values returned by the store are treated as absent.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ContentRecord(BaseModel):
    """Base for everything read from the content store."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ---------------------------------------------------------------------------
# Authors
# ---------------------------------------------------------------------------

class Author(ContentRecord):
    """An author snapshot. Only ``full_name`` is used for display."""
    id: Optional[str] = Field(default=None, alias="_id")
    full_name: str = Field(default="", alias="fullName")
    email: Optional[str] = None
    slug: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoUrl")

    @field_validator("slug", mode="before")
    @classmethod
    def _slug_current(cls, value: Any) -> Any:
        # Unprojected slugs come back as {"_type": "slug", "current": "..."}
        if isinstance(value, dict):
            return value.get("current")
        return value

    @property
    def has_name(self) -> bool:
        return bool(self.full_name.strip())


# ---------------------------------------------------------------------------
# Body blocks
# ---------------------------------------------------------------------------

class FaqItem(ContentRecord):
    """A single FAQ question/answer pair."""
    question: str = ""
    answer: str = ""


class WysiwygBlock(ContentRecord):
    kind: Literal["wysiwygBlock"] = Field(default="wysiwygBlock", alias="_type")
    key: Optional[str] = Field(default=None, alias="_key")
    title: str = ""
    content: list[dict[str, Any]] = Field(default_factory=list)


class FaqBlock(ContentRecord):
    kind: Literal["faqBlock"] = Field(default="faqBlock", alias="_type")
    key: Optional[str] = Field(default=None, alias="_key")
    title: str = ""
    items: list[FaqItem] = Field(default_factory=list)


class CtaBlock(ContentRecord):
    kind: Literal["ctaBlock"] = Field(default="ctaBlock", alias="_type")
    key: Optional[str] = Field(default=None, alias="_key")
    title: str = ""
    description: str = ""
    btn_text: str = Field(default="", alias="btnText")


class QuickAnswerBlock(ContentRecord):
    kind: Literal["quickAnswerBlock"] = Field(default="quickAnswerBlock", alias="_type")
    key: Optional[str] = Field(default=None, alias="_key")
    title: str = ""
    content: list[dict[str, Any]] = Field(default_factory=list)


class UnknownBlock(ContentRecord):
    """Any block whose ``_type`` has no renderer."""
    kind: str = Field(default="", alias="_type")
    key: Optional[str] = Field(default=None, alias="_key")


BodyBlock = Union[WysiwygBlock, FaqBlock, CtaBlock, QuickAnswerBlock, UnknownBlock]

BLOCK_TYPES: dict[str, type[ContentRecord]] = {
    "wysiwygBlock": WysiwygBlock,
    "faqBlock": FaqBlock,
    "ctaBlock": CtaBlock,
    "quickAnswerBlock": QuickAnswerBlock,
}


def parse_block(raw: Any) -> BodyBlock:
    """Build the typed block for a raw body entry, keyed on ``_type``."""
    if isinstance(raw, BaseModel):
        return raw  # type: ignore[return-value]
    model = BLOCK_TYPES.get(raw.get("_type", ""), UnknownBlock)
    return model.model_validate(raw)  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------

class BlogPost(ContentRecord):
    """A ``blog`` document with its structured body."""
    title: str = Field(min_length=1)
    short_description: Optional[str] = Field(default=None, alias="shortDescription")
    body: list[BodyBlock] = Field(default_factory=list)
    main_photo_url: Optional[str] = Field(default=None, alias="mainPhotoUrl")
    main_photo_alt: Optional[str] = Field(default=None, alias="mainPhotoAlt")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    authors: list[Author] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("body", mode="before")
    @classmethod
    def _parse_body(cls, value: Any) -> Any:
        if not value:
            return []
        return [parse_block(raw) for raw in value if isinstance(raw, (dict, BaseModel))]

    @field_validator("authors", mode="before")
    @classmethod
    def _drop_missing_authors(cls, value: Any) -> Any:
        # Dangling references resolve to null
        if not value:
            return []
        return [a for a in value if a is not None]

    @property
    def author_names(self) -> list[str]:
        return [a.full_name for a in self.authors if a.has_name]

    @property
    def hero_alt(self) -> str:
        return self.main_photo_alt or self.title
