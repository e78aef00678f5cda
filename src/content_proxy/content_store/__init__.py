# Content Fetcher
# Sanity queries and the typed records they produce

from .client import ContentStore, SanityClient
from .fetcher import ContentFetcher
from .models import (
    Author,
    BlogPost,
    BodyBlock,
    CtaBlock,
    FaqBlock,
    FaqItem,
    QuickAnswerBlock,
    UnknownBlock,
    WysiwygBlock,
    parse_block,
)

__all__ = [
    "ContentStore",
    "SanityClient",
    "ContentFetcher",
    "Author",
    "BlogPost",
    "BodyBlock",
    "CtaBlock",
    "FaqBlock",
    "FaqItem",
    "QuickAnswerBlock",
    "UnknownBlock",
    "WysiwygBlock",
    "parse_block",
]
