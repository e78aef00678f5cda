"""Exception types shared across the content proxy."""

from __future__ import annotations


class ContentProxyError(Exception):
    """Base class for content proxy failures."""


class NotFoundError(ContentProxyError):
    """No usable record for the requested content."""


class ContentStoreError(ContentProxyError):
    """The content store could not be reached or answered with an error."""
