# Common utilities and shared modules
"""
Shared components used across the proxy:
- Project configuration (pydantic settings, YAML + environment)
- Logging configuration
- Error types
"""

from .config import (
    CONFIG_DIR,
    FIXTURES_DIR,
    PROJECT_ROOT,
    ProxySettings,
    SanitySettings,
    Settings,
    get_shopify_client_secret,
)
from .errors import ContentProxyError, ContentStoreError, NotFoundError
from .logging import setup_logging

__all__ = [
    "CONFIG_DIR",
    "FIXTURES_DIR",
    "PROJECT_ROOT",
    "ProxySettings",
    "SanitySettings",
    "Settings",
    "get_shopify_client_secret",
    "ContentProxyError",
    "ContentStoreError",
    "NotFoundError",
    "setup_logging",
]
