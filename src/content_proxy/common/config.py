"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"
FIXTURES_DIR = PROJECT_ROOT / "fixtures"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class SanitySettings(BaseModel):
    """Content store (Sanity) connection settings."""
    model_config = ConfigDict(frozen=True)

    project_id: str = ""
    dataset: str = "production"
    api_version: str = "2024-01-01"
    use_cdn: bool = True
    token: Optional[str] = Field(default=None, repr=False)
    timeout_seconds: float = 10.0


class ProxySettings(BaseModel):
    """Storefront proxy response settings."""
    model_config = ConfigDict(frozen=True)

    content_type: str = "application/liquid"
    cache_max_age: int = 300
    list_slug: str = "liste"

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.cache_max_age}"


class Settings(BaseModel):
    """Top-level application settings, read-only once built."""
    model_config = ConfigDict(frozen=True)

    sanity: SanitySettings = Field(default_factory=SanitySettings)
    proxy: ProxySettings = Field(default_factory=ProxySettings)
    shopify_client_secret: str = Field(default="", repr=False)

    @classmethod
    def load(
        cls,
        settings_path: Path | None = None,
        require_secret: bool = True,
    ) -> Settings:
        """Load settings from config/settings.yaml, then apply env overrides.

        Args:
            settings_path: YAML file to read (default config/settings.yaml).
            require_secret: Fail when SHOPIFY_CLIENT_SECRET is missing.

        Raises:
            ValueError: If the secret is required and not set.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict[str, Any] = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        sanity = dict(data.get("sanity") or {})
        if project_id := os.getenv("SANITY_PROJECT_ID"):
            sanity["project_id"] = project_id
        if dataset := os.getenv("SANITY_DATASET"):
            sanity["dataset"] = dataset
        if api_version := os.getenv("SANITY_API_VERSION"):
            sanity["api_version"] = api_version
        if token := os.getenv("SANITY_API_TOKEN"):
            sanity["token"] = token
        if use_cdn := os.getenv("SANITY_USE_CDN"):
            sanity["use_cdn"] = use_cdn.strip().lower() in ("1", "true", "yes")
        data["sanity"] = sanity

        if require_secret:
            data["shopify_client_secret"] = get_shopify_client_secret()
        else:
            data["shopify_client_secret"] = os.getenv("SHOPIFY_CLIENT_SECRET", "")
        return cls(**data)


def get_shopify_client_secret() -> str:
    """Get the Shopify app proxy shared secret from environment."""
    key = os.getenv("SHOPIFY_CLIENT_SECRET", "")
    if not key:
        raise ValueError("SHOPIFY_CLIENT_SECRET not set in environment")
    return key
