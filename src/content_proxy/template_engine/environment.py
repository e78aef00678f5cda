"""Jinja2 environment shared by the block renderer and the page assembler."""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .rich_text import is_safe_url

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_environment(templates_dir: Optional[Path] = None) -> Environment:
    """
    Build the template environment.

    Autoescaping is on for every ``.html`` template, so all text coming from
    the content store is escaped unless it is wrapped in ``Markup``.

    Args:
        templates_dir: Path to templates directory.
                       Defaults to ./templates relative to this file.
    """
    if templates_dir is None:
        templates_dir = TEMPLATES_DIR

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"], default_for_string=True),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.tests["safe_url"] = is_safe_url
    return env
