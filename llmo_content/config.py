"""Central configuration for the content generation service."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
ARTICLE_OUTPUT_DIR = ROOT_DIR / "output" / "articles"

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")

# ── Claude settings ────────────────────────────────────────────────────────
DEFAULT_MODEL = os.getenv("LLMO_DEFAULT_MODEL", "claude-haiku-4-5-20251001")  # fast model for titles
ADVANCED_MODEL = os.getenv("LLMO_ADVANCED_MODEL", "claude-sonnet-4-5-20250929")  # articles + metadata

# Titles want variety, metadata wants consistency.
TITLE_TEMPERATURE = 0.8
TITLE_MAX_TOKENS = 2000
ARTICLE_TEMPERATURE = 0.7
ARTICLE_MAX_TOKENS = 4000
SEO_TEMPERATURE = 0.3
SEO_MAX_TOKENS = 1500

# ── Content settings ───────────────────────────────────────────────────────
CONTENT_LANGUAGE = os.getenv("LLMO_CONTENT_LANGUAGE", "English")
HTML_LANG = os.getenv("LLMO_HTML_LANG", "en")  # <html lang> of exported pages
ARTICLE_SECTION_COUNT = 6
TITLE_COUNT_RANGE = (8, 10)
SEO_CONTENT_EXCERPT_CHARS = 1000  # article text passed to the metadata prompt
SEO_TITLE_LENGTH = (50, 60)
SEO_DESCRIPTION_LENGTH = (150, 160)
DEFAULT_META_ROBOTS = "index, follow"

# ── Export labels ──────────────────────────────────────────────────────────
AUTHOR_NAME = os.getenv("LLMO_AUTHOR", "CloudFlow Dynamics")
SYSTEM_NAME = "LLMO Content Generator"
PROJECT_URL = "https://github.com/ukenn2112/llmo-content"

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LLMO_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the CLI and the web app."""
    # Avoid duplicate handlers if the host already configured logging
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
