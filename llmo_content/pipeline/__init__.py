"""Content generation: prompts, Claude calls, reply recovery."""

from llmo_content.pipeline.generator import generate_article
from llmo_content.pipeline.llm import create_client
from llmo_content.pipeline.seo import generate_seo_metadata
from llmo_content.pipeline.titles import generate_titles

__all__ = [
    "create_client",
    "generate_titles",
    "generate_article",
    "generate_seo_metadata",
]
