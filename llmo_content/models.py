"""Article, title and metadata records passed between pipeline steps.

Field names are snake_case here; ``to_dict`` produces the camelCase JSON wire
format used by the HTTP API. Building these records from untrusted JSON goes
through ``llmo_content.validation.checks``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TitleCandidate:
    id: str
    title: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "description": self.description}


@dataclass
class Subsection:
    title: str
    content: str

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content}


@dataclass
class Section:
    heading: str
    content: str
    subheadings: list[Subsection] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {"heading": self.heading, "content": self.content}
        if self.subheadings:
            data["subheadings"] = [sub.to_dict() for sub in self.subheadings]
        return data


@dataclass
class StructuredData:
    """schema.org Article record embedded as JSON-LD."""

    type: str = "Article"
    name: str = ""
    description: str = ""
    author: str = ""
    date_published: str = ""
    date_modified: str = ""
    keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "author": self.author,
            "datePublished": self.date_published,
            "dateModified": self.date_modified,
            "keywords": list(self.keywords),
        }


@dataclass
class SEOMetadata:
    title: str
    description: str
    keywords: list[str]
    og_title: str
    og_description: str
    twitter_title: str
    twitter_description: str
    meta_robots: str
    canonical_url: Optional[str] = None
    structured_data: Optional[StructuredData] = None

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "ogTitle": self.og_title,
            "ogDescription": self.og_description,
            "twitterTitle": self.twitter_title,
            "twitterDescription": self.twitter_description,
            "metaRobots": self.meta_robots,
        }
        if self.canonical_url:
            data["canonicalUrl"] = self.canonical_url
        if self.structured_data is not None:
            data["structuredData"] = self.structured_data.to_dict()
        return data


@dataclass
class Article:
    title: str
    sections: list[Section]
    seo_metadata: Optional[SEOMetadata] = None

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "sections": [section.to_dict() for section in self.sections],
        }
        if self.seo_metadata is not None:
            data["seoMetadata"] = self.seo_metadata.to_dict()
        return data

    def flatten_content(self) -> str:
        """Join headings, bodies and subsections into one text blob.

        This is the excerpt handed to the metadata prompt.
        """
        blocks = []
        for section in self.sections:
            subs = "\n".join(f"{sub.title}\n{sub.content}" for sub in section.subheadings)
            blocks.append(f"{section.heading}\n{section.content}\n{subs}")
        return "\n".join(blocks)

    def word_count(self) -> int:
        words = len(self.title.split())
        for section in self.sections:
            words += len(section.heading.split()) + len(section.content.split())
            for sub in section.subheadings:
                words += len(sub.title.split()) + len(sub.content.split())
        return words
