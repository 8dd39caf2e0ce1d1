"""Stand-ins for the Anthropic client and canned model replies."""

import json
from types import SimpleNamespace


def make_message(text):
    """Shape a Messages API response; ``None`` means no content blocks."""
    content = [] if text is None else [SimpleNamespace(type="text", text=text)]
    return SimpleNamespace(
        content=content,
        usage=SimpleNamespace(input_tokens=10, output_tokens=20),
    )


class FakeMessages:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError("unexpected extra model call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return make_message(reply)


class FakeClient:
    """Replays queued replies (strings, None, or exceptions) in order."""

    def __init__(self, *replies):
        self.messages = FakeMessages(replies)

    @property
    def calls(self):
        return self.messages.calls


TITLES_PAYLOAD = {
    "titles": [
        {
            "title": "Remote Work Playbook: 12 Field-Tested Practices",
            "description": "Signals experience with concrete numbers.",
        },
        {
            "title": "Remote Work vs Hybrid: A Complete Guide",
            "description": "Targets comparison queries.",
        },
    ]
}

ARTICLE_PAYLOAD = {
    "title": "Remote Work Playbook: 12 Field-Tested Practices",
    "sections": [
        {
            "heading": "Why remote work matters",
            "content": "Remote work changes how teams plan.\nRemote work also changes hiring.",
            "subheadings": [
                {"title": "Expected impact", "content": "Remote work cuts commute time."},
            ],
        },
        {
            "heading": "Core concepts",
            "content": "Asynchronous communication is the base of remote work.",
        },
    ],
}

SEO_PAYLOAD = {
    "title": "Remote Work Playbook: 12 Practices That Work in 2026",
    "description": "Learn twelve remote work practices tested by real teams.",
    "keywords": ["remote work", "distributed teams", "async communication"],
    "ogTitle": "Remote Work Playbook",
    "ogDescription": "Twelve practices for distributed teams.",
    "twitterTitle": "Remote Work Playbook",
    "twitterDescription": "Twelve practices, tested.",
    "metaRobots": "index, follow",
    "canonicalUrl": "https://example.com/remote-work",
    "structuredData": {
        "type": "Article",
        "name": "Remote Work Playbook",
        "description": "Twelve practices for distributed teams.",
        "author": "CloudFlow Dynamics",
        "datePublished": "2026-10-19",
        "dateModified": "2026-10-19",
        "keywords": ["remote work"],
    },
}


def as_reply(payload) -> str:
    return json.dumps(payload)
