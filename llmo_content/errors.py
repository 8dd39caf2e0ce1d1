"""Error types raised by the generation services and the exporter.

HTTP mapping (see ``llmo_content.web``):
    InvalidInput, UnsupportedFormat  -> 400
    GenerationError subclasses       -> 500
"""


class LlmoError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(LlmoError):
    """Startup configuration is incomplete (e.g. no API key)."""


class InvalidInput(LlmoError, ValueError):
    """A required request field is missing or empty."""


class UnsupportedFormat(LlmoError, ValueError):
    """Export format is not one of the supported selectors."""

    def __init__(self, fmt):
        self.format = fmt
        super().__init__(f"Unsupported export format: {fmt!r}")


class GenerationError(LlmoError):
    """The hosted model reply could not be turned into a result."""


class UpstreamEmpty(GenerationError):
    """The hosted model returned no text."""


class ResponseUnparseable(GenerationError):
    """The recovered reply text is still not valid JSON."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse model response: {detail}")


class ResponseMalformed(GenerationError):
    """The parsed reply lacks the required structure."""
