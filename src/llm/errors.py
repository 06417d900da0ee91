from __future__ import annotations


class StoryMapGenerationError(Exception):
    """Base class for everything a story map provider can raise."""


class ConfigurationError(StoryMapGenerationError):
    """Provider has no usable credential."""


class ProviderError(StoryMapGenerationError):
    """Network failure, bad HTTP status or a reply we could not parse as JSON."""


class ValidationError(StoryMapGenerationError):
    """Parsed JSON does not look like a story map at all."""
