"""Custom exception classes for CHT-Gen."""


class CHTGenError(Exception):
    """Base exception for all CHT-Gen errors."""

    pass


class ConfigurationError(CHTGenError):
    """Configuration or initialization errors (e.g. missing API key)."""

    pass


class GenerationError(CHTGenError):
    """Generation failed; the message is meant to be shown to the user as-is."""

    pass


class MalformedAnalysisError(CHTGenError):
    """The text model returned a payload that is not a JSON object."""

    pass
