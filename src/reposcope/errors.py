# src/reposcope/errors.py


class ReposcopeError(Exception):
    """Base error for reposcope."""


class ConfigurationError(ReposcopeError):
    """Raised when required settings (e.g. the API key) are missing."""


class AnalysisError(ReposcopeError):
    """Raised when the language-model call fails."""
