# Error taxonomy for the dialogue pipeline.
# None of these are retried; the caller decides what to report.

from typing import Optional


class DialogueError(Exception):
    """Base class for every error raised by the pipeline."""


class ValidationError(DialogueError):
    """Caller input is unusable (missing scenario, too few characters, ...)."""


class ConfigurationError(DialogueError):
    """A credential, model id or provider name is missing or unknown."""


class ProviderError(DialogueError):
    """The remote provider failed, or answered with something we cannot use."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
