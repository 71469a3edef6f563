# Model clients and the settings-driven selection between them.

from typing import Optional

from ..errors import ConfigurationError
from ..types import ModelParams
from .echo_dev_client import EchoDevClient
from .huggingface_client import HuggingFaceClient, DEFAULT_MODEL_ID
from .openai_client import OpenAIClient

PROVIDERS = ("huggingface", "openai", "echo")


def select_provider(settings) -> str:
    """Explicit LLM_PROVIDER wins; otherwise the first configured key decides."""
    if settings.LLM_PROVIDER:
        name = settings.LLM_PROVIDER.strip().lower()
        if name not in PROVIDERS:
            raise ConfigurationError(
                f"Unknown LLM_PROVIDER {settings.LLM_PROVIDER!r}; expected one of {', '.join(PROVIDERS)}"
            )
        return name
    if settings.HUGGINGFACE_API_KEY:
        return "huggingface"
    if settings.OPENAI_API_KEY:
        return "openai"
    raise ConfigurationError("No LLM provider configured: set HUGGINGFACE_API_KEY or OPENAI_API_KEY")


def build_client(settings, params: Optional[ModelParams] = None):
    provider = select_provider(settings)
    if provider == "huggingface":
        return HuggingFaceClient(
            api_key=settings.HUGGINGFACE_API_KEY,
            model=settings.HUGGINGFACE_MODEL_ID or DEFAULT_MODEL_ID,
            api_url=settings.HUGGINGFACE_API_URL,
            params=params,
            timeout=settings.REQUEST_TIMEOUT,
        )
    if provider == "openai":
        return OpenAIClient(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            params=params,
            timeout=settings.REQUEST_TIMEOUT,
        )
    return EchoDevClient(params=params)


__all__ = ["build_client", "select_provider", "EchoDevClient", "HuggingFaceClient", "OpenAIClient", "PROVIDERS"]
