# Client for the HuggingFace Inference API (raw text generation).
# Same generate(prompt, system_prompt) interface as OpenAIClient, but the
# conversation is flattened into one Llama-style templated prompt.

from typing import Any, Optional

import requests

from ..errors import ConfigurationError, ProviderError
from ..prompts import format_llama_prompt
from ..types import ModelParams
from ...log import get_logger

logger = get_logger(__name__)

DEFAULT_MODEL_ID = "meta-llama/Meta-Llama-3.2-3B-Instruct"
DEFAULT_API_URL = "https://api-inference.huggingface.co"


class HuggingFaceClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        params: Optional[ModelParams] = None,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise ConfigurationError("HUGGINGFACE_API_KEY environment variable not set")
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL_ID
        self.api_url = api_url.rstrip("/")
        self.params = params or ModelParams(temperature=0.7, max_tokens=1024)
        self.timeout = timeout

    def generate(self, prompt: str, system_prompt: str) -> str:
        payload = {
            "inputs": format_llama_prompt(system_prompt, prompt),
            "parameters": {
                "temperature": float(self.params.temperature if self.params.temperature is not None else 0.7),
                "max_new_tokens": int(self.params.max_tokens or 1024),
                "return_full_text": False,
            },
        }
        url = f"{self.api_url}/models/{self.model}"
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"Failed to connect to HuggingFace API: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise ProviderError(
                f"HuggingFace API error (status {resp.status_code}): {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )
        logger.debug("HuggingFace response: %s", resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to parse HuggingFace response: {e}",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        return extract_generated_text(data)


def extract_generated_text(data: Any) -> str:
    """Accept either {"generated_text": ...} or [{"generated_text": ...}]."""
    if isinstance(data, list):
        if not data:
            raise ProviderError("No response generated")
        data = data[0]
    if not isinstance(data, dict):
        raise ProviderError(f"Unexpected HuggingFace response shape: {type(data).__name__}")

    text = data.get("generated_text") or ""
    if not text:
        err = data.get("error")
        if err:
            raise ProviderError(f"No response generated: {err}")
        raise ProviderError("No response generated")
    return text
