# Client for OpenAI Chat Completions.
# Follows the same interface as HuggingFaceClient: generate(prompt, system_prompt) -> str.

from typing import Optional

import httpx
from openai import OpenAI, APIConnectionError, APIStatusError, OpenAIError

from ..errors import ConfigurationError, ProviderError
from ..types import ModelParams
from ...log import get_logger

logger = get_logger(__name__)


class OpenAIClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        params: Optional[ModelParams] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY environment variable not set")
        self.model = model
        self.params = params or ModelParams(temperature=0.7)
        # no retries: a failed call surfaces straight away
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    def generate(self, prompt: str, system_prompt: str) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.params.temperature if self.params.temperature is not None else 0.7,
            )
        except APIStatusError as e:
            body = e.response.text
            raise ProviderError(
                f"OpenAI API error (status {e.status_code}): {body}",
                status_code=e.status_code,
                body=body,
            ) from e
        except APIConnectionError as e:
            raise ProviderError(f"Failed to connect to OpenAI API: {e}") from e
        except OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        if not resp.choices:
            raise ProviderError("No response generated")
        text = (resp.choices[0].message.content or "").strip()
        if not text:
            raise ProviderError("No response generated")
        logger.debug("OpenAI response: %s", text)
        return text
