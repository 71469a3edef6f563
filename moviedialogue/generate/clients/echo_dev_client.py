# Offline model client for local dev: echoes the prompt, makes no API call.

from ..types import ModelParams


class EchoDevClient:
    def __init__(self, params: ModelParams = None):
        self.model = "echo-dev"
        self.params = params or ModelParams()

    def generate(self, prompt: str, system_prompt: str) -> str:
        return f"[ECHO RESPONSE]\n{prompt}"
