# DialogueGenerator: validate request -> build prompt -> one model call -> parse.
# Accepts any model client exposing generate(prompt, system_prompt) -> str.

from __future__ import annotations
import dataclasses
import os
from pathlib import Path
from typing import Optional

import yaml

from .clients import build_client
from .errors import ProviderError, ValidationError
from .parser import parse_dialogue_response
from .prompts import SYSTEM_PROMPT, build_dialogue_prompt
from .types import GenerationRequest, GenerationResult, ModelParams
from ..log import get_logger
from ..settings import settings as default_settings

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")
DEFAULT_EXCHANGES = 5


class DialogueGenerator:
    def __init__(self, model_client=None, settings=None, config_path: Optional[str] = None):
        self.settings = settings or default_settings
        self.config_path = str(config_path or self.settings.GENERATE_CONFIG or DEFAULT_CONFIG_PATH)
        self.cfg = self._load_config()
        self.model_client = model_client

    def _load_config(self) -> dict:
        if not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @property
    def system_prompt(self) -> str:
        return (self.cfg.get("system_prompt") or SYSTEM_PROMPT).strip()

    @property
    def default_exchanges(self) -> int:
        return int(self.cfg.get("default_exchanges") or DEFAULT_EXCHANGES)

    def model_params(self) -> ModelParams:
        return ModelParams(
            temperature=self.cfg.get("temperature", 0.7),
            max_tokens=self.cfg.get("max_new_tokens", 1024),
        )

    def _get_client(self):
        # built lazily so a missing key is reported per request, after validation
        if self.model_client is None:
            self.model_client = build_client(self.settings, self.model_params())
        return self.model_client

    def validate(self, req: GenerationRequest) -> GenerationRequest:
        """Check the request and return a copy with the exchange count defaulted."""
        if not (req.scenario or "").strip():
            raise ValidationError("scenario required")
        if len(req.characters) < 2:
            raise ValidationError("at least two characters required")
        if req.num_exchanges <= 0:
            req = dataclasses.replace(req, num_exchanges=self.default_exchanges)
        return req

    def generate(self, req: GenerationRequest) -> GenerationResult:
        """Main entry point for generation."""
        req = self.validate(req)
        prompt = build_dialogue_prompt(req)
        client = self._get_client()
        model = getattr(client, "model", None)

        logger.info(
            "Requesting %d exchanges for %d characters (engine=%s, model=%s)",
            req.num_exchanges, len(req.characters), type(client).__name__, model,
        )
        logger.debug("Prompt:\n%s", prompt)
        try:
            text = client.generate(prompt, self.system_prompt)
        except ProviderError as e:
            logger.error("Provider call failed: %s", e)
            raise

        exchanges = parse_dialogue_response(text, req.characters)
        if not exchanges:
            logger.warning("No dialogue lines matched a known character")
        logger.info("Parsed %d exchanges", len(exchanges))

        return GenerationResult(
            scenario=req.scenario,
            exchanges=exchanges,
            meta={"engine": type(client).__name__, "model": model},
        )
