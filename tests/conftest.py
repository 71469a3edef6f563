"""Shared pytest fixtures for the dialogue generator tests."""

from __future__ import annotations

import json

import pytest

from moviedialogue.generate import Character, GenerationRequest
from moviedialogue.settings import Settings


class FakeModelClient:
    """Stands in for a provider: records calls and returns canned text."""

    def __init__(self, text: str = "", error: Exception = None):
        self.model = "fake-model"
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, prompt: str, system_prompt: str) -> str:
        self.calls.append((prompt, system_prompt))
        if self.error is not None:
            raise self.error
        return self.text


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, json_data=None, text: str = None, content: bytes = b""):
        self.status_code = status_code
        self._json = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.content = content

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


@pytest.fixture()
def make_settings():
    """Factory for isolated Settings that ignore the developer's .env file."""

    def _make(**overrides) -> Settings:
        base = {
            "LLM_PROVIDER": None,
            "OPENAI_API_KEY": None,
            "HUGGINGFACE_API_KEY": None,
            "HUGGINGFACE_MODEL_ID": None,
            "ELEVENLABS_API_KEY": None,
            "GENERATE_CONFIG": None,
        }
        base.update(overrides)
        return Settings(_env_file=None, **base)

    return _make


@pytest.fixture()
def heist_request() -> GenerationRequest:
    return GenerationRequest(
        scenario="A heist gone wrong",
        characters=(Character(name="Max"), Character(name="Lena")),
        num_exchanges=2,
    )


@pytest.fixture()
def cast():
    return (
        Character(name="Hero", type="hero", traits=("brave", "stubborn")),
        Character(name="Villain", type="villain", traits=("cunning",)),
    )


@pytest.fixture()
def fake_client_cls():
    return FakeModelClient


@pytest.fixture()
def fake_response_cls():
    return FakeResponse
