# Generator package

# Makes generate/ importable and exposes the pipeline's public interfaces.

from .generator import DialogueGenerator
from .types import Character, GenerationRequest, GenerationResult, DialogueExchange, ModelParams
from .errors import DialogueError, ValidationError, ConfigurationError, ProviderError
from .parser import parse_dialogue_response, format_dialogue
from .prompts import build_dialogue_prompt, SYSTEM_PROMPT

__all__ = [
    "DialogueGenerator",
    "Character",
    "GenerationRequest",
    "GenerationResult",
    "DialogueExchange",
    "ModelParams",
    "DialogueError",
    "ValidationError",
    "ConfigurationError",
    "ProviderError",
    "parse_dialogue_response",
    "format_dialogue",
    "build_dialogue_prompt",
    "SYSTEM_PROMPT",
]
