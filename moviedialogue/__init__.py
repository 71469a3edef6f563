# Movie dialogue generator package.
# Exposes the dialogue pipeline entry points for convenience.

from .generate import DialogueGenerator, GenerationRequest, GenerationResult, Character, DialogueExchange

__all__ = ["DialogueGenerator", "GenerationRequest", "GenerationResult", "Character", "DialogueExchange"]
