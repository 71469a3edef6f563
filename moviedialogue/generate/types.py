# Dataclasses shared across the generation modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Dict, Any

from .errors import ValidationError


@dataclass(frozen=True)
class Character:
    """A cast member; `name` is the key the parser matches on."""
    name: str
    type: str = ""
    traits: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationRequest:
    scenario: str
    characters: Tuple[Character, ...]
    num_exchanges: int = 0
    style: str = ""
    emotional_tone: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationRequest":
        """Build from the camelCase JSON shape used by the HTTP API and CLI.

        Raises ValidationError when a field has the wrong JSON type; absent or
        null fields take their defaults.
        """
        if not isinstance(data, dict):
            raise ValidationError("request must be a JSON object")

        raw_chars = data.get("characters")
        if raw_chars is None:
            raw_chars = []
        if not isinstance(raw_chars, list):
            raise ValidationError("characters must be a list")

        chars = []
        for i, c in enumerate(raw_chars):
            if not isinstance(c, dict):
                raise ValidationError(f"characters[{i}] must be an object with a name")
            traits = c.get("traits")
            if traits is None:
                traits = []
            if not isinstance(traits, list) or not all(isinstance(t, str) for t in traits):
                raise ValidationError(f"characters[{i}].traits must be a list of strings")
            chars.append(
                Character(
                    name=_text(c, "name", f"characters[{i}].name"),
                    type=_text(c, "type", f"characters[{i}].type"),
                    traits=tuple(traits),
                )
            )

        count = data.get("numExchanges")
        if count is None:
            count = 0
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError("numExchanges must be an integer")

        return cls(
            scenario=_text(data, "scenario", "scenario"),
            characters=tuple(chars),
            num_exchanges=count,
            style=_text(data, "style", "style"),
            emotional_tone=_text(data, "emotionalTone", "emotionalTone"),
        )


def _text(obj: Dict[str, Any], key: str, label: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    return value

@dataclass(frozen=True)
class DialogueExchange:
    character: str
    line: str


@dataclass
class GenerationResult:
    scenario: str
    exchanges: List[DialogueExchange] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario": self.scenario,
            "exchanges": [{"character": e.character, "line": e.line} for e in self.exchanges],
        }


@dataclass
class ModelParams:
    """Sampling parameters a client sends with every request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
