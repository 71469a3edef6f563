# Records returned by the dialogue store.

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional


@dataclass
class CharacterRecord:
    id: Optional[int]
    name: str
    type: str = ""
    traits: List[str] = field(default_factory=list)


@dataclass
class ReferenceDialogue:
    """A hand-picked dialogue kept around as a style reference."""
    id: Optional[int]
    source: str
    content: str
    characters: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass
class SavedDialogue:
    id: int
    scenario: str
    characters: List[Dict[str, Any]]
    exchanges: List[Dict[str, Any]]
    created_at: str


def to_dict(record) -> Dict[str, Any]:
    return asdict(record)
