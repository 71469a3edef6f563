# Storage package: SQLite persistence for characters and dialogues.

from .store import DialogueStore
from .types import CharacterRecord, ReferenceDialogue, SavedDialogue, to_dict

__all__ = ["DialogueStore", "CharacterRecord", "ReferenceDialogue", "SavedDialogue", "to_dict"]
