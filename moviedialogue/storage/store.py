# SQLite-backed storage for characters, reference dialogues and saved
# generated dialogues. List-valued columns are stored as JSON text.
# A fresh connection is opened per call, so one store can be shared
# across request threads.

from __future__ import annotations

import json
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .types import CharacterRecord, ReferenceDialogue, SavedDialogue
from ..log import get_logger

logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS characters (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    type TEXT NOT NULL DEFAULT '',
    traits TEXT NOT NULL DEFAULT '[]'
);
CREATE TABLE IF NOT EXISTS reference_dialogues (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    source TEXT NOT NULL DEFAULT '',
    characters TEXT NOT NULL DEFAULT '[]',
    content TEXT NOT NULL,
    tags TEXT NOT NULL DEFAULT '[]'
);
CREATE TABLE IF NOT EXISTS dialogues (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    scenario TEXT NOT NULL,
    characters TEXT NOT NULL,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class DialogueStore:
    def __init__(self, db_path: str):
        self.db_path = db_path
        self._initialized = False

    # -------------------------
    # Connections
    # -------------------------
    def _connect(self) -> sqlite3.Connection:
        if not self._initialized:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            with closing(sqlite3.connect(self.db_path)) as conn:
                conn.executescript(SCHEMA)
            self._initialized = True
            logger.info("Dialogue store ready at %s", self.db_path)
        return sqlite3.connect(self.db_path)

    def _query(self, sql: str, params: Sequence[Any] = ()) -> List[tuple]:
        with closing(self._connect()) as conn:
            return conn.execute(sql, params).fetchall()

    def _insert(self, sql: str, params: Sequence[Any]) -> int:
        with closing(self._connect()) as conn:
            with conn:
                cur = conn.execute(sql, params)
            return cur.lastrowid

    # -------------------------
    # Characters
    # -------------------------
    def list_characters(self) -> List[CharacterRecord]:
        rows = self._query("SELECT id, name, type, traits FROM characters ORDER BY id")
        return [CharacterRecord(id=r[0], name=r[1], type=r[2], traits=json.loads(r[3])) for r in rows]

    def create_character(self, character: CharacterRecord) -> CharacterRecord:
        new_id = self._insert(
            "INSERT INTO characters (name, type, traits) VALUES (?, ?, ?)",
            (character.name, character.type or "", json.dumps(list(character.traits))),
        )
        return CharacterRecord(id=new_id, name=character.name, type=character.type or "", traits=list(character.traits))

    # -------------------------
    # Reference dialogues
    # -------------------------
    def list_reference_dialogues(self, tag: Optional[str] = None) -> List[ReferenceDialogue]:
        sql = "SELECT id, source, characters, content, tags FROM reference_dialogues"
        params: tuple = ()
        if tag:
            sql += " WHERE EXISTS (SELECT 1 FROM json_each(reference_dialogues.tags) WHERE json_each.value = ?)"
            params = (tag,)
        rows = self._query(sql + " ORDER BY id", params)
        return [
            ReferenceDialogue(id=r[0], source=r[1], characters=json.loads(r[2]), content=r[3], tags=json.loads(r[4]))
            for r in rows
        ]

    def add_reference_dialogue(self, dialogue: ReferenceDialogue) -> ReferenceDialogue:
        new_id = self._insert(
            "INSERT INTO reference_dialogues (source, characters, content, tags) VALUES (?, ?, ?, ?)",
            (dialogue.source, json.dumps(list(dialogue.characters)), dialogue.content, json.dumps(list(dialogue.tags))),
        )
        return ReferenceDialogue(
            id=new_id,
            source=dialogue.source,
            content=dialogue.content,
            characters=list(dialogue.characters),
            tags=list(dialogue.tags),
        )

    # -------------------------
    # Generated dialogues
    # -------------------------
    def save_generated_dialogue(
        self,
        scenario: str,
        characters: List[Dict[str, Any]],
        exchanges: List[Dict[str, Any]],
    ) -> int:
        return self._insert(
            "INSERT INTO dialogues (scenario, characters, content) VALUES (?, ?, ?)",
            (scenario, json.dumps(characters), json.dumps(exchanges)),
        )

    def list_generated_dialogues(self) -> List[SavedDialogue]:
        rows = self._query(
            "SELECT id, scenario, characters, content, created_at FROM dialogues ORDER BY created_at DESC, id DESC"
        )
        return [
            SavedDialogue(id=r[0], scenario=r[1], characters=json.loads(r[2]), exchanges=json.loads(r[3]), created_at=r[4])
            for r in rows
        ]
