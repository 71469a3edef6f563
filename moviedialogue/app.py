# ============================================================
# Movie Dialogue Generator FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Dialogue generation (HuggingFace, OpenAI, or Echo clients)
#   - Character / reference / saved-dialogue storage (SQLite)
#   - Voice synthesis for single lines (ElevenLabs)
# ============================================================

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel
from typing import List, Optional
from functools import lru_cache
import sqlite3
from urllib.parse import quote

# --- Local imports ---
from moviedialogue.settings import settings
from moviedialogue.log import get_logger
from moviedialogue.generate import (
    DialogueGenerator,
    GenerationRequest,
    ValidationError,
    ConfigurationError,
    ProviderError,
)
from moviedialogue.storage import DialogueStore, CharacterRecord, ReferenceDialogue, to_dict
from moviedialogue.voice import VoiceSynthesizer

logger = get_logger("moviedialogue.app")

# ------------------------------------------------------------
# 🔧 Collaborators (built once per process)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_generator() -> DialogueGenerator:
    # model client is resolved lazily on first generate, after validation
    return DialogueGenerator(settings=settings)


@lru_cache(maxsize=1)
def get_store() -> DialogueStore:
    return DialogueStore(settings.DB_PATH)


@lru_cache(maxsize=1)
def get_voice() -> VoiceSynthesizer:
    return VoiceSynthesizer(
        api_key=settings.ELEVENLABS_API_KEY,
        api_url=settings.ELEVENLABS_API_URL,
        timeout=settings.REQUEST_TIMEOUT,
    )

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class CharacterIn(BaseModel):
    name: str
    type: str = ""
    traits: List[str] = []

class DialogueRequest(BaseModel):
    scenario: str = ""
    characters: List[CharacterIn] = []
    numExchanges: Optional[int] = None
    style: str = ""
    emotionalTone: str = ""

class ExchangeOut(BaseModel):
    character: str
    line: str

class DialogueResponse(BaseModel):
    scenario: str
    exchanges: List[ExchangeOut]

class SaveDialogueRequest(BaseModel):
    scenario: str
    characters: List[CharacterIn] = []
    exchanges: List[ExchangeOut] = []

class ReferenceIn(BaseModel):
    source: str = ""
    characters: List[str] = []
    content: str
    tags: List[str] = []

class VoiceRequest(BaseModel):
    character: str = ""
    text: str = ""
    voiceId: Optional[str] = None

# ------------------------------------------------------------
# 🧯 Error mapping
# ------------------------------------------------------------
def _raise_http(e: Exception):
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ConfigurationError):
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    if isinstance(e, ProviderError):
        raise HTTPException(status_code=502, detail=str(e))
    raise e

# ------------------------------------------------------------
# 💬 Dialogue generation
# ------------------------------------------------------------
@app.post("/api/generate", response_model=DialogueResponse)
def generate_dialogue(req: DialogueRequest):
    request = GenerationRequest.from_dict(req.model_dump())
    try:
        result = get_generator().generate(request)
    except (ValidationError, ConfigurationError, ProviderError) as e:
        _raise_http(e)
    return result.to_dict()

# ------------------------------------------------------------
# 💾 Saved dialogues
# ------------------------------------------------------------
@app.post("/api/save-dialogue", status_code=201)
def save_dialogue(req: SaveDialogueRequest):
    try:
        new_id = get_store().save_generated_dialogue(
            req.scenario,
            [c.model_dump() for c in req.characters],
            [e.model_dump() for e in req.exchanges],
        )
    except sqlite3.Error as e:
        logger.error("Failed to save dialogue: %s", e)
        raise HTTPException(status_code=500, detail="Failed to save dialogue")
    return {"id": new_id, "message": "Dialogue saved successfully"}


@app.get("/api/saved-dialogues")
def get_saved_dialogues():
    try:
        return [to_dict(d) for d in get_store().list_generated_dialogues()]
    except sqlite3.Error as e:
        logger.error("Failed to fetch saved dialogues: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch saved dialogues")

# ------------------------------------------------------------
# 🎭 Characters
# ------------------------------------------------------------
@app.get("/api/characters")
def get_characters():
    try:
        return [to_dict(c) for c in get_store().list_characters()]
    except sqlite3.Error as e:
        logger.error("Failed to fetch characters: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch characters")


@app.post("/api/characters", status_code=201)
def create_character(req: CharacterIn):
    try:
        created = get_store().create_character(CharacterRecord(id=None, name=req.name, type=req.type, traits=req.traits))
    except sqlite3.Error as e:
        logger.error("Failed to create character: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create character")
    return to_dict(created)

# ------------------------------------------------------------
# 📚 Reference dialogues
# ------------------------------------------------------------
@app.get("/api/references")
def get_references(tag: Optional[str] = Query(None, description="Only references carrying this tag")):
    try:
        return [to_dict(d) for d in get_store().list_reference_dialogues(tag)]
    except sqlite3.Error as e:
        logger.error("Failed to fetch reference dialogues: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch reference dialogues")


@app.post("/api/references", status_code=201)
def add_reference(req: ReferenceIn):
    try:
        created = get_store().add_reference_dialogue(
            ReferenceDialogue(id=None, source=req.source, content=req.content, characters=req.characters, tags=req.tags)
        )
    except sqlite3.Error as e:
        logger.error("Failed to add reference dialogue: %s", e)
        raise HTTPException(status_code=500, detail="Failed to add reference dialogue")
    return to_dict(created)

# ------------------------------------------------------------
# 🔊 Voice synthesis
# ------------------------------------------------------------
def _audio_disposition(character: str) -> str:
    # header values must be latin-1; non-ASCII names go in the RFC 5987 form
    filename = f"{character}_dialogue.mp3"
    if filename.isascii() and filename.isprintable() and '"' not in filename and "\\" not in filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"dialogue.mp3\"; filename*=UTF-8''{quote(filename)}"


@app.post("/api/synthesize")
def synthesize(req: VoiceRequest):
    if not req.text:
        raise HTTPException(status_code=400, detail="Text is required")
    try:
        audio = get_voice().synthesize(req.text, req.character, req.voiceId)
    except (ValidationError, ConfigurationError, ProviderError) as e:
        _raise_http(e)
    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Disposition": _audio_disposition(req.character)},
    )

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV, "debug": settings.DEBUG}

@app.get("/")
def hello():
    return {"message": "Movie Dialogue Generator API"}
