# Text-to-speech for a single line of dialogue via ElevenLabs.
# Returns raw MP3 bytes; the HTTP layer decides how to deliver them.

from typing import Dict, Optional

import requests

from ..generate.errors import ConfigurationError, ProviderError, ValidationError
from ..log import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.elevenlabs.io/v1"
VOICE_MODEL_ID = "eleven_monolingual_v1"

# character key -> ElevenLabs voice id
VOICE_MAP: Dict[str, str] = {
    "hero": "21m00Tcm4TlvDq8ikWAM",
    "villain": "AZnzlk1XvdvUeBnXmlld",
    "sidekick": "EXAVITQu4vr4xnSDxMaL",
    "detective": "MF3mGyEYCl7XYWbV9V6O",
    "default": "EXAVITQu4vr4xnSDxMaL",
}


class VoiceSynthesizer:
    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = DEFAULT_API_URL,
        voice_map: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise ConfigurationError("Voice synthesis API key not configured (ELEVENLABS_API_KEY)")
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.voice_map = dict(voice_map or VOICE_MAP)
        self.timeout = timeout

    def voice_for(self, character: str, voice_id: Optional[str] = None) -> str:
        """Explicit voice id wins; otherwise map the character, falling back to the default voice."""
        if voice_id:
            return voice_id
        mapped = self.voice_map.get(character)
        if mapped:
            return mapped
        logger.warning("No voice mapped for character %r, using default voice", character)
        return self.voice_map.get("default") or VOICE_MAP["default"]

    def synthesize(self, text: str, character: str = "", voice_id: Optional[str] = None) -> bytes:
        if not (text or "").strip():
            raise ValidationError("Text is required")

        voice = self.voice_for(character, voice_id)
        payload = {
            "text": text,
            "model_id": VOICE_MODEL_ID,
            "voice_settings": {"stability": 0.75, "similarity_boost": 0.75},
        }
        headers = {"xi-api-key": self.api_key}
        url = f"{self.api_url}/text-to-speech/{voice}"

        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"Failed to make voice synthesis request: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.error("Voice synthesis failed (status %d): %s", resp.status_code, resp.text)
            raise ProviderError(
                f"Voice synthesis API error (status {resp.status_code}): {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )
        return resp.content
