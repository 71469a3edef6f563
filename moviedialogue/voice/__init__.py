# Voice synthesis package.

from .elevenlabs_client import VoiceSynthesizer, VOICE_MAP

__all__ = ["VoiceSynthesizer", "VOICE_MAP"]
