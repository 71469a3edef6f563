# cli.py
# ============================================================
# Command-line front end for the dialogue pipeline.
#
#   moviedialogue generate --request req.json [--provider huggingface|openai|echo]
#                          [--format json|text] [--out result.json]
#   moviedialogue synthesize --character hero --text "Run!" --out line.mp3
#
# The request file uses the same JSON shape as POST /api/generate.
# Exit codes: 0 ok, 1 bad input, 2 configuration error, 3 provider error.
# ============================================================

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from moviedialogue.generate import (
    ConfigurationError,
    DialogueGenerator,
    GenerationRequest,
    ProviderError,
    ValidationError,
    format_dialogue,
)
from moviedialogue.generate.clients import PROVIDERS
from moviedialogue.log import get_logger
from moviedialogue.settings import settings
from moviedialogue.voice import VoiceSynthesizer

logger = get_logger("moviedialogue.cli")

EXIT_OK = 0
EXIT_INPUT = 1
EXIT_CONFIG = 2
EXIT_PROVIDER = 3


def _exit_code(e: Exception) -> int:
    if isinstance(e, ValidationError):
        return EXIT_INPUT
    if isinstance(e, ConfigurationError):
        return EXIT_CONFIG
    return EXIT_PROVIDER


def _write(out: Optional[str], text: str) -> None:
    if out:
        p = Path(out)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        data = json.loads(Path(args.request).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"ERROR: cannot read request file: {e}", file=sys.stderr)
        return EXIT_INPUT
    if not isinstance(data, dict):
        print("ERROR: request file must contain a JSON object", file=sys.stderr)
        return EXIT_INPUT

    cfg = settings
    if args.provider:
        cfg = settings.model_copy(update={"LLM_PROVIDER": args.provider})

    gen = DialogueGenerator(settings=cfg)
    try:
        result = gen.generate(GenerationRequest.from_dict(data))
    except (ValidationError, ConfigurationError, ProviderError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return _exit_code(e)

    if args.format == "text":
        _write(args.out, format_dialogue(result.exchanges) + "\n")
    else:
        _write(args.out, json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n")
    return EXIT_OK


def cmd_synthesize(args: argparse.Namespace) -> int:
    try:
        voice = VoiceSynthesizer(
            api_key=settings.ELEVENLABS_API_KEY,
            api_url=settings.ELEVENLABS_API_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )
        audio = voice.synthesize(args.text, args.character, args.voice_id)
    except (ValidationError, ConfigurationError, ProviderError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return _exit_code(e)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(audio)
    logger.info("Wrote %d bytes of audio to %s", len(audio), out)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="moviedialogue", description="Generate movie-style dialogue with an LLM.")
    sub = ap.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a dialogue from a JSON request file")
    g.add_argument("--request", required=True, help="Path to request JSON (same shape as POST /api/generate)")
    g.add_argument("--provider", choices=PROVIDERS, default=None, help="Override LLM_PROVIDER")
    g.add_argument("--format", choices=("json", "text"), default="json")
    g.add_argument("--out", default=None, help="Write output here instead of stdout")
    g.set_defaults(func=cmd_generate)

    s = sub.add_parser("synthesize", help="Synthesize one line of dialogue to MP3")
    s.add_argument("--character", default="", help="Character key used to pick a voice")
    s.add_argument("--text", required=True)
    s.add_argument("--voice-id", default=None, help="Explicit ElevenLabs voice id")
    s.add_argument("--out", required=True, help="Output .mp3 path")
    s.set_defaults(func=cmd_synthesize)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
