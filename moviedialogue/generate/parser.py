# Turns free-form model output into attributed dialogue lines.
# Permissive by intent: anything that is not "KnownName: text" is skipped,
# never raised on.

from typing import Iterable, List

from .types import Character, DialogueExchange


def parse_dialogue_response(text: str, characters: Iterable[Character]) -> List[DialogueExchange]:
    known = {c.name for c in characters}
    exchanges: List[DialogueExchange] = []

    for raw in (text or "").split("\n"):
        line = raw.strip()
        if not line:
            continue

        # only the first colon separates speaker from line
        speaker, sep, rest = line.partition(":")
        if not sep:
            continue

        speaker = speaker.strip()
        rest = rest.strip()
        if speaker not in known or not rest:
            continue

        exchanges.append(DialogueExchange(character=speaker, line=rest))

    return exchanges


def format_dialogue(exchanges: Iterable[DialogueExchange]) -> str:
    """Render exchanges back to the canonical "Name: line" text."""
    return "\n".join(f"{e.character}: {e.line}" for e in exchanges)
