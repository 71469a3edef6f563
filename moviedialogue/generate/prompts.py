# Prompt text for dialogue generation.
# The instruction layout below is what the parser and operators reading the
# logs expect, so keep it byte-for-byte stable.

from .types import GenerationRequest

SYSTEM_PROMPT = (
    "You are a creative dialogue writer that specializes in creating authentic "
    "movie-like or anime-like dialogues. Create realistic exchanges between "
    "characters based on the described scenario and character traits."
)

LINE_FORMAT = "CHARACTER_NAME: Their dialogue line here."


def build_dialogue_prompt(req: GenerationRequest) -> str:
    parts = [f"Scenario: {req.scenario}\n\n", "Characters:\n"]
    for char in req.characters:
        parts.append(f"- {char.name} (Type: {char.type}, Traits: {', '.join(char.traits)})\n")

    if req.style:
        parts.append(f"\nStyle: {req.style}\n")
    if req.emotional_tone:
        parts.append(f"Emotional Tone: {req.emotional_tone}\n")

    parts.append(
        f"\nPlease create a dialogue with {req.num_exchanges} exchanges between these "
        "characters in the given scenario. Format the dialogue as:\n"
    )
    parts.append(f"{LINE_FORMAT}\n")
    return "".join(parts)


def format_llama_prompt(system_message: str, user_message: str) -> str:
    """Flatten system + user turns into the Llama chat template for raw text generation."""
    return f"<|system|>\n{system_message}\n<|user|>\n{user_message}\n<|assistant|>\n"
