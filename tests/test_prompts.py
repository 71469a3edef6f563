"""Prompt layout for dialogue generation."""

from moviedialogue.generate import Character, GenerationRequest, build_dialogue_prompt
from moviedialogue.generate.prompts import SYSTEM_PROMPT, format_llama_prompt


def test_prompt_layout_with_style_and_tone(cast):
    req = GenerationRequest(
        scenario="Rooftop standoff at dawn",
        characters=cast,
        num_exchanges=4,
        style="noir",
        emotional_tone="tense",
    )
    expected = (
        "Scenario: Rooftop standoff at dawn\n\n"
        "Characters:\n"
        "- Hero (Type: hero, Traits: brave, stubborn)\n"
        "- Villain (Type: villain, Traits: cunning)\n"
        "\nStyle: noir\n"
        "Emotional Tone: tense\n"
        "\nPlease create a dialogue with 4 exchanges between these characters in the given scenario. "
        "Format the dialogue as:\n"
        "CHARACTER_NAME: Their dialogue line here.\n"
    )
    assert build_dialogue_prompt(req) == expected


def test_prompt_omits_empty_style_and_tone():
    req = GenerationRequest(
        scenario="Kitchen argument",
        characters=(Character(name="A"), Character(name="B", type="cook")),
        num_exchanges=3,
    )
    prompt = build_dialogue_prompt(req)
    assert "Style:" not in prompt
    assert "Emotional Tone:" not in prompt
    assert "- A (Type: , Traits: )\n" in prompt
    assert "- B (Type: cook, Traits: )\n" in prompt
    assert "Characters:\n- A" in prompt
    assert prompt.endswith("CHARACTER_NAME: Their dialogue line here.\n")


def test_tone_without_style():
    req = GenerationRequest(
        scenario="s",
        characters=(Character(name="A"), Character(name="B")),
        num_exchanges=1,
        emotional_tone="warm",
    )
    prompt = build_dialogue_prompt(req)
    assert "Style:" not in prompt
    assert ")\nEmotional Tone: warm\n\nPlease create" in prompt


def test_prompt_is_deterministic(cast):
    req = GenerationRequest(scenario="x", characters=cast, num_exchanges=2)
    assert build_dialogue_prompt(req) == build_dialogue_prompt(req)


def test_llama_template():
    out = format_llama_prompt(SYSTEM_PROMPT, "Write it.")
    assert out == f"<|system|>\n{SYSTEM_PROMPT}\n<|user|>\nWrite it.\n<|assistant|>\n"
