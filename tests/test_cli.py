"""CLI: generate + synthesize subcommands and their exit codes."""

import json

import pytest

from moviedialogue import cli
from moviedialogue.generate import DialogueGenerator


@pytest.fixture()
def request_file(tmp_path):
    def _make(data) -> str:
        p = tmp_path / "request.json"
        p.write_text(json.dumps(data), encoding="utf-8")
        return str(p)

    return _make


@pytest.fixture()
def isolated_settings(monkeypatch, make_settings):
    s = make_settings()
    monkeypatch.setattr(cli, "settings", s)
    return s


@pytest.fixture()
def fake_generator(monkeypatch, fake_client_cls):
    fake = fake_client_cls("Max: Let's go.\nLena: Not yet.\nNarrator: (aside) tense.")
    monkeypatch.setattr(cli, "DialogueGenerator", lambda settings=None: DialogueGenerator(model_client=fake))
    return fake


HEIST = {"scenario": "A heist gone wrong", "characters": [{"name": "Max"}, {"name": "Lena"}], "numExchanges": 2}


def test_generate_json_to_file(request_file, fake_generator, tmp_path):
    out = tmp_path / "out" / "result.json"
    code = cli.main(["generate", "--request", request_file(HEIST), "--out", str(out)])
    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["exchanges"] == [
        {"character": "Max", "line": "Let's go."},
        {"character": "Lena", "line": "Not yet."},
    ]


def test_generate_text_to_stdout(request_file, fake_generator, capsys):
    code = cli.main(["generate", "--request", request_file(HEIST), "--format", "text"])
    assert code == 0
    assert capsys.readouterr().out == "Max: Let's go.\nLena: Not yet.\n"


def test_generate_with_echo_provider(request_file, isolated_settings, capsys):
    code = cli.main(["generate", "--request", request_file(HEIST), "--provider", "echo"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"scenario": "A heist gone wrong", "exchanges": []}


def test_validation_error_exit_code(request_file, fake_generator, capsys):
    code = cli.main(["generate", "--request", request_file({**HEIST, "characters": [{"name": "Max"}]})])
    assert code == cli.EXIT_INPUT
    assert "at least two characters required" in capsys.readouterr().err


def test_missing_request_file(tmp_path):
    assert cli.main(["generate", "--request", str(tmp_path / "missing.json")]) == cli.EXIT_INPUT


def test_non_object_request_file(request_file):
    assert cli.main(["generate", "--request", request_file(["not", "an", "object"])]) == cli.EXIT_INPUT


def test_configuration_error_exit_code(request_file, isolated_settings, capsys):
    code = cli.main(["generate", "--request", request_file(HEIST)])
    assert code == cli.EXIT_CONFIG
    assert "No LLM provider configured" in capsys.readouterr().err


def test_synthesize_without_key(isolated_settings, tmp_path):
    code = cli.main(["synthesize", "--character", "hero", "--text", "Run!", "--out", str(tmp_path / "a.mp3")])
    assert code == cli.EXIT_CONFIG


@pytest.mark.parametrize(
    "bad",
    [
        {**HEIST, "characters": ["Max", "Lena"]},
        {**HEIST, "numExchanges": "two"},
        {**HEIST, "characters": [{"name": "Max", "traits": "brave"}, {"name": "Lena"}]},
        {**HEIST, "scenario": 42},
    ],
)
def test_malformed_request_fields_exit_code(request_file, isolated_settings, bad, capsys):
    code = cli.main(["generate", "--request", request_file(bad), "--provider", "echo"])
    assert code == cli.EXIT_INPUT
    assert "ERROR:" in capsys.readouterr().err


def test_null_exchange_count_defaults(request_file, fake_generator):
    code = cli.main(["generate", "--request", request_file({**HEIST, "numExchanges": None})])
    assert code == 0
    assert "with 5 exchanges" in fake_generator.calls[0][0]
