"""
Tests for the recipebox command line interface.
"""

import json

import pytest

from recipebox import cli
from recipebox.const import ENV_FETCH_TIMEOUT
from recipebox.models.recipe import ParsedRecipe


def test_markdown_command(tmp_path, capsys, grok_markdown):
    path = tmp_path / "banana.md"
    path.write_text(grok_markdown, encoding="utf-8")

    assert cli.main(["markdown", str(path)]) == 0

    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert output["recipe"]["title"] == "Classic Banana Bread"
    assert output["error"] is None
    assert "warning: Detected subheading" in captured.err


def test_markdown_command_failure(tmp_path, capsys):
    path = tmp_path / "empty.md"
    path.write_text("- 1 cup flour\n", encoding="utf-8")

    assert cli.main(["markdown", str(path)]) == 1
    assert json.loads(capsys.readouterr().out)["error"] == "Could not detect recipe title"


def test_markdown_command_missing_file(tmp_path):
    assert cli.main(["markdown", str(tmp_path / "nope.md")]) == 1


def test_groceries_command(tmp_path, capsys, selections):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(selections), encoding="utf-8")

    assert cli.main(["groceries", str(path)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert list(output) == ["Dairy & Eggs", "Pantry"]
    assert output["Pantry"][0]["amount"] == "5.5"


@pytest.mark.parametrize("content", ["not json", '{"title": "x"}', '[{"ingredients": []}]'])
def test_groceries_command_bad_input(tmp_path, content):
    path = tmp_path / "recipes.json"
    path.write_text(content, encoding="utf-8")
    assert cli.main(["groceries", str(path)]) == 1


def test_url_command(monkeypatch, capsys):
    seen = {}

    class FakeExtractor:
        def __init__(self, timeout):
            seen["timeout"] = timeout

        def extract_from_url(self, url):
            return ParsedRecipe(title="Fake Pie", instructions=["Bake."])

    monkeypatch.setattr(cli, "RecipeExtractor", FakeExtractor)
    monkeypatch.setenv(ENV_FETCH_TIMEOUT, "12")

    assert cli.main(["url", "https://example.com/pie"]) == 0
    assert seen["timeout"] == 12.0
    assert json.loads(capsys.readouterr().out)["title"] == "Fake Pie"


def test_url_command_timeout_flag_wins(monkeypatch, capsys):
    seen = {}

    class FakeExtractor:
        def __init__(self, timeout):
            seen["timeout"] = timeout

        def extract_from_url(self, url):
            return None

    monkeypatch.setattr(cli, "RecipeExtractor", FakeExtractor)
    monkeypatch.setenv(ENV_FETCH_TIMEOUT, "12")

    assert cli.main(["url", "https://example.com/pie", "--timeout", "3"]) == 1
    assert seen["timeout"] == 3.0


def test_url_command_rejects_internal_address():
    assert cli.main(["url", "http://127.0.0.1/recipe"]) == 1


def test_bad_timeout_env(monkeypatch):
    monkeypatch.setenv(ENV_FETCH_TIMEOUT, "soon")
    with pytest.raises(SystemExit):
        cli.main(["url", "https://example.com/pie"])
