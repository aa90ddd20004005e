"""
Tests for the command-line entry point.
"""

import json
from unittest.mock import patch

from chef_ai.cli import main
from chef_ai.services.gemini.gemini_recipes import RecipeResponse

GENERATE = "chef_ai.services.gemini.gemini_recipes.generate_recipe_text"


class TestCli:
    def test_prints_ingredients_recipes_and_sources(self, tmp_path, png_bytes, recipe_response, capsys, monkeypatch):
        monkeypatch.setenv("API_KEY", "cli-key")
        photo = tmp_path / "fridge.png"
        photo.write_bytes(png_bytes)

        with patch(GENERATE, return_value=recipe_response) as gen:
            code = main([str(photo), "--model", "gemini-cli"])

        assert code == 0
        assert gen.call_args.args[0] == "cli-key"
        assert gen.call_args.args[1] == "gemini-cli"
        out = capsys.readouterr().out
        assert "Egg, Tofu" in out
        assert "Recipe 1: Mapo Tofu  [Braised]" in out
        assert "https://example.com/mapo-tofu" in out

    def test_json_output(self, tmp_path, png_bytes, recipe_response, capsys, monkeypatch):
        monkeypatch.setenv("API_KEY", "cli-key")
        photo = tmp_path / "fridge.png"
        photo.write_bytes(png_bytes)

        with patch(GENERATE, return_value=recipe_response):
            code = main([str(photo), "--json"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["state"] == "SUCCESS"
        assert data["result"]["recipes"][2]["id"] == 3

    def test_error_state_exits_nonzero(self, tmp_path, png_bytes, capsys, monkeypatch):
        monkeypatch.setenv("API_KEY", "cli-key")
        photo = tmp_path / "cat.png"
        photo.write_bytes(png_bytes)

        with patch(GENERATE, return_value=RecipeResponse("No food ingredients detected.", [])):
            code = main([str(photo)])

        assert code == 1
        assert "try a different photo" in capsys.readouterr().out

    def test_unreadable_image(self, tmp_path, capsys):
        bogus = tmp_path / "notes.png"
        bogus.write_bytes(b"plain text")
        assert main([str(bogus)]) == 1
        assert "not a readable image" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.jpg")]) == 1
