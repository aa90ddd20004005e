"""
Tests for the Gemini client helpers and the recipe request.

No test reaches the network: the genai client is replaced with a Mock.
"""

import base64
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest

from chef_ai.models.analysis import Source
from chef_ai.services.errors import ConfigurationError, ServiceError
from chef_ai.services.gemini.gemini_recipes import generate_recipe_text
from chef_ai.services.parsing.response_parser import parse_analysis_text
from chef_ai.services.shared.gemini.gemini_client import (
    decode_data_url,
    encode_data_url,
    extract_grounding_sources,
    extract_text_from_response,
    make_client,
)


def _response(text="", chunks=(), parts=None):
    parts = parts if parts is not None else ([SimpleNamespace(text=text)] if text else [])
    cand = SimpleNamespace(
        content=SimpleNamespace(parts=parts),
        grounding_metadata=SimpleNamespace(grounding_chunks=list(chunks)),
    )
    return SimpleNamespace(candidates=[cand], text=text or None)


def _chunk(uri, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


class TestMakeClient:
    def test_missing_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc:
            make_client(None)
        assert "API Key is missing" in exc.value.user_message

    def test_empty_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            make_client("")

    def test_key_is_passed_to_sdk(self):
        with patch("chef_ai.services.shared.gemini.gemini_client.genai.Client") as mock_client:
            make_client("secret")
        mock_client.assert_called_once_with(api_key="secret")


class TestDataUrls:
    def test_decode_png_data_url(self, png_bytes):
        data, mime = decode_data_url(encode_data_url(png_bytes, "image/png"))
        assert data == png_bytes
        assert mime == "image/png"

    def test_bare_base64_defaults_to_jpeg(self):
        data, mime = decode_data_url(base64.b64encode(b"jpegbytes").decode())
        assert data == b"jpegbytes"
        assert mime == "image/jpeg"

    def test_missing_mime_defaults_to_jpeg(self):
        _, mime = decode_data_url("data:;base64," + base64.b64encode(b"x").decode())
        assert mime == "image/jpeg"

    @pytest.mark.parametrize("bad", ["", "   ", "data:image/png;base64,@@@not-base64@@@", "data:image/png,rawtext"])
    def test_undecodable_input_is_service_error(self, bad):
        with pytest.raises(ServiceError):
            decode_data_url(bad)


class TestResponseExtraction:
    def test_text_parts_are_concatenated(self):
        resp = _response(parts=[SimpleNamespace(text="Detected "), SimpleNamespace(text="Ingredients:")])
        assert extract_text_from_response(resp) == "Detected Ingredients:"

    def test_whitespace_only_parts_keep_line_breaks(self):
        resp = _response(parts=[
            SimpleNamespace(text="Recipe 1: Congee"),
            SimpleNamespace(text="\n"),
            SimpleNamespace(text="Cooking Style: Boiled"),
        ])
        text = extract_text_from_response(resp)
        assert text == "Recipe 1: Congee\nCooking Style: Boiled"
        recipe = parse_analysis_text(text).recipes[0]
        assert recipe.name == "Congee"
        assert recipe.style == "Boiled"

    def test_thought_parts_are_skipped(self):
        resp = _response(parts=[
            SimpleNamespace(text="Let me look at the photo.", thought=True),
            SimpleNamespace(text="Detected Ingredients:\n- Leek"),
        ])
        assert extract_text_from_response(resp) == "Detected Ingredients:\n- Leek"

    def test_falls_back_to_top_level_text(self):
        resp = SimpleNamespace(candidates=[], text="hello")
        assert extract_text_from_response(resp) == "hello"

    def test_no_text_returns_empty_string(self):
        assert extract_text_from_response(SimpleNamespace(candidates=None, text=None)) == ""

    def test_sources_are_deduplicated_and_titled(self):
        resp = _response("x", chunks=[
            _chunk("https://a.example/recipe", "Recipe A"),
            _chunk("https://a.example/recipe", "Recipe A again"),
            _chunk("https://b.example/"),
            SimpleNamespace(web=None),
        ])
        assert extract_grounding_sources(resp) == [
            Source(uri="https://a.example/recipe", title="Recipe A"),
            Source(uri="https://b.example/", title="https://b.example/"),
        ]

    def test_missing_grounding_metadata_gives_no_sources(self):
        resp = SimpleNamespace(candidates=[SimpleNamespace(content=None, grounding_metadata=None)])
        assert extract_grounding_sources(resp) == []


class TestGenerateRecipeText:
    """Test the single grounded generate_content call."""

    def _client(self, response=None, side_effect=None):
        client = Mock()
        client.models.generate_content.return_value = response
        client.models.generate_content.side_effect = side_effect
        return client

    def test_request_has_prompt_image_and_search_tool(self, png_bytes, reply_text):
        client = self._client(_response(reply_text, chunks=[_chunk("https://a.example", "A")]))
        with patch("chef_ai.services.gemini.gemini_recipes.make_client", return_value=client) as mk:
            resp = generate_recipe_text("key", "gemini-test", encode_data_url(png_bytes, "image/png"))

        mk.assert_called_once_with("key")
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        parts = kwargs["contents"][0].parts
        assert "Detected Ingredients:" in parts[0].text
        assert "No food ingredients detected." in parts[0].text
        assert parts[1].inline_data.mime_type == "image/png"
        assert parts[1].inline_data.data == png_bytes
        assert kwargs["config"].tools[0].google_search is not None

        assert resp.text == reply_text
        assert resp.sources == [Source(uri="https://a.example", title="A")]

    def test_empty_reply_is_service_error(self, png_bytes):
        client = self._client(_response(""))
        with patch("chef_ai.services.gemini.gemini_recipes.make_client", return_value=client):
            with pytest.raises(ServiceError) as exc:
                generate_recipe_text("key", "m", encode_data_url(png_bytes, "image/png"))
        assert exc.value.user_message == "Received empty response from AI"

    def test_sdk_failure_is_generic_service_error(self, png_bytes):
        client = self._client(side_effect=ConnectionError("network down"))
        with patch("chef_ai.services.gemini.gemini_recipes.make_client", return_value=client):
            with pytest.raises(ServiceError) as exc:
                generate_recipe_text("key", "m", encode_data_url(png_bytes, "image/png"))
        assert "Please try again" in exc.value.user_message

    def test_missing_key_fails_before_any_request(self, png_bytes):
        with patch("chef_ai.services.shared.gemini.gemini_client.genai.Client") as mock_client:
            with pytest.raises(ConfigurationError):
                generate_recipe_text(None, "m", encode_data_url(png_bytes, "image/png"))
        mock_client.assert_not_called()
