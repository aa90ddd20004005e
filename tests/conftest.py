"""
Shared fixtures: Flask app/client built with TestingConfig, sample replies and images.
"""

import io

import pytest
from PIL import Image

from chef_ai import create_app
from chef_ai.config.settings import TestingConfig
from chef_ai.models.analysis import Source
from chef_ai.services.gemini.gemini_recipes import RecipeResponse


WELL_FORMED_REPLY = (
    "Detected Ingredients:\n"
    "- Egg\n"
    "- Tofu\n"
    "\n"
    "Recipe 1: Mapo Tofu\n"
    "Cooking Style: Braised\n"
    "Instructions: Cook it well.\n"
    "\n"
    "Recipe 2: Egg Drop Soup\n"
    "Cooking Style: Soup\n"
    "Instructions: Bring the stock to a boil.\n"
    "Drizzle in the beaten egg.\n"
    "\n"
    "Recipe 3: Tofu and Egg Stir-Fry\n"
    "Cooking Style: Stir-fry\n"
    "Instructions: Fry the tofu, then scramble in the egg.\n"
)


@pytest.fixture
def reply_text():
    return WELL_FORMED_REPLY


@pytest.fixture
def recipe_response():
    return RecipeResponse(
        text=WELL_FORMED_REPLY,
        sources=[Source(uri="https://example.com/mapo-tofu", title="Mapo Tofu - Example")],
    )


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
