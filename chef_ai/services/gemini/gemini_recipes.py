# gemini_recipes.py
import logging
from typing import List, NamedTuple, Optional
from google.genai import types
from google.genai import errors as genai_errors

from ..errors import ServiceError
from ..shared.gemini.gemini_client import make_client, image_part_from_data_url, extract_text_from_response, extract_grounding_sources
from ...models.analysis import Source
from ...prompts.recipes_prompt import build_recipes_prompt

logger = logging.getLogger(__name__)


class RecipeResponse(NamedTuple):
    text: str
    sources: List[Source]


def grounded_config(temperature: Optional[float] = None) -> types.GenerateContentConfig:
    """Generation config with Google Search grounding enabled."""
    return types.GenerateContentConfig(
        temperature=temperature,
        tools=[types.Tool(google_search=types.GoogleSearch())],
    )


def generate_recipe_text(api_key: Optional[str], model: str, image_data_url: str) -> RecipeResponse:
    """
    Ask Gemini to list the ingredients in the photo and suggest three Chinese recipes.
    Returns:
      RecipeResponse(text=<raw reply>, sources=[Source(uri, title), ...])
    Raises ConfigurationError without a credential, ServiceError on SDK failure or empty reply.
    """
    client = make_client(api_key)
    image_part = image_part_from_data_url(image_data_url)

    parts = [types.Part.from_text(text=build_recipes_prompt()), image_part]
    try:
        resp = client.models.generate_content(
            model=model,
            contents=[types.Content(role="user", parts=parts)],
            config=grounded_config(),
        )
    except genai_errors.APIError as e:
        logger.error("Gemini request failed (code=%s): %s", getattr(e, "code", "?"), e)
        raise ServiceError() from e
    except Exception as e:
        logger.exception("Gemini request raised unexpectedly")
        raise ServiceError() from e

    text = extract_text_from_response(resp)
    if not text.strip():
        raise ServiceError("Received empty response from AI")

    sources = extract_grounding_sources(resp)
    logger.info("Gemini replied with %d chars and %d grounding sources", len(text), len(sources))
    return RecipeResponse(text=text, sources=sources)
