# response_parser.py
"""
Turns Gemini's semi-structured reply into an AnalysisResult.

Expected shape (see prompts/recipes_prompt.py):

    Detected Ingredients:
    - Egg
    - Tofu

    Recipe 1: Mapo Tofu
    Cooking Style: Braised
    Instructions: ...
"""
import re
import logging
from typing import Iterable, List, Optional

from ...models.analysis import AnalysisResult, Recipe, Source

logger = logging.getLogger(__name__)

NO_INGREDIENTS_PHRASE = "no food ingredients detected"
NO_INGREDIENTS_MESSAGE = "No clear food ingredients were detected in this image. Please try a different photo!"
DEFAULT_STYLE = "Traditional"

INGREDIENTS_RE = re.compile(r"Detected Ingredients:(.*?)(?=Recipe 1:|\Z)", re.I | re.S)
RECIPE_SPLIT_RE = re.compile(r"Recipe \d:", re.I)
INSTRUCTIONS_PREFIX_RE = re.compile(r"instructions:", re.I)


def parse_ingredients(text: str) -> List[str]:
    m = INGREDIENTS_RE.search(text or "")
    if not m:
        return []
    items = []
    for line in m.group(1).strip().splitlines():
        line = line.strip()
        if line.startswith("- "):
            line = line[2:].strip()
        if line:
            items.append(line)
    return items


def split_recipe_blocks(text: str) -> List[str]:
    """Blocks follow each 'Recipe <digit>:' marker in split order; the digit itself is ignored."""
    return RECIPE_SPLIT_RE.split(text or "")[1:]


def parse_recipe_block(block: str, recipe_id: int) -> Optional[Recipe]:
    """Returns None for a block with nothing to extract."""
    lines = block.strip().splitlines()
    non_empty = [ln.strip() for ln in lines if ln.strip()]
    if not non_empty:
        return None
    name = non_empty[0]

    style = DEFAULT_STYLE
    style_line = next((ln for ln in lines if "cooking style:" in ln.lower()), None)
    if style_line is not None:
        style = style_line.split(":", 1)[1].strip() or DEFAULT_STYLE

    instructions = ""
    idx = next((i for i, ln in enumerate(lines) if ln.lstrip().lower().startswith("instructions:")), -1)
    if idx != -1:
        first = INSTRUCTIONS_PREFIX_RE.sub("", lines[idx], count=1).strip()
        rest = " ".join(ln.strip() for ln in lines[idx + 1:] if ln.strip())
        instructions = f"{first} {rest}".strip()

    return Recipe(id=recipe_id, name=name, style=style, instructions=instructions)


def parse_recipes(text: str) -> List[Recipe]:
    recipes: List[Recipe] = []
    for block in split_recipe_blocks(text):
        recipe = parse_recipe_block(block, len(recipes) + 1)
        if recipe is None:
            logger.debug("skipping empty recipe block")
            continue
        recipes.append(recipe)
    return recipes


def parse_analysis_text(text: str, sources: Optional[Iterable[Source]] = None) -> AnalysisResult:
    """
    Parse the raw reply.

    Args:
        text: raw model reply
        sources: grounding citations to carry through onto the result

    Returns:
        AnalysisResult; `error` is set (and lists are empty) when the model
        reported that the photo has no food ingredients.
    """
    text = text or ""
    if NO_INGREDIENTS_PHRASE in text.lower():
        return AnalysisResult(error=NO_INGREDIENTS_MESSAGE, raw_text=text)

    return AnalysisResult(
        ingredients=tuple(parse_ingredients(text)),
        recipes=tuple(parse_recipes(text)),
        sources=tuple(sources) if sources is not None else None,
        raw_text=text,
    )
