from typing import Iterable

from flask import render_template_string
from markupsafe import Markup

from .templates import INDEX_HTML, RECIPE_CARD_HTML
from ..models.session import RecipeOut, SessionSnapshot


def render_recipe_card(recipe: RecipeOut) -> str:
    """One recipe card: name, style badge, method text"""
    return render_template_string(RECIPE_CARD_HTML, recipe=recipe)


def render_recipe_cards(recipes: Iterable[RecipeOut]) -> Markup:
    return Markup("".join(render_recipe_card(r) for r in recipes))


def render_index(snap: SessionSnapshot) -> str:
    cards = render_recipe_cards(snap.result.recipes) if snap.result else Markup("")
    return render_template_string(INDEX_HTML, snap=snap, recipe_cards=cards)
