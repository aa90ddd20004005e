# recipes_prompt.py
"""
Prompt for ingredient detection + Chinese recipe suggestions.
The section headers here are the ones the response parser looks for.
"""

NO_INGREDIENTS_SENTINEL = "No food ingredients detected."

STYLE_GUIDE = (
    "Aim for 3 distinct styles: e.g., one stir-fry, one braised/stewed, and one soup/steamed.\n"
)

RESPONSE_FORMAT = (
    "Format your response exactly like this structure:\n"
    "Detected Ingredients:\n"
    "- [Ingredient 1]\n"
    "- [Ingredient 2]\n"
    "\n"
    "Recipe 1: [Name]\n"
    "Cooking Style: [Style]\n"
    "Instructions: [Provide the steps here]\n"
    "\n"
    "Recipe 2: [Name]\n"
    "Cooking Style: [Style]\n"
    "Instructions: [Provide the steps here]\n"
    "\n"
    "Recipe 3: [Name]\n"
    "Cooking Style: [Style]\n"
    "Instructions: [Provide the steps here]\n"
)


def build_recipes_prompt() -> str:
    """
    Build the complete analysis prompt.

    Returns:
        Complete prompt string
    """
    prompt = (
        "Analyze the uploaded image and identify all food ingredients shown.\n"
        "Based on the detected ingredients, propose 3 authentic Chinese dishes.\n"
        + STYLE_GUIDE
        + "\n"
        + f'If the image does not contain clear food ingredients, start your response with "{NO_INGREDIENTS_SENTINEL}"\n'
        + "\n"
        + RESPONSE_FORMAT
        + "\n"
        + "Use your search grounding capability to ensure these are authentic Chinese recipes.\n"
    )
    return prompt
