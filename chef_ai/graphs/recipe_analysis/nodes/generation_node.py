import time

from ....services.errors import ChefAIError
from ....services.gemini import gemini_recipes
from ..state.recipe_analysis_state import RecipeAnalysisState
from ..utils.timing import calculate_ms, log_node_summary


def generate_recipes(state: RecipeAnalysisState) -> RecipeAnalysisState:
    """
    Node that sends the photo to Gemini with search grounding enabled.

    Args:
        state: Current graph state containing the image data URL and credentials

    Returns:
        Updated state with the raw reply text and grounding sources
    """
    t0 = time.perf_counter()

    try:
        resp = gemini_recipes.generate_recipe_text(
            state["api_key"],
            state["model"],
            state["image_data_url"],
        )
    except ChefAIError as e:
        timing_ms = calculate_ms(t0)
        state["timings"]["generate_ms"] = timing_ms
        state["error"] = e.user_message
        state["error_code"] = e.code
        log_node_summary("generate", False, timing_ms, code=e.code)
        return state

    timing_ms = calculate_ms(t0)
    state["timings"]["generate_ms"] = timing_ms
    state["raw_text"] = resp.text
    state["sources"] = list(resp.sources)
    state["debug"]["reply_chars"] = len(resp.text)

    log_node_summary(
        "generate",
        True,
        timing_ms,
        model=state["model"],
        chars=len(resp.text),
        sources=len(resp.sources),
    )
    return state
