import time

from ....services.parsing.response_parser import parse_analysis_text
from ..state.recipe_analysis_state import RecipeAnalysisState
from ..utils.timing import calculate_ms, log_node_summary


def parse_reply(state: RecipeAnalysisState) -> RecipeAnalysisState:
    """Node that turns the reply text into an AnalysisResult."""
    t0 = time.perf_counter()

    result = parse_analysis_text(state["raw_text"], state.get("sources") or [])
    state["result"] = result

    timing_ms = calculate_ms(t0)
    state["timings"]["parse_ms"] = timing_ms

    if result.error:
        state["error"] = result.error
        state["error_code"] = "no_ingredients"
        log_node_summary("parse", False, timing_ms, code="no_ingredients")
        return state

    names = ", ".join(r.name for r in result.recipes)
    log_node_summary(
        "parse",
        True,
        timing_ms,
        ingredients=len(result.ingredients),
        recipes=f"[{names}]",
    )
    return state
