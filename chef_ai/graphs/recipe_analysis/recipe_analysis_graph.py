import time
import logging
from typing import Optional

from langgraph.graph import StateGraph, END

from .state.recipe_analysis_state import RecipeAnalysisState
from .nodes.generation_node import generate_recipes
from .nodes.parsing_node import parse_reply
from .utils.timing import log_pipeline_summary

logger = logging.getLogger(__name__)


def _after_generate(state: RecipeAnalysisState) -> str:
    return "end" if state.get("error") else "parse"


def build_recipe_analysis_graph():
    """
    Build the recipe analysis graph:
    1. generate - Gemini call with search grounding
    2. parse - extract ingredients and recipe cards (skipped when generation failed)

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(RecipeAnalysisState)

    workflow.add_node("generate", generate_recipes)
    workflow.add_node("parse", parse_reply)

    workflow.set_entry_point("generate")
    workflow.add_conditional_edges("generate", _after_generate, {"parse": "parse", "end": END})
    workflow.add_edge("parse", END)

    return workflow.compile()


def run_recipe_analysis(image_data_url: str, api_key: Optional[str], model: str) -> RecipeAnalysisState:
    """
    Run the complete recipe analysis workflow.

    Args:
        image_data_url: photo as a data URL
        api_key: Gemini API key (validated by the client)
        model: Gemini model name

    Returns:
        Final state; `result` is set on success or content error, `error` on any failure
    """
    initial_state: RecipeAnalysisState = {
        "image_data_url": image_data_url,
        "api_key": api_key,
        "model": model,

        "raw_text": "",
        "sources": [],

        "result": None,

        "timings": {},
        "total_ms": None,

        "debug": {},
        "error": None,
        "error_code": None,
    }

    t0_total = time.perf_counter()
    graph = build_recipe_analysis_graph()
    result = graph.invoke(initial_state)
    result["total_ms"] = round((time.perf_counter() - t0_total) * 1000.0, 2)

    log_pipeline_summary(result["timings"], result["total_ms"])

    return result
