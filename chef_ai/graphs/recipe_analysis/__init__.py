"""
Recipe Analysis Graph Module

Two-stage LangGraph workflow for one photo:
1. generate - ask Gemini (with search grounding) for ingredients + recipes
2. parse - turn the reply text into an AnalysisResult
"""

from .recipe_analysis_graph import run_recipe_analysis, build_recipe_analysis_graph
from .state.recipe_analysis_state import RecipeAnalysisState

__all__ = [
    "run_recipe_analysis",
    "build_recipe_analysis_graph",
    "RecipeAnalysisState"
]
