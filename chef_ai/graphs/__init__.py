"""
Graphs Module

LangGraph workflows used by the app. Each graph lives in its own subdirectory.
"""

from .recipe_analysis import run_recipe_analysis, build_recipe_analysis_graph, RecipeAnalysisState

__all__ = [
    "run_recipe_analysis",
    "build_recipe_analysis_graph",
    "RecipeAnalysisState"
]
