"""
Graph nodes for the recipe analysis workflow.
"""

from .generation_node import generate_recipes
from .parsing_node import parse_reply

__all__ = [
    "generate_recipes",
    "parse_reply"
]
