"""
Utility functions for the recipe analysis graph.
"""

from .timing import calculate_ms, log_node_summary, log_pipeline_summary

__all__ = [
    "calculate_ms",
    "log_node_summary",
    "log_pipeline_summary"
]
