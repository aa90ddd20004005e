import time
import logging
from typing import Dict

logger = logging.getLogger(__name__)


def calculate_ms(t0: float) -> float:
    """Calculate milliseconds elapsed since t0."""
    return round((time.perf_counter() - t0) * 1000.0, 2)


def log_node_summary(node_name: str, success: bool, timing_ms: float, **kwargs):
    """Log a standardized node execution summary."""
    status = "✅" if success else "❌"
    details = " ".join([f"{k}={v}" for k, v in kwargs.items()])
    logger.info(f"[{node_name}] {status} {details} took {timing_ms} ms")


def log_pipeline_summary(timings: Dict[str, float], total_ms: float):
    """Log a summary of the entire pipeline execution."""
    timing_details = ", ".join([
        f"{node} {timings.get(node + '_ms', '?')} ms"
        for node in ["generate", "parse"]
    ])
    logger.info(f"[pipeline] ⏱ total {total_ms} ms ({timing_details})")
