from typing import TypedDict, Optional, Dict, Any, List

from ....models.analysis import AnalysisResult, Source


class RecipeAnalysisState(TypedDict):
    """State for the recipe analysis graph workflow."""

    # Input parameters
    image_data_url: str
    api_key: Optional[str]
    model: str

    # Generation results
    raw_text: str
    sources: List[Source]

    # Parsed output
    result: Optional[AnalysisResult]

    # Performance tracking
    timings: Dict[str, float]   # per-node ms
    total_ms: Optional[float]   # total workflow ms

    # Debug and error handling
    debug: Dict[str, Any]
    error: Optional[str]         # user-facing message
    error_code: Optional[str]
