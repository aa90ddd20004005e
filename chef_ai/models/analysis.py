from enum import Enum
from typing import Optional, Tuple, Dict, Any
from dataclasses import dataclass, field, asdict


class AppState(str, Enum):
    """What the page is currently showing"""
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Source:
    """Web citation reported by search grounding"""
    uri: str
    title: str


@dataclass(frozen=True)
class Recipe:
    """One recipe card; id is the 1-based position among parsed recipes"""
    id: int
    name: str
    style: str
    instructions: str


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis attempt"""
    ingredients: Tuple[str, ...] = ()
    recipes: Tuple[Recipe, ...] = ()
    sources: Optional[Tuple[Source, ...]] = None
    error: Optional[str] = None

    # Misc
    raw_text: Optional[str] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("raw_text", None)
        data["ingredients"] = list(self.ingredients)
        data["recipes"] = [asdict(r) for r in self.recipes]
        data["sources"] = [asdict(s) for s in self.sources] if self.sources is not None else None
        return data
