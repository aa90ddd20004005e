# chef_ai/models/session.py
from pydantic import BaseModel, Field
from typing import List, Optional

from .analysis import AppState, AnalysisResult


class SourceOut(BaseModel):
    uri: str
    title: str


class RecipeOut(BaseModel):
    id: int = Field(..., ge=1)
    name: str
    style: str
    instructions: str


class AnalysisOut(BaseModel):
    ingredients: List[str] = []
    recipes: List[RecipeOut] = []
    sources: Optional[List[SourceOut]] = None

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisOut":
        data = result.to_dict()
        data.pop("error", None)
        return cls(**data)


class SessionSnapshot(BaseModel):
    state: AppState
    has_image: bool = False
    image: Optional[str] = None            # data URL, omitted from JSON responses
    result: Optional[AnalysisOut] = None
    error: Optional[str] = None
