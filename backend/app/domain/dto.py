from datetime import date
from pydantic import BaseModel, Field
from typing import Optional


class MovieDto(BaseModel):
    """Movie as exchanged with API callers."""
    id: Optional[int] = None
    title: str
    description: str = ""
    release_date: date = Field(..., description="Release date (YYYY-MM-DD)")


class HealthResponse(BaseModel):
    status: str
