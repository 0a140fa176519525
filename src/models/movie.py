"""
Movie-related Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field

class MovieRequest(BaseModel):
    """Full movie payload accepted by POST and PUT"""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    director: str = Field(..., min_length=1, max_length=255)
    year: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=255)
    duration: int = Field(..., gt=0, strict=True, description="Running time in minutes")

class MovieCreateRequest(MovieRequest):
    pass

class MovieUpdateRequest(MovieRequest):
    pass

class MovieResponse(BaseModel):
    id: int
    title: str
    director: str
    year: str
    color: str
    duration: int
