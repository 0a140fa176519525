"""
User-related Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field

class UserRequest(BaseModel):
    """Full user payload accepted by POST and PUT"""
    model_config = ConfigDict(str_strip_whitespace=True)

    firstname: str = Field(..., min_length=1, max_length=255)
    lastname: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    language: str = Field(..., min_length=1, max_length=255)

class UserCreateRequest(UserRequest):
    pass

class UserUpdateRequest(UserRequest):
    pass

class UserResponse(BaseModel):
    id: int
    firstname: str
    lastname: str
    email: str
    city: str
    language: str
