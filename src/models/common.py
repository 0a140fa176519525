"""
Shared response models
"""

from pydantic import BaseModel

class CreatedResponse(BaseModel):
    """Identifier assigned by the store to a newly inserted row"""
    id: int
