"""
User-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """Incoming user payload. Presence and format are checked by utils.validation."""
    id: Optional[int] = Field(None, description="Ignored on input; assigned by the store")
    name: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    id: Optional[int] = None
    name: str
    email: str
