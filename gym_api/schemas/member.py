"""
Pydantic models for gym members.

Create payload fields are optional at the schema level so that a
missing field reaches the validation layer and is reported the same
way as an empty one.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MemberCreate(BaseModel):
    """Schema for registering a member."""

    name: Optional[str] = Field(None, examples=["Jo Smith"])
    email: Optional[str] = Field(None, examples=["jo@example.com"])
    join_date: Optional[str] = Field(None, examples=["2024-01-01"])
    membership_type: Optional[str] = Field(None, examples=["gold"])


class MemberUpdate(BaseModel):
    """Patch for a member; only provided fields are overwritten."""

    name: Optional[str] = None
    email: Optional[str] = None
    join_date: Optional[str] = None
    membership_type: Optional[str] = None


class MemberRead(BaseModel):
    id: str
    name: str
    email: str
    join_date: str
    membership_type: str
    created_at: int
    updated_at: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }


class FieldValue(BaseModel):
    """Body of the single-field member updates (membership type, email, name)."""

    value: Optional[str] = Field(None, examples=["platinum"])
