"""
Pydantic models for gym classes.

``start_time`` and ``end_time`` are opaque strings; they are compared
as text by the query layer and never parsed as dates.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GymClassCreate(BaseModel):
    """Schema for scheduling a class. ``description`` may be omitted."""

    name: Optional[str] = Field(None, examples=["Morning Yoga"])
    description: str = Field("", examples=["Vinyasa flow for all levels"])
    start_time: Optional[str] = Field(None, examples=["09:00"])
    end_time: Optional[str] = Field(None, examples=["10:00"])
    trainer_id: Optional[str] = Field(None, description="Trainer identifier; not checked for existence")
    capacity: Optional[int] = Field(None, examples=[20])


class GymClassUpdate(BaseModel):
    """Patch for a class; only provided fields are overwritten."""

    name: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    trainer_id: Optional[str] = None
    capacity: Optional[int] = None


class GymClassRead(BaseModel):
    id: str
    name: str
    description: str
    start_time: str
    end_time: str
    trainer_id: str
    capacity: int
    created_at: int
    updated_at: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
