"""Pydantic models for trainers and the availability check response."""

from typing import List, Optional

from pydantic import BaseModel, Field


class TrainerCreate(BaseModel):
    """Schema for registering a trainer; at least one specialization is required."""

    name: Optional[str] = Field(None, examples=["Sam Lee"])
    email: Optional[str] = Field(None, examples=["sam@example.com"])
    specializations: Optional[List[str]] = Field(None, examples=[["yoga", "pilates"]])


class TrainerUpdate(BaseModel):
    """Patch for a trainer; only provided fields are overwritten."""

    name: Optional[str] = None
    email: Optional[str] = None
    specializations: Optional[List[str]] = None


class TrainerRead(BaseModel):
    id: str
    name: str
    email: str
    specializations: List[str]
    created_at: int
    updated_at: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }


class Availability(BaseModel):
    trainer_id: str
    start_time: str
    end_time: str
    available: bool
