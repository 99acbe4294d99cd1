"""
Pydantic schemas for categories.

A category groups products under a unique, case-insensitive name.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CategoryCreate(BaseModel):
    """Schema for creating or replacing a category."""

    name: str = Field(..., description="Unique category name", examples=["Electronics"])
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category name is required")
        return v


class CategoryRead(CategoryCreate):
    """Schema for reading a category."""

    id: int

    model_config = {
        "from_attributes": True,
    }
