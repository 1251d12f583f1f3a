"""Category schemas."""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from lifetracer.core.palette import CategoryColor, CategoryIcon, DEFAULT_COLOR


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: CategoryColor = DEFAULT_COLOR
    icon: Optional[CategoryIcon] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """Schema for updating a category (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[CategoryColor] = None
    icon: Optional[CategoryIcon] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("name cannot be blank")
        return value


class Category(CategoryBase):
    id: str
    owner_id: str

    class Config:
        from_attributes = True


class CategoryList(BaseModel):
    items: list[Category]
    total: int
