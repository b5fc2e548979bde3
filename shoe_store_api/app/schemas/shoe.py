"""
Pydantic schemas for shoe records.

``ShoePayload`` is the caller-supplied body for creating and updating
a shoe; it carries no id, rating or timestamps.  ``Shoe`` is the
stored record.  Attribute names are snake_case while the JSON wire
format keeps the camelCase names (``shoeURL``, ``createdAt``,
``updatedAt``); input accepts either form.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


INT16_MIN = -(2 ** 15)
INT16_MAX = 2 ** 15 - 1


class ShoeBase(BaseModel):
    """Fields shared by payloads and stored records."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Display name, matched by keyword search")
    size: str = Field(..., description="Shoe size label")
    shoe_url: str = Field(..., alias="shoeURL", description="Image or product URL")
    price: int = Field(..., ge=INT16_MIN, le=INT16_MAX, description="Price; must be greater than 0")
    quantity: str = Field(..., description="Stock quantity; must not be blank")


class ShoePayload(ShoeBase):
    """Schema for creating or updating a shoe."""
    pass


class Shoe(ShoeBase):
    """Schema for a stored shoe record."""

    id: str
    rating: float = Field(1.0, description="Aggregated rating in [0, 4]")
    created_at: int = Field(..., alias="createdAt", ge=0, description="Creation time, ns since epoch")
    updated_at: Optional[int] = Field(None, alias="updatedAt", ge=0, description="Last update time, absent until first update")


class RatePayload(BaseModel):
    """Schema for rating a shoe."""

    rate: float = Field(..., description="Rating value from 0 to 4")
