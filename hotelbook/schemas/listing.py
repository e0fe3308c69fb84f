"""Listing form schema."""

from pydantic import BaseModel, Field


class ListingForm(BaseModel):
    """Fields submitted by the new/edit listing forms."""
    title: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    image: str = Field(..., min_length=1, max_length=500)
    location: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)

    model_config = {"extra": "ignore", "str_strip_whitespace": True}
