"""Review form schema."""

from pydantic import BaseModel, Field


class ReviewForm(BaseModel):
    """Fields submitted by the review form on a listing page."""
    rating: int = Field(..., ge=1, le=5)
    body: str = Field(..., min_length=1)

    model_config = {"extra": "ignore", "str_strip_whitespace": True}
