"""Pydantic schemas for form validation."""

from hotelbook.schemas.common import FieldError, FormResult, validate_form
from hotelbook.schemas.account import RegisterForm, LoginForm
from hotelbook.schemas.listing import ListingForm
from hotelbook.schemas.review import ReviewForm

__all__ = [
    "FieldError",
    "FormResult",
    "validate_form",
    "RegisterForm",
    "LoginForm",
    "ListingForm",
    "ReviewForm",
]
