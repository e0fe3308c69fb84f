"""Registration and login form schemas."""

from pydantic import BaseModel, EmailStr, Field


class RegisterForm(BaseModel):
    """Fields submitted by the registration form."""
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)

    model_config = {"extra": "ignore"}


class LoginForm(BaseModel):
    """Fields submitted by the login form."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = {"extra": "ignore"}
