"""User Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr


class UserBase(BaseModel):
    """Base user schema."""

    username: str
    email: EmailStr


class UserCreate(UserBase):
    """Schema for creating a new user."""

    password: str
    full_name: str | None = None
    phone: str | None = None


class UserResponse(UserBase):
    """Schema for user response."""

    id: int
    created_at: datetime
    is_active: bool
    role: str
    full_name: str | None = None
    phone: str | None = None

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """Schema for updating profile contact details."""

    full_name: str | None = None
    phone: str | None = None


class Token(BaseModel):
    """Schema for JWT token response."""

    access_token: str
    token_type: str


class TokenData(BaseModel):
    """Schema for token payload data."""

    username: str | None = None


class LoginRequest(BaseModel):
    """Schema for login request."""

    username: str
    password: str
