"""Pydantic schemas for user-related API operations."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    """
    Base schema for user data.

    Fields are optional at the schema level; required-field checks are made by
    ``UserService`` so that API and library callers get the same errors.
    """

    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    birthdate: Optional[date] = Field(None, description="Date of birth")
    email: Optional[str] = Field(None, description="Email address, unique across users")


class UserCreate(UserBase):
    """Schema for creating a user. ``id`` must be left empty."""

    id: Optional[int] = Field(None, description="Must be empty; assigned on creation")

    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Emma",
                "last_name": "Johnson",
                "birthdate": "1996-04-12",
                "email": "emma.johnson@domain.com",
            }
        }


class UserUpdate(UserBase):
    """Schema for replacing all mutable fields of a user."""

    pass


class UserResponse(BaseModel):
    """Schema for user API responses."""

    id: int = Field(..., description="User ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    birthdate: date = Field(..., description="Date of birth")
    email: str = Field(..., description="Email address")

    class Config:
        from_attributes = True


class UserSimpleResponse(BaseModel):
    """Schema for the short user listing."""

    id: int
    first_name: str
    last_name: str

    class Config:
        from_attributes = True


class UserEmailResponse(BaseModel):
    """Schema for email search results."""

    id: int
    email: str

    class Config:
        from_attributes = True
