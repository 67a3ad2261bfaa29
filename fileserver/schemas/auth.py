"""Pydantic schemas for authentication endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request model for user login."""
    login: str
    password: str


class LoginResponse(BaseModel):
    """Response model for user login."""
    model_config = ConfigDict(populate_by_name=True)

    auth_token: str = Field(alias="auth-token")
