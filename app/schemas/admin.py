# app/schemas/admin.py
from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    """Request body for owner login."""
    email: EmailStr
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "email": "owner@sriragavendreagro.com",
                "password": "SecurePass123!"
            }
        }


class TokenResponse(BaseModel):
    """Response with the admin access token."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    email: str
