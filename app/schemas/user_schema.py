from datetime import datetime
from pydantic import BaseModel, EmailStr, validator, Field
from typing import List, Optional
from app.models.user import UserRole
import re

PHONE_PATTERN = r'^\+?\d{10,15}$'


class UserPublic(BaseModel):
    user_id: int
    name: str
    email: str
    role: UserRole
    company: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileResponse(UserPublic):
    phone: Optional[str] = None
    image: Optional[str] = None
    skills: Optional[List[str]] = None
    created_at: Optional[datetime] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=255)
    role: UserRole

    @validator('email')
    def validate_email(cls, v):
        return v.lower().strip()


class UserSignup(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str
    password: str = Field(..., min_length=8, max_length=255)

    @validator('name')
    def validate_name(cls, v):
        # Collapse whitespace and drop markup characters
        sanitized = re.sub(r'[<>]', '', v.strip())
        sanitized = re.sub(r'\s+', ' ', sanitized)
        if len(sanitized) < 2:
            raise ValueError('Name must be at least 2 characters long')
        return sanitized

    @validator('email')
    def validate_email(cls, v):
        return v.lower().strip()

    @validator('phone')
    def validate_phone(cls, v):
        if not re.match(PHONE_PATTERN, v.strip()):
            raise ValueError('Invalid phone number format (10-15 digits, optional +)')
        return v.strip()


class HrSignup(UserSignup):
    company: str = Field(..., min_length=2, max_length=200)

    @validator('company')
    def validate_company(cls, v):
        if len(v.strip()) < 2:
            raise ValueError('Company name must be at least 2 characters long')
        return v.strip()


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserPublic


class SignupResponse(BaseModel):
    message: str
    user: UserPublic


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = None
