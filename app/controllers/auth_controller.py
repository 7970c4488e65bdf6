from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.services.auth.AuthInterface import IAuthService
from app.services.auth.auth_service import AuthService, get_current_user, oauth2_scheme
import app.schemas.user_schema as user_schema
from app.db.database import get_db
from app.models.user import UserRole

router = APIRouter()
auth_service: IAuthService = AuthService()


@router.post("/user/signup", status_code=status.HTTP_201_CREATED, response_model=user_schema.SignupResponse)
async def user_signup(data: user_schema.UserSignup, db: AsyncSession = Depends(get_db)):
    user = await auth_service.signup(data.model_dump(), UserRole.user, db)
    return {"message": "User registered successfully!", "user": user}


@router.post("/hr/signup", status_code=status.HTTP_201_CREATED, response_model=user_schema.SignupResponse)
async def hr_signup(data: user_schema.HrSignup, db: AsyncSession = Depends(get_db)):
    user = await auth_service.signup(data.model_dump(), UserRole.hr, db)
    return {"message": "HR account registered successfully!", "user": user}


@router.post("/login", response_model=user_schema.TokenResponse)
async def login(data: user_schema.UserLogin, db: AsyncSession = Depends(get_db)):
    return await auth_service.login(data.email, data.password, data.role, db)


@router.get("/me", response_model=user_schema.UserPublic)
async def read_current_user(current_user=Depends(get_current_user)):
    """Get current user information"""
    return current_user


@router.post("/logout")
async def logout(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user)
):
    return await auth_service.logout(token, db)
