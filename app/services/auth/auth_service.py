import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.user import User, UserRole
from app.core.security import verify_password, get_password_hash, create_access_token, decode_token
from app.core.exceptions import UnauthorizedError, ConflictError
from app.repositories.user_repo import (
    get_user_by_email, get_user_by_id, create_user, is_token_revoked, revoke_token
)
from app.db.database import get_db
from app.services.auth.AuthInterface import IAuthService

logger = logging.getLogger(__name__)

# Missing credentials resolve to an anonymous caller instead of failing here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


class AuthService(IAuthService):
    async def login(self, email: str, password: str, role: UserRole, db: AsyncSession) -> dict:
        user = await get_user_by_email(db, email)
        # Social-login accounts carry no password hash
        if not user or not user.hashed_password or not verify_password(password, user.hashed_password):
            logger.info(f"Login failed for {email}")
            raise UnauthorizedError("Invalid credentials")
        if user.role != role:
            logger.warning(f"Login for {email} with role {role.value}, account role is {user.role.value}")
            raise UnauthorizedError(
                f"Unauthorized role: Expected {role.value}, got {user.role.value}")

        token = create_access_token({
            "sub": str(user.user_id),
            "email": user.email,
            "role": user.role.value,
        })
        return {"token": token, "token_type": "bearer", "user": user}

    async def signup(self, data: dict, role: UserRole, db: AsyncSession) -> User:
        existing = await get_user_by_email(db, data["email"])
        if existing:
            raise ConflictError("A user with this email already exists!")

        new_user = await create_user(
            db,
            name=data["name"],
            email=data["email"],
            hashed_password=get_password_hash(data["password"]),
            role=role,
            phone=data.get("phone"),
            company=data.get("company") if role == UserRole.hr else None,
        )
        logger.info(f"Created {role.value} account {new_user.user_id}")
        return new_user

    async def logout(self, token: str, db: AsyncSession) -> dict:
        payload = decode_token(token) if token else None
        jti = payload.get("jti") if payload else None
        if jti and not await is_token_revoked(db, jti):
            await revoke_token(db, jti)
        return {"message": "Successfully logged out."}


async def resolve_caller(token: Optional[str], db: AsyncSession) -> Optional[User]:
    """Resolve the account behind a bearer token, or None for an anonymous caller."""
    if not token:
        return None
    payload = decode_token(token)
    if not payload or "sub" not in payload:
        return None
    jti = payload.get("jti")
    if jti and await is_token_revoked(db, jti):
        return None
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return None
    return await get_user_by_id(db, user_id)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db)
) -> User:
    user = await resolve_caller(token, db)
    if not user:
        raise UnauthorizedError("Invalid authentication credentials")
    return user


def require_role(role: UserRole):
    """Dependency factory rejecting callers that do not hold the given role."""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role:
            logger.warning(f"User {current_user.user_id} with role {current_user.role.value} denied {role.value} access")
            raise UnauthorizedError(f"Unauthorized: {role.value} access required.")
        return current_user
    return role_checker


hr_required = require_role(UserRole.hr)
candidate_required = require_role(UserRole.user)
