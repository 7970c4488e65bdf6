from typing import Any, Dict, List, Optional
from sqlalchemy.future import select
from app.models.user import User, UserRole
from app.models.revoked_token import RevokedToken

async def get_user_by_email(db, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()

async def get_user_by_id(db, user_id: int) -> Optional[User]:
    """Get user by user_id"""
    result = await db.execute(select(User).where(User.user_id == user_id))
    return result.scalar_one_or_none()

async def create_user(db, name: str, email: str, hashed_password: Optional[str], role: UserRole,
                      phone: Optional[str] = None, company: Optional[str] = None) -> User:
    """Create a new account and commit to DB."""
    new_user = User(
        name=name,
        email=email,
        phone=phone,
        company=company,
        role=role,
        hashed_password=hashed_password
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    return new_user

async def update_user(db, user: User, update_data: Dict[str, Any]) -> User:
    for key, value in update_data.items():
        setattr(user, key, value)
    await db.commit()
    await db.refresh(user)
    return user

async def set_user_skills(db, user_id: int, skills: List[str]) -> Optional[User]:
    user = await get_user_by_id(db, user_id)
    if not user:
        return None
    return await update_user(db, user, {"skills": skills})

async def is_token_revoked(db, jti: str) -> bool:
    result = await db.execute(select(RevokedToken).where(RevokedToken.jti == jti))
    return result.scalar_one_or_none() is not None

async def revoke_token(db, jti: str) -> None:
    db.add(RevokedToken(jti=jti))
    await db.commit()
