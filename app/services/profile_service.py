import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import ConflictError, ValidationError
from app.core.security import get_password_hash, verify_password
from app.core.validators import InputValidator
from app.models.user import User
from app.repositories.user_repo import get_user_by_email, update_user
from app.schemas.user_schema import ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    async def update_profile(self, user: User, data: ProfileUpdate, db: AsyncSession) -> User:
        """Apply the fields present in ``data``; a password change needs the current password."""
        changes = {}
        if data.name is not None:
            changes["name"] = InputValidator.validate_name(data.name)
        if data.phone is not None:
            changes["phone"] = InputValidator.validate_phone(data.phone) if data.phone.strip() else None
        if data.email is not None:
            email = InputValidator.validate_email(data.email)
            if email != user.email:
                other = await get_user_by_email(db, email)
                if other and other.user_id != user.user_id:
                    raise ConflictError("A user with this email already exists!")
                changes["email"] = email

        if data.new_password:
            if not data.current_password:
                raise ValidationError("Current password is required to change it.", fields=["current_password"])
            if not user.hashed_password or not verify_password(data.current_password, user.hashed_password):
                raise ValidationError("Current password is incorrect.", fields=["current_password"])
            changes["hashed_password"] = get_password_hash(
                InputValidator.validate_password(data.new_password, field="new_password"))

        if not changes:
            return user
        updated = await update_user(db, user, changes)
        logger.info(f"Profile updated for user {user.user_id}: {sorted(k for k in changes if k != 'hashed_password')}")
        return updated


profile_service = ProfileService()

def get_profile_service() -> ProfileService:
    return profile_service
