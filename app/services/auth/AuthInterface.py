from abc import ABC, abstractmethod
from app.models.user import UserRole

class IAuthService(ABC):
    @abstractmethod
    async def login(self, email: str, password: str, role: UserRole, db) -> dict:
        pass

    @abstractmethod
    async def signup(self, data: dict, role: UserRole, db):
        pass

    @abstractmethod
    async def logout(self, token: str, db) -> dict:
        pass
