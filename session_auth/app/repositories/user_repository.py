from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from session_auth.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (already lower-cased) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateEmailError if the email is taken"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user. Raises DuplicateEmailError if the email is taken"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user"""
        pass

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> List[User]:
        """Users ordered newest first"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of users"""
        pass
