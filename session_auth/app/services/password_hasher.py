from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing capability"""

    @abstractmethod
    async def hash(self, password: str) -> str:
        pass

    @abstractmethod
    async def verify(self, password: str, digest: str) -> bool:
        pass
