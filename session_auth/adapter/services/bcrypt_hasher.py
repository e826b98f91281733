import asyncio

import bcrypt

from session_auth.app.services.password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation; hashing runs in a worker thread"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        digest = await asyncio.to_thread(
            bcrypt.hashpw, password.encode("utf-8"), bcrypt.gensalt(self.rounds)
        )
        return digest.decode("utf-8")

    async def verify(self, password: str, digest: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, password.encode("utf-8"), digest.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash
            return False
