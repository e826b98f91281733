from typing import Optional

from session_auth.adapter.repositories.in_memory import (
    InMemorySessionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from session_auth.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """UnitOfWork over an InMemoryStore; writes are visible immediately"""

    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store if store is not None else InMemoryStore()
        self.committed = 0

    async def __aenter__(self):
        self.users = InMemoryUserRepository(self.store)
        self.sessions = InMemorySessionRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self.committed += 1

    async def rollback(self):
        pass
