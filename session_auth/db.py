from sqlmodel import SQLModel

# Importing the entities registers their tables on SQLModel.metadata
from session_auth.domain.entities import Session, User

__all__ = ["Session", "User", "create_tables"]


async def create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
