import math

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.libs.result import Result, Return
from .dtos import PageMeta, UserPage, UserProfile


class ListUsersUseCase:
    """Paginated user listing, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int = 1, limit: int = 10) -> Result[UserPage]:
        offset = (page - 1) * limit

        async with self.uow:
            users = await self.uow.users.list_page(offset, limit)
            total = await self.uow.users.count()

            return Return.ok(
                UserPage(
                    data=[UserProfile.from_user(u) for u in users],
                    meta=PageMeta(
                        total=total,
                        page=page,
                        limit=limit,
                        total_pages=math.ceil(total / limit),
                    ),
                )
            )
