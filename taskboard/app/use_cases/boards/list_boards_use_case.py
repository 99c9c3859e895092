from typing import List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.libs.result import Result, Return

from .dtos import BoardResponse


class ListBoardsUseCase:
    """Boards of an organization, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID
    ) -> Result[List[BoardResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(user_id, organization_id)
            if access.is_err():
                return Return.err(access.error)

            boards = await self.uow.boards.get_by_organization_id(organization_id)
            return Return.ok([BoardResponse.model_validate(board) for board in boards])
