"""
Delete Board Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.organizations.dtos import DeleteResponse
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteBoardUseCase:
    """
    Use case for deleting a board.

    Business Rules:
    - Only owners of the board's organization can delete it
    - A board addressed through another organization is not found
    - Lists, cards and activities go with it through cascading foreign keys
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID, board_id: UUID
    ) -> Result[DeleteResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(
                user_id, board_id, MembershipRole.owner
            )
            if access.is_err():
                return Return.err(access.error)

            if access.value.board.organization_id != organization_id:
                return Return.err(Error("BOARD_NOT_FOUND", "Board not found"))

            await self.uow.boards.delete(board_id)
            await self.uow.commit()

            logger.info(f"Board {board_id} deleted by {user_id}")

            return Return.ok(DeleteResponse(status="deleted"))
