"""
Create Board Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.validation import clean_required_text
from taskboard.domain.entities import DEFAULT_BOARD_COLOR, Board
from taskboard.libs.result import Error, Result, Return

from .dtos import BoardResponse

logger = logging.getLogger(__name__)


class CreateBoardUseCase:
    """
    Use case for creating a board inside an organization.

    Business Rules:
    - Title is required (trimmed, non-empty)
    - Any member of the organization can create boards
    - Color falls back to the default board color
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        organization_id: UUID,
        title: Optional[str],
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Result[BoardResponse]:
        clean_title = clean_required_text(title)
        if clean_title is None:
            return Return.err(Error("INVALID_TITLE", "Board title is required"))

        async with self.uow:
            access = await AccessGuard(self.uow).authorize(user_id, organization_id)
            if access.is_err():
                return Return.err(access.error)

            board = await self.uow.boards.create(
                Board(
                    organization_id=organization_id,
                    title=clean_title,
                    description=clean_required_text(description),
                    color=clean_required_text(color) or DEFAULT_BOARD_COLOR,
                    created_by=user_id,
                )
            )
            await self.uow.commit()

            logger.info(f"Board {board.id} created in organization {organization_id}")

            return Return.ok(BoardResponse.model_validate(board))
