"""
Create List Use Case
"""

from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.ordering_engine import OrderingEngine
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.validation import clean_required_text
from taskboard.domain.entities import BoardList
from taskboard.libs.result import Error, Result, Return

from .dtos import ListResponse


class CreateListUseCase:
    """
    Use case for adding a list to a board.

    Business Rules:
    - Title is required (trimmed, non-empty)
    - Any member of the board's organization can add lists
    - The new list is appended after every existing list
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID, title: Optional[str]
    ) -> Result[ListResponse]:
        clean_title = clean_required_text(title)
        if clean_title is None:
            return Return.err(Error("INVALID_TITLE", "List title is required"))

        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            sort_order = await OrderingEngine(self.uow).append(self.uow.lists, board_id)

            board_list = await self.uow.lists.create(
                BoardList(board_id=board_id, title=clean_title, sort_order=sort_order)
            )
            await self.uow.commit()

            return Return.ok(ListResponse.model_validate(board_list))
