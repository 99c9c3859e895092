from typing import List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.libs.result import Result, Return

from .board_lists import load_lists_with_cards
from .dtos import ListWithCardsResponse


class GetBoardListsUseCase:
    """All lists of a board with their cards. Any member may read them."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID
    ) -> Result[List[ListWithCardsResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            return Return.ok(await load_lists_with_cards(self.uow, board_id))
