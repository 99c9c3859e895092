from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lists.board_lists import load_lists_with_cards
from taskboard.libs.result import Error, Result, Return

from .dtos import BoardDetailResponse, BoardResponse


class GetBoardUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        organization_id: Optional[UUID] = None,
    ) -> Result[BoardDetailResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            board = access.value.board
            if organization_id is not None and board.organization_id != organization_id:
                return Return.err(Error("BOARD_NOT_FOUND", "Board not found"))

            summary = BoardResponse.model_validate(board)
            lists = await load_lists_with_cards(self.uow, board_id)

            return Return.ok(BoardDetailResponse(**summary.model_dump(), lists=lists))
