"""
Reorder Lists Use Case
"""

from typing import List, Optional, Sequence
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.ordering_engine import OrderingEngine
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.libs.result import Error, Result, Return

from .dtos import ListResponse


class ReorderListsUseCase:
    """
    Use case for dragging a list to a new position.

    Business Rules:
    - The caller sends the list order it observed and the target index
    - Every observed list receives a position-derived sort_order, so the
      same request applied twice yields identical values
    - Lists the caller did not observe keep their sort_order
    - Concurrent reorders are last-write-wins
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        list_id: UUID,
        new_index: int,
        observed_list_ids: Sequence[UUID],
    ) -> Result[List[ListResponse]]:
        """
        Execute reorder lists use case.

        Args:
            user_id: Verified caller identity
            board_id: Board whose lists are reordered
            list_id: List being moved
            new_index: Zero-based target position within the observed order
            observed_list_ids: List order as the caller last saw it

        Returns:
            Result with the board's lists in their new order, or Error
        """
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            result = await OrderingEngine(self.uow).reorder(
                self.uow.lists, board_id, list_id, new_index, observed_list_ids
            )
            if result.is_err():
                error = result.error
                if error.code == "ITEM_NOT_FOUND":
                    error = Error("LIST_NOT_FOUND", "List not found")
                await self.uow.rollback()
                return Return.err(error)

            await self.uow.commit()

            return Return.ok([ListResponse.model_validate(item) for item in result.value])
