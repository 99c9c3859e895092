"""
Move Card Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.app.services.ordering_engine import OrderingEngine
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_list
from taskboard.domain.entities import ActivityAction
from taskboard.libs.result import Error, Result, Return

from .dtos import CardResponse

logger = logging.getLogger(__name__)


class MoveCardUseCase:
    """
    Use case for dragging a card into another list of the same board.

    Business Rules:
    - Source and target lists must both belong to the board
    - The move only happens if the card is still in the source list;
      otherwise CARD_NOT_IN_SOURCE_LIST and nothing changes
    - The card lands first in the target list
    - A "moved" activity naming both lists is recorded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        source_list_id: UUID,
        card_id: UUID,
        target_list_id: UUID,
    ) -> Result[CardResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            source = await resolve_list(self.uow, board_id, source_list_id)
            if source.is_err():
                return Return.err(source.error)

            target = await resolve_list(self.uow, board_id, target_list_id)
            if target.is_err():
                return Return.err(target.error)

            card = await self.uow.cards.get_by_id(card_id)
            current_list = None
            if card is not None:
                current_list = await self.uow.lists.get_by_id(card.list_id)
            if current_list is None or current_list.board_id != board_id:
                return Return.err(Error("CARD_NOT_FOUND", "Card not found"))

            moved = await OrderingEngine(self.uow).move_card(
                card_id, source_list_id, target_list_id
            )
            if moved.is_err():
                await self.uow.rollback()
                return Return.err(moved.error)

            await ActivityRecorder(self.uow).record(
                card_id,
                board_id,
                ActivityAction.moved,
                user_id,
                f'Moved from "{source.value.title}" to "{target.value.title}"',
            )

            await self.uow.commit()

            logger.info(f"Card {card_id} moved from {source_list_id} to {target_list_id}")

            return Return.ok(CardResponse.model_validate(moved.value))
