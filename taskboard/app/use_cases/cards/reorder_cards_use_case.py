from typing import List, Optional, Sequence
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.ordering_engine import OrderingEngine
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_list
from taskboard.libs.result import Error, Result, Return

from .dtos import CardResponse


class ReorderCardsUseCase:
    """
    Move a card to a new position within its list.

    Same contract as list reordering: the observed order is fully
    reassigned, so repeating a request changes nothing.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        list_id: UUID,
        card_id: UUID,
        new_index: int,
        observed_card_ids: Sequence[UUID],
    ) -> Result[List[CardResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            found = await resolve_list(self.uow, board_id, list_id)
            if found.is_err():
                return Return.err(found.error)

            result = await OrderingEngine(self.uow).reorder(
                self.uow.cards, list_id, card_id, new_index, observed_card_ids
            )
            if result.is_err():
                error = result.error
                if error.code == "ITEM_NOT_FOUND":
                    error = Error("CARD_NOT_FOUND", "Card not found")
                await self.uow.rollback()
                return Return.err(error)

            await self.uow.commit()

            return Return.ok([CardResponse.model_validate(card) for card in result.value])
