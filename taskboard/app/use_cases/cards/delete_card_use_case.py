import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_card, resolve_list
from taskboard.app.use_cases.organizations.dtos import DeleteResponse
from taskboard.domain.entities import ActivityAction
from taskboard.libs.result import Result, Return

logger = logging.getLogger(__name__)


class DeleteCardUseCase:
    """
    Delete a card. The "deleted" activity is written first and outlives the
    card, since activities reference cards without a foreign key.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID, list_id: UUID, card_id: UUID
    ) -> Result[DeleteResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            found_list = await resolve_list(self.uow, board_id, list_id)
            if found_list.is_err():
                return Return.err(found_list.error)

            found = await resolve_card(self.uow, list_id, card_id)
            if found.is_err():
                return Return.err(found.error)

            await ActivityRecorder(self.uow).record(
                card_id,
                board_id,
                ActivityAction.deleted,
                user_id,
                f'Card deleted: "{found.value.title}"',
            )

            await self.uow.cards.delete(card_id)
            await self.uow.commit()

            logger.info(f"Card {card_id} deleted by {user_id}")

            return Return.ok(DeleteResponse(status="deleted"))
