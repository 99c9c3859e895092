from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_list
from taskboard.app.use_cases.organizations.dtos import DeleteResponse
from taskboard.domain.entities import ActivityAction
from taskboard.libs.result import Result, Return


class DeleteListUseCase:
    """
    Delete a list and, through the storage cascade, its cards.

    Each card still in the list gets a "deleted" history entry first.
    Siblings are not renumbered; the gap is harmless because order is
    relative.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID, list_id: UUID
    ) -> Result[DeleteResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            found = await resolve_list(self.uow, board_id, list_id)
            if found.is_err():
                return Return.err(found.error)

            recorder = ActivityRecorder(self.uow)
            for card in await self.uow.cards.get_siblings(list_id):
                await recorder.record(
                    card.id,
                    board_id,
                    ActivityAction.deleted,
                    user_id,
                    f'Card deleted: "{card.title}"',
                )

            await self.uow.lists.delete(list_id)
            await self.uow.commit()

            return Return.ok(DeleteResponse(status="deleted"))
