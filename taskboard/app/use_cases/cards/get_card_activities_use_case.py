from typing import List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.libs.result import Result, Return

from .dtos import ActivityResponse


class GetCardActivitiesUseCase:
    """
    History of a card, most recent first.

    Works for deleted cards too; only entries recorded on this board are
    returned.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID, card_id: UUID
    ) -> Result[List[ActivityResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            activities = await self.uow.activities.get_by_card_id(card_id)
            return Return.ok(
                [
                    ActivityResponse.model_validate(activity)
                    for activity in activities
                    if activity.board_id == board_id
                ]
            )
