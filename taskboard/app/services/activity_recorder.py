"""
Activity Recorder

Appends an immutable history entry for every card mutation. Recording is a
best-effort side channel: a failure is logged and never fails the mutation
that triggered it.
"""

import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import Activity, ActivityAction

logger = logging.getLogger(__name__)


class ActivityRecorder:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        card_id: UUID,
        board_id: UUID,
        action: ActivityAction,
        actor_id: str,
        detail: Optional[str] = None,
    ) -> None:
        activity = Activity(
            card_id=card_id,
            board_id=board_id,
            action=action,
            actor_id=actor_id,
            detail=detail,
        )
        try:
            async with self.uow.savepoint():
                await self.uow.activities.create(activity)
        except Exception:
            logger.exception(
                f"Failed to record {action.value} activity for card {card_id}"
            )
