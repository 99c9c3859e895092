"""
Create Card Use Case
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.app.services.ordering_engine import OrderingEngine
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_list
from taskboard.app.use_cases.validation import clean_required_text
from taskboard.domain.base import as_naive_utc
from taskboard.domain.entities import ActivityAction, Card, CardPriority
from taskboard.libs.result import Error, Result, Return

from .dtos import CardResponse
from .priority import parse_priority

logger = logging.getLogger(__name__)


class CreateCardUseCase:
    """
    Use case for adding a card to a list.

    Business Rules:
    - Title is required (trimmed, non-empty)
    - Priority defaults to medium and must be low, medium or high
    - The new card is appended after every existing card of the list
    - A "created" activity is recorded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        list_id: UUID,
        title: Optional[str],
        description: Optional[str] = None,
        priority: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Result[CardResponse]:
        clean_title = clean_required_text(title)
        if clean_title is None:
            return Return.err(Error("INVALID_TITLE", "Card title is required"))

        card_priority = CardPriority.medium
        if priority is not None:
            card_priority = parse_priority(priority)
            if card_priority is None:
                return Return.err(
                    Error("INVALID_PRIORITY", "Priority must be low, medium or high")
                )

        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            found = await resolve_list(self.uow, board_id, list_id)
            if found.is_err():
                return Return.err(found.error)

            sort_order = await OrderingEngine(self.uow).append(self.uow.cards, list_id)

            card = await self.uow.cards.create(
                Card(
                    list_id=list_id,
                    title=clean_title,
                    description=clean_required_text(description),
                    priority=card_priority,
                    due_date=as_naive_utc(due_date),
                    sort_order=sort_order,
                    created_by=user_id,
                )
            )

            await ActivityRecorder(self.uow).record(
                card.id,
                board_id,
                ActivityAction.created,
                user_id,
                f'Card created: "{card.title}"',
            )

            await self.uow.commit()

            logger.info(f"Card {card.id} created in list {list_id}")

            return Return.ok(CardResponse.model_validate(card))
