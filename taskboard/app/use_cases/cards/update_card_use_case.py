"""
Update Card Use Case
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_card, resolve_list
from taskboard.app.use_cases.validation import clean_required_text
from taskboard.domain.base import as_naive_utc, utcnow
from taskboard.domain.entities import ActivityAction, Card
from taskboard.libs.result import Error, Result, Return

from .dtos import CardResponse
from .priority import parse_priority

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "priority", "due_date", "completed")


class UpdateCardUseCase:
    """
    Use case for editing a card in place.

    Business Rules:
    - Only the fields present in ``changes`` are touched
    - A present title must still be non-empty; a present priority must be valid
    - An "updated" activity describing what changed is recorded, unless
      nothing actually changed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: Optional[str],
        board_id: UUID,
        list_id: UUID,
        card_id: UUID,
        changes: Dict[str, Any],
    ) -> Result[CardResponse]:
        """
        Execute update card use case.

        Args:
            user_id: Verified caller identity
            board_id: Board the card is addressed through
            list_id: List the card currently belongs to
            card_id: Card to update
            changes: Subset of title, description, priority, due_date, completed

        Returns:
            Result with the updated CardResponse DTO, or Error
        """
        values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}

        if "title" in values:
            values["title"] = clean_required_text(values["title"])
            if values["title"] is None:
                return Return.err(Error("INVALID_TITLE", "Card title is required"))

        if "priority" in values:
            values["priority"] = parse_priority(values["priority"])
            if values["priority"] is None:
                return Return.err(
                    Error("INVALID_PRIORITY", "Priority must be low, medium or high")
                )

        if "description" in values:
            values["description"] = clean_required_text(values["description"])

        if "due_date" in values:
            values["due_date"] = as_naive_utc(values["due_date"])

        if values.get("completed", False) is None:
            del values["completed"]
        elif "completed" in values:
            values["completed"] = bool(values["completed"])

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

            card = found.value
            changed = [key for key, value in values.items() if getattr(card, key) != value]
            if not changed:
                return Return.ok(CardResponse.model_validate(card))

            detail = describe_changes(card, {key: values[key] for key in changed})

            for key in changed:
                setattr(card, key, values[key])
            card.updated_at = utcnow()
            card = await self.uow.cards.update(card)

            await ActivityRecorder(self.uow).record(
                card.id, board_id, ActivityAction.updated, user_id, detail
            )

            await self.uow.commit()

            logger.info(f"Card {card.id} updated: {', '.join(changed)}")

            return Return.ok(CardResponse.model_validate(card))


def describe_changes(card: Card, changes: Dict[str, Any]) -> str:
    """Human readable summary of the changes about to be applied to ``card``."""
    parts: List[str] = []
    if "title" in changes:
        parts.append(f'Renamed from "{card.title}" to "{changes["title"]}"')
    if "description" in changes:
        parts.append("Description updated")
    if "priority" in changes:
        parts.append(f"Priority set to {changes['priority'].value}")
    if "due_date" in changes:
        due_date = changes["due_date"]
        parts.append(
            f"Due date set to {due_date.date().isoformat()}" if due_date else "Due date removed"
        )
    if "completed" in changes:
        action = "Marked as done" if changes["completed"] else "Marked as incomplete"
        parts.append(f'{action}: "{changes.get("title", card.title)}"')
    return "; ".join(parts)
