"""
Ordering Engine

Maintains the total order of siblings (lists within a board, cards within a
list). All decisions are made over a snapshot queried at call time; nothing
is cached between requests and no application-level lock is taken, so two
simultaneous reorders resolve as last-write-wins.
"""

import logging
from typing import List, Sequence, TypeVar
from uuid import UUID

from taskboard.app.repositories.sibling_repository import ISiblingRepository
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.base import utcnow
from taskboard.domain.entities import Card
from taskboard.domain.ordering import (
    assign_positions,
    first_sort_order,
    next_sort_order,
    reorder_sequence,
)
from taskboard.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrderingEngine:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def append(self, siblings: ISiblingRepository, container_id: UUID) -> int:
        """
        Order value that places a new item last in its container.

        Concurrent appends may compute the same value; the duplicate is
        tie-broken by (created_at, id) when reading.
        """
        current_max = await siblings.get_max_sort_order(container_id)
        return next_sort_order(current_max)

    async def reorder(
        self,
        siblings: ISiblingRepository[T],
        container_id: UUID,
        item_id: UUID,
        new_index: int,
        observed_ids: Sequence[UUID],
    ) -> Result[List[T]]:
        """
        Move ``item_id`` to ``new_index`` within the caller-observed sequence
        and reassign every visible item a position-derived order value.

        Siblings the caller did not observe keep their current value.
        Returns the container's items in their new display order.
        """
        try:
            sequence = reorder_sequence(item_id, new_index, list(observed_ids))
        except ValueError as exc:
            return Return.err(Error("INVALID_ORDER", "Invalid order", reason=str(exc)))

        current = {item.id: item for item in await siblings.get_siblings(container_id)}
        if item_id not in current:
            return Return.err(Error("ITEM_NOT_FOUND", "Item not found in container"))

        unknown = [observed for observed in sequence if observed not in current]
        if unknown:
            return Return.err(
                Error(
                    "STALE_ORDER",
                    "The observed order references items that are no longer here",
                    reason=", ".join(str(item) for item in unknown),
                )
            )

        for observed, position in assign_positions(sequence).items():
            item = current[observed]
            if item.sort_order != position:
                item.sort_order = position
                await siblings.update(item)

        logger.debug(f"Reordered {len(sequence)} items in container {container_id}")
        return Return.ok(await siblings.get_siblings(container_id))

    async def move_card(
        self, card_id: UUID, source_list_id: UUID, target_list_id: UUID
    ) -> Result[Card]:
        """
        Move a card to another list, placing it first in the target.

        The placement is derived from the target's current lowest order
        value, so the card sorts ahead of every card already there.

        Fails with CARD_NOT_IN_SOURCE_LIST, and changes nothing, when the
        card is not in the claimed source list. A follow-up reorder places
        it precisely.
        """
        current_min = await self.uow.cards.get_min_sort_order(target_list_id)
        moved = await self.uow.cards.move_to_list(
            card_id,
            source_list_id,
            target_list_id,
            first_sort_order(current_min),
            utcnow(),
        )
        if not moved:
            return Return.err(
                Error(
                    "CARD_NOT_IN_SOURCE_LIST",
                    "Card does not belong to the source list",
                )
            )

        card = await self.uow.cards.get_by_id(card_id)
        return Return.ok(card)
