"""
Board-scoped lookups shared by list and card use cases.

A list or card addressed through a board it does not belong to is reported
as not found.
"""

from uuid import UUID

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import BoardList, Card
from taskboard.libs.result import Error, Result, Return


async def resolve_list(uow: UnitOfWork, board_id: UUID, list_id: UUID) -> Result[BoardList]:
    board_list = await uow.lists.get_by_id(list_id)
    if board_list is None or board_list.board_id != board_id:
        return Return.err(Error("LIST_NOT_FOUND", "List not found"))
    return Return.ok(board_list)


async def resolve_card(uow: UnitOfWork, list_id: UUID, card_id: UUID) -> Result[Card]:
    card = await uow.cards.get_by_id(card_id)
    if card is None or card.list_id != list_id:
        return Return.err(Error("CARD_NOT_FOUND", "Card not found"))
    return Return.ok(card)
