from collections import defaultdict
from typing import List
from uuid import UUID

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.cards.dtos import CardResponse

from .dtos import ListWithCardsResponse


async def load_lists_with_cards(uow: UnitOfWork, board_id: UUID) -> List[ListWithCardsResponse]:
    """Lists of a board with their cards, both in display order."""
    board_lists = await uow.lists.get_siblings(board_id)
    cards = await uow.cards.get_by_list_ids([board_list.id for board_list in board_lists])

    cards_by_list = defaultdict(list)
    for card in cards:
        cards_by_list[card.list_id].append(CardResponse.model_validate(card))

    return [
        ListWithCardsResponse(
            id=board_list.id,
            board_id=board_list.board_id,
            title=board_list.title,
            sort_order=board_list.sort_order,
            created_at=board_list.created_at,
            cards=cards_by_list[board_list.id],
        )
        for board_list in board_lists
    ]
