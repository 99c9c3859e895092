"""
List Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskboard.app.use_cases.cards.dtos import CardResponse


class ListResponse(BaseModel):
    """List with its position in the board"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    board_id: UUID
    title: str
    sort_order: int
    created_at: datetime


class ListWithCardsResponse(ListResponse):
    """List together with its cards in display order"""

    cards: List[CardResponse] = []
