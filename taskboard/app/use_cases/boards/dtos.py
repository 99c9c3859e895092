"""
Board Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskboard.app.use_cases.lists.dtos import ListWithCardsResponse


class BoardResponse(BaseModel):
    """Board summary"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    title: str
    description: Optional[str]
    color: str
    created_by: str
    created_at: datetime


class BoardDetailResponse(BoardResponse):
    """Board with its lists and cards, both in display order"""

    lists: List[ListWithCardsResponse] = []
