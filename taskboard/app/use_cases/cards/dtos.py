"""
Card Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskboard.domain.entities import ActivityAction, CardPriority


class CardResponse(BaseModel):
    """Card with its position in the list"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    list_id: UUID
    title: str
    description: Optional[str]
    priority: CardPriority
    due_date: Optional[datetime]
    completed: bool
    sort_order: int
    created_by: str
    created_at: datetime
    updated_at: datetime


class ActivityResponse(BaseModel):
    """Entry of a card's history"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    card_id: UUID
    action: ActivityAction
    actor_id: str
    detail: Optional[str]
    created_at: datetime
