"""
Activity Entity

Immutable history of card mutations.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow

from .enums import ActivityAction


class Activity(SQLModel, table=True):
    """
    Activity entity - append-only audit entry for a card.

    Business Rules:
    - Immutable (never updated or deleted by the application)
    - card_id carries no foreign key so a card's history outlives the card
    - board_id cascades, so board and organization deletes remove history
    """

    __tablename__ = "activities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    card_id: UUID = Field(nullable=False, index=True)
    board_id: UUID = Field(
        foreign_key="boards.id", ondelete="CASCADE", nullable=False, index=True
    )

    action: ActivityAction = Field(nullable=False)
    actor_id: str = Field(max_length=255, nullable=False)
    detail: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_activity_card_created_at", "card_id", "created_at"),)
