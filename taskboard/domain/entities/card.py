"""
Card Entity

A task within a list, ordered by sort_order (ties broken by created_at, id).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow

from .enums import CardPriority


class Card(SQLModel, table=True):
    """
    Card entity - belongs to exactly one list.

    Business Rules:
    - New cards are appended to their list
    - Moving to another list resets sort_order to 0 (first in target)
    - Every mutation is recorded in the activity history
    """

    __tablename__ = "cards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    list_id: UUID = Field(
        foreign_key="board_lists.id", ondelete="CASCADE", nullable=False, index=True
    )

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    priority: CardPriority = Field(default=CardPriority.medium)
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completed: bool = Field(default=False)

    sort_order: int = Field(
        default=0, sa_column=Column(BigInteger, nullable=False, default=0)
    )

    created_by: str = Field(max_length=255, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_card_list_sort", "list_id", "sort_order"),)
