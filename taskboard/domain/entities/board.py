"""
Board Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow

DEFAULT_BOARD_COLOR = "#3b82f6"


class Board(SQLModel, table=True):
    """
    Board entity - belongs to exactly one organization.

    Business Rules:
    - Any member can create a board
    - Only owners can delete it; deletion cascades to lists, cards and
      activities
    """

    __tablename__ = "boards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False, index=True
    )

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    color: str = Field(default=DEFAULT_BOARD_COLOR, max_length=32)

    created_by: str = Field(max_length=255, nullable=False)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_board_org_created_at", "organization_id", "created_at"),)
