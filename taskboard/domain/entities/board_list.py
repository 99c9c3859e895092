"""
BoardList Entity

A sectional column of a board. Lists are ordered by sort_order, ties broken
by created_at then id.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow


class BoardList(SQLModel, table=True):
    """
    BoardList entity - ordered column within a board.

    Business Rules:
    - New lists are appended (max sort_order + 1, 0 when empty)
    - Deleting a list never renumbers its siblings
    - Deletion cascades to the list's cards
    """

    __tablename__ = "board_lists"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    board_id: UUID = Field(
        foreign_key="boards.id", ondelete="CASCADE", nullable=False, index=True
    )

    title: str = Field(max_length=255)
    sort_order: int = Field(
        default=0, sa_column=Column(BigInteger, nullable=False, default=0)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_board_list_board_sort", "board_id", "sort_order"),)
