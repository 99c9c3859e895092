"""
Organization Entity

Top-level tenant that owns members and boards.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow


class Organization(SQLModel, table=True):
    """
    Organization entity - isolated workspace owning members and boards.

    Business Rules:
    - The creator becomes its first owner
    - Only owners can delete it
    - Deletion cascades (via foreign keys) to memberships, boards, lists,
      cards, activities and invites
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    # External identity of the creator
    created_by: str = Field(max_length=255, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_organization_created_at", "created_at"),)
