"""
Membership Entity

Links an external user identity to an organization with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow

from .enums import MembershipRole


class Membership(SQLModel, table=True):
    """
    Membership entity - (organization, user) pair with a role.

    Business Rules:
    - (organization_id, user_id) must be unique
    - user_id is the opaque identifier issued by the identity provider
    - email is captured from the identity at join time, lower-cased, and is
      only used for the best-effort "already a member" invite check
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False, index=True
    )
    user_id: str = Field(max_length=255, nullable=False, index=True)
    email: Optional[str] = Field(default=None, max_length=255)

    role: MembershipRole = Field(nullable=False)

    # Joined at
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_org_user", "organization_id", "user_id", unique=True),
        Index("idx_membership_org_email", "organization_id", "email"),
    )
