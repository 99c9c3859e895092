"""
Invite Entity

Invitation to join an organization, redeemable once before it expires.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskboard.domain.base import utcnow

from .enums import InviteStatus, MembershipRole


class Invite(SQLModel, table=True):
    """
    Invite entity - pending invitation to join an organization.

    Business Rules:
    - Created by owners only
    - Expires 7 days after creation; expiry is evaluated lazily
    - Token is single-use, 256 bits of randomness, hex encoded
    - accepted_at is stamped exactly once, together with the membership
    - Cancelling deletes the row
    """

    __tablename__ = "invites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", ondelete="CASCADE", nullable=False, index=True
    )
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)

    created_by: str = Field(max_length=255, nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invite_expires_at", "expires_at"),
        Index("idx_invite_org_email", "organization_id", "email"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) >= self.expires_at

    def status_at(self, now: Optional[datetime] = None) -> InviteStatus:
        if self.accepted_at is not None:
            return InviteStatus.accepted
        if self.is_expired(now):
            return InviteStatus.expired
        return InviteStatus.pending
