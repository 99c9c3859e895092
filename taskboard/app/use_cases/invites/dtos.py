"""
Invite Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from taskboard.domain.entities import Invite, MembershipRole


class InviteResponse(BaseModel):
    """Invite as shown to organization owners (token withheld)"""

    id: UUID
    organization_id: UUID
    email: str
    role: str
    status: str
    created_by: str
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime]


class CreateInviteResponse(BaseModel):
    """Response for create invite use case"""

    invite: InviteResponse
    invite_link: str
    organization_name: str


class AcceptInviteResponse(BaseModel):
    """Response for accept invite use case"""

    organization_id: UUID
    role: str
    message: str


class CancelInviteResponse(BaseModel):
    """Response for cancel invite use case"""

    status: str


def to_invite_response(invite: Invite, now: Optional[datetime] = None) -> InviteResponse:
    return InviteResponse(
        id=invite.id,
        organization_id=invite.organization_id,
        email=invite.email,
        role=MembershipRole(invite.role).value,
        status=invite.status_at(now).value,
        created_by=invite.created_by,
        created_at=invite.created_at,
        expires_at=invite.expires_at,
        accepted_at=invite.accepted_at,
    )
