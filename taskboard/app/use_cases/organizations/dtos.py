"""
Organization Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class OrganizationResponse(BaseModel):
    """Organization as returned to members"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_by: str
    created_at: datetime


class OrganizationDetailResponse(OrganizationResponse):
    """Organization together with the caller's role"""

    role: str


class MemberResponse(BaseModel):
    """Membership row of an organization"""

    id: UUID
    organization_id: UUID
    user_id: str
    email: Optional[str]
    role: str
    joined_at: datetime


class DeleteResponse(BaseModel):
    """Response for delete use cases"""

    status: str
