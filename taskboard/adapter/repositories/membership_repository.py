from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.membership_repository import (
    DuplicateMembershipError,
    IMembershipRepository,
)
from taskboard.domain.entities import Membership


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_organization(
        self, user_id: str, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        stmt = select(Membership).where(
            Membership.user_id == user_id,
            Membership.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Membership]:
        """Get membership recorded for an email in an organization"""
        stmt = (
            select(Membership)
            .where(
                Membership.organization_id == organization_id,
                Membership.email == email,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships of an organization, ordered by join time"""
        stmt = (
            select(Membership)
            .where(Membership.organization_id == organization_id)
            .order_by(Membership.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateMembershipError(
                f"User {membership.user_id} already belongs to {membership.organization_id}"
            ) from exc
        await self.session.refresh(membership)
        return membership
