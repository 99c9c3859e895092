from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.invite_repository import IInviteRepository
from taskboard.domain.entities import Invite


class InviteRepository(IInviteRepository):
    """Invite repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invite_id: UUID) -> Optional[Invite]:
        """Get invite by ID"""
        stmt = select(Invite).where(Invite.id == invite_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invite]:
        """Get invite by token"""
        stmt = select(Invite).where(Invite.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_organization_id(
        self, organization_id: UUID, now: datetime
    ) -> List[Invite]:
        """Get unaccepted, unexpired invites of an organization, newest first"""
        stmt = (
            select(Invite)
            .where(
                Invite.organization_id == organization_id,
                Invite.accepted_at.is_(None),
                Invite.expires_at > now,
            )
            .order_by(Invite.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invite: Invite) -> Invite:
        """Create a new invite"""
        self.session.add(invite)
        await self.session.flush()
        await self.session.refresh(invite)
        return invite

    async def mark_accepted(self, invite_id: UUID, accepted_at: datetime) -> bool:
        """Stamp accepted_at unless another request already did"""
        stmt = (
            update(Invite)
            .where(Invite.id == invite_id, Invite.accepted_at.is_(None))
            .values(accepted_at=accepted_at)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, invite_id: UUID) -> None:
        """Delete invite"""
        stmt = delete(Invite).where(Invite.id == invite_id)
        await self.session.execute(stmt)
