from typing import List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.base import utcnow
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Result, Return

from .dtos import InviteResponse, to_invite_response


class ListInvitesUseCase:
    """Pending, unexpired invites of an organization, newest first. Owners only."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID
    ) -> Result[List[InviteResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(
                user_id, organization_id, MembershipRole.owner
            )
            if access.is_err():
                return Return.err(access.error)

            now = utcnow()
            invites = await self.uow.invites.get_pending_by_organization_id(
                organization_id, now
            )
            return Return.ok([to_invite_response(invite, now) for invite in invites])
