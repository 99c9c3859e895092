import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Error, Result, Return

from .dtos import CancelInviteResponse

logger = logging.getLogger(__name__)


class CancelInviteUseCase:
    """
    Owners cancel an invite by deleting it, whatever its state.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID, invite_id: UUID
    ) -> Result[CancelInviteResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(
                user_id, organization_id, MembershipRole.owner
            )
            if access.is_err():
                return Return.err(access.error)

            invite = await self.uow.invites.get_by_id(invite_id)
            if invite is None or invite.organization_id != organization_id:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            await self.uow.invites.delete(invite_id)
            await self.uow.commit()

            logger.info(f"Invite {invite_id} cancelled by {user_id}")

            return Return.ok(CancelInviteResponse(status="cancelled"))
