"""
Delete Organization Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Result, Return

from .dtos import DeleteResponse

logger = logging.getLogger(__name__)


class DeleteOrganizationUseCase:
    """
    Use case for deleting an organization.

    Business Rules:
    - Only owners can delete an organization
    - Memberships, boards, lists, cards, activities and invites are removed
      by the storage layer's cascading foreign keys
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID
    ) -> Result[DeleteResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(
                user_id, organization_id, MembershipRole.owner
            )
            if access.is_err():
                return Return.err(access.error)

            await self.uow.organizations.delete(organization_id)
            await self.uow.commit()

            logger.info(f"Organization {organization_id} deleted by {user_id}")

            return Return.ok(DeleteResponse(status="deleted"))
