from typing import List, Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Result, Return

from .dtos import MemberResponse


class ListMembersUseCase:
    """Members of an organization ordered by join time. Any member may list them."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID
    ) -> Result[List[MemberResponse]]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(user_id, organization_id)
            if access.is_err():
                return Return.err(access.error)

            memberships = await self.uow.memberships.get_by_organization_id(
                organization_id
            )

            return Return.ok(
                [
                    MemberResponse(
                        id=membership.id,
                        organization_id=membership.organization_id,
                        user_id=membership.user_id,
                        email=membership.email,
                        role=MembershipRole(membership.role).value,
                        joined_at=membership.created_at,
                    )
                    for membership in memberships
                ]
            )
