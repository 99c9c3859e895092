from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import MembershipRole
from taskboard.libs.result import Result, Return

from .dtos import OrganizationDetailResponse


class GetOrganizationUseCase:
    """Single organization with the caller's role. Any member may read it."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], organization_id: UUID
    ) -> Result[OrganizationDetailResponse]:
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(user_id, organization_id)
            if access.is_err():
                return Return.err(access.error)

            organization = await self.uow.organizations.get_by_id(organization_id)

            return Return.ok(
                OrganizationDetailResponse(
                    id=organization.id,
                    name=organization.name,
                    created_by=organization.created_by,
                    created_at=organization.created_at,
                    role=MembershipRole(access.value.role).value,
                )
            )
