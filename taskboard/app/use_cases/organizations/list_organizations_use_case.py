from typing import List, Optional

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.libs.result import Error, Result, Return

from .dtos import OrganizationResponse


class ListOrganizationsUseCase:
    """Organizations the caller belongs to, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: Optional[str]) -> Result[List[OrganizationResponse]]:
        if not user_id:
            return Return.err(Error("UNAUTHENTICATED", "Authentication required"))

        async with self.uow:
            organizations = await self.uow.organizations.get_by_member(user_id)
            return Return.ok(
                [OrganizationResponse.model_validate(org) for org in organizations]
            )
