"""
Create Organization Use Case

Creates an organization and makes its creator the first owner.
"""

import logging
from typing import Optional

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.validation import clean_required_text, normalize_email
from taskboard.domain.entities import Membership, MembershipRole, Organization
from taskboard.libs.result import Error, Result, Return

from .dtos import OrganizationDetailResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Use case for creating an organization.

    Business Rules:
    - Name is required (trimmed, non-empty)
    - The organization and the creator's owner membership are written in
      one transaction, so an organization always starts with an owner
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], name: Optional[str], email: Optional[str] = None
    ) -> Result[OrganizationDetailResponse]:
        """
        Execute create organization use case.

        Args:
            user_id: Verified caller identity
            name: Organization name
            email: Caller email from the identity provider, if known

        Returns:
            Result with OrganizationDetailResponse DTO, or Error
        """
        if not user_id:
            return Return.err(Error("UNAUTHENTICATED", "Authentication required"))

        clean_name = clean_required_text(name)
        if clean_name is None:
            return Return.err(Error("INVALID_NAME", "Organization name is required"))

        async with self.uow:
            organization = await self.uow.organizations.create(
                Organization(name=clean_name, created_by=user_id)
            )

            await self.uow.memberships.create(
                Membership(
                    organization_id=organization.id,
                    user_id=user_id,
                    email=normalize_email(email),
                    role=MembershipRole.owner,
                )
            )

            await self.uow.commit()

            logger.info(f"Organization {organization.id} created by {user_id}")

            return Return.ok(
                OrganizationDetailResponse(
                    id=organization.id,
                    name=organization.name,
                    created_by=organization.created_by,
                    created_at=organization.created_at,
                    role=MembershipRole.owner.value,
                )
            )
