"""
Create Invite Use Case

Owners invite people to their organization by email. The invitee redeems
the emailed link once, before it expires.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.validation import normalize_email
from taskboard.domain.base import utcnow
from taskboard.domain.entities import Invite, MembershipRole
from taskboard.libs.result import Error, Result, Return

from .dtos import CreateInviteResponse, to_invite_response

logger = logging.getLogger(__name__)

DEFAULT_INVITE_EXPIRY_DAYS = 7


class CreateInviteUseCase:
    """
    Use case for inviting someone to an organization.

    Business Rules:
    - Only owners can invite; non-owners are refused before input is checked
    - Email is trimmed and lower-cased and must be a valid address
    - Role must be owner, admin or member
    - Emails already recorded on a membership of the organization are
      rejected with ALREADY_MEMBER (best effort: members who joined without
      an email are not detected here, acceptance still catches them)
    - Token: 256 bits from the OS CSPRNG, hex encoded
    - Expires INVITE_EXPIRY_DAYS after creation
    """

    def __init__(
        self,
        uow: UnitOfWork,
        app_base_url: str,
        expiry_days: int = DEFAULT_INVITE_EXPIRY_DAYS,
    ):
        self.uow = uow
        self.app_base_url = app_base_url.rstrip("/")
        self.expiry_days = expiry_days

    async def execute(
        self,
        user_id: Optional[str],
        organization_id: UUID,
        email: Optional[str],
        role: Optional[str] = MembershipRole.member.value,
    ) -> Result[CreateInviteResponse]:
        """
        Execute create invite use case.

        Args:
            user_id: Verified caller identity (must be an owner)
            organization_id: Organization to invite into
            email: Invitee email address
            role: Role granted on acceptance

        Returns:
            Result with CreateInviteResponse DTO (including the accept link), or Error
        """
        async with self.uow:
            access = await AccessGuard(self.uow).authorize(
                user_id, organization_id, MembershipRole.owner
            )
            if access.is_err():
                return Return.err(access.error)

            clean_email = normalize_email(email)
            if clean_email is None:
                return Return.err(Error("INVALID_EMAIL", "A valid email address is required"))

            try:
                invite_role = MembershipRole(role or MembershipRole.member.value)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {role}. Must be one of: owner, admin, member",
                    )
                )

            existing = await self.uow.memberships.get_by_organization_and_email(
                organization_id, clean_email
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "This person is already a member")
                )

            organization = await self.uow.organizations.get_by_id(organization_id)

            now = utcnow()
            invite = await self.uow.invites.create(
                Invite(
                    organization_id=organization_id,
                    email=clean_email,
                    role=invite_role,
                    token=secrets.token_hex(32),
                    created_by=user_id,
                    created_at=now,
                    expires_at=now + timedelta(days=self.expiry_days),
                )
            )

            await self.uow.commit()

            logger.info(f"Invite {invite.id} created for organization {organization_id}")

            return Return.ok(
                CreateInviteResponse(
                    invite=to_invite_response(invite, now),
                    invite_link=f"{self.app_base_url}/invite/{invite.token}",
                    organization_name=organization.name,
                )
            )
