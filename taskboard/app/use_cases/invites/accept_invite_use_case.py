"""
Accept Invite Use Case
"""

import logging
from typing import Optional

from taskboard.app.repositories.membership_repository import DuplicateMembershipError
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.validation import normalize_email
from taskboard.domain.base import utcnow
from taskboard.domain.entities import Membership, MembershipRole
from taskboard.libs.result import Error, Result, Return

from .dtos import AcceptInviteResponse

logger = logging.getLogger(__name__)


class AcceptInviteUseCase:
    """
    Use case for redeeming an invite token.

    Business Rules:
    - Checks run in order: not found, expired, already accepted, already member
    - Expiry is checked before acceptance state, so an expired invite always
      reports INVITE_EXPIRED
    - The invite is stamped with a conditional update and the membership is
      inserted in the same transaction; a concurrent accept of the same
      token loses with INVITE_ALREADY_ACCEPTED
    - The accepting identity does not have to match the invited email
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: Optional[str], user_id: Optional[str], email: Optional[str] = None
    ) -> Result[AcceptInviteResponse]:
        """
        Execute accept invite use case.

        Args:
            token: Invite token from the emailed link
            user_id: Verified caller identity
            email: Caller email from the identity provider, if known

        Returns:
            Result with AcceptInviteResponse DTO, or Error
        """
        if not user_id:
            return Return.err(Error("UNAUTHENTICATED", "Authentication required"))

        async with self.uow:
            invite = await self.uow.invites.get_by_token(token) if token else None
            if invite is None:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            now = utcnow()
            if invite.is_expired(now):
                return Return.err(Error("INVITE_EXPIRED", "This invite has expired"))

            if invite.accepted_at is not None:
                return Return.err(
                    Error("INVITE_ALREADY_ACCEPTED", "This invite has already been used")
                )

            existing = await self.uow.memberships.get_by_user_and_organization(
                user_id, invite.organization_id
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this organization")
                )

            if not await self.uow.invites.mark_accepted(invite.id, now):
                await self.uow.rollback()
                return Return.err(
                    Error("INVITE_ALREADY_ACCEPTED", "This invite has already been used")
                )

            role = MembershipRole(invite.role)
            try:
                await self.uow.memberships.create(
                    Membership(
                        organization_id=invite.organization_id,
                        user_id=user_id,
                        email=normalize_email(email),
                        role=role,
                    )
                )
            except DuplicateMembershipError:
                await self.uow.rollback()
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this organization")
                )

            await self.uow.commit()

            logger.info(
                f"User {user_id} joined organization {invite.organization_id} as {role.value}"
            )

            return Return.ok(
                AcceptInviteResponse(
                    organization_id=invite.organization_id,
                    role=role.value,
                    message="Invite accepted",
                )
            )
