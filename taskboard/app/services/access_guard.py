"""
Access Guard

Resolves the caller's membership and authorizes an action against a
required role. Pure read-then-decide: it never writes.

Checks always run in the same order:
1. caller identity present        -> UNAUTHENTICATED
2. organization / board exists    -> ORGANIZATION_NOT_FOUND / BOARD_NOT_FOUND
3. caller is a member             -> NOT_A_MEMBER
4. caller role is sufficient      -> INSUFFICIENT_ROLE
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.domain.entities import Board, Membership, MembershipRole
from taskboard.libs.result import Error, Result, Return


@dataclass
class BoardAccess:
    board: Board
    membership: Membership


class AccessGuard:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def authorize(
        self,
        user_id: Optional[str],
        organization_id: UUID,
        required_role: MembershipRole = MembershipRole.member,
    ) -> Result[Membership]:
        if not user_id:
            return Return.err(Error("UNAUTHENTICATED", "Authentication required"))

        organization = await self.uow.organizations.get_by_id(organization_id)
        if organization is None:
            return Return.err(
                Error("ORGANIZATION_NOT_FOUND", "Organization not found")
            )

        return await self._check_membership(user_id, organization_id, required_role)

    async def authorize_board(
        self,
        user_id: Optional[str],
        board_id: UUID,
        required_role: MembershipRole = MembershipRole.member,
    ) -> Result[BoardAccess]:
        if not user_id:
            return Return.err(Error("UNAUTHENTICATED", "Authentication required"))

        board = await self.uow.boards.get_by_id(board_id)
        if board is None:
            return Return.err(Error("BOARD_NOT_FOUND", "Board not found"))

        result = await self._check_membership(
            user_id, board.organization_id, required_role
        )
        if result.is_err():
            return Return.err(result.error)

        return Return.ok(BoardAccess(board=board, membership=result.value))

    async def _check_membership(
        self, user_id: str, organization_id: UUID, required_role: MembershipRole
    ) -> Result[Membership]:
        membership = await self.uow.memberships.get_by_user_and_organization(
            user_id, organization_id
        )
        if membership is None:
            return Return.err(
                Error("NOT_A_MEMBER", "You are not a member of this organization")
            )

        if not MembershipRole(membership.role).satisfies(required_role):
            return Return.err(
                Error(
                    "INSUFFICIENT_ROLE",
                    f"This action requires the {required_role.value} role",
                )
            )

        return Return.ok(membership)
