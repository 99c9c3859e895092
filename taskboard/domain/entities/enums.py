"""
Taskboard Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """Role within an organization, ordered member < admin < owner"""

    member = "member"
    admin = "admin"
    owner = "owner"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def satisfies(self, required: "MembershipRole") -> bool:
        """True when this role is at least as privileged as ``required``."""
        return self.rank >= required.rank


_ROLE_RANK = {
    MembershipRole.member: 0,
    MembershipRole.admin: 1,
    MembershipRole.owner: 2,
}


class CardPriority(str, Enum):
    """Card priority"""

    low = "low"
    medium = "medium"
    high = "high"


class ActivityAction(str, Enum):
    """Kind of card mutation recorded in the activity history"""

    created = "created"
    updated = "updated"
    moved = "moved"
    deleted = "deleted"


class InviteStatus(str, Enum):
    """Invite status, derived from accepted_at and expires_at"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
