"""
Taskboard Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActivityAction,
    CardPriority,
    InviteStatus,
    MembershipRole,
)

# Export all entities
from .organization import Organization
from .membership import Membership
from .board import DEFAULT_BOARD_COLOR, Board
from .board_list import BoardList
from .card import Card
from .activity import Activity
from .invite import Invite

__all__ = [
    # Enums
    "ActivityAction",
    "CardPriority",
    "InviteStatus",
    "MembershipRole",
    # Entities
    "Organization",
    "Membership",
    "Board",
    "BoardList",
    "Card",
    "Activity",
    "Invite",
    "DEFAULT_BOARD_COLOR",
]
