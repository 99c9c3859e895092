"""
Invite Use Cases
"""

from .accept_invite_use_case import AcceptInviteUseCase
from .cancel_invite_use_case import CancelInviteUseCase
from .create_invite_use_case import DEFAULT_INVITE_EXPIRY_DAYS, CreateInviteUseCase
from .dtos import (
    AcceptInviteResponse,
    CancelInviteResponse,
    CreateInviteResponse,
    InviteResponse,
)
from .list_invites_use_case import ListInvitesUseCase

__all__ = [
    "CreateInviteUseCase",
    "AcceptInviteUseCase",
    "CancelInviteUseCase",
    "ListInvitesUseCase",
    "InviteResponse",
    "CreateInviteResponse",
    "AcceptInviteResponse",
    "CancelInviteResponse",
    "DEFAULT_INVITE_EXPIRY_DAYS",
]
