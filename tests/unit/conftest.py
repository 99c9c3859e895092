from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from taskboard.domain.entities import Board, Membership, MembershipRole, Organization

REPOSITORY_METHODS = {
    "organizations": ["get_by_id", "get_by_member", "create", "delete"],
    "memberships": [
        "get_by_user_and_organization",
        "get_by_organization_and_email",
        "get_by_organization_id",
        "create",
    ],
    "boards": ["get_by_id", "get_by_organization_id", "create", "delete"],
    "lists": ["get_by_id", "get_siblings", "get_max_sort_order", "create", "update", "delete"],
    "cards": [
        "get_by_id",
        "get_siblings",
        "get_by_list_ids",
        "get_max_sort_order",
        "get_min_sort_order",
        "create",
        "update",
        "move_to_list",
        "delete",
    ],
    "activities": ["create", "get_by_card_id"],
    "invites": [
        "get_by_id",
        "get_by_token",
        "get_pending_by_organization_id",
        "create",
        "mark_accepted",
        "delete",
    ],
}


def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=None)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    uow.savepoint = MagicMock(return_value=savepoint)

    for name, methods in REPOSITORY_METHODS.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    # Writes hand back what they were given
    for name in ("organizations", "memberships", "boards", "lists", "cards", "activities", "invites"):
        getattr(uow, name).create.side_effect = _echo
    uow.lists.update.side_effect = _echo
    uow.cards.update.side_effect = _echo
    uow.cards.get_min_sort_order.return_value = None

    return uow


@pytest.fixture
def organization():
    return Organization(id=uuid4(), name="Acme", created_by="user_owner")


@pytest.fixture
def board(organization):
    return Board(
        id=uuid4(), organization_id=organization.id, title="Roadmap", created_by="user_owner"
    )


@pytest.fixture
def grant_role(mock_uow, organization, board):
    """Make the organization and board exist and give the caller ``role``."""

    def _grant(role: MembershipRole, user_id: str = "user_caller") -> Membership:
        membership = Membership(
            id=uuid4(), organization_id=organization.id, user_id=user_id, role=role
        )
        mock_uow.organizations.get_by_id.return_value = organization
        mock_uow.boards.get_by_id.return_value = board
        mock_uow.memberships.get_by_user_and_organization.return_value = membership
        return membership

    return _grant
