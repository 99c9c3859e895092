from abc import ABC, abstractmethod
from typing import AsyncContextManager

from taskboard.app.repositories.activity_repository import IActivityRepository
from taskboard.app.repositories.board_list_repository import IBoardListRepository
from taskboard.app.repositories.board_repository import IBoardRepository
from taskboard.app.repositories.card_repository import ICardRepository
from taskboard.app.repositories.invite_repository import IInviteRepository
from taskboard.app.repositories.membership_repository import IMembershipRepository
from taskboard.app.repositories.organization_repository import IOrganizationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    memberships: IMembershipRepository
    boards: IBoardRepository
    lists: IBoardListRepository
    cards: ICardRepository
    activities: IActivityRepository
    invites: IInviteRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def savepoint(self) -> AsyncContextManager:
        """Nested transaction; a failure inside it leaves the outer one usable"""
        pass
