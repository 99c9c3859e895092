from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.adapter.repositories.activity_repository import ActivityRepository
from taskboard.adapter.repositories.board_list_repository import BoardListRepository
from taskboard.adapter.repositories.board_repository import BoardRepository
from taskboard.adapter.repositories.card_repository import CardRepository
from taskboard.adapter.repositories.invite_repository import InviteRepository
from taskboard.adapter.repositories.membership_repository import MembershipRepository
from taskboard.adapter.repositories.organization_repository import OrganizationRepository
from taskboard.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.organizations = OrganizationRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.boards = BoardRepository(self.session)
        self.lists = BoardListRepository(self.session)
        self.cards = CardRepository(self.session)
        self.activities = ActivityRepository(self.session)
        self.invites = InviteRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def savepoint(self):
        return self.session.begin_nested()
