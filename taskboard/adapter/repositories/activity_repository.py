from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.activity_repository import IActivityRepository
from taskboard.domain.entities import Activity


class ActivityRepository(IActivityRepository):
    """Activity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity: Activity) -> Activity:
        """Create a new activity (immutable)"""
        self.session.add(activity)
        await self.session.flush()
        await self.session.refresh(activity)
        return activity

    async def get_by_card_id(self, card_id: UUID) -> List[Activity]:
        """Get activities of a card, most recent first"""
        stmt = (
            select(Activity)
            .where(Activity.card_id == card_id)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
