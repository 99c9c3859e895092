from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.card_repository import ICardRepository
from taskboard.domain.entities import Card


class CardRepository(ICardRepository):
    """Card repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, card_id: UUID) -> Optional[Card]:
        """Get card by ID"""
        stmt = select(Card).where(Card.id == card_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_siblings(self, container_id: UUID) -> List[Card]:
        """Get all cards of a list in display order"""
        stmt = (
            select(Card)
            .where(Card.list_id == container_id)
            .order_by(Card.sort_order, Card.created_at, Card.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_list_ids(self, list_ids: List[UUID]) -> List[Card]:
        """Get cards of several lists in display order"""
        if not list_ids:
            return []
        stmt = (
            select(Card)
            .where(Card.list_id.in_(list_ids))
            .order_by(Card.sort_order, Card.created_at, Card.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_max_sort_order(self, container_id: UUID) -> Optional[int]:
        """Highest sort_order among the cards of a list"""
        stmt = select(func.max(Card.sort_order)).where(Card.list_id == container_id)
        result = await self.session.execute(stmt)
        return result.scalar()

    async def get_min_sort_order(self, list_id: UUID) -> Optional[int]:
        """Lowest sort_order among the cards of a list"""
        stmt = select(func.min(Card.sort_order)).where(Card.list_id == list_id)
        result = await self.session.execute(stmt)
        return result.scalar()

    async def create(self, card: Card) -> Card:
        """Create a new card"""
        self.session.add(card)
        await self.session.flush()
        await self.session.refresh(card)
        return card

    async def update(self, item: Card) -> Card:
        """Update existing card"""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def move_to_list(
        self,
        card_id: UUID,
        source_list_id: UUID,
        target_list_id: UUID,
        sort_order: int,
        moved_at: datetime,
    ) -> bool:
        """Conditional move: only matches while the card is in the source list"""
        stmt = (
            update(Card)
            .where(Card.id == card_id, Card.list_id == source_list_id)
            .values(list_id=target_list_id, sort_order=sort_order, updated_at=moved_at)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, card_id: UUID) -> None:
        """Delete card"""
        stmt = delete(Card).where(Card.id == card_id)
        await self.session.execute(stmt)
