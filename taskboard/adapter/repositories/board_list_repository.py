from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.board_list_repository import IBoardListRepository
from taskboard.domain.entities import BoardList


class BoardListRepository(IBoardListRepository):
    """BoardList repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, list_id: UUID) -> Optional[BoardList]:
        """Get list by ID"""
        stmt = select(BoardList).where(BoardList.id == list_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_siblings(self, container_id: UUID) -> List[BoardList]:
        """Get all lists of a board in display order"""
        stmt = (
            select(BoardList)
            .where(BoardList.board_id == container_id)
            .order_by(BoardList.sort_order, BoardList.created_at, BoardList.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_max_sort_order(self, container_id: UUID) -> Optional[int]:
        """Highest sort_order among the lists of a board"""
        stmt = select(func.max(BoardList.sort_order)).where(
            BoardList.board_id == container_id
        )
        result = await self.session.execute(stmt)
        return result.scalar()

    async def create(self, board_list: BoardList) -> BoardList:
        """Create a new list"""
        self.session.add(board_list)
        await self.session.flush()
        await self.session.refresh(board_list)
        return board_list

    async def update(self, item: BoardList) -> BoardList:
        """Update existing list"""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, list_id: UUID) -> None:
        """Delete list; foreign keys cascade to its cards"""
        stmt = delete(BoardList).where(BoardList.id == list_id)
        await self.session.execute(stmt)
