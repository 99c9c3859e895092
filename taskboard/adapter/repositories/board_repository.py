from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskboard.app.repositories.board_repository import IBoardRepository
from taskboard.domain.entities import Board


class BoardRepository(IBoardRepository):
    """Board repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, board_id: UUID) -> Optional[Board]:
        """Get board by ID"""
        stmt = select(Board).where(Board.id == board_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_organization_id(self, organization_id: UUID) -> List[Board]:
        """Get all boards of an organization, newest first"""
        stmt = (
            select(Board)
            .where(Board.organization_id == organization_id)
            .order_by(Board.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, board: Board) -> Board:
        """Create a new board"""
        self.session.add(board)
        await self.session.flush()
        await self.session.refresh(board)
        return board

    async def delete(self, board_id: UUID) -> None:
        """Delete board; foreign keys cascade the rest"""
        stmt = delete(Board).where(Board.id == board_id)
        await self.session.execute(stmt)
