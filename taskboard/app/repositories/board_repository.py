from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskboard.domain.entities import Board


class IBoardRepository(ABC):
    """Board repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, board_id: UUID) -> Optional[Board]:
        """Get board by ID"""
        pass

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> List[Board]:
        """Get all boards of an organization, newest first"""
        pass

    @abstractmethod
    async def create(self, board: Board) -> Board:
        """Create a new board"""
        pass

    @abstractmethod
    async def delete(self, board_id: UUID) -> None:
        """Delete board; storage cascades to lists, cards and activities"""
        pass
