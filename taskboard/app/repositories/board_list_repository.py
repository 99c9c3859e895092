from abc import abstractmethod
from typing import Optional
from uuid import UUID

from taskboard.domain.entities import BoardList

from .sibling_repository import ISiblingRepository


class IBoardListRepository(ISiblingRepository[BoardList]):
    """BoardList repository interface - siblings are the lists of a board"""

    @abstractmethod
    async def get_by_id(self, list_id: UUID) -> Optional[BoardList]:
        """Get list by ID"""
        pass

    @abstractmethod
    async def create(self, board_list: BoardList) -> BoardList:
        """Create a new list"""
        pass

    @abstractmethod
    async def delete(self, list_id: UUID) -> None:
        """Delete list; storage cascades to its cards"""
        pass
