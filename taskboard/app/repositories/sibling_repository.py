from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class ISiblingRepository(ABC, Generic[T]):
    """
    Access to items ordered by sort_order inside a container.

    Lists are siblings within a board, cards within a list.
    """

    @abstractmethod
    async def get_siblings(self, container_id: UUID) -> List[T]:
        """Get all items of a container ordered by (sort_order, created_at, id)"""
        pass

    @abstractmethod
    async def get_max_sort_order(self, container_id: UUID) -> Optional[int]:
        """Highest sort_order in a container, None when it is empty"""
        pass

    @abstractmethod
    async def update(self, item: T) -> T:
        """Update existing item"""
        pass
