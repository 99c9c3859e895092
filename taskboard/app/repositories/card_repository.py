from abc import abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from taskboard.domain.entities import Card

from .sibling_repository import ISiblingRepository


class ICardRepository(ISiblingRepository[Card]):
    """Card repository interface - siblings are the cards of a list"""

    @abstractmethod
    async def get_by_id(self, card_id: UUID) -> Optional[Card]:
        """Get card by ID"""
        pass

    @abstractmethod
    async def get_by_list_ids(self, list_ids: List[UUID]) -> List[Card]:
        """Get cards of several lists ordered by (sort_order, created_at, id)"""
        pass

    @abstractmethod
    async def get_min_sort_order(self, list_id: UUID) -> Optional[int]:
        """Lowest sort_order among the cards of a list, None when it is empty"""
        pass

    @abstractmethod
    async def create(self, card: Card) -> Card:
        """Create a new card"""
        pass

    @abstractmethod
    async def move_to_list(
        self,
        card_id: UUID,
        source_list_id: UUID,
        target_list_id: UUID,
        sort_order: int,
        moved_at: datetime,
    ) -> bool:
        """
        Move a card only if it still belongs to source_list_id.

        Returns False (and changes nothing) when the card is not in the
        source list.
        """
        pass

    @abstractmethod
    async def delete(self, card_id: UUID) -> None:
        """Delete card"""
        pass
