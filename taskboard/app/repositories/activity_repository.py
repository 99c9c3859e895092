from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from taskboard.domain.entities import Activity


class IActivityRepository(ABC):
    """Activity repository interface - application layer"""

    @abstractmethod
    async def create(self, activity: Activity) -> Activity:
        """Create a new activity (immutable)"""
        pass

    @abstractmethod
    async def get_by_card_id(self, card_id: UUID) -> List[Activity]:
        """Get activities of a card, most recent first"""
        pass
