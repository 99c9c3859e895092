from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskboard.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_by_member(self, user_id: str) -> List[Organization]:
        """Get all organizations the user belongs to, newest first"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass

    @abstractmethod
    async def delete(self, organization_id: UUID) -> None:
        """Delete organization; storage cascades to everything it owns"""
        pass
