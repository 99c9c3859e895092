from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskboard.domain.entities import Membership


class DuplicateMembershipError(Exception):
    """Raised when the user already belongs to the organization"""


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: str, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def get_by_organization_and_email(
        self, organization_id: UUID, email: str
    ) -> Optional[Membership]:
        """Get membership recorded for an email in an organization"""
        pass

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships of an organization, ordered by join time"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass
