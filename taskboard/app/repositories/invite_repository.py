from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from taskboard.domain.entities import Invite


class IInviteRepository(ABC):
    """Invite repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invite_id: UUID) -> Optional[Invite]:
        """Get invite by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invite]:
        """Get invite by token"""
        pass

    @abstractmethod
    async def get_pending_by_organization_id(
        self, organization_id: UUID, now: datetime
    ) -> List[Invite]:
        """Get unaccepted, unexpired invites of an organization, newest first"""
        pass

    @abstractmethod
    async def create(self, invite: Invite) -> Invite:
        """Create a new invite"""
        pass

    @abstractmethod
    async def mark_accepted(self, invite_id: UUID, accepted_at: datetime) -> bool:
        """
        Stamp accepted_at if it is still unset.

        Returns False when another request consumed the invite first.
        """
        pass

    @abstractmethod
    async def delete(self, invite_id: UUID) -> None:
        """Delete invite"""
        pass
