"""
Organization Use Cases
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .delete_organization_use_case import DeleteOrganizationUseCase
from .dtos import (
    DeleteResponse,
    MemberResponse,
    OrganizationDetailResponse,
    OrganizationResponse,
)
from .get_organization_use_case import GetOrganizationUseCase
from .list_members_use_case import ListMembersUseCase
from .list_organizations_use_case import ListOrganizationsUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "DeleteOrganizationUseCase",
    "ListMembersUseCase",
    "OrganizationResponse",
    "OrganizationDetailResponse",
    "MemberResponse",
    "DeleteResponse",
]
