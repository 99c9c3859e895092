from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskboard.api.error import raise_for_error
from taskboard.api.response import ApiResponse
from taskboard.api.utils.params import parse_id
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.organizations import (
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    DeleteResponse,
    GetOrganizationUseCase,
    ListMembersUseCase,
    ListOrganizationsUseCase,
    MemberResponse,
    OrganizationDetailResponse,
    OrganizationResponse,
)
from taskboard.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/organizations", tags=["Organizations"])


class CreateOrganizationRequest(BaseModel):
    """
    Create organization HTTP request payload

    Blank names are rejected by the use case with INVALID_NAME.
    """

    name: Optional[str] = Field(None, description="Organization name")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[OrganizationDetailResponse],
)
async def create_organization(
    request: CreateOrganizationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    The caller becomes the organization's first owner.

    Raises:
        - 400 Bad Request: INVALID_NAME
        - 401 Unauthorized: Missing or invalid token
    """
    use_case = CreateOrganizationUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], request.name, current_user.get("email")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get("", response_model=ApiResponse[List[OrganizationResponse]])
async def list_organizations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the organizations the caller belongs to, newest first."""
    result = await ListOrganizationsUseCase(uow).execute(current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get(
    "/{organization_id}", response_model=ApiResponse[OrganizationDetailResponse]
)
async def get_organization(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Organization

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await GetOrganizationUseCase(uow).execute(
        current_user["user_id"], parse_id(organization_id, "organization ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete("/{organization_id}", response_model=ApiResponse[DeleteResponse])
async def delete_organization(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Organization

    Owners only. Members, boards, lists, cards, activities and invites go
    with it.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_ROLE
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await DeleteOrganizationUseCase(uow).execute(
        current_user["user_id"], parse_id(organization_id, "organization ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get(
    "/{organization_id}/members", response_model=ApiResponse[List[MemberResponse]]
)
async def list_members(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List members of an organization in join order. Any member may call it."""
    result = await ListMembersUseCase(uow).execute(
        current_user["user_id"], parse_id(organization_id, "organization ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
