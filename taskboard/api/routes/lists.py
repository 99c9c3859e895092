from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskboard.api.error import raise_for_error
from taskboard.api.response import ApiResponse
from taskboard.api.utils.params import parse_id
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lists import (
    CreateListUseCase,
    DeleteListUseCase,
    GetBoardListsUseCase,
    ListResponse,
    ListWithCardsResponse,
    RenameListUseCase,
    ReorderListsUseCase,
)
from taskboard.app.use_cases.organizations import DeleteResponse
from taskboard.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/boards/{board_id}/lists", tags=["Lists"])


class ListTitleRequest(BaseModel):
    """Create / rename list HTTP request payload"""

    title: Optional[str] = Field(None, description="List title")


class ReorderListsRequest(BaseModel):
    """
    Reorder lists HTTP request payload

    list_ids is the board's list order as the client last rendered it.
    """

    new_index: int = Field(..., description="Zero-based target position")
    list_ids: List[UUID] = Field(..., description="Observed list order")


@router.get("", response_model=ApiResponse[List[ListWithCardsResponse]])
async def get_lists(
    board_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetBoardListsUseCase(uow).execute(
        current_user["user_id"], parse_id(board_id, "board ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[ListResponse]
)
async def create_list(
    board_id: str,
    request: ListTitleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create List

    The list is appended after the board's existing lists.

    Raises:
        - 400 Bad Request: INVALID_TITLE
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: BOARD_NOT_FOUND
    """
    result = await CreateListUseCase(uow).execute(
        current_user["user_id"], parse_id(board_id, "board ID"), request.title
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.patch("/{list_id}", response_model=ApiResponse[ListResponse])
async def rename_list(
    board_id: str,
    list_id: str,
    request: ListTitleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RenameListUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        request.title,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.put("/{list_id}/sort", response_model=ApiResponse[List[ListResponse]])
async def reorder_lists(
    board_id: str,
    list_id: str,
    request: ReorderListsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reorder Lists

    Moves the list to new_index within the observed order. Repeating the
    same request leaves the order unchanged.

    Raises:
        - 400 Bad Request: INVALID_ORDER
        - 404 Not Found: BOARD_NOT_FOUND, LIST_NOT_FOUND
        - 409 Conflict: STALE_ORDER
    """
    result = await ReorderListsUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        request.new_index,
        request.list_ids,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete("/{list_id}", response_model=ApiResponse[DeleteResponse])
async def delete_list(
    board_id: str,
    list_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a list together with its cards."""
    result = await DeleteListUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
