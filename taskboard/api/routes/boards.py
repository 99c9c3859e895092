from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskboard.api.error import raise_for_error
from taskboard.api.response import ApiResponse
from taskboard.api.utils.params import parse_id
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.boards import (
    BoardDetailResponse,
    BoardResponse,
    CreateBoardUseCase,
    DeleteBoardUseCase,
    GetBoardUseCase,
    ListBoardsUseCase,
)
from taskboard.app.use_cases.organizations import DeleteResponse
from taskboard.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/organizations/{organization_id}/boards", tags=["Boards"])


class CreateBoardRequest(BaseModel):
    """Create board HTTP request payload"""

    title: Optional[str] = Field(None, description="Board title")
    description: Optional[str] = Field(None, description="Optional description")
    color: Optional[str] = Field(None, description="Hex color, defaults to #3b82f6")


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[BoardResponse]
)
async def create_board(
    organization_id: str,
    request: CreateBoardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Board

    Any member of the organization can create boards.

    Raises:
        - 400 Bad Request: INVALID_TITLE
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await CreateBoardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(organization_id, "organization ID"),
        request.title,
        request.description,
        request.color,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get("", response_model=ApiResponse[List[BoardResponse]])
async def list_boards(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListBoardsUseCase(uow).execute(
        current_user["user_id"], parse_id(organization_id, "organization ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get("/{board_id}", response_model=ApiResponse[BoardDetailResponse])
async def get_board(
    organization_id: str,
    board_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Board with its lists and cards, in display order."""
    result = await GetBoardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(organization_id, "organization ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete("/{board_id}", response_model=ApiResponse[DeleteResponse])
async def delete_board(
    organization_id: str,
    board_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Board

    Owners only.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_ROLE
        - 404 Not Found: BOARD_NOT_FOUND
    """
    result = await DeleteBoardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(organization_id, "organization ID"),
        parse_id(board_id, "board ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
