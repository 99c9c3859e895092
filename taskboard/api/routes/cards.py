from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskboard.api.error import raise_for_error
from taskboard.api.response import ApiResponse
from taskboard.api.utils.params import parse_id
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.cards import (
    ActivityResponse,
    CardResponse,
    CreateCardUseCase,
    DeleteCardUseCase,
    GetCardActivitiesUseCase,
    MoveCardUseCase,
    ReorderCardsUseCase,
    UpdateCardUseCase,
)
from taskboard.app.use_cases.organizations import DeleteResponse
from taskboard.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/boards/{board_id}/lists/{list_id}/cards", tags=["Cards"])


class CreateCardRequest(BaseModel):
    """Create card HTTP request payload"""

    title: Optional[str] = Field(None, description="Card title")
    description: Optional[str] = Field(None, description="Optional description")
    priority: Optional[str] = Field(None, description="low, medium or high")
    due_date: Optional[datetime] = Field(None, description="Optional due date")


class UpdateCardRequest(BaseModel):
    """
    Update card HTTP request payload

    Only the fields sent are changed; send null to clear description or due date.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None


class CompleteCardRequest(BaseModel):
    completed: bool = Field(..., description="New completion state")


class MoveCardRequest(BaseModel):
    target_list_id: UUID = Field(..., description="List of the same board to move into")


class ReorderCardsRequest(BaseModel):
    """
    Reorder cards HTTP request payload

    card_ids is the list's card order as the client last rendered it.
    """

    new_index: int = Field(..., description="Zero-based target position")
    card_ids: List[UUID] = Field(..., description="Observed card order")


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[CardResponse]
)
async def create_card(
    board_id: str,
    list_id: str,
    request: CreateCardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Card

    The card is appended to the list and a "created" activity is recorded.

    Raises:
        - 400 Bad Request: INVALID_TITLE, INVALID_PRIORITY
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: BOARD_NOT_FOUND, LIST_NOT_FOUND
    """
    result = await CreateCardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        request.title,
        request.description,
        request.priority,
        request.due_date,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.patch("/{card_id}", response_model=ApiResponse[CardResponse])
async def update_card(
    board_id: str,
    list_id: str,
    card_id: str,
    request: UpdateCardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Card

    Raises:
        - 400 Bad Request: INVALID_TITLE, INVALID_PRIORITY
        - 404 Not Found: BOARD_NOT_FOUND, LIST_NOT_FOUND, CARD_NOT_FOUND
    """
    result = await UpdateCardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        parse_id(card_id, "card ID"),
        request.model_dump(exclude_unset=True),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.patch("/{card_id}/complete", response_model=ApiResponse[CardResponse])
async def complete_card(
    board_id: str,
    list_id: str,
    card_id: str,
    request: CompleteCardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark a card as done or incomplete."""
    result = await UpdateCardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        parse_id(card_id, "card ID"),
        {"completed": request.completed},
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.post("/{card_id}/move", response_model=ApiResponse[CardResponse])
async def move_card(
    board_id: str,
    list_id: str,
    card_id: str,
    request: MoveCardRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Move Card

    Moves the card from list_id into target_list_id, first position.

    Raises:
        - 404 Not Found: BOARD_NOT_FOUND, LIST_NOT_FOUND, CARD_NOT_FOUND
        - 409 Conflict: CARD_NOT_IN_SOURCE_LIST
    """
    result = await MoveCardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        parse_id(card_id, "card ID"),
        request.target_list_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.put("/{card_id}/sort", response_model=ApiResponse[List[CardResponse]])
async def reorder_cards(
    board_id: str,
    list_id: str,
    card_id: str,
    request: ReorderCardsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reorder Cards

    Raises:
        - 400 Bad Request: INVALID_ORDER
        - 404 Not Found: BOARD_NOT_FOUND, LIST_NOT_FOUND, CARD_NOT_FOUND
        - 409 Conflict: STALE_ORDER
    """
    result = await ReorderCardsUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        parse_id(card_id, "card ID"),
        request.new_index,
        request.card_ids,
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete("/{card_id}", response_model=ApiResponse[DeleteResponse])
async def delete_card(
    board_id: str,
    list_id: str,
    card_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCardUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(list_id, "list ID"),
        parse_id(card_id, "card ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get("/{card_id}/activities", response_model=ApiResponse[List[ActivityResponse]])
async def get_card_activities(
    board_id: str,
    list_id: str,
    card_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Card history, most recent first.

    The card may have moved to another list or been deleted since; only
    the board scopes the lookup.
    """
    parse_id(list_id, "list ID")
    result = await GetCardActivitiesUseCase(uow).execute(
        current_user["user_id"],
        parse_id(board_id, "board ID"),
        parse_id(card_id, "card ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
