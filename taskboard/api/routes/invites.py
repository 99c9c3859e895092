from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from taskboard.api.error import raise_for_error
from taskboard.api.response import ApiResponse
from taskboard.api.utils.params import parse_id
from taskboard.app.services.invite_mailer import send_invite_email
from taskboard.app.services.mail_transport import IMailTransport
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.invites import (
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CancelInviteResponse,
    CancelInviteUseCase,
    CreateInviteResponse,
    CreateInviteUseCase,
    InviteResponse,
    ListInvitesUseCase,
)
from taskboard.depends import get_current_user, get_mail_transport, get_unit_of_work

router = APIRouter(tags=["Invites"])


class CreateInviteRequest(BaseModel):
    """
    Create invite HTTP request payload

    The email is normalized and checked by the use case (INVALID_EMAIL).
    """

    email: Optional[str] = Field(None, description="Email address to invite")
    role: Optional[str] = Field("member", description="Role granted on acceptance")


@router.post(
    "/organizations/{organization_id}/invites",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[CreateInviteResponse],
)
async def create_invite(
    organization_id: str,
    request: CreateInviteRequest,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_transport: IMailTransport = Depends(get_mail_transport),
):
    """
    Create Invite

    Owners only. The invitation email is sent after the response; a mail
    failure is logged and does not undo the invite.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, INVALID_ROLE
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_ROLE
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER
    """
    use_case = CreateInviteUseCase(
        uow,
        app_base_url=ApplicationConfig.APP_BASE_URL,
        expiry_days=ApplicationConfig.INVITE_EXPIRY_DAYS,
    )
    result = await use_case.execute(
        current_user["user_id"],
        parse_id(organization_id, "organization ID"),
        request.email,
        request.role,
    )

    if result.is_err():
        raise_for_error(result.error)

    created = result.value
    background_tasks.add_task(
        send_invite_email,
        mail_transport,
        created.invite.email,
        created.organization_name,
        created.invite_link,
        ApplicationConfig.INVITE_EXPIRY_DAYS,
    )

    return ApiResponse(data=created)


@router.get(
    "/organizations/{organization_id}/invites",
    response_model=ApiResponse[List[InviteResponse]],
)
async def list_invites(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invites of an organization, newest first. Owners only."""
    result = await ListInvitesUseCase(uow).execute(
        current_user["user_id"], parse_id(organization_id, "organization ID")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete(
    "/organizations/{organization_id}/invites/{invite_id}",
    response_model=ApiResponse[CancelInviteResponse],
)
async def cancel_invite(
    organization_id: str,
    invite_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Invite

    Owners only; the invite is deleted whatever its state.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, INSUFFICIENT_ROLE
        - 404 Not Found: ORGANIZATION_NOT_FOUND, INVITE_NOT_FOUND
    """
    result = await CancelInviteUseCase(uow).execute(
        current_user["user_id"],
        parse_id(organization_id, "organization ID"),
        parse_id(invite_id, "invite ID"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.post(
    "/invites/{token}/accept", response_model=ApiResponse[AcceptInviteResponse]
)
async def accept_invite(
    token: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invite

    Joins the caller to the invite's organization with the invited role.

    Raises:
        - 404 Not Found: INVITE_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_ACCEPTED, ALREADY_MEMBER
        - 410 Gone: INVITE_EXPIRED
    """
    result = await AcceptInviteUseCase(uow).execute(
        token, current_user["user_id"], current_user.get("email")
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
