from datetime import timedelta
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from taskboard.domain.base import utcnow
from taskboard.domain.entities import Invite
from tests.utils.api_helpers import API, add_member, create_organization, invite
from tests.utils.auth import bearer


def token_of(created: dict) -> str:
    return created["invite_link"].rsplit("/", 1)[-1]


@pytest.mark.asyncio
async def test_create_invite_response(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner", "Acme")

    created = await invite(client, "user_owner", organization_id, " Dev@Example.com ", "admin")

    assert created["organization_name"] == "Acme"
    assert created["invite_link"].startswith("http")
    assert "/invite/" in created["invite_link"]
    assert len(token_of(created)) == 64
    assert created["invite"]["email"] == "dev@example.com"
    assert created["invite"]["role"] == "admin"
    assert created["invite"]["status"] == "pending"
    assert "token" not in created["invite"]


@pytest.mark.asyncio
async def test_invite_single_acceptance(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    created = await invite(client, "user_owner", organization_id, "dev@example.com", "member")
    accept_url = f"{API}/invites/{token_of(created)}/accept"

    first = await client.post(accept_url, headers=bearer("user_dev", "dev@example.com"))
    assert first.status_code == 200
    assert first.json()["data"]["role"] == "member"
    assert first.json()["data"]["organization_id"] == organization_id

    second = await client.post(accept_url, headers=bearer("user_dev", "dev@example.com"))
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "INVITE_ALREADY_ACCEPTED"

    third = await client.post(accept_url, headers=bearer("user_someone_else"))
    assert third.status_code == 409
    assert third.json()["error"]["code"] == "INVITE_ALREADY_ACCEPTED"

    members = await client.get(
        f"{API}/organizations/{organization_id}/members", headers=bearer("user_owner")
    )
    assert [member["user_id"] for member in members.json()["data"]] == ["user_owner", "user_dev"]


@pytest.mark.asyncio
async def test_expired_invite_always_fails(client: AsyncClient, db_session):
    organization_id = await create_organization(client, "user_owner")
    created = await invite(client, "user_owner", organization_id, "late@example.com", "member")

    stored = (
        await db_session.exec(select(Invite).where(Invite.id == UUID(created["invite"]["id"])))
    ).one()
    stored.expires_at = utcnow() - timedelta(seconds=1)
    db_session.add(stored)
    await db_session.commit()

    for _ in range(2):
        response = await client.post(
            f"{API}/invites/{token_of(created)}/accept", headers=bearer("user_late")
        )
        assert response.status_code == 410
        assert response.json()["error"]["code"] == "INVITE_EXPIRED"

    pending = await client.get(
        f"{API}/organizations/{organization_id}/invites", headers=bearer("user_owner")
    )
    assert pending.json()["data"] == []


@pytest.mark.asyncio
async def test_unknown_token(client: AsyncClient):
    response = await client.post(f"{API}/invites/{'0' * 64}/accept", headers=bearer("user_dev"))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITE_NOT_FOUND"


@pytest.mark.asyncio
async def test_member_cannot_accept_again_through_new_invite(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    await add_member(client, "user_owner", organization_id, "user_dev")

    created = await invite(client, "user_owner", organization_id, "other@example.com", "admin")
    response = await client.post(
        f"{API}/invites/{token_of(created)}/accept", headers=bearer("user_dev")
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_inviting_a_known_member_email(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    await add_member(client, "user_owner", organization_id, "user_dev")

    response = await client.post(
        f"{API}/organizations/{organization_id}/invites",
        json={"email": "USER_DEV@example.com"},
        headers=bearer("user_owner"),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, code",
    [
        ({"email": "nope"}, "INVALID_EMAIL"),
        ({"email": "dev@example.com", "role": "superuser"}, "INVALID_ROLE"),
    ],
)
async def test_invite_validation(client: AsyncClient, payload, code):
    organization_id = await create_organization(client, "user_owner")

    response = await client.post(
        f"{API}/organizations/{organization_id}/invites",
        json=payload,
        headers=bearer("user_owner"),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == code


@pytest.mark.asyncio
async def test_bad_invite_from_non_owner_is_forbidden(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    await add_member(client, "user_owner", organization_id, "user_member")

    response = await client.post(
        f"{API}/organizations/{organization_id}/invites",
        json={"email": "nope", "role": "superuser"},
        headers=bearer("user_member"),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_list_and_cancel(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    first = await invite(client, "user_owner", organization_id, "a@example.com", "member")
    second = await invite(client, "user_owner", organization_id, "b@example.com", "member")

    listed = await client.get(
        f"{API}/organizations/{organization_id}/invites", headers=bearer("user_owner")
    )
    assert [item["email"] for item in listed.json()["data"]] == ["b@example.com", "a@example.com"]

    cancelled = await client.delete(
        f"{API}/organizations/{organization_id}/invites/{first['invite']['id']}",
        headers=bearer("user_owner"),
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["data"] == {"status": "cancelled"}

    accept = await client.post(
        f"{API}/invites/{token_of(first)}/accept", headers=bearer("user_a")
    )
    assert accept.status_code == 404

    again = await client.delete(
        f"{API}/organizations/{organization_id}/invites/{first['invite']['id']}",
        headers=bearer("user_owner"),
    )
    assert again.status_code == 404
    assert again.json()["error"]["code"] == "INVITE_NOT_FOUND"

    still_pending = await client.get(
        f"{API}/organizations/{organization_id}/invites", headers=bearer("user_owner")
    )
    assert [item["id"] for item in still_pending.json()["data"]] == [second["invite"]["id"]]
