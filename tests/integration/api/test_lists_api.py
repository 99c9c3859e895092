import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import (
    API,
    add_member,
    create_board,
    create_card,
    create_list,
    create_organization,
)
from tests.utils.auth import bearer


async def board_with_member(client: AsyncClient):
    organization_id = await create_organization(client, "user_owner")
    await add_member(client, "user_owner", organization_id, "user_member")
    board_id = await create_board(client, "user_member", organization_id)
    return organization_id, board_id


@pytest.mark.asyncio
async def test_lists_are_appended(client: AsyncClient):
    _, board_id = await board_with_member(client)

    first = await create_list(client, "user_member", board_id, "To Do")
    second = await create_list(client, "user_member", board_id, "Done")

    assert first["sort_order"] == 0
    assert second["sort_order"] == 1


@pytest.mark.asyncio
async def test_reorder_lists_is_idempotent(client: AsyncClient):
    _, board_id = await board_with_member(client)
    first = await create_list(client, "user_member", board_id, "L1")
    second = await create_list(client, "user_member", board_id, "L2")
    url = f"{API}/boards/{board_id}/lists/{second['id']}/sort"
    payload = {"new_index": 0, "list_ids": [first["id"], second["id"]]}

    response = await client.put(url, json=payload, headers=bearer("user_member"))
    assert response.status_code == 200
    assert [item["title"] for item in response.json()["data"]] == ["L2", "L1"]

    repeated = await client.put(url, json=payload, headers=bearer("user_member"))
    assert repeated.status_code == 200
    assert [item["title"] for item in repeated.json()["data"]] == ["L2", "L1"]
    assert [item["sort_order"] for item in repeated.json()["data"]] == [0, 1]

    listed = await client.get(f"{API}/boards/{board_id}/lists", headers=bearer("user_member"))
    assert [item["title"] for item in listed.json()["data"]] == ["L2", "L1"]


@pytest.mark.asyncio
async def test_reorder_with_stale_snapshot(client: AsyncClient):
    _, board_id = await board_with_member(client)
    first = await create_list(client, "user_member", board_id, "L1")
    second = await create_list(client, "user_member", board_id, "L2")
    await client.delete(f"{API}/boards/{board_id}/lists/{second['id']}", headers=bearer("user_member"))

    response = await client.put(
        f"{API}/boards/{board_id}/lists/{first['id']}/sort",
        json={"new_index": 1, "list_ids": [first["id"], second["id"]]},
        headers=bearer("user_member"),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "STALE_ORDER"


@pytest.mark.asyncio
async def test_reorder_item_not_in_snapshot(client: AsyncClient):
    _, board_id = await board_with_member(client)
    first = await create_list(client, "user_member", board_id, "L1")
    second = await create_list(client, "user_member", board_id, "L2")

    response = await client.put(
        f"{API}/boards/{board_id}/lists/{second['id']}/sort",
        json={"new_index": 0, "list_ids": [first["id"]]},
        headers=bearer("user_member"),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ORDER"


@pytest.mark.asyncio
async def test_rename_and_delete_list(client: AsyncClient):
    _, board_id = await board_with_member(client)
    first = await create_list(client, "user_member", board_id, "L1")
    second = await create_list(client, "user_member", board_id, "L2")

    renamed = await client.patch(
        f"{API}/boards/{board_id}/lists/{first['id']}",
        json={"title": "Backlog"},
        headers=bearer("user_member"),
    )
    assert renamed.status_code == 200
    assert renamed.json()["data"]["title"] == "Backlog"

    await client.delete(f"{API}/boards/{board_id}/lists/{first['id']}", headers=bearer("user_member"))
    third = await create_list(client, "user_member", board_id, "L3")

    # gaps are left as they are; appends still go last
    assert third["sort_order"] == 2
    listed = await client.get(f"{API}/boards/{board_id}/lists", headers=bearer("user_member"))
    assert [item["id"] for item in listed.json()["data"]] == [second["id"], third["id"]]


@pytest.mark.asyncio
async def test_list_of_another_board_is_not_found(client: AsyncClient):
    organization_id, board_id = await board_with_member(client)
    other_board_id = await create_board(client, "user_member", organization_id, "Other")
    foreign = await create_list(client, "user_member", other_board_id, "Foreign")

    response = await client.patch(
        f"{API}/boards/{board_id}/lists/{foreign['id']}",
        json={"title": "Hijacked"},
        headers=bearer("user_member"),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "LIST_NOT_FOUND"


@pytest.mark.asyncio
async def test_board_detail_and_owner_delete(client: AsyncClient):
    organization_id, board_id = await board_with_member(client)
    todo = await create_list(client, "user_member", board_id, "To Do")
    await create_card(client, "user_member", board_id, todo["id"], "First")
    await create_card(client, "user_member", board_id, todo["id"], "Second")

    detail = await client.get(
        f"{API}/organizations/{organization_id}/boards/{board_id}", headers=bearer("user_member")
    )
    assert detail.status_code == 200
    data = detail.json()["data"]
    assert data["color"] == "#3b82f6"
    assert [card["title"] for card in data["lists"][0]["cards"]] == ["First", "Second"]

    deleted = await client.delete(
        f"{API}/organizations/{organization_id}/boards/{board_id}", headers=bearer("user_owner")
    )
    assert deleted.status_code == 200

    gone = await client.get(
        f"{API}/organizations/{organization_id}/boards/{board_id}", headers=bearer("user_owner")
    )
    assert gone.status_code == 404
