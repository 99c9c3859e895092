import pytest
from httpx import AsyncClient

from taskboard.adapter.repositories.activity_repository import ActivityRepository
from tests.utils.api_helpers import (
    API,
    create_board,
    create_card,
    create_list,
    create_organization,
)
from tests.utils.auth import bearer

OWNER = "user_owner"


async def board_with_two_lists(client: AsyncClient):
    organization_id = await create_organization(client, OWNER)
    board_id = await create_board(client, OWNER, organization_id)
    source = await create_list(client, OWNER, board_id, "A")
    target = await create_list(client, OWNER, board_id, "B")
    return board_id, source, target


def card_url(board_id, list_id, card_id=None, action=None):
    url = f"{API}/boards/{board_id}/lists/{list_id}/cards"
    if card_id:
        url = f"{url}/{card_id}"
    if action:
        url = f"{url}/{action}"
    return url


@pytest.mark.asyncio
async def test_create_card_defaults(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)

    first = await create_card(client, OWNER, board_id, source["id"], "Write plan")
    second = await create_card(client, OWNER, board_id, source["id"], "Review")

    assert first["priority"] == "medium"
    assert first["completed"] is False
    assert (first["sort_order"], second["sort_order"]) == (0, 1)


@pytest.mark.asyncio
async def test_invalid_priority(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)

    response = await client.post(
        card_url(board_id, source["id"]),
        json={"title": "Task", "priority": "urgent"},
        headers=bearer(OWNER),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PRIORITY"


@pytest.mark.asyncio
async def test_moved_card_survives_source_list_deletion(client: AsyncClient):
    board_id, source, target = await board_with_two_lists(client)
    existing = await create_card(client, OWNER, board_id, target["id"], "Already there")
    card = await create_card(client, OWNER, board_id, source["id"], "Traveller")

    moved = await client.post(
        card_url(board_id, source["id"], card["id"], "move"),
        json={"target_list_id": target["id"]},
        headers=bearer(OWNER),
    )
    assert moved.status_code == 200
    assert moved.json()["data"]["list_id"] == target["id"]
    assert moved.json()["data"]["sort_order"] == -1

    deleted = await client.delete(
        f"{API}/boards/{board_id}/lists/{source['id']}", headers=bearer(OWNER)
    )
    assert deleted.status_code == 200

    listed = await client.get(f"{API}/boards/{board_id}/lists", headers=bearer(OWNER))
    (remaining,) = listed.json()["data"]
    assert remaining["id"] == target["id"]
    assert {item["id"] for item in remaining["cards"]} == {card["id"], existing["id"]}

    history = await client.get(
        card_url(board_id, target["id"], card["id"], "activities"), headers=bearer(OWNER)
    )
    entries = history.json()["data"]
    assert [entry["action"] for entry in entries] == ["moved", "created"]
    assert entries[0]["detail"] == 'Moved from "A" to "B"'


@pytest.mark.asyncio
async def test_move_from_wrong_source_list(client: AsyncClient):
    board_id, source, target = await board_with_two_lists(client)
    card = await create_card(client, OWNER, board_id, source["id"], "Stay")

    response = await client.post(
        card_url(board_id, target["id"], card["id"], "move"),
        json={"target_list_id": source["id"]},
        headers=bearer(OWNER),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CARD_NOT_IN_SOURCE_LIST"

    listed = await client.get(f"{API}/boards/{board_id}/lists", headers=bearer(OWNER))
    cards_by_list = {item["id"]: item["cards"] for item in listed.json()["data"]}
    assert [item["id"] for item in cards_by_list[source["id"]]] == [card["id"]]
    assert cards_by_list[target["id"]] == []


@pytest.mark.asyncio
async def test_reorder_cards(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)
    first = await create_card(client, OWNER, board_id, source["id"], "One")
    second = await create_card(client, OWNER, board_id, source["id"], "Two")
    third = await create_card(client, OWNER, board_id, source["id"], "Three")

    response = await client.put(
        card_url(board_id, source["id"], third["id"], "sort"),
        json={"new_index": 0, "card_ids": [first["id"], second["id"], third["id"]]},
        headers=bearer(OWNER),
    )

    assert response.status_code == 200
    assert [item["title"] for item in response.json()["data"]] == ["Three", "One", "Two"]


@pytest.mark.asyncio
async def test_update_and_complete_record_history(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)
    card = await create_card(client, OWNER, board_id, source["id"], "Draft")

    updated = await client.patch(
        card_url(board_id, source["id"], card["id"]),
        json={"title": "Final", "priority": "high"},
        headers=bearer(OWNER),
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Final"
    assert updated.json()["data"]["priority"] == "high"

    completed = await client.patch(
        card_url(board_id, source["id"], card["id"], "complete"),
        json={"completed": True},
        headers=bearer(OWNER),
    )
    assert completed.status_code == 200
    assert completed.json()["data"]["completed"] is True

    history = await client.get(
        card_url(board_id, source["id"], card["id"], "activities"), headers=bearer(OWNER)
    )
    details = [entry["detail"] for entry in history.json()["data"]]
    assert details == [
        'Marked as done: "Final"',
        'Renamed from "Draft" to "Final"; Priority set to high',
        'Card created: "Draft"',
    ]


@pytest.mark.asyncio
async def test_history_outlives_deleted_card(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)
    card = await create_card(client, OWNER, board_id, source["id"], "Temporary")

    deleted = await client.delete(card_url(board_id, source["id"], card["id"]), headers=bearer(OWNER))
    assert deleted.status_code == 200

    again = await client.delete(card_url(board_id, source["id"], card["id"]), headers=bearer(OWNER))
    assert again.status_code == 404
    assert again.json()["error"]["code"] == "CARD_NOT_FOUND"

    history = await client.get(
        card_url(board_id, source["id"], card["id"], "activities"), headers=bearer(OWNER)
    )
    assert [entry["action"] for entry in history.json()["data"]] == ["deleted", "created"]


@pytest.mark.asyncio
async def test_outsider_cannot_touch_cards(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)

    response = await client.post(
        card_url(board_id, source["id"]), json={"title": "Sneaky"}, headers=bearer("user_outsider")
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_A_MEMBER"


async def titles_by_list(client: AsyncClient, board_id: str) -> dict:
    listed = await client.get(f"{API}/boards/{board_id}/lists", headers=bearer(OWNER))
    assert listed.status_code == 200
    return {item["id"]: [card["title"] for card in item["cards"]] for item in listed.json()["data"]}


@pytest.mark.asyncio
async def test_moved_card_lands_ahead_of_existing_cards(client: AsyncClient):
    board_id, source, target = await board_with_two_lists(client)
    await create_card(client, OWNER, board_id, target["id"], "Already in B")
    await create_card(client, OWNER, board_id, target["id"], "Also in B")
    first = await create_card(client, OWNER, board_id, source["id"], "First mover")
    second = await create_card(client, OWNER, board_id, source["id"], "Second mover")

    for card in (first, second):
        moved = await client.post(
            card_url(board_id, source["id"], card["id"], "move"),
            json={"target_list_id": target["id"]},
            headers=bearer(OWNER),
        )
        assert moved.status_code == 200

    assert (await titles_by_list(client, board_id))[target["id"]] == [
        "Second mover",
        "First mover",
        "Already in B",
        "Also in B",
    ]


@pytest.mark.asyncio
async def test_move_into_list_starting_above_zero_uses_zero(client: AsyncClient):
    board_id, source, target = await board_with_two_lists(client)
    gone = await create_card(client, OWNER, board_id, target["id"], "Gone")
    kept = await create_card(client, OWNER, board_id, target["id"], "Kept")
    await client.delete(card_url(board_id, target["id"], gone["id"]), headers=bearer(OWNER))
    card = await create_card(client, OWNER, board_id, source["id"], "Mover")

    moved = await client.post(
        card_url(board_id, source["id"], card["id"], "move"),
        json={"target_list_id": target["id"]},
        headers=bearer(OWNER),
    )

    assert moved.json()["data"]["sort_order"] == 0
    assert kept["sort_order"] == 1
    assert (await titles_by_list(client, board_id))[target["id"]] == ["Mover", "Kept"]


@pytest.mark.asyncio
async def test_deleting_list_closes_history_of_its_cards(client: AsyncClient):
    board_id, source, _ = await board_with_two_lists(client)
    card = await create_card(client, OWNER, board_id, source["id"], "Swept away")

    deleted = await client.delete(
        f"{API}/boards/{board_id}/lists/{source['id']}", headers=bearer(OWNER)
    )
    assert deleted.status_code == 200

    history = await client.get(
        card_url(board_id, source["id"], card["id"], "activities"), headers=bearer(OWNER)
    )
    assert history.status_code == 200
    entries = history.json()["data"]
    assert [entry["action"] for entry in entries] == ["deleted", "created"]
    assert entries[0]["detail"] == 'Card deleted: "Swept away"'


@pytest.mark.asyncio
async def test_history_failure_does_not_undo_card_creation(client: AsyncClient, monkeypatch):
    board_id, source, _ = await board_with_two_lists(client)
    original_create = ActivityRepository.create

    # Fails after the row has reached the database, inside the savepoint
    async def create_then_fail(self, activity):
        await original_create(self, activity)
        raise RuntimeError("history store unavailable")

    monkeypatch.setattr(ActivityRepository, "create", create_then_fail)

    card = await create_card(client, OWNER, board_id, source["id"], "Still here")

    assert (await titles_by_list(client, board_id))[source["id"]] == ["Still here"]

    history = await client.get(
        card_url(board_id, source["id"], card["id"], "activities"), headers=bearer(OWNER)
    )
    assert history.status_code == 200
    assert history.json()["data"] == []
