from uuid import uuid4

import pytest

from taskboard.app.use_cases.boards import CreateBoardUseCase, DeleteBoardUseCase, GetBoardUseCase
from taskboard.app.use_cases.lists import (
    CreateListUseCase,
    DeleteListUseCase,
    RenameListUseCase,
    ReorderListsUseCase,
)
from taskboard.domain.entities import (
    DEFAULT_BOARD_COLOR,
    ActivityAction,
    BoardList,
    Card,
    MembershipRole,
)


@pytest.mark.asyncio
async def test_create_board_uses_default_color(mock_uow, organization, grant_role):
    grant_role(MembershipRole.member)

    result = await CreateBoardUseCase(mock_uow).execute(
        "user_caller", organization.id, "Sprint 1"
    )

    assert result.is_ok()
    assert result.value.color == DEFAULT_BOARD_COLOR
    assert result.value.created_by == "user_caller"


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [MembershipRole.member, MembershipRole.admin])
async def test_only_owner_deletes_board(mock_uow, organization, board, grant_role, role):
    grant_role(role)

    result = await DeleteBoardUseCase(mock_uow).execute("user_caller", organization.id, board.id)

    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.boards.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_board_through_other_organization(mock_uow, board, grant_role):
    grant_role(MembershipRole.owner)

    result = await DeleteBoardUseCase(mock_uow).execute("user_caller", uuid4(), board.id)

    assert result.error.code == "BOARD_NOT_FOUND"


@pytest.mark.asyncio
async def test_board_detail_groups_cards_by_list(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    first = BoardList(id=uuid4(), board_id=board.id, title="A", sort_order=0)
    second = BoardList(id=uuid4(), board_id=board.id, title="B", sort_order=1)
    card = Card(id=uuid4(), list_id=second.id, title="Card", sort_order=0, created_by="u")
    mock_uow.lists.get_siblings.return_value = [first, second]
    mock_uow.cards.get_by_list_ids.return_value = [card]

    result = await GetBoardUseCase(mock_uow).execute("user_caller", board.id)

    assert [item.title for item in result.value.lists] == ["A", "B"]
    assert result.value.lists[0].cards == []
    assert [item.id for item in result.value.lists[1].cards] == [card.id]


@pytest.mark.asyncio
async def test_create_list_appends(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    mock_uow.lists.get_max_sort_order.return_value = 2

    result = await CreateListUseCase(mock_uow).execute("user_caller", board.id, "Review")

    assert result.value.sort_order == 3
    assert result.value.board_id == board.id


@pytest.mark.asyncio
async def test_create_list_requires_title(mock_uow, board):
    result = await CreateListUseCase(mock_uow).execute("user_caller", board.id, "")

    assert result.error.code == "INVALID_TITLE"


@pytest.mark.asyncio
async def test_rename_keeps_position(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    board_list = BoardList(id=uuid4(), board_id=board.id, title="Old", sort_order=3)
    mock_uow.lists.get_by_id.return_value = board_list

    result = await RenameListUseCase(mock_uow).execute(
        "user_caller", board.id, board_list.id, "New"
    )

    assert result.value.title == "New"
    assert result.value.sort_order == 3


@pytest.mark.asyncio
async def test_reorder_stale_snapshot_rolls_back(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    board_list = BoardList(id=uuid4(), board_id=board.id, title="A", sort_order=0)
    mock_uow.lists.get_siblings.return_value = [board_list]

    result = await ReorderListsUseCase(mock_uow).execute(
        "user_caller", board.id, board_list.id, 0, [board_list.id, uuid4()]
    )

    assert result.error.code == "STALE_ORDER"
    mock_uow.rollback.assert_awaited()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_list_does_not_renumber(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    board_list = BoardList(id=uuid4(), board_id=board.id, title="A", sort_order=0)
    mock_uow.lists.get_by_id.return_value = board_list
    mock_uow.cards.get_siblings.return_value = []

    result = await DeleteListUseCase(mock_uow).execute("user_caller", board.id, board_list.id)

    assert result.is_ok()
    mock_uow.lists.delete.assert_awaited_once_with(board_list.id)
    mock_uow.lists.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_list_records_deletion_of_its_cards(mock_uow, board, grant_role):
    grant_role(MembershipRole.member)
    board_list = BoardList(id=uuid4(), board_id=board.id, title="A", sort_order=0)
    cards = [
        Card(id=uuid4(), list_id=board_list.id, title=title, sort_order=index, created_by="u")
        for index, title in enumerate(["One", "Two"])
    ]
    mock_uow.lists.get_by_id.return_value = board_list
    mock_uow.cards.get_siblings.return_value = cards

    result = await DeleteListUseCase(mock_uow).execute("user_caller", board.id, board_list.id)

    assert result.is_ok()
    recorded = [call.args[0] for call in mock_uow.activities.create.await_args_list]
    assert [activity.card_id for activity in recorded] == [card.id for card in cards]
    assert {activity.action for activity in recorded} == {ActivityAction.deleted}
    assert [activity.detail for activity in recorded] == ['Card deleted: "One"', 'Card deleted: "Two"']
    mock_uow.lists.delete.assert_awaited_once_with(board_list.id)
