from uuid import uuid4

import pytest

from taskboard.app.services.activity_recorder import ActivityRecorder
from taskboard.domain.entities import ActivityAction


@pytest.mark.asyncio
async def test_records_inside_savepoint(mock_uow):
    card_id, board_id = uuid4(), uuid4()

    await ActivityRecorder(mock_uow).record(
        card_id, board_id, ActivityAction.created, "user_1", 'Card created: "A"'
    )

    mock_uow.savepoint.assert_called_once()
    activity = mock_uow.activities.create.await_args.args[0]
    assert activity.card_id == card_id
    assert activity.board_id == board_id
    assert activity.action == ActivityAction.created
    assert activity.actor_id == "user_1"
    assert activity.detail == 'Card created: "A"'


@pytest.mark.asyncio
async def test_failure_is_logged_and_swallowed(mock_uow, caplog):
    mock_uow.activities.create.side_effect = RuntimeError("disk full")

    await ActivityRecorder(mock_uow).record(
        uuid4(), uuid4(), ActivityAction.moved, "user_1"
    )

    assert "Failed to record moved activity" in caplog.text
