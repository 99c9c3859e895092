from typing import Optional
from uuid import UUID

from taskboard.app.services.access_guard import AccessGuard
from taskboard.app.services.unit_of_work import UnitOfWork
from taskboard.app.use_cases.lookups import resolve_list
from taskboard.app.use_cases.validation import clean_required_text
from taskboard.libs.result import Error, Result, Return

from .dtos import ListResponse


class RenameListUseCase:
    """Change a list's title. Its position is untouched."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[str], board_id: UUID, list_id: UUID, title: Optional[str]
    ) -> Result[ListResponse]:
        clean_title = clean_required_text(title)
        if clean_title is None:
            return Return.err(Error("INVALID_TITLE", "List title is required"))

        async with self.uow:
            access = await AccessGuard(self.uow).authorize_board(user_id, board_id)
            if access.is_err():
                return Return.err(access.error)

            found = await resolve_list(self.uow, board_id, list_id)
            if found.is_err():
                return Return.err(found.error)

            board_list = found.value
            board_list.title = clean_title
            board_list = await self.uow.lists.update(board_list)
            await self.uow.commit()

            return Return.ok(ListResponse.model_validate(board_list))
