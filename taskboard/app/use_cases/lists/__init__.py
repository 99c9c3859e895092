"""
List Use Cases
"""

from .board_lists import load_lists_with_cards
from .create_list_use_case import CreateListUseCase
from .delete_list_use_case import DeleteListUseCase
from .dtos import ListResponse, ListWithCardsResponse
from .get_board_lists_use_case import GetBoardListsUseCase
from .rename_list_use_case import RenameListUseCase
from .reorder_lists_use_case import ReorderListsUseCase

__all__ = [
    "CreateListUseCase",
    "GetBoardListsUseCase",
    "RenameListUseCase",
    "ReorderListsUseCase",
    "DeleteListUseCase",
    "ListResponse",
    "ListWithCardsResponse",
    "load_lists_with_cards",
]
