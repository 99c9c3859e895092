"""
Board Use Cases
"""

from .create_board_use_case import CreateBoardUseCase
from .delete_board_use_case import DeleteBoardUseCase
from .dtos import BoardDetailResponse, BoardResponse
from .get_board_use_case import GetBoardUseCase
from .list_boards_use_case import ListBoardsUseCase

__all__ = [
    "CreateBoardUseCase",
    "ListBoardsUseCase",
    "GetBoardUseCase",
    "DeleteBoardUseCase",
    "BoardResponse",
    "BoardDetailResponse",
]
