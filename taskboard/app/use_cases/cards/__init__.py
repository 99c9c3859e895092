"""
Card Use Cases
"""

from .create_card_use_case import CreateCardUseCase
from .delete_card_use_case import DeleteCardUseCase
from .dtos import ActivityResponse, CardResponse
from .get_card_activities_use_case import GetCardActivitiesUseCase
from .move_card_use_case import MoveCardUseCase
from .reorder_cards_use_case import ReorderCardsUseCase
from .update_card_use_case import UpdateCardUseCase

__all__ = [
    "CreateCardUseCase",
    "UpdateCardUseCase",
    "MoveCardUseCase",
    "ReorderCardsUseCase",
    "DeleteCardUseCase",
    "GetCardActivitiesUseCase",
    "CardResponse",
    "ActivityResponse",
]
