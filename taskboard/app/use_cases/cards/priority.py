from typing import Optional

from taskboard.domain.entities import CardPriority


def parse_priority(value: Optional[str]) -> Optional[CardPriority]:
    """CardPriority for a case-insensitive name, or None when unknown."""
    if not isinstance(value, str):
        return None
    try:
        return CardPriority(value.strip().lower())
    except ValueError:
        return None
