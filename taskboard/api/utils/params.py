from uuid import UUID

from fastapi import status

from taskboard.api.error import ClientError
from taskboard.libs.result import Error


def parse_id(value: str, name: str) -> UUID:
    """Path parameter as UUID; malformed ids are a 400, not a 422."""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error("INVALID_ID", f"Invalid {name} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
