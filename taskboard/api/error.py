from fastapi import status

from taskboard.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Every business error code and the HTTP status it is reported with
ERROR_STATUS_CODES = {
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "ORGANIZATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BOARD_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LIST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CARD_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NOT_A_MEMBER": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "INVALID_ID": status.HTTP_400_BAD_REQUEST,
    "INVALID_NAME": status.HTTP_400_BAD_REQUEST,
    "INVALID_TITLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_PRIORITY": status.HTTP_400_BAD_REQUEST,
    "INVALID_EMAIL": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ORDER": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CARD_NOT_IN_SOURCE_LIST": status.HTTP_409_CONFLICT,
    "STALE_ORDER": status.HTTP_409_CONFLICT,
    "ALREADY_MEMBER": status.HTTP_409_CONFLICT,
    "INVITE_ALREADY_ACCEPTED": status.HTTP_409_CONFLICT,
    "INVITE_EXPIRED": status.HTTP_410_GONE,
}


def raise_for_error(error: Error):
    """Raise the ClientError for a known code, ServerError otherwise."""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
