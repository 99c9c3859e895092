"""
Response envelope shared by every route.

Success: {"success": true, "data": ...}
Failure: {"success": false, "error": {"code": ..., "message": ...}}
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


def error_body(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}
