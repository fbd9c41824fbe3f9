from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope expected by the mobile client."""

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
