"""Response envelopes shared by several routers."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """``{"success": true, "data": ...}`` envelope used by content management."""

    success: bool = True
    data: T
