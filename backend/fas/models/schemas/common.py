"""Response envelopes shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope for successful responses."""

    success: bool = True
    message: str = "Success"
    data: Optional[DataT] = None


class ErrorResponse(BaseModel):
    """Envelope for failed responses; ``errors`` maps field names to reasons."""

    success: bool = False
    message: str
    errors: Optional[dict[str, str]] = None
