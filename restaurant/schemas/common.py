from typing import Optional, List, Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


# Base for every schema that mirrors a table row. Wire names (TableID, ...)
# are aliases; code builds instances with the snake_case field names.
class APIModel(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True


# Success envelopes: every endpoint answers {success, ...}
class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: T


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# Error responses (produced by restaurant.core.errors)
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
