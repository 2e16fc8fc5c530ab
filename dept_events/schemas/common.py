from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ApiListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
