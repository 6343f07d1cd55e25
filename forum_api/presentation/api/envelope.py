"""
Response envelope shared by all routers.

Success: {"status": "success", "data": {...}}
Failure: {"status": "fail", "message": "..."} (see presentation/errors.py)
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    status: str = "success"
    data: T


class MessageEnvelope(BaseModel):
    status: str = "success"
    message: Optional[str] = None
