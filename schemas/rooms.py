from pydantic import BaseModel
from typing import Any, Optional


class EmitRequest(BaseModel):
    event: str
    data: Optional[Any] = None

class EmitResponse(BaseModel):
    room_id: str
    channel: str
    event: str

class RoomClientsResponse(BaseModel):
    room_id: str
    clients: list[str]
    count: int
