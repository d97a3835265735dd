from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    sender_id: str
    receiver_id: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
