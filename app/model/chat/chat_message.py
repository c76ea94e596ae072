from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: ChatRole = Field(..., description="Who produced the turn: user or assistant")
    content: str = Field(..., description="Text of the turn")
    timestamp: datetime = Field(default_factory=_utcnow, description="Creation time (UTC)")
