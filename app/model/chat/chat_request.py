from typing import Optional

from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    message: Optional[str] = Field(None, description="User's message to the shopping assistant")
