from pydantic import BaseModel, ConfigDict
from typing import Any


class MessageCreate(BaseModel):
    """Create payload. A missing `text` is kept as None and echoed back as null."""

    model_config = ConfigDict(extra="ignore")

    text: Any = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: Any
    timestamp: str


class HealthResponse(BaseModel):
    status: str
