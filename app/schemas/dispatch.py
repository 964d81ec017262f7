from __future__ import annotations

from pydantic import BaseModel, Field


class BulkSmsRequest(BaseModel):
    to: list[str] = Field(
        default_factory=list,
        description="Recipient phone numbers, duplicates are sent twice",
    )
    message: str = Field(..., min_length=1)


class BulkSmsResponse(BaseModel):
    sent: list[str]
    failed: list[str]
    total: int
