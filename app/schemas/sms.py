from __future__ import annotations

from pydantic import BaseModel, Field


class SmsSendRequest(BaseModel):
    to: str = Field(..., min_length=1, description="Recipient phone number")
    message: str = Field(..., min_length=1)


class SmsSendResponse(BaseModel):
    status: str
    message: str
    to: str
