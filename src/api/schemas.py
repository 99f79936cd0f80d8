"""API-facing Pydantic models.

Field aliases keep the camelCase wire names the softphone client sends.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DialRequest(_WireModel):
    phone_number: str | None = Field(default=None, alias="phoneNumber")


class MuteRequest(_WireModel):
    call_sid: str | None = Field(default=None, alias="callSid")
    mute: bool = False


class HangupRequest(_WireModel):
    call_sid: str | None = Field(default=None, alias="callSid")


class TokenResponse(BaseModel):
    token: str


class CallStartedResponse(_WireModel):
    success: bool = True
    call_sid: str = Field(alias="callSid")


class SuccessResponse(BaseModel):
    success: bool = True


class FailureResponse(BaseModel):
    success: bool = False
    error: str
