from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SendSmsRequest(BaseModel):
    """Single message. ``from_`` is sent as ``from``."""

    model_config = ConfigDict(populate_by_name=True)

    to: str
    message: str
    from_: str | None = Field(default=None, alias="from")
    sender: str | None = None
    # 1 when ``message`` holds a template UID
    template: int | None = None
    callback: str | None = None


class SendSmsResponse(BaseModel):
    acknowledge: Literal["success"] = "success"
    response: Any = None


class PersonalizedMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    to: str
    message: str


class BulkSmsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to: list[str] | None = None
    personalized_to: list[PersonalizedMessage] | None = Field(
        default=None, alias="personalizedTo"
    )
    from_: str | None = Field(default=None, alias="from")
    sender: str
    message: str | None = None
    campaign: str | None = None
    create_callback: str | None = Field(default=None, alias="createCallback")
    status_callback: str | None = Field(default=None, alias="statusCallback")


class BulkSmsResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: Any = None
    campaign_id: Any = None


class BulkSmsResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    acknowledge: Any = None
    response: BulkSmsResult | Any = Field(default=None, union_mode="left_to_right")
