from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Annotated, Self


class CodeType(IntEnum):
    NUMERIC = 0
    ALPHABETIC = 1
    ALPHANUMERIC = 2


class SecurityCodeRequest(BaseModel):
    """Parameters of the ``/challenge`` endpoint.

    Every optional field defaults to ``None`` and is left out of the query
    string. The server then applies its own defaults: a 4 character numeric
    code that never expires, with no padding around it.
    """

    model_config = ConfigDict(populate_by_name=True)

    to: str
    from_: str | None = Field(default=None, alias="from")
    sender: str | None = None
    len: Annotated[int, Field(ge=1)] | None = None
    t: CodeType | None = None
    # seconds, 0 means no expiry
    ttl: Annotated[int, Field(ge=0)] | None = None
    callback: str | None = None
    pr: str | None = None
    ps: str | None = None
    sb: Annotated[int, Field(ge=0)] | None = None
    sa: Annotated[int, Field(ge=0)] | None = None


class SecurityCodeResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Any = None
    message_id: Any = None
    message: Any = None
    to: Any = None
    code: Any = None
    verificationId: Any = None


class SecurityCodeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    acknowledge: Any = None
    response: SecurityCodeResult | Any = Field(
        default=None, union_mode="left_to_right"
    )


class VerifyCodeRequest(BaseModel):
    to: str | None = None
    # verification id returned by the challenge call
    vc: str | None = None
    code: str

    @model_validator(mode="after")
    def check_recipient(self) -> Self:
        if not self.to and not self.vc:
            raise ValueError("Either 'to' or 'vc' is required")
        return self


class VerifyCodeResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    phone: Any = None
    code: Any = None
    verificationId: Any = None
    sentAt: Any = None


class VerifyCodeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    acknowledge: Any = None
    response: VerifyCodeResult | Any = Field(default=None, union_mode="left_to_right")
    error: Any = None
