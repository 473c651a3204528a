from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class Platform(str, Enum):
    IOS = "ios"
    ANDROID = "android"


class OutboundRequest(BaseModel):
    path: str
    params: dict[str, Any]


class SendMessageRequest(BaseModel):
    reg_id: str | list[str] | None = Field(
        default=None, validation_alias=AliasChoices("reg_id", "regId")
    )
    alias: str | list[str] | None = None
    user: str | list[str] | None = None
    topic: str | None = None
    topics: list[str] | None = None
    topic_op: str | None = Field(
        default=None, validation_alias=AliasChoices("topic_op", "topicOp")
    )
    all: bool | None = None
    platform: Platform | None = None
    message: dict[str, Any] = Field(default_factory=dict)
