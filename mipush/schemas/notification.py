from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator


class PushMessage(BaseModel):
    """
    Structured notification body. Subclasses declare the platform fields; the target
    field is injected per send and emitted alongside them by to_params().
    """

    extras: dict[str, Any] = Field(default_factory=dict)

    _target: dict[str, Any] = PrivateAttr(default_factory=dict)

    @field_validator("extras", mode="before")
    @classmethod
    def default_extras(cls, value):
        return {} if value is None else value

    def set_target_field(self, field_name: str, value: Any) -> None:
        self._target = {field_name: value}

    def to_params(self) -> dict[str, Any]:
        params = self.model_dump(exclude_none=True)
        params.update(self._target)
        return params


class IOSMessage(PushMessage):
    """iOS notification. title/subtitle/body are only shown on iOS 10 and later."""

    title: str | None = None
    subtitle: str | None = None
    body: str | None = None
    description: str | None = None
    badge: int = 1
    sound: str = "default"
    category: str | None = None

    @field_validator("badge", "sound", mode="before")
    @classmethod
    def default_unset(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @model_validator(mode="after")
    def default_body_to_description(self) -> "IOSMessage":
        if self.body is None:
            self.body = self.description
        return self


class AndroidMessage(PushMessage):
    title: str | None = None
    description: str | None = None
    payload: str | None = None
    restricted_package_name: str | None = None
    # 0: notification bar message, 1: pass-through message
    pass_through: int = 0
    # -1: sound, vibration and lights
    notify_type: int = -1
    notify_id: int | None = None
    time_to_live: int | None = None
    time_to_send: int | None = None
