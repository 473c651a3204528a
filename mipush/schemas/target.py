from enum import Enum
from typing import Any, NamedTuple


class TargetKind(str, Enum):
    REG_ID = "reg_id"
    ALIAS = "alias"
    USER = "user"
    TOPIC = "topic"
    TOPICS = "topics"
    TOPIC_OP = "topic_op"
    ALL = "all"

    @property
    def path_segment(self) -> str:
        return _ROUTES[self][0]

    @property
    def field_name(self) -> str:
        return _ROUTES[self][1]

    @property
    def option_keys(self) -> tuple[str, ...]:
        return _OPTION_KEYS.get(self, (self.value,))


# (path_segment, field_name)
_ROUTES: dict[TargetKind, tuple[str, str]] = {
    TargetKind.REG_ID: ("regid", "registration_id"),
    TargetKind.ALIAS: ("alias", "alias"),
    TargetKind.USER: ("user_account", "user_account"),
    TargetKind.TOPIC: ("topic", "topic"),
    TargetKind.TOPICS: ("multi_topic", "topics"),
    TargetKind.TOPIC_OP: ("multi_topic", "topic_op"),
    TargetKind.ALL: ("all", "all"),
}

_OPTION_KEYS: dict[TargetKind, tuple[str, ...]] = {
    TargetKind.REG_ID: ("reg_id", "regId"),
    TargetKind.TOPIC_OP: ("topic_op", "topicOp"),
}

# Resolution order, earliest wins.
TARGET_ORDER: tuple[TargetKind, ...] = tuple(TargetKind)


class ResolvedTarget(NamedTuple):
    kind: TargetKind
    value: Any
