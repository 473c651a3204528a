import logging
from collections.abc import Mapping
from typing import Any

from mipush.core.exceptions import InvalidMessageError, InvalidTargetError
from mipush.schemas.message import OutboundRequest
from mipush.schemas.notification import PushMessage
from mipush.services.target_resolver import VALID_TARGET_KEYS, resolve

logger = logging.getLogger(__name__)

MESSAGE_PATH_PREFIX = "message/"


def build(
    specifier: Mapping[str, Any], payload: PushMessage | Mapping[str, Any]
) -> OutboundRequest:
    """
    Assemble the outbound request for a push message.

    A structured payload gets the target injected through set_target_field() and is then
    flattened; a raw mapping is copied and the target field added to the copy.

    Raises:
        InvalidTargetError: no targeting key in `specifier`
        InvalidMessageError: a raw payload carries non-mapping `extras`
        TypeError: `payload` is neither a PushMessage nor a mapping
    """
    target = resolve(specifier)
    if target is None:
        logger.error("No message target in options: %s", sorted(specifier))
        raise InvalidTargetError(VALID_TARGET_KEYS)

    path = MESSAGE_PATH_PREFIX + target.kind.path_segment
    field_name = target.kind.field_name

    if isinstance(payload, PushMessage):
        payload.set_target_field(field_name, target.value)
        params = payload.to_params()
    elif isinstance(payload, Mapping):
        extras = payload.get("extras")
        if extras is not None and not isinstance(extras, Mapping):
            raise InvalidMessageError(f"extras must be a mapping, got {type(extras).__name__}")
        params = dict(payload)
        params[field_name] = target.value
    else:
        raise TypeError(
            f"message must be a PushMessage or a mapping, got {type(payload).__name__}"
        )

    return OutboundRequest(path=path, params=params)


def build_from_options(**options: Any) -> OutboundRequest:
    payload = options.get("message")
    if payload is None:
        payload = {}
    return build(options, payload)
