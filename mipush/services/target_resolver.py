import logging
from collections.abc import Mapping
from typing import Any

from mipush.schemas.target import TARGET_ORDER, ResolvedTarget

logger = logging.getLogger(__name__)

VALID_TARGET_KEYS = [kind.value for kind in TARGET_ORDER]


def resolve(specifier: Mapping[str, Any]) -> ResolvedTarget | None:
    """
    Pick the targeting dimension named in `specifier`.

    Kinds are checked in the fixed order reg_id, alias, user, topic, topics, topic_op, all
    and the first one present wins. Unknown keys are ignored. Returns None when no
    targeting key is present.
    """
    resolved = None
    ignored = []
    for kind in TARGET_ORDER:
        for key in kind.option_keys:
            if key not in specifier:
                continue
            if resolved is None:
                resolved = ResolvedTarget(kind, specifier[key])
            else:
                ignored.append(key)

    if resolved is not None and ignored:
        logger.warning(
            "Multiple message targets given, using %s and ignoring %s",
            resolved.kind.value,
            ", ".join(ignored),
        )
    return resolved
