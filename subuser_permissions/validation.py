import logging
import re
from typing import Iterable

from .constants.permissions import PERMISSIONS, WILDCARD_KEY, permission_string
from .errors import InvalidPermissionFormat, PermissionValidationError, UnknownPermission

logger = logging.getLogger(__name__)

_PERMISSION_PATTERN = re.compile(r"([a-z][a-z_]*)\.([a-z][a-z_]*|\*)")


def parse_permission(value: object) -> tuple[str, str]:
    if not isinstance(value, str):
        raise InvalidPermissionFormat(value)
    # whole string, so a trailing newline is malformed
    match = _PERMISSION_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidPermissionFormat(value)
    return match.group(1), match.group(2)


def validate_permission(value: object) -> str:
    """Return ``value`` if it names a registered permission.

    Raises :class:`InvalidPermissionFormat` for malformed strings and
    :class:`UnknownPermission` for well-formed strings the registry does not
    declare. A wildcard is only accepted where the registry declares one.
    """
    category, key = parse_permission(value)
    entry = PERMISSIONS.get(category)
    if entry is None or key not in entry.keys:
        logger.warning("Rejected unknown permission %s", value)
        raise UnknownPermission(value)
    return permission_string(category, key)


def validate_permissions(values: Iterable[object]) -> list[str]:
    validated: list[str] = []
    seen: set[str] = set()
    for value in values:
        permission = validate_permission(value)
        if permission not in seen:
            seen.add(permission)
            validated.append(permission)
    return validated


def is_known_permission(value: object) -> bool:
    try:
        validate_permission(value)
    except PermissionValidationError:
        return False
    return True


def is_wildcard(value: str) -> bool:
    _, key = parse_permission(value)
    return key == WILDCARD_KEY
