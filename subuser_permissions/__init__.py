"""Permission registry for server subusers."""

from .constants.permissions import ALL_PERMISSIONS, PERMISSIONS, PermissionCategory, list_permissions
from .errors import InvalidPermissionFormat, PermissionValidationError, UnknownPermission
from .validation import (
    is_known_permission,
    is_wildcard,
    parse_permission,
    validate_permission,
    validate_permissions,
)

__all__ = [
    "ALL_PERMISSIONS",
    "InvalidPermissionFormat",
    "PERMISSIONS",
    "PermissionCategory",
    "PermissionValidationError",
    "UnknownPermission",
    "is_known_permission",
    "is_wildcard",
    "list_permissions",
    "parse_permission",
    "validate_permission",
    "validate_permissions",
]
