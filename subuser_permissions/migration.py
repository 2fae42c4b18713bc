"""Translate permissions stored in the legacy format into registry permission strings."""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from .config import settings
from .constants.legacy import DEPRECATED_PERMISSIONS
from .constants.permissions import (
    ACTION_ALLOCATION_READ,
    ACTION_ALLOCATION_UPDATE,
    ACTION_CONTROL_CONSOLE,
    ACTION_CONTROL_RESTART,
    ACTION_CONTROL_START,
    ACTION_CONTROL_STOP,
    ACTION_DATABASE_CREATE,
    ACTION_DATABASE_DELETE,
    ACTION_DATABASE_READ,
    ACTION_DATABASE_UPDATE,
    ACTION_FILE_ARCHIVE,
    ACTION_FILE_CREATE,
    ACTION_FILE_DELETE,
    ACTION_FILE_READ,
    ACTION_FILE_SFTP,
    ACTION_FILE_UPDATE,
    ACTION_SCHEDULE_CREATE,
    ACTION_SCHEDULE_DELETE,
    ACTION_SCHEDULE_READ,
    ACTION_SCHEDULE_UPDATE,
    ACTION_STARTUP_READ,
    ACTION_STARTUP_UPDATE,
    ACTION_USER_CREATE,
    ACTION_USER_DELETE,
    ACTION_USER_READ,
    ACTION_USER_UPDATE,
)
from .errors import UnknownPermission
from .validation import is_known_permission, validate_permission

logger = logging.getLogger(__name__)

LEGACY_TRANSLATIONS: Mapping[str, str] = MappingProxyType(
    {
        # power
        "power-start": ACTION_CONTROL_START,
        "power-stop": ACTION_CONTROL_STOP,
        "power-restart": ACTION_CONTROL_RESTART,
        "power-kill": ACTION_CONTROL_STOP,
        "send-command": ACTION_CONTROL_CONSOLE,
        # subuser
        "list-subusers": ACTION_USER_READ,
        "view-subuser": ACTION_USER_READ,
        "edit-subuser": ACTION_USER_UPDATE,
        "create-subuser": ACTION_USER_CREATE,
        "delete-subuser": ACTION_USER_DELETE,
        # server
        "view-allocations": ACTION_ALLOCATION_READ,
        "edit-allocation": ACTION_ALLOCATION_UPDATE,
        "view-startup": ACTION_STARTUP_READ,
        "edit-startup": ACTION_STARTUP_UPDATE,
        # database
        "view-databases": ACTION_DATABASE_READ,
        "reset-db-password": ACTION_DATABASE_UPDATE,
        "delete-database": ACTION_DATABASE_DELETE,
        "create-database": ACTION_DATABASE_CREATE,
        # file
        "access-sftp": ACTION_FILE_SFTP,
        "list-files": ACTION_FILE_READ,
        "edit-files": ACTION_FILE_READ,
        "save-files": ACTION_FILE_UPDATE,
        "move-files": ACTION_FILE_UPDATE,
        "copy-files": ACTION_FILE_CREATE,
        "compress-files": ACTION_FILE_ARCHIVE,
        "decompress-files": ACTION_FILE_ARCHIVE,
        "create-files": ACTION_FILE_CREATE,
        "upload-files": ACTION_FILE_CREATE,
        "delete-files": ACTION_FILE_DELETE,
        "download-files": ACTION_FILE_READ,
        # task
        "list-schedules": ACTION_SCHEDULE_READ,
        "view-schedule": ACTION_SCHEDULE_READ,
        "toggle-schedule": ACTION_SCHEDULE_UPDATE,
        "queue-schedule": ACTION_SCHEDULE_UPDATE,
        "edit-schedule": ACTION_SCHEDULE_UPDATE,
        "create-schedule": ACTION_SCHEDULE_CREATE,
        "delete-schedule": ACTION_SCHEDULE_DELETE,
    }
)


def legacy_category(legacy_key: str) -> str | None:
    for category, keys in DEPRECATED_PERMISSIONS.items():
        if legacy_key in keys:
            return category
    return None


def translate_legacy_permissions(
    stored: Iterable[str],
    *,
    strict: bool | None = None,
) -> list[str]:
    """Map stored legacy permission names onto registry permission strings.

    Values already in the current format pass through unchanged. The result is
    de-duplicated and keeps first-seen order. Unrecognised values raise
    :class:`UnknownPermission` when ``strict``, otherwise they are dropped.
    """
    if strict is None:
        strict = settings.legacy_translation_strict

    translated: list[str] = []
    for value in stored:
        if value in LEGACY_TRANSLATIONS:
            permission = LEGACY_TRANSLATIONS[value]
            logger.debug(
                "Translated legacy %s permission %s to %s",
                legacy_category(value),
                value,
                permission,
            )
        elif is_known_permission(value):
            permission = validate_permission(value)
        else:
            if strict:
                raise UnknownPermission(value)
            logger.warning("Skipping stored permission %r with no translation", value)
            continue
        if permission not in translated:
            translated.append(permission)
    return translated
