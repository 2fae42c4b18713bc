"""Deprecated permission table kept only for migrating stored subuser permissions.

Nothing in here may be used to grant new permissions; see
:mod:`subuser_permissions.constants.permissions` for the current registry.
"""

import warnings
from types import MappingProxyType
from typing import Mapping

DEPRECATED_PERMISSIONS: Mapping[str, Mapping[str, str | None]] = MappingProxyType(
    {
        "power": MappingProxyType(
            {
                "power-start": "s:power:start",
                "power-stop": "s:power:stop",
                "power-restart": "s:power:restart",
                "power-kill": "s:power:kill",
                "send-command": "s:command",
            }
        ),
        "subuser": MappingProxyType(
            {
                "list-subusers": None,
                "view-subuser": None,
                "edit-subuser": None,
                "create-subuser": None,
                "delete-subuser": None,
            }
        ),
        "server": MappingProxyType(
            {
                "view-allocations": None,
                "edit-allocation": None,
                "view-startup": None,
                "edit-startup": None,
            }
        ),
        "database": MappingProxyType(
            {
                "view-databases": None,
                "reset-db-password": None,
                "delete-database": None,
                "create-database": None,
            }
        ),
        "file": MappingProxyType(
            {
                "access-sftp": None,
                "list-files": "s:files:get",
                "edit-files": "s:files:read",
                "save-files": "s:files:post",
                "move-files": "s:files:move",
                "copy-files": "s:files:copy",
                "compress-files": "s:files:compress",
                "decompress-files": "s:files:decompress",
                "create-files": "s:files:create",
                "upload-files": "s:files:upload",
                "delete-files": "s:files:delete",
                "download-files": "s:files:download",
            }
        ),
        "task": MappingProxyType(
            {
                "list-schedules": None,
                "view-schedule": None,
                "toggle-schedule": None,
                "queue-schedule": None,
                "edit-schedule": None,
                "create-schedule": None,
                "delete-schedule": None,
            }
        ),
    }
)


def legacy_permissions(
    flatten: bool = False,
) -> Mapping[str, Mapping[str, str | None]] | dict[str, str | None]:
    """Return the deprecated permission table.

    With ``flatten`` the per-category tables are merged into a single
    ``legacy-key -> daemon token`` dict. A ``None`` token means the legacy key
    never had a daemon-side equivalent.
    """
    warnings.warn(
        "legacy_permissions() is only meant for migrating stored permissions",
        DeprecationWarning,
        stacklevel=2,
    )
    if flatten:
        flat: dict[str, str | None] = {}
        for keys in DEPRECATED_PERMISSIONS.values():
            flat.update(keys)
        return flat
    return DEPRECATED_PERMISSIONS
