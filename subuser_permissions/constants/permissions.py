from types import MappingProxyType
from typing import Mapping, NamedTuple

# API resource name for a single subuser permission assignment
RESOURCE_NAME = "subuser_permission"

# websocket permissions
ACTION_WEBSOCKET = "websocket.*"

# power and console permissions
ACTION_CONTROL_CONSOLE = "control.console"
ACTION_CONTROL_START = "control.start"
ACTION_CONTROL_STOP = "control.stop"
ACTION_CONTROL_RESTART = "control.restart"

# subuser management permissions
ACTION_USER_CREATE = "user.create"
ACTION_USER_READ = "user.read"
ACTION_USER_UPDATE = "user.update"
ACTION_USER_DELETE = "user.delete"

# file manager permissions
ACTION_FILE_CREATE = "file.create"
ACTION_FILE_READ = "file.read"
ACTION_FILE_UPDATE = "file.update"
ACTION_FILE_DELETE = "file.delete"
ACTION_FILE_ARCHIVE = "file.archive"
ACTION_FILE_SFTP = "file.sftp"

# allocation permissions
ACTION_ALLOCATION_READ = "allocation.read"
ACTION_ALLOCATION_UPDATE = "allocation.update"

# startup permissions
ACTION_STARTUP_READ = "startup.read"
ACTION_STARTUP_UPDATE = "startup.update"

# database permissions
ACTION_DATABASE_CREATE = "database.create"
ACTION_DATABASE_READ = "database.read"
ACTION_DATABASE_UPDATE = "database.update"
ACTION_DATABASE_DELETE = "database.delete"
ACTION_DATABASE_VIEW_PASSWORD = "database.view_password"

# schedule permissions
ACTION_SCHEDULE_CREATE = "schedule.create"
ACTION_SCHEDULE_READ = "schedule.read"
ACTION_SCHEDULE_UPDATE = "schedule.update"
ACTION_SCHEDULE_DELETE = "schedule.delete"

# settings permissions
ACTION_SETTINGS_RENAME = "settings.rename"
ACTION_SETTINGS_REINSTALL = "settings.reinstall"

SEPARATOR = "."
WILDCARD_KEY = "*"


class PermissionCategory(NamedTuple):
    """A named group of permission keys shown together in the panel."""

    name: str
    description: str
    keys: Mapping[str, str]

    def permission_strings(self) -> tuple[str, ...]:
        return tuple(permission_string(self.name, key) for key in self.keys)


def permission_string(category: str, key: str) -> str:
    return f"{category}{SEPARATOR}{key}"


def _category(name: str, description: str, keys: dict[str, str]) -> PermissionCategory:
    return PermissionCategory(name=name, description=description, keys=MappingProxyType(keys))


_CATEGORIES = (
    _category(
        "websocket",
        "Allows the user to connect to the server websocket, giving them access to view console "
        "output and realtime server stats.",
        {
            WILDCARD_KEY: "Gives user full read access to the websocket.",
        },
    ),
    _category(
        "control",
        "Permissions that control a user's ability to control the power state of a server, or "
        "send commands.",
        {
            "console": "Allows a user to send commands to the server instance via the console.",
            "start": "Allows a user to start the server if it is stopped.",
            "stop": "Allows a user to stop a server if it is running.",
            "restart": "Allows a user to perform a server restart. This allows them to start the "
            "server if it is offline, but not put the server in a completely stopped state.",
        },
    ),
    _category(
        "user",
        "Permissions that allow a user to manage other subusers on a server. They will never be "
        "able to edit their own account, or assign permissions they do not have themselves.",
        {
            "create": "Allows a user to create new subusers for the server.",
            "read": "Allows the user to view subusers and their permissions for the server.",
            "update": "Allows a user to modify other subusers.",
            "delete": "Allows a user to delete a subuser from the server.",
        },
    ),
    _category(
        "file",
        "Permissions that control a user's ability to modify the filesystem for this server.",
        {
            "create": "Allows a user to create additional files and folders via the Panel or "
            "direct upload.",
            "read": "Allows a user to view the contents of a directory and read the contents of a "
            "file. Users with this permission can also download files.",
            "update": "Allows a user to update the contents of an existing file or directory.",
            "delete": "Allows a user to delete files or directories.",
            "archive": "Allows a user to archive the contents of a directory as well as decompress "
            "existing archives on the system.",
            "sftp": "Allows a user to connect to SFTP and manage server files using the other "
            "assigned file permissions.",
        },
    ),
    _category(
        "allocation",
        "Permissions that control a user's ability to modify the port allocations for this "
        "server.",
        {
            "read": "Allows a user to view the allocations assigned to this server.",
            "update": "Allows a user to modify the allocations assigned to this server.",
        },
    ),
    _category(
        "startup",
        "Permissions that control a user's ability to view this server's startup parameters.",
        {
            "read": "",
            "update": "",
        },
    ),
    _category(
        "database",
        "Permissions that control a user's access to the database management for this server.",
        {
            "create": "Allows a user to create a new database for this server.",
            "read": "Allows a user to view the database associated with this server.",
            "update": "Allows a user to rotate the password on a database instance. If the user "
            "does not have the view_password permission they will not see the updated password.",
            "delete": "Allows a user to remove a database instance from this server.",
            "view_password": "Allows a user to view the password associated with a database "
            "instance for this server.",
        },
    ),
    _category(
        "schedule",
        "Permissions that control a user's access to the schedule management for this server.",
        {
            "create": "",
            "read": "",
            "update": "",
            "delete": "",
        },
    ),
    _category(
        "settings",
        "Permissions that control a user's access to the settings for this server.",
        {
            "rename": "",
            "reinstall": "",
        },
    ),
)

PERMISSIONS: Mapping[str, PermissionCategory] = MappingProxyType(
    {category.name: category for category in _CATEGORIES}
)

ALL_PERMISSIONS: tuple[str, ...] = tuple(
    permission for category in _CATEGORIES for permission in category.permission_strings()
)


def list_permissions() -> tuple[PermissionCategory, ...]:
    """Return every permission category in declaration order.

    The returned tuple and the key mappings inside it are read-only, so callers
    may share them freely.
    """
    return _CATEGORIES
