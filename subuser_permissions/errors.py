class PermissionValidationError(ValueError):
    """Raised when a permission string cannot be assigned to a subuser."""

    code = "invalid_permission"

    def __init__(self, permission: object, message: str) -> None:
        super().__init__(message)
        self.permission = permission


class InvalidPermissionFormat(PermissionValidationError):
    code = "invalid_permission_format"

    def __init__(self, permission: object) -> None:
        super().__init__(
            permission,
            f"Permission {permission!r} does not match '<category>.<key>' or '<category>.*'",
        )


class UnknownPermission(PermissionValidationError):
    code = "unknown_permission"

    def __init__(self, permission: object) -> None:
        super().__init__(permission, f"Permission {permission!r} is not a known permission")
