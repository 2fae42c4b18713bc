from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants.permissions import RESOURCE_NAME, list_permissions
from .validation import validate_permission


class PermissionCategoryOut(BaseModel):
    description: str
    keys: dict[str, str]


class SystemPermissionsAttributes(BaseModel):
    permissions: dict[str, PermissionCategoryOut]


class SystemPermissions(BaseModel):
    object: Literal["system_permissions"] = "system_permissions"
    attributes: SystemPermissionsAttributes

    @classmethod
    def from_registry(cls) -> "SystemPermissions":
        permissions = {
            category.name: PermissionCategoryOut(
                description=category.description,
                keys=dict(category.keys),
            )
            for category in list_permissions()
        }
        return cls(attributes=SystemPermissionsAttributes(permissions=permissions))


class SubuserPermission(BaseModel):
    """A single permission granted to a subuser, checked against the registry."""

    model_config = ConfigDict(frozen=True)

    resource_name: ClassVar[str] = RESOURCE_NAME

    subuser_id: int = Field(ge=1)
    permission: str

    @field_validator("permission")
    @classmethod
    def check_permission(cls, value: str) -> str:
        return validate_permission(value)

    def to_api(self) -> dict[str, Any]:
        return {"object": self.resource_name, "attributes": self.model_dump()}


class PermissionAssignment(BaseModel):
    permissions: list[str]


class SubuserAssignment(BaseModel):
    subuser_id: int = Field(ge=1)
    permissions: list[str]


class ValidatedPermissions(BaseModel):
    permissions: list[str]
