import pytest
from pydantic import ValidationError

from subuser_permissions.constants.permissions import PERMISSIONS
from subuser_permissions.schemas import SubuserPermission, SystemPermissions


def test_system_permissions_from_registry():
    payload = SystemPermissions.from_registry().model_dump()
    assert payload["object"] == "system_permissions"
    permissions = payload["attributes"]["permissions"]
    assert list(permissions) == list(PERMISSIONS)
    assert permissions["websocket"]["keys"] == {"*": "Gives user full read access to the websocket."}
    assert permissions["settings"]["keys"] == {"rename": "", "reinstall": ""}


def test_subuser_permission_api_representation():
    permission = SubuserPermission(subuser_id=3, permission="file.sftp")
    assert permission.to_api() == {
        "object": "subuser_permission",
        "attributes": {"subuser_id": 3, "permission": "file.sftp"},
    }


def test_subuser_permission_accepts_numeric_string_id():
    assert SubuserPermission(subuser_id="7", permission="user.read").subuser_id == 7


@pytest.mark.parametrize("subuser_id", [0, -1])
def test_subuser_id_must_be_positive(subuser_id):
    with pytest.raises(ValidationError):
        SubuserPermission(subuser_id=subuser_id, permission="user.read")


@pytest.mark.parametrize("permission", ["control.pause", "control", "control.*"])
def test_permission_must_be_registered(permission):
    with pytest.raises(ValidationError) as exc_info:
        SubuserPermission(subuser_id=1, permission=permission)
    assert exc_info.value.errors()[0]["loc"] == ("permission",)


def test_subuser_permission_is_frozen():
    permission = SubuserPermission(subuser_id=1, permission="control.start")
    with pytest.raises(ValidationError):
        permission.permission = "control.stop"
