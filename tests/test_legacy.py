import pytest

from subuser_permissions.constants.legacy import DEPRECATED_PERMISSIONS, legacy_permissions


def test_nested_table_keeps_category_order():
    with pytest.deprecated_call():
        table = legacy_permissions()
    assert list(table) == ["power", "subuser", "server", "database", "file", "task"]
    assert table["power"]["power-kill"] == "s:power:kill"
    assert table["file"]["access-sftp"] is None


def test_flattened_table():
    with pytest.deprecated_call():
        flat = legacy_permissions(flatten=True)
    assert len(flat) == sum(len(keys) for keys in DEPRECATED_PERMISSIONS.values())
    assert all(value is None or isinstance(value, str) for value in flat.values())
    assert flat["send-command"] == "s:command"
    assert flat["list-schedules"] is None


def test_flattened_table_is_a_copy():
    with pytest.deprecated_call():
        flat = legacy_permissions(flatten=True)
    flat["power-start"] = "changed"
    assert DEPRECATED_PERMISSIONS["power"]["power-start"] == "s:power:start"


def test_nested_table_is_read_only():
    with pytest.deprecated_call():
        table = legacy_permissions()
    with pytest.raises(TypeError):
        table["power"]["power-start"] = "changed"  # type: ignore[index]
