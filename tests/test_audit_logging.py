import asyncio
import json
from datetime import datetime, timezone

from subuser_permissions.audit_logging import (
    AccessEvent,
    CompositeLogSink,
    FileLogSink,
    PermissionRejection,
    outcome_for,
)
from subuser_permissions.errors import InvalidPermissionFormat, UnknownPermission


def test_event_payload_serialises_timestamp():
    event = AccessEvent(
        method="GET",
        path="/permissions",
        status_code=200,
        outcome="success",
        occurred_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )
    payload = event.to_payload()
    assert payload["occurred_at"] == "2024-01-02T03:04:05+00:00"
    assert payload["rejected_permission"] is None


def test_rejection_from_error_keeps_code():
    rejection = PermissionRejection.from_error(UnknownPermission("control.pause"))
    assert rejection == PermissionRejection(permission="control.pause", code="unknown_permission")


def test_rejection_from_non_string_permission():
    rejection = PermissionRejection.from_error(InvalidPermissionFormat(42))
    assert rejection.permission == "42"
    assert rejection.code == "invalid_permission_format"


def test_outcome_for():
    rejection = PermissionRejection(permission="file.chmod", code="unknown_permission")
    assert outcome_for(422, rejection) == "rejected"
    assert outcome_for(422, None) == "failure"
    assert outcome_for(500, None) == "error"
    assert outcome_for(200, None) == "success"


def test_file_sink_appends_json_lines(tmp_path):
    path = tmp_path / "nested" / "access.log"
    sink = FileLogSink(path)

    async def write_two():
        await sink.write({"path": "/a"})
        await sink.write({"path": "/b"})

    asyncio.run(write_two())

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["path"] for line in lines] == ["/a", "/b"]


def test_composite_sink_isolates_failing_sink(tmp_path):
    class BrokenSink:
        async def write(self, payload: dict) -> None:
            raise OSError("disk full")

    path = tmp_path / "access.log"
    sink = CompositeLogSink([BrokenSink(), FileLogSink(path)])
    asyncio.run(sink.write({"path": "/permissions"}))
    assert json.loads(path.read_text(encoding="utf-8"))["path"] == "/permissions"


def test_empty_composite_sink_is_a_no_op():
    asyncio.run(CompositeLogSink([]).write({"path": "/healthz"}))
