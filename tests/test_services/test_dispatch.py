"""Tests for the endpoint dispatch loop."""

from unittest.mock import MagicMock, call

import pytest

from mosh_srv.models import ConnectionType, PortRangeError, ServiceRecord
from mosh_srv.services.dispatch import DispatchResult, dispatch
from mosh_srv.services.shell import ShellExitError

RECORDS = [
    ServiceRecord(target="a.example.com.", port=60001, priority=10),
    ServiceRecord(target="b.example.com.", port=60002, priority=20),
    ServiceRecord(target="c.example.com.", port=60003, priority=30),
]


def _exit(record: ServiceRecord, code: int = 1) -> ShellExitError:
    return ShellExitError(record.hostname, code)


def test_stops_at_first_success() -> None:
    """The first clean session ends the loop."""
    invoke = MagicMock(return_value=0)

    result = dispatch(ConnectionType.MOSH, RECORDS, ["-4"], invoke=invoke)

    invoke.assert_called_once_with(ConnectionType.MOSH, RECORDS[0], ["-4"])
    assert result == DispatchResult(
        attempts=1, returncode=0, succeeded=True, hostname="a.example.com"
    )


def test_falls_back_in_order_until_success() -> None:
    """N-1 failures then a success makes exactly N attempts in list order."""
    invoke = MagicMock(side_effect=[_exit(RECORDS[0]), _exit(RECORDS[1]), 0])

    result = dispatch(ConnectionType.MOSH, RECORDS, [], invoke=invoke)

    assert invoke.call_args_list == [
        call(ConnectionType.MOSH, RECORDS[0], []),
        call(ConnectionType.MOSH, RECORDS[1], []),
        call(ConnectionType.MOSH, RECORDS[2], []),
    ]
    assert result.attempts == 3
    assert result.succeeded is True
    assert result.hostname == "c.example.com"


def test_exhaustion_keeps_last_status() -> None:
    """When every endpoint fails, the last exit code is reported."""
    invoke = MagicMock(
        side_effect=[_exit(RECORDS[0], 2), _exit(RECORDS[1], 3), _exit(RECORDS[2], 5)]
    )

    result = dispatch(ConnectionType.MOSH, RECORDS, [], invoke=invoke)

    assert invoke.call_count == 3
    assert result.succeeded is False
    assert result.attempts == 3
    assert result.returncode == 5


def test_launch_failure_is_fatal() -> None:
    """A client that cannot start stops the loop immediately."""
    invoke = MagicMock(side_effect=[_exit(RECORDS[0]), PermissionError("denied"), 0])

    with pytest.raises(PermissionError):
        dispatch(ConnectionType.MOSH, RECORDS, [], invoke=invoke)

    assert invoke.call_count == 2


def test_port_range_error_skips_record() -> None:
    """A record without a valid port range is skipped, not counted."""
    invoke = MagicMock(side_effect=[PortRangeError(65000), 0])

    result = dispatch(ConnectionType.MOSH, RECORDS, [], invoke=invoke)

    assert invoke.call_count == 2
    assert result.attempts == 1
    assert result.succeeded is True


def test_empty_list() -> None:
    """No records means no attempts."""
    invoke = MagicMock()

    result = dispatch(ConnectionType.MOSH, [], [], invoke=invoke)

    invoke.assert_not_called()
    assert result == DispatchResult()
