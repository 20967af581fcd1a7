import os
from unittest import mock

from novakit.system import (
    ProcessPriority,
    ProcessScheduling,
    get_pid,
    set_cpu_affinity,
)


def _cfg():
    return ProcessScheduling(pid=123, cpu=2, priority=ProcessPriority.CRITICAL)


def test_get_pid():
    assert get_pid() == os.getpid()


def test_success():
    with mock.patch("os.sched_setaffinity", create=True) as affinity, mock.patch(
        "os.setpriority", create=True
    ) as priority, mock.patch("os.PRIO_PROCESS", 0, create=True):
        result = set_cpu_affinity(_cfg())
    assert result.has_value()
    assert result.value() is None
    affinity.assert_called_once_with(123, {2})
    priority.assert_called_once_with(0, 123, -20)


def test_affinity_failure():
    with mock.patch(
        "os.sched_setaffinity", create=True, side_effect=OSError
    ), mock.patch("os.setpriority", create=True) as priority, mock.patch(
        "os.PRIO_PROCESS", 0, create=True
    ):
        result = set_cpu_affinity(_cfg())
    assert not result
    assert result.error() == "Cannot set CPU affinity!"
    priority.assert_not_called()


def test_priority_failure():
    with mock.patch("os.sched_setaffinity", create=True), mock.patch(
        "os.setpriority", create=True, side_effect=PermissionError
    ), mock.patch("os.PRIO_PROCESS", 0, create=True):
        result = set_cpu_affinity(_cfg())
    assert not result.has_value()
    assert result.error() == "Cannot set process priority!"