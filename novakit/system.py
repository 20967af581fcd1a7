"""Operating-system process controls."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from novakit.expected import Expected, Unexpected
from novakit.types import to_underlying


class ProcessPriority(Enum):
    CRITICAL = -20


@dataclass(frozen=True)
class ProcessScheduling:
    """Which process to pin, to which CPU, and with what priority."""

    pid: int
    cpu: int
    priority: ProcessPriority


def set_cpu_affinity(cfg: ProcessScheduling) -> Expected:
    """Pin the process to one CPU and set its priority.

    Returns an :class:`Expected` holding ``None`` on success or an error
    message. Where the platform offers no such controls, nothing is done and
    success is reported.
    """
    if not (hasattr(os, "sched_setaffinity") and hasattr(os, "setpriority")):
        return Expected(None)
    try:
        os.sched_setaffinity(cfg.pid, {cfg.cpu})
    except OSError:
        return Expected(Unexpected("Cannot set CPU affinity!"))
    try:
        os.setpriority(os.PRIO_PROCESS, cfg.pid, to_underlying(cfg.priority))
    except OSError:
        return Expected(Unexpected("Cannot set process priority!"))
    return Expected(None)


def get_pid() -> int:
    """Return the current process id."""
    return os.getpid()