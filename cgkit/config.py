"""Thread pool settings and the constants they are built from."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .task import MAX_BLOCK_TTL

__all__ = [
    "CPU_NUM",
    "THREAD_TYPE_PRIMARY",
    "THREAD_TYPE_SECONDARY",
    "THREAD_SCHED_OTHER",
    "THREAD_SCHED_RR",
    "THREAD_SCHED_FIFO",
    "THREAD_MIN_PRIORITY",
    "THREAD_MAX_PRIORITY",
    "MAX_BLOCK_TTL",
    "DEFAULT_RINGBUFFER_SIZE",
    "SECONDARY_THREAD_COMMON_ID",
    "DEFAULT_TASK_STRATEGY",
    "LONG_TIME_TASK_STRATEGY",
    "REGION_TASK_STRATEGY",
    "EVENT_TASK_STRATEGY",
    "DEFAULT_THREAD_SIZE",
    "SECONDARY_THREAD_SIZE",
    "MAX_THREAD_SIZE",
    "MAX_TASK_STEAL_RANGE",
    "BATCH_TASK_ENABLE",
    "MAX_LOCAL_BATCH_SIZE",
    "MAX_POOL_BATCH_SIZE",
    "MAX_STEAL_BATCH_SIZE",
    "SECONDARY_THREAD_TTL",
    "MONITOR_ENABLE",
    "MONITOR_SPAN",
    "BIND_CPU_ENABLE",
    "PRIMARY_THREAD_POLICY",
    "SECONDARY_THREAD_POLICY",
    "PRIMARY_THREAD_PRIORITY",
    "SECONDARY_THREAD_PRIORITY",
    "ThreadPoolConfig",
]

CPU_NUM = os.cpu_count() or 0
THREAD_TYPE_PRIMARY = 1
THREAD_TYPE_SECONDARY = 2

# Scheduling policies are only meaningful where the platform provides them.
THREAD_SCHED_OTHER = getattr(os, "SCHED_OTHER", 0)
THREAD_SCHED_RR = getattr(os, "SCHED_RR", 0)
THREAD_SCHED_FIFO = getattr(os, "SCHED_FIFO", 0)

THREAD_MIN_PRIORITY = 0
THREAD_MAX_PRIORITY = 99
DEFAULT_RINGBUFFER_SIZE = 1024
SECONDARY_THREAD_COMMON_ID = -1

DEFAULT_TASK_STRATEGY = -1
LONG_TIME_TASK_STRATEGY = -101
REGION_TASK_STRATEGY = -102
EVENT_TASK_STRATEGY = -103

DEFAULT_THREAD_SIZE = 8
SECONDARY_THREAD_SIZE = 0
MAX_THREAD_SIZE = DEFAULT_THREAD_SIZE * 2 + 1
MAX_TASK_STEAL_RANGE = 2
BATCH_TASK_ENABLE = False
MAX_LOCAL_BATCH_SIZE = 2
MAX_POOL_BATCH_SIZE = 2
MAX_STEAL_BATCH_SIZE = 2
SECONDARY_THREAD_TTL = 10
MONITOR_ENABLE = False
MONITOR_SPAN = 5
BIND_CPU_ENABLE = True
PRIMARY_THREAD_POLICY = THREAD_SCHED_OTHER
SECONDARY_THREAD_POLICY = THREAD_SCHED_OTHER
PRIMARY_THREAD_PRIORITY = THREAD_MIN_PRIORITY
SECONDARY_THREAD_PRIORITY = THREAD_MIN_PRIORITY


@dataclass
class ThreadPoolConfig:
    """Settings of a thread pool.

    ``secondary_thread_ttl`` and ``monitor_span`` are in seconds.
    """

    default_thread_size: int = DEFAULT_THREAD_SIZE
    secondary_thread_size: int = SECONDARY_THREAD_SIZE
    max_thread_size: int = MAX_THREAD_SIZE
    max_task_steal_range: int = MAX_TASK_STEAL_RANGE
    max_local_batch_size: int = MAX_LOCAL_BATCH_SIZE
    max_pool_batch_size: int = MAX_POOL_BATCH_SIZE
    max_steal_batch_size: int = MAX_STEAL_BATCH_SIZE
    secondary_thread_ttl: int = SECONDARY_THREAD_TTL
    monitor_span: int = MONITOR_SPAN
    primary_thread_policy: int = PRIMARY_THREAD_POLICY
    secondary_thread_policy: int = SECONDARY_THREAD_POLICY
    primary_thread_priority: int = PRIMARY_THREAD_PRIORITY
    secondary_thread_priority: int = SECONDARY_THREAD_PRIORITY
    bind_cpu_enable: bool = BIND_CPU_ENABLE
    batch_task_enable: bool = BATCH_TASK_ENABLE
    monitor_enable: bool = MONITOR_ENABLE

    def calc_steal_range(self) -> int:
        """How many neighbouring primary threads a thread may steal from.

        Never more than one less than the number of primary threads.
        """
        return min(self.max_task_steal_range, self.default_thread_size - 1)