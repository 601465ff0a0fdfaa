import pytest

from cgkit import config
from cgkit.config import ThreadPoolConfig


def test_documented_defaults():
    cfg = ThreadPoolConfig()
    assert cfg.default_thread_size == 8
    assert cfg.max_thread_size == 17
    assert cfg.secondary_thread_size == 0
    assert cfg.max_task_steal_range == 2


def test_config_uses_module_defaults():
    cfg = ThreadPoolConfig()
    assert cfg.default_thread_size == config.DEFAULT_THREAD_SIZE
    assert cfg.max_thread_size == config.MAX_THREAD_SIZE
    assert cfg.secondary_thread_size == config.SECONDARY_THREAD_SIZE
    assert cfg.monitor_enable is config.MONITOR_ENABLE
    assert cfg.batch_task_enable is config.BATCH_TASK_ENABLE
    assert cfg.bind_cpu_enable is config.BIND_CPU_ENABLE


def test_steal_range_default_is_configured_range():
    assert ThreadPoolConfig().calc_steal_range() == 2


@pytest.mark.parametrize("threads", [1, 2, 3])
def test_steal_range_bounded_by_threads(threads):
    cfg = ThreadPoolConfig(default_thread_size=threads, max_task_steal_range=50)
    assert cfg.calc_steal_range() == threads - 1


def test_steal_range_never_exceeds_setting():
    cfg = ThreadPoolConfig(default_thread_size=100, max_task_steal_range=4)
    assert cfg.calc_steal_range() == 4


def test_configs_compare_by_value():
    a = ThreadPoolConfig(default_thread_size=4, max_thread_size=4)
    b = ThreadPoolConfig(default_thread_size=4, max_thread_size=4)
    assert a == b
    assert a != ThreadPoolConfig()