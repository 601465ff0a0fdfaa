# cgkit

A small toolkit of building blocks for concurrent and numeric code.

- `cgkit.status`: `Status` results that can be combined with `+=` and `+`, `CGraphException`, the `FunctionType` enum, and the `CObject` (init/run/destroy lifecycle) and `DescInfo` (name, session, description) base classes.
- `cgkit.utils`: `echo` for timestamped printf-style output, plus `container_sum`, `container_multiply`, `cgraph_max`, `cgraph_sum`, `make_cobject` and the `UtilsObject` base class.
- `cgkit.lru`: `Lru`, a cache that drops the least recently used entry once it is full.
- `cgkit.trie`: `Trie`, a prefix tree of strings.
- `cgkit.unique_array`: `SerialUniqueArray`, which keeps values in the order they were first added and drops duplicates.
- `cgkit.singleton`: `Singleton`, a holder that builds its object lazily or eagerly (`SingletonType.LAZY` / `SingletonType.HUNGRY`).
- `cgkit.randomgen`: `generate`, `generate_matrix` and `generate_session`; pass a non-zero `seed` for repeatable values.
- `cgkit.distance`: `CosineDistance`, `EuclideanDistance` and `DistanceCalculator`, and the `Distance` base class for your own measures.
- `cgkit.timer`: `Timer`, which calls a function every given number of milliseconds on its own thread.
- `cgkit.lock`: `SpinLock`, usable as a context manager.
- `cgkit.task`: `Task` (a callable with a priority) and `TaskGroup` (callables with a deadline and a completion callback).
- `cgkit.config`: `ThreadPoolConfig` and the constants behind its defaults.

## Install

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Examples

### Status

```python
from cgkit.status import Status

status = Status()
status += Status("first failure")
status += Status("second failure")
print(status.is_err())   # True
print(status.info)       # "first failure && second failure"
```

### LRU cache

```python
from cgkit.lru import Lru

lru = Lru(capacity=3)
for key, value in [(1, "one"), (2, "two"), (3, "three"), (4, "four"), (5, "five")]:
    lru.put(key, value)
print(lru.get(4))    # "four"
print(1 in lru)      # False
```

### Trie

```python
from cgkit.trie import Trie

trie = Trie()
trie.insert("hello")
trie.insert("help")
print(trie.find("hello"))    # True
trie.erase("hello")
print("hello" in trie)       # False
```

### Distances

```python
from cgkit.distance import DistanceCalculator, EuclideanDistance

calc = DistanceCalculator(EuclideanDistance(), need_check=True)
print(calc.calculate([0.0, 0.0], [3.0, 4.0]))    # 5.0
```

With `need_check=True`, vectors of different or zero length raise `CGraphException`.

### Timer

```python
import time
from cgkit.timer import Timer

with Timer() as timer:
    timer.start(1000, lambda: print("tick"))
    time.sleep(3.5)
```

### Task group

```python
from cgkit.task import TaskGroup

group = TaskGroup().add_task(lambda: print("a")).set_ttl(2500)
print(len(group))          # 1
for task in group.tasks:
    task()
```

## What this package does not do

There is no thread pool here, and no task queues or worker threads. `Task`,
`TaskGroup` and `ThreadPoolConfig` describe work and settings, but nothing in
the package schedules or runs them: call the tasks yourself, or hand them to an
executor of your choosing such as `concurrent.futures.ThreadPoolExecutor`.

## Tests

```
pytest
```