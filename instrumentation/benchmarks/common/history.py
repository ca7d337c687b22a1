"""
Bounded run history, most recent first.
"""

from collections import deque
from typing import Deque, Generic, Iterator, List, TypeVar

from .statistics_utils import aggregate
from .data_classes import AggregateStats

T = TypeVar("T")


class ResultHistory(Generic[T]):
    """
    Keeps the newest `capacity` results of one test kind.

    New results are inserted at the front; once the history is full the
    oldest result is evicted.

    Usage:
        history = ResultHistory(capacity=10)
        history.add(result)
        stats = history.statistics("execution_time_us")
    """

    def __init__(self, capacity: int = 10):
        if capacity < 1:
            raise ValueError(f"History capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = deque(maxlen=capacity)

    def add(self, result: T) -> None:
        # appendleft on a bounded deque drops from the right (oldest)
        self._items.appendleft(result)

    def clear(self) -> None:
        self._items.clear()

    def latest(self) -> T:
        if not self._items:
            raise IndexError("History is empty")
        return self._items[0]

    def values(self, field_name: str) -> List:
        return [getattr(item, field_name) for item in self._items]

    def statistics(self, field_name: str) -> AggregateStats:
        return aggregate(self.values(field_name))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]
