import logging

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class NodeArena(Generic[T]):
    """
    Singly linked lists stored in parallel lists. A node is a slot index and a
    list head is the index of its first slot, or None when the list is empty.
    Several lists may share one arena. Removed slots are recycled by later
    insertions.
    """

    def __init__(self):
        self.values: list[T | None] = []
        self.next: list[int | None] = []
        self._live: list[bool] = []
        self._free: list[int] = []

    def _check(self, idx: int) -> int:
        if idx < 0 or idx >= len(self.values) or not self._live[idx]:
            raise IndexError(f"slot {idx} is not a live node")
        return idx

    def value(self, idx: int) -> T:
        return self.values[self._check(idx)]  # type: ignore

    def next_of(self, idx: int) -> int | None:
        return self.next[self._check(idx)]

    def node_repr(self, idx: int) -> str:
        return f"Node({self.value(idx)!r}, slot={idx}, next={self.next[idx]})"

    def create_node(self, value: T, next: int | None = None) -> int:
        if self._free:
            idx = self._free.pop()
            self.values[idx] = value
            self.next[idx] = next
            self._live[idx] = True
            return idx

        self.values.append(value)
        self.next.append(next)
        self._live.append(True)
        return len(self.values) - 1

    def _free_slot(self, idx: int):
        self.values[idx] = None
        self.next[idx] = None
        self._live[idx] = False
        self._free.append(idx)

    def add_front(self, head: int | None, value: T) -> int:
        logger.debug("adding %r in front of slot %s", value, head)
        return self.create_node(value, head)

    def add_end(self, head: int | None, value: T) -> int:
        if head is None:
            return self.create_node(value)

        tail_idx = head
        while (next_idx := self.next[tail_idx]) is not None:
            tail_idx = next_idx
        logger.debug("appending %r after slot %d", value, tail_idx)
        self.next[tail_idx] = self.create_node(value)
        return head

    def remove(self, head: int | None, value: T) -> int | None:
        if head is None:
            return None
        if self.values[head] == value:
            logger.debug("freeing head slot %d", head)
            new_head = self.next[head]
            self._free_slot(head)
            return new_head

        curr = head
        while (next_idx := self.next[curr]) is not None and self.values[next_idx] != value:
            curr = next_idx

        if next_idx is not None:
            logger.debug("freeing slot %d after slot %d", next_idx, curr)
            self.next[curr] = self.next[next_idx]
            self._free_slot(next_idx)
        return head

    def find(self, head: int | None, value: T) -> int | None:
        idx = head
        while idx is not None:
            if self.values[idx] == value:
                return idx
            idx = self.next[idx]
        return None

    def to_array(self, head: int | None) -> list[T]:
        values: list[T] = []
        idx = head
        while idx is not None:
            values.append(self.values[idx])  # type: ignore
            idx = self.next[idx]
        return values

    def length(self, head: int | None) -> int:
        n = 0
        idx = head
        while idx is not None:
            n += 1
            idx = self.next[idx]
        return n

    def from_list(self, values: Iterable[T]) -> int | None:
        head = None
        tail = None
        for value in values:
            idx = self.create_node(value)
            if tail is None:
                head = idx
            else:
                self.next[tail] = idx
            tail = idx
        return head

    def __len__(self) -> int:
        return len(self.values) - len(self._free)

    def __repr__(self) -> str:
        return f"NodeArena(live={len(self)}, free={self._free})"
