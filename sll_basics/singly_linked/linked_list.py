"""Singly linked list over plain nodes.

A list is whatever ``Node`` the caller holds as its head, ``None`` being the
empty list. Every operation takes the head and returns the head to keep, so
all of them are total over the empty list. Values are compared with ``==``,
so ``True`` matches ``1`` and ``1.0`` matches ``1``.
"""

import logging

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    def __init__(self, value: T, next: "Node[T] | None" = None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r}, next={id(self.next) if self.next else None})"


def create_node(value: T, next: Node[T] | None = None) -> Node[T]:
    return Node(value, next)


def add_front(head: Node[T] | None, value: T) -> Node[T]:
    logger.debug("adding %r in front", value)
    return create_node(value, head)


def add_end(head: Node[T] | None, value: T) -> Node[T]:
    """Appends ``value`` after the tail. The head only changes for an empty list."""
    if head is None:
        return create_node(value)

    tail = head
    while tail.next:
        tail = tail.next
    logger.debug("appending %r after %r", value, tail.value)
    tail.next = create_node(value)
    return head


def remove(head: Node[T] | None, value: T) -> Node[T] | None:
    """
    Unlinks the first node holding ``value`` and returns the head to keep.
    Later occurrences are left alone.
    """
    if head is None:
        return None
    if head.value == value:
        logger.debug("removing head %r", value)
        return head.next

    curr = head
    while curr.next and curr.next.value != value:
        curr = curr.next

    if curr.next:
        logger.debug("splicing out %r after %r", value, curr.value)
        curr.next = curr.next.next
    return head


def find(head: Node[T] | None, value: T) -> Node[T] | None:
    curr = head
    while curr:
        if curr.value == value:
            return curr
        curr = curr.next
    return None


def to_array(head: Node[T] | None) -> list[T]:
    values: list[T] = []
    curr = head
    while curr:
        values.append(curr.value)
        curr = curr.next
    return values


def length(head: Node[T] | None) -> int:
    n = 0
    curr = head
    while curr:
        n += 1
        curr = curr.next
    return n


def from_list(values: Iterable[T]) -> Node[T] | None:
    head: Node[T] | None = None
    tail: Node[T] | None = None
    for value in values:
        node = create_node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


class SinglyLinkedList(Generic[T]):
    """Owns the head slot and rebinds it after every operation."""

    def __init__(self, head: Node[T] | None = None):
        self.head = head

    @classmethod
    def from_list(cls, lst: Iterable[T]) -> "SinglyLinkedList[T]":
        return cls(from_list(lst))

    def add_front(self, value: T) -> None:
        self.head = add_front(self.head, value)

    def add_end(self, value: T) -> None:
        self.head = add_end(self.head, value)

    def remove(self, value: T) -> None:
        self.head = remove(self.head, value)

    def find(self, value: T) -> Node[T] | None:
        return find(self.head, value)

    def to_array(self) -> list[T]:
        return to_array(self.head)

    def __len__(self) -> int:
        return length(self.head)

    def __repr__(self):
        nodes = []
        curr = self.head
        while curr:
            nodes.append(repr(curr))
            curr = curr.next
        return " -> ".join(nodes)
