from sll_basics.singly_linked import linked_list
from sll_basics.singly_linked.node_arena import NodeArena


def build_front(values):
    head = None
    for value in values:
        head = linked_list.add_front(head, value)
    return head


def build_end(values):
    head = None
    for value in values:
        head = linked_list.add_end(head, value)
    return head


def build_arena(values) -> tuple[NodeArena, int | None]:
    arena = NodeArena()
    return arena, arena.from_list(values)
