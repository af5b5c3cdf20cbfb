from sll_basics.singly_linked.linked_list import (
    Node,
    SinglyLinkedList,
    add_end,
    add_front,
    create_node,
    find,
    from_list,
    length,
    remove,
    to_array,
)
from sll_basics.singly_linked.node_arena import NodeArena

DEFAULT_FRONT_VALUES = "3 2 1"
DEFAULT_END_VALUES = "4 5"
