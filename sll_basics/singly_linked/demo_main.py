import argparse
import json
import logging
import regex as re

from sll_basics.singly_linked import (
    DEFAULT_END_VALUES,
    DEFAULT_FRONT_VALUES,
    linked_list,
)
from sll_basics.singly_linked.node_arena import NodeArena

TOKEN_PAT = re.compile(r"[^\s,]+")
INT_PAT = re.compile(r"[+-]?\p{Nd}+")

logger = logging.getLogger(__name__)

parser = argparse.ArgumentParser(
    description="Build a singly linked list, look a value up and remove one."
)

parser.add_argument("--front", type=str, default=DEFAULT_FRONT_VALUES)
parser.add_argument("--end", type=str, default=DEFAULT_END_VALUES)
parser.add_argument("--find", type=str, default="3")
parser.add_argument("--remove", type=str, default="2")
parser.add_argument("--backend", choices=["node", "arena"], default="node")
parser.add_argument("--json", action="store_true")
parser.add_argument("--log_level", type=str, default="WARNING")


def parse_value(token: str) -> int | str:
    return int(token) if INT_PAT.fullmatch(token) else token


def parse_values(text: str) -> list[int | str]:
    return [parse_value(token) for token in TOKEN_PAT.findall(text)]


def parse_single(text: str, option: str) -> int | str:
    values = parse_values(text)
    if len(values) != 1:
        raise ValueError(f"{option} expects exactly one value, got {text!r}")
    return values[0]


def _run_nodes(front, end, target, doomed):
    head = None
    for value in front:
        head = linked_list.add_front(head, value)
    for value in end:
        head = linked_list.add_end(head, value)
    initial = linked_list.to_array(head)

    found = linked_list.find(head, target)
    head = linked_list.remove(head, doomed)
    return initial, found, found.value if found else None, linked_list.to_array(head)


def _run_arena(front, end, target, doomed):
    arena: NodeArena[int | str] = NodeArena()
    head = None
    for value in front:
        head = arena.add_front(head, value)
    for value in end:
        head = arena.add_end(head, value)
    initial = arena.to_array(head)

    found = arena.find(head, target)
    if found is None:
        found_node, found_value = None, None
    else:
        found_node, found_value = arena.node_repr(found), arena.value(found)
    head = arena.remove(head, doomed)
    return initial, found_node, found_value, arena.to_array(head)


def main(argv: list[str] | None = None) -> list[int | str]:
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    front = parse_values(args.front)
    end = parse_values(args.end)
    target = parse_single(args.find, "--find")
    doomed = parse_single(args.remove, "--remove")
    logger.info("front=%s end=%s backend=%s", front, end, args.backend)

    run = _run_arena if args.backend == "arena" else _run_nodes
    initial, found, found_value, final = run(front, end, target, doomed)

    if args.json:
        print(
            json.dumps(
                {
                    "initial": initial,
                    "found": found_value,
                    "removed": doomed,
                    "final": final,
                }
            )
        )
    else:
        print(initial)
        print(found)
        print(final)
    return final


if __name__ == "__main__":
    main()
