import json

import pytest

from sll_basics.singly_linked import demo_main


def test_default_run(capsys):
    assert demo_main.main([]) == [1, 3, 4, 5]
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[1, 2, 3, 4, 5]"
    assert lines[1].startswith("Node(3, next=")
    assert lines[2] == "[1, 3, 4, 5]"


@pytest.mark.parametrize("backend", ["node", "arena"])
def test_json_output(capsys, backend):
    final = demo_main.main(
        ["--backend", backend, "--front", "b,a", "--end", "c 7", "--find", "z",
         "--remove", "a", "--json"]
    )
    doc = json.loads(capsys.readouterr().out)
    assert doc == {
        "initial": ["a", "b", "c", 7],
        "found": None,
        "removed": "a",
        "final": ["b", "c", 7],
    }
    assert final == ["b", "c", 7]


def test_empty_front_values(capsys):
    assert demo_main.main(["--front", "", "--end", "1", "--remove", "1"]) == []


def test_parse_values():
    assert demo_main.parse_values("3, -2 x,,+4") == [3, -2, "x", 4]
    assert demo_main.parse_values("  ") == []


def test_find_requires_one_value():
    with pytest.raises(ValueError):
        demo_main.main(["--find", "1 2"])


def test_unknown_backend():
    with pytest.raises(SystemExit):
        demo_main.main(["--backend", "tree"])


def test_default_run_arena(capsys):
    assert demo_main.main(["--backend", "arena"]) == [1, 3, 4, 5]
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[1, 2, 3, 4, 5]",
        "Node(3, slot=0, next=3)",
        "[1, 3, 4, 5]",
    ]


@pytest.mark.parametrize("backend", ["node", "arena"])
def test_missing_value_prints_none(capsys, backend):
    demo_main.main(["--backend", backend, "--find", "42"])
    assert capsys.readouterr().out.splitlines()[1] == "None"
