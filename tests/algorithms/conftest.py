import pytest

from timegraph.model.graph import Graph


def _graph(labels, edges):
    g = Graph()
    for label in labels:
        g.add_node(label)
    for src, dst, label in edges:
        g.connect(src, dst, label)
    return g


@pytest.fixture
def square1():
    #      [1]        [2]
    #   A──────►B──────────┐
    #   ▲│                 ▼
    #   ││       [3]       D
    #   │└────────────────►│
    #   └──────────────────┘
    #           [4]
    #   C has no incoming edges.
    return _graph(
        "ABCD",
        [("A", "B", 1), ("B", "D", 2), ("A", "D", 3), ("D", "A", 4)],
    )


@pytest.fixture
def backwards1():
    #      [5]       [2]
    #   A──────►B──────►C
    return _graph("ABC", [("A", "B", 5), ("B", "C", 2)])


@pytest.fixture
def layover1():
    # Direct A->B arrives at 6; via M arrives at 4 but costs 8 in total.
    # Only the later arrival at B can make the B->T departure at 5.
    #
    #        [6]
    #   A──────────►B──────►T
    #   │           ▲  [5]
    #   │[4]    [4] │
    #   └────►M─────┘
    return _graph(
        "ABMT",
        [("A", "B", 6), ("A", "M", 4), ("M", "B", 4), ("B", "T", 5)],
    )


@pytest.fixture
def chain1():
    #      [1]      [3]      [3]      [7]
    #   A──────►B──────►C──────►D──────►E
    #   │                       ▲
    #   └───────────────────────┘
    #              [2]
    return _graph(
        "ABCDE",
        [
            ("A", "B", 1),
            ("B", "C", 3),
            ("C", "D", 3),
            ("D", "E", 7),
            ("A", "D", 2),
        ],
    )


@pytest.fixture
def parallel1():
    # Two A->B edges added in order [9] then [1], and B->C [4].
    return _graph("ABC", [("A", "B", 9), ("A", "B", 1), ("B", "C", 4)])
