import pytest


@pytest.fixture
def mixed():
    """a mapping with both integer and string keys"""
    return {0: 0, 1: 2, 2: 4, "a": "A", "b": "B", "c": "C"}


class Node:
    def __init__(self, name, parent=None):
        self.name, self.parent = name, parent

    def __repr__(self):
        return "Node({!r})".format(self.name)


@pytest.fixture
def branch():
    """a chain of nodes: a <- b <- c"""
    a = Node("a")
    b = Node("b", a)
    return Node("c", b)
