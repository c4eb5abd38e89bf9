from __future__ import annotations

import pytest

from file_forest.forestindex import ForestIndex
from file_forest.forestmodel import ROOT_PARENT
from file_forest.forestmodel import File

FILES = [
    File(1, "root", ["a"], ROOT_PARENT, 10),
    File(2, "child01", ["a"], 1, 20),
    File(3, "child02", ["b"], 1, 30),
    File(4, "grandchild", ["b"], 2, 40),
    File(5, "lonely", ["c"], ROOT_PARENT, 5),
]


@pytest.fixture
def index() -> ForestIndex:
    return ForestIndex(FILES)


def test_index_keeps_input_order(index: ForestIndex) -> None:
    assert len(index) == 5
    assert [file.id for file in index.files] == [1, 2, 3, 4, 5]


def test_roots(index: ForestIndex) -> None:
    assert [file.name for file in index.roots] == ["root", "lonely"]


def test_parent_ids(index: ForestIndex) -> None:
    assert index.parent_ids == {1, 2}


def test_get_file(index: ForestIndex) -> None:
    assert index.get_file(4).name == "grandchild"

    with pytest.raises(KeyError):
        index.get_file(99)


@pytest.mark.parametrize(
    "file_id, expected",
    [
        (1, [2, 3]),
        (2, [4]),
        (3, []),
        (99, []),
    ],
)
def test_children(index: ForestIndex, file_id: int, expected: list[int]) -> None:
    assert index.children(file_id) == expected


@pytest.mark.parametrize(
    "file_id, expected",
    [
        (1, 100),
        (2, 60),
        (3, 30),
        (4, 40),
        (5, 5),
    ],
)
def test_subtree_size(index: ForestIndex, file_id: int, expected: int) -> None:
    assert index.subtree_size(file_id) == expected


def test_subtree_size_unknown_id(index: ForestIndex) -> None:
    with pytest.raises(KeyError):
        index.subtree_size(99)


def test_subtree_size_deep_chain_does_not_recurse() -> None:
    depth = 50_000
    files = [File(0, "top", [], ROOT_PARENT, 1)]
    files.extend(File(i, f"file{i}", [], i - 1, 1) for i in range(1, depth))

    index = ForestIndex(files)

    assert index.subtree_size(0) == depth


def test_index_does_not_mutate_input() -> None:
    files = list(FILES)
    index = ForestIndex(files)
    files.clear()

    assert len(index) == 5
