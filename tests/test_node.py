# tests/test_node.py
import pytest

from catalog_autocompleter.core.node import TrieNode


def test_value_is_fixed():
    n = TrieNode("a")
    assert n.value == "a"
    with pytest.raises(AttributeError):
        n.value = "b"


@pytest.mark.parametrize("bad", ["", "ab", None, 3])
def test_value_must_be_single_character(bad):
    with pytest.raises(ValueError):
        TrieNode(bad)


def test_ensure_child_is_idempotent():
    n = TrieNode(" ")
    first = n.ensure_child("x")
    second = n.ensure_child("x")
    assert first is second
    assert len(n.children()) == 1
    assert first.value == "x"


def test_child_lookup():
    n = TrieNode(" ")
    n.ensure_child("a")
    n.ensure_child("b")
    assert n.has_child("a") and n.has_child("b")
    assert not n.has_child("c")
    assert n.get_child("c") is None
    assert n.get_child("a").value == "a"
    assert n.child_values() == {"a", "b"}
    assert sorted(c.value for c in n.children()) == ["a", "b"]


def test_child_values_is_a_copy():
    n = TrieNode(" ")
    n.ensure_child("a")
    vals = n.child_values()
    vals.add("z")
    assert not n.has_child("z")


def test_equality_is_identity():
    # same character at two tree positions are still different nodes
    assert TrieNode("a") != TrieNode("a")
    n = TrieNode("a")
    assert n == n


def test_repr_lists_children_sorted():
    n = TrieNode("a")
    n.ensure_child("c")
    n.ensure_child("b")
    assert repr(n) == "TrieNode(value='a', children=['b', 'c'])"


def test_dump_nests_whole_subtree():
    n = TrieNode("a")
    n.ensure_child("n").ensure_child("$")
    n.get_child("n").ensure_child("e").ensure_child("$")
    assert n.dump() == "'a'{'n'{'$', 'e'{'$'}}}"
    assert TrieNode("z").dump() == "'z'"
