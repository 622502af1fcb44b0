"""Tests for the two-phase keyword dictionary."""

import pytest

from wordfilter.core.exceptions import DictionaryFrozenError, ValidationError
from wordfilter.engine.trie import DictionaryBuilder, TrieNode


@pytest.mark.unit
class TestDictionaryBuilder:
    def test_keyword_path_ends_at_terminal_node(self):
        dictionary = DictionaryBuilder().insert_all(["abc"]).build()

        node = dictionary.root
        for char in "abc":
            assert not node.is_terminal
            node = dictionary.child_of(node, char)
            assert node is not None
        assert node.is_terminal

    def test_duplicate_insert_is_idempotent(self):
        dictionary = DictionaryBuilder().insert_all(["cat", "cat"]).build()

        assert dictionary.keyword_count == 1
        assert len(dictionary.root.children) == 1

    def test_prefix_keywords_are_both_terminal(self):
        dictionary = DictionaryBuilder().insert_all(["ab", "abc"]).build()

        assert "ab" in dictionary
        assert "abc" in dictionary
        assert len(dictionary) == 2

    def test_empty_keyword_is_ignored(self):
        builder = DictionaryBuilder()
        builder.insert("")
        dictionary = builder.build()

        assert not dictionary.root.is_terminal
        assert dictionary.keyword_count == 0
        assert "" not in dictionary

    def test_non_string_keyword_is_rejected(self):
        with pytest.raises(ValidationError):
            DictionaryBuilder().insert(42)

    def test_insert_after_build_is_rejected(self):
        builder = DictionaryBuilder()
        builder.build()

        with pytest.raises(DictionaryFrozenError):
            builder.insert("late")

    def test_build_twice_is_rejected(self):
        builder = DictionaryBuilder()
        builder.build()

        with pytest.raises(DictionaryFrozenError):
            builder.build()


@pytest.mark.unit
class TestDictionary:
    def test_child_of_missing_character(self):
        dictionary = DictionaryBuilder().insert_all(["dog"]).build()

        assert dictionary.child_of(dictionary.root, "x") is None

    def test_strict_prefix_is_not_a_keyword(self):
        dictionary = DictionaryBuilder().insert_all(["abc"]).build()

        assert "ab" not in dictionary
        assert "abcd" not in dictionary
        assert None not in dictionary

    def test_built_tree_is_read_only(self):
        dictionary = DictionaryBuilder().insert_all(["dog"]).build()

        with pytest.raises(TypeError):
            dictionary.root.children["x"] = TrieNode()

        child = dictionary.child_of(dictionary.root, "d")
        with pytest.raises(TypeError):
            child.children["z"] = TrieNode()
