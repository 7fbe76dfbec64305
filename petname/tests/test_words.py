"""Tests for word-list loading."""

from __future__ import annotations

import pytest

from petname.src.petnames import Petnames
from petname.src.words import (
    LIST_NAMES,
    SIZES,
    builtin_list,
    builtin_lists,
    read_directories,
    read_directory,
    split_words,
    split_words_deduplicate_and_sort,
)
from petname.tests.conftest import write_word_lists


class TestSplitting:
    def test_split_keeps_order_and_duplicates(self):
        assert split_words("b a\n\tb") == ("b", "a", "b")

    def test_split_empty(self):
        assert split_words("") == ()

    def test_deduplicate_and_sort(self):
        assert split_words_deduplicate_and_sort("pear apple\npear  fig") == ("apple", "fig", "pear")


class TestBuiltinLists:
    @pytest.mark.parametrize("size", SIZES)
    def test_all_lists_load(self, size):
        lists = builtin_lists(size)
        assert set(lists) == set(LIST_NAMES)
        for words in lists.values():
            assert len(words) > 0

    @pytest.mark.parametrize("size", SIZES)
    def test_lists_are_sorted_and_unique(self, size):
        for list_name in LIST_NAMES:
            words = builtin_list(size, list_name)
            assert list(words) == sorted(set(words))

    def test_larger_lists_contain_smaller(self):
        for list_name in LIST_NAMES:
            small = set(builtin_list("small", list_name))
            medium = set(builtin_list("medium", list_name))
            large = set(builtin_list("large", list_name))
            assert small <= medium <= large

    def test_unknown_size(self):
        with pytest.raises(ValueError, match="Unknown word list size"):
            builtin_list("huge", "nouns")

    def test_unknown_list(self):
        with pytest.raises(ValueError, match="Unknown word list"):
            builtin_list("small", "verbs")


class TestDirectories:
    def test_read_directory(self, words_dir):
        texts = read_directory(words_dir)
        assert texts == {"adjectives": "a1 a2", "adverbs": "b1", "nouns": "c1 c2 c3"}

    def test_legacy_names_file(self, tmp_path):
        directory = write_word_lists(tmp_path / "legacy", nouns=None, legacy_nouns="old names")
        assert read_directory(directory)["nouns"] == "old names"

    def test_nouns_file_wins_over_legacy(self, tmp_path):
        directory = write_word_lists(tmp_path / "both", nouns="new", legacy_nouns="old")
        assert read_directory(directory)["nouns"] == "new"

    def test_missing_list(self, tmp_path):
        directory = write_word_lists(tmp_path / "partial", nouns=None)
        with pytest.raises(FileNotFoundError, match="nouns.txt"):
            read_directory(directory)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            read_directory(tmp_path / "nowhere")

    def test_several_directories_are_concatenated(self, tmp_path):
        first = write_word_lists(tmp_path / "first")
        second = write_word_lists(tmp_path / "second", adjectives="a3", adverbs="", nouns="c4")
        petnames = Petnames.from_directories([first, second])
        assert petnames.adjectives == ("a1", "a2", "a3")
        assert petnames.adverbs == ("b1",)
        assert petnames.nouns == ("c1", "c2", "c3", "c4")

    def test_read_directories_keeps_all_list_names(self, words_dir):
        assert set(read_directories([words_dir])) == set(LIST_NAMES)
