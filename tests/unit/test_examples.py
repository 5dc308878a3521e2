"""Tests for built-in example datasets and random operation lists."""

import random

import pytest

from trie_visualizer.examples import EXAMPLE_DATASETS, random_operations
from trie_visualizer.operations import is_valid_word
from trie_visualizer.step_types import OperationType
from trie_visualizer.steps import generate_steps


class TestExampleDatasets:
    def test_four_datasets(self):
        assert len(EXAMPLE_DATASETS) == 4

    def test_operations_are_fresh_copies(self):
        example = EXAMPLE_DATASETS[0]
        first = example.operations()
        generate_steps(first)

        second = example.operations()

        assert first[1].result is True
        assert all(op.result is None for op in second)

    def test_apple_example_results(self):
        ops = EXAMPLE_DATASETS[0].operations()

        generate_steps(ops)

        assert [op.result for op in ops] == [None, True, False, True, None, True]

    def test_single_character_example_results(self):
        ops = EXAMPLE_DATASETS[3].operations()

        generate_steps(ops)

        assert [op.result for op in ops[3:]] == [True, True, True, False]


class TestRandomOperations:
    def test_count_and_leading_inserts(self):
        ops = random_operations(10, random.Random(7))

        assert len(ops) == 10
        assert all(op.type == OperationType.INSERT for op in ops[:4])
        assert all(op.type != OperationType.INSERT for op in ops[4:])

    def test_small_counts_still_insert_twice(self):
        ops = random_operations(3, random.Random(1))

        assert [op.type for op in ops[:2]] == [OperationType.INSERT] * 2

    def test_words_are_valid(self):
        ops = random_operations(20, random.Random(3))

        assert all(is_valid_word(op.word) for op in ops)

    def test_seeded_generation_is_reproducible(self):
        first = random_operations(8, random.Random(42))
        second = random_operations(8, random.Random(42))

        assert first == second

    def test_non_positive_count_rejected(self):
        with pytest.raises(ValueError):
            random_operations(0)
