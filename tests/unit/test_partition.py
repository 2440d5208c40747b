"""
Unit tests for the partitioner.

Tests chunk coverage, chunk count bounds and the small-input policy.
"""

import math
import random
from unittest.mock import Mock, call
import pytest

from pathfinder.tools.partition import partition, choose_chunk_count


class TestChooseChunkCount:
    """Test cases for chunk count selection."""

    def test_empty_input(self):
        """Test that an empty sequence gets no chunks."""
        assert choose_chunk_count(0) == 0

    @pytest.mark.parametrize("size", [1, 2, 3, 4])
    def test_small_inputs_use_one_chunk(self, size):
        """Test that inputs too small for a random draw use a single chunk."""
        assert choose_chunk_count(size) == 1

    def test_small_input_draw_range(self):
        """Test that sizes 1 and 2 skip the draw and sizes 3 and 4 draw from [1, 1]."""
        rng = Mock(spec=random.Random)
        rng.randint.return_value = 1

        choose_chunk_count(1, rng)
        choose_chunk_count(2, rng)
        rng.randint.assert_not_called()

        choose_chunk_count(3, rng)
        choose_chunk_count(4, rng)
        assert rng.randint.call_args_list == [call(1, 1), call(1, 1)]

    def test_count_within_bounds(self):
        """Test that the drawn count stays within [1, ceil(n / 2))."""
        rng = random.Random(7)
        for size in range(5, 200):
            count = choose_chunk_count(size, rng)
            assert 1 <= count < math.ceil(size / 2)

    def test_draws_vary(self):
        """Test that the count is not fixed for larger inputs."""
        rng = random.Random(3)
        counts = {choose_chunk_count(100, rng) for _ in range(50)}
        assert len(counts) > 1


class TestPartition:
    """Test cases for the partition function."""

    def test_empty_input(self):
        """Test that an empty sequence produces no chunks."""
        assert partition([]) == []

    def test_single_item(self):
        """Test that one item produces exactly one chunk."""
        assert partition(["a"]) == [["a"]]

    def test_coverage_for_many_sizes(self):
        """Test that chunks concatenate back to the input for any size."""
        rng = random.Random(11)
        for size in range(1, 120):
            items = list(range(size))
            chunks = partition(items, rng)

            flattened = [item for chunk in chunks for item in chunk]
            assert flattened == items
            assert 1 <= len(chunks) <= size
            assert all(chunks)

    def test_equal_chunk_sizes_except_last(self):
        """Test that all chunks but the last have the same length."""
        rng = random.Random(5)
        chunks = partition(list(range(97)), rng)

        sizes = [len(chunk) for chunk in chunks]
        assert all(s == sizes[0] for s in sizes[:-1])
        assert sizes[-1] <= sizes[0]

    def test_deterministic_with_seeded_rng(self):
        """Test that the same seed gives the same partition."""
        items = list(range(40))
        assert partition(items, random.Random(42)) == partition(items, random.Random(42))

    def test_accepts_tuples(self):
        """Test that any sequence can be partitioned and chunks are lists."""
        chunks = partition(tuple("abcdefghij"), random.Random(1))
        assert all(isinstance(chunk, list) for chunk in chunks)
        assert "".join("".join(chunk) for chunk in chunks) == "abcdefghij"
