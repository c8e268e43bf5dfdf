"""Tests for the shuffled tile order."""
import numpy as np
import pytest

from hourpuzzle.model.tile_order import MAX_SAFE_INTEGER, TileOrder, generate


class TestGenerate:
    """Permutation properties of the Fisher-Yates generator."""

    @pytest.mark.parametrize("width,height", [(60, 60), (7, 3), (1, 1), (1, 5)])
    def test_result_is_a_permutation(self, width, height, rng):
        order = generate(width, height, rng=rng)

        assert len(order) == width * height
        assert sorted(order.thresholds.tolist()) == list(range(width * height))

    def test_many_seeds_all_produce_permutations(self):
        for seed in range(20):
            order = generate(10, 6, seed=seed)
            assert np.array_equal(np.sort(order.thresholds), np.arange(60))

    def test_same_seed_gives_same_order(self):
        a = generate(60, 60, seed=42)
        b = generate(60, 60, seed=42)
        assert np.array_equal(a.thresholds, b.thresholds)

    def test_default_grid_is_shuffled(self, rng):
        order = generate(60, 60, rng=rng)
        assert not np.array_equal(order.thresholds, np.arange(3600))

    def test_empty_grid(self, rng):
        order = generate(0, 60, rng=rng)
        assert len(order) == 0

    def test_negative_dimension_raises(self):
        with pytest.raises(ValueError):
            generate(-1, 60)

    def test_unsafe_size_raises(self):
        with pytest.raises(ValueError):
            generate(MAX_SAFE_INTEGER, 2)

    def test_uses_injected_rng(self):
        class CountingRng:
            def __init__(self):
                self.calls = 0

            def integers(self, low, high):
                self.calls += 1
                assert low == 0
                return high - 1  # swap with itself, keeps identity order

        fake = CountingRng()
        order = generate(4, 3, rng=fake)

        assert fake.calls == 11
        assert order.thresholds.tolist() == list(range(12))


class TestTileOrder:
    """Lookup and immutability of a generated order."""

    def test_threshold_uses_row_major_index(self):
        thresholds = np.arange(12, dtype=np.int64)[::-1].copy()
        order = TileOrder(width=4, height=3, thresholds=thresholds)

        # row 2, column 1 -> index 2*4 + 1 = 9 -> value 12 - 1 - 9 = 2
        assert order.index_of(1, 2) == 9
        assert order.threshold(1, 2) == 2
        assert order.as_grid()[2, 1] == 2

    def test_thresholds_are_read_only(self, rng):
        order = generate(5, 5, rng=rng)
        with pytest.raises(ValueError):
            order.thresholds[0] = 99

    def test_out_of_grid_cell_raises(self, rng):
        order = generate(5, 5, rng=rng)
        with pytest.raises(IndexError):
            order.threshold(5, 0)
        with pytest.raises(IndexError):
            order.threshold(0, -1)

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError):
            TileOrder(width=3, height=3, thresholds=np.arange(8, dtype=np.int64))
