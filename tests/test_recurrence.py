"""Tests for the Poisson Binomial recurrence and its memo table."""

import pytest

from successdist.stats.common.recurrence import MemoTable, ekj


class TestMemoTable:
    """Test the per-query memo table."""

    def test_starts_uncomputed(self) -> None:
        """Test every cell starts out as None, distinct from 0.0."""
        table = MemoTable(3)
        assert all(table[k, j] is None for k in range(3) for j in range(3))
        assert table.computed_cells() == 0

    def test_zero_is_a_value(self) -> None:
        """Test a stored zero counts as computed."""
        table = MemoTable(2)
        table[0, 1] = 0.0
        assert table[0, 1] == 0.0
        assert table.computed_cells() == 1

    def test_write_once(self) -> None:
        """Test a computed cell cannot change value."""
        table = MemoTable(2)
        table[1, 1] = 0.25
        with pytest.raises(RuntimeError, match="already holds"):
            table[1, 1] = 0.5

    def test_rewriting_same_value_is_allowed(self) -> None:
        """Test storing an identical value again is a no-op."""
        table = MemoTable(2)
        table[1, 1] = 0.25
        table[1, 1] = 0.25
        assert table.computed_cells() == 1

    def test_iterates_computed_cells(self) -> None:
        """Test iteration yields only computed cells."""
        table = MemoTable(3)
        table[0, 2] = 0.5
        table[2, 2] = 0.1
        assert sorted(table) == [(0, 2, 0.5), (2, 2, 0.1)]


class TestBaseCases:
    """Test base cases are resolved before the memo is consulted."""

    def test_negative_count_is_impossible(self) -> None:
        """Test k == -1 gives 0."""
        assert ekj(-1, 3, [0.5, 0.5, 0.5], MemoTable(4)) == 0.0

    def test_more_successes_than_trials(self) -> None:
        """Test k == j + 1 gives 0."""
        assert ekj(4, 3, [0.5, 0.5, 0.5], MemoTable(4)) == 0.0
        assert ekj(1, 0, [], MemoTable(1)) == 0.0

    def test_empty_sequence(self) -> None:
        """Test zero trials give zero successes with certainty."""
        assert ekj(0, 0, [], MemoTable(1)) == 1.0

    def test_base_cases_do_not_touch_table(self) -> None:
        """Test base cases are not written to the memo."""
        table = MemoTable(2)
        ekj(-1, 1, [0.3], table)
        ekj(2, 1, [0.3], table)
        ekj(0, 0, [0.3], table)
        assert table.computed_cells() == 0


class TestRecurrence:
    """Test the recurrence values and memo reuse."""

    def test_single_trial(self) -> None:
        """Test n = 1 picks p[0] for success, 1 - p[0] for failure."""
        assert ekj(1, 1, [0.3], MemoTable(2)) == pytest.approx(0.3)
        assert ekj(0, 1, [0.3], MemoTable(2)) == pytest.approx(0.7)

    def test_two_trials(self) -> None:
        """Test n = 2 addresses p[j - 1] for trial j."""
        p = [0.2, 0.6]
        table = MemoTable(3)
        assert ekj(0, 2, p, table) == pytest.approx(0.8 * 0.4)
        assert ekj(1, 2, p, table) == pytest.approx(0.2 * 0.4 + 0.8 * 0.6)
        assert ekj(2, 2, p, table) == pytest.approx(0.2 * 0.6)

    def test_prefix_probabilities(self) -> None:
        """Test E(k, j) only looks at the first j trials."""
        p = [0.2, 0.6, 0.9]
        assert ekj(1, 1, p, MemoTable(4)) == pytest.approx(0.2)
        assert ekj(2, 2, p, MemoTable(4)) == pytest.approx(0.12)

    def test_memo_hit_adds_no_cells(self) -> None:
        """Test repeating a query is answered from the memo."""
        p = [0.1, 0.4, 0.7, 0.2]
        table = MemoTable(5)
        first = ekj(2, 4, p, table)
        cells = table.computed_cells()
        assert ekj(2, 4, p, table) == first
        assert table.computed_cells() == cells

    def test_increasing_order_reuses_states(self) -> None:
        """Test E(1, n) after E(0, n) only fills the k = 1 row."""
        p = [0.1, 0.4, 0.7, 0.2]

        fresh = MemoTable(5)
        ekj(1, 4, p, fresh)
        assert fresh.computed_cells() == 7

        shared = MemoTable(5)
        ekj(0, 4, p, shared)
        assert shared.computed_cells() == 4
        ekj(1, 4, p, shared)
        assert shared.computed_cells() == 8

    def test_memo_cells_are_probabilities(self) -> None:
        """Test every stored value lies in [0, 1]."""
        p = [0.05, 0.9, 0.3, 0.65, 0.5]
        table = MemoTable(6)
        for k in range(6):
            ekj(k, 5, p, table)
        assert all(-1e-12 <= value <= 1 + 1e-12 for _, _, value in table)

    def test_long_sequences_do_not_recurse(self) -> None:
        """Test depth well past the interpreter recursion limit."""
        n = 1500
        p = [0.0005] * n
        assert ekj(0, n, p, MemoTable(n + 1)) == pytest.approx(0.9995**n, rel=1e-9)
