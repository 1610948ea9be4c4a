import pytest

from connect4_rng import ColumnRandom


def test_same_seed_same_sequence():
    a, b = ColumnRandom(42), ColumnRandom(42)
    cols = list(range(7))
    assert [a.choice(cols) for _ in range(50)] == [b.choice(cols) for _ in range(50)]


def test_only_offered_columns_are_picked():
    rng = ColumnRandom(7)
    offered = [1, 4, 6]
    assert {rng.choice(offered) for _ in range(300)} == set(offered)


def test_every_column_is_reachable():
    rng = ColumnRandom(2024)
    counts = [0] * 7
    for _ in range(7000):
        counts[rng.choice(range(7))] += 1
    assert min(counts) > 800


def test_empty_choice_raises():
    with pytest.raises(IndexError):
        ColumnRandom(1).choice([])


def test_unseeded_works():
    assert ColumnRandom().choice([3]) == 3
