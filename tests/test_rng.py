import pytest

from barrelclimb.rng import Random


def test_same_seed_same_sequence():
    a = Random(7)
    b = Random(7)
    assert [a.random_int() for _ in range(5)] == [b.random_int() for _ in range(5)]
    assert a.random_float() == b.random_float()


def test_random_int_fits_32_bits():
    rng = Random(1)
    for _ in range(200):
        value = rng.random_int()
        assert 0 <= value < 2**32


def test_random_float_is_half_open_unit_interval():
    rng = Random(2)
    for _ in range(200):
        assert 0.0 <= rng.random_float() < 1.0


def test_integer_range_is_inclusive():
    rng = Random(3)
    values = {rng.random_range(1, 3) for _ in range(300)}
    assert values == {1, 2, 3}


def test_degenerate_integer_range():
    assert Random(4).random_range(5, 5) == 5


def test_float_range_bounds():
    rng = Random(5)
    for _ in range(200):
        value = rng.random_range(2.5, 4.0)
        assert isinstance(value, float)
        assert 2.5 <= value < 4.0


def test_reversed_integer_range_raises():
    with pytest.raises(ValueError):
        Random(6).random_range(4, 1)