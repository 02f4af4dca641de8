import pytest

from barrelclimb.vector import (
    ONE,
    RIGHT,
    UP,
    ZERO,
    BezierCurve,
    Vector2,
    lerp,
    rotate_vector,
)


def test_magnitude_and_square():
    v = Vector2(3.0, 4.0)
    assert v.magnitude() == pytest.approx(5.0)
    assert v.magnitude_sqr() == pytest.approx(v.magnitude() ** 2)


def test_normalized_is_unit_and_parallel():
    v = Vector2(-7.0, 2.5)
    n = v.normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.x * v.y == pytest.approx(n.y * v.x)
    assert n.x < 0 < n.y


def test_normalized_zero_vector_is_zero():
    assert ZERO.normalized() == Vector2(0.0, 0.0)


def test_arithmetic_operators():
    a = Vector2(1.5, -2.0)
    b = Vector2(4.0, 0.25)
    assert (a + b) - b == a
    assert -a == Vector2(-1.5, 2.0)
    assert a * 2.0 == 2.0 * a
    assert a * 1 == a
    assert ONE * 0.0 == ZERO


def test_multiplying_by_non_number_is_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) * "x"


def test_rotating_right_by_quarter_turn_gives_up():
    r = rotate_vector(RIGHT, 90.0)
    assert r.x == pytest.approx(UP.x, abs=1e-6)
    assert r.y == pytest.approx(UP.y, abs=1e-6)


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, 181.5, -45.0, 720.0])
def test_rotation_preserves_length_and_inverts(angle):
    v = Vector2(3.0, -8.0)
    r = rotate_vector(v, angle)
    assert r.magnitude() == pytest.approx(v.magnitude())
    back = rotate_vector(r, -angle)
    assert back.x == pytest.approx(v.x, abs=1e-9)
    assert back.y == pytest.approx(v.y, abs=1e-9)


def test_lerp_clamps_time():
    a = Vector2(1.0, 2.0)
    b = Vector2(9.0, -6.0)
    assert lerp(a, b, -1.0) == a
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 2.0) == b


def test_lerp_midpoint():
    a = Vector2(1.0, 2.0)
    b = Vector2(9.0, -6.0)
    m = lerp(a, b, 0.5)
    mid = (a + b) * 0.5
    assert m.x == pytest.approx(mid.x)
    assert m.y == pytest.approx(mid.y)


def test_bezier_endpoints():
    curve = BezierCurve(
        Vector2(10.0, 20.0), Vector2(30.0, -40.0), Vector2(50.0, 60.0), Vector2(70.0, 80.0)
    )
    assert curve.point_at(0.0) == curve.p0
    assert curve.point_at(1.0) == curve.p3


def test_bezier_points_are_whole_numbers():
    curve = BezierCurve(
        Vector2(0.3, 1.7), Vector2(13.1, -4.2), Vector2(55.5, 6.6), Vector2(9.9, 80.4)
    )
    for step in range(11):
        p = curve.point_at(step / 10)
        assert float(p.x).is_integer()
        assert float(p.y).is_integer()


def test_bezier_symmetric_curve_midpoint():
    curve = BezierCurve(
        Vector2(0.0, 0.0), Vector2(0.0, 100.0), Vector2(100.0, 100.0), Vector2(100.0, 0.0)
    )
    assert curve.point_at(0.5).x == (curve.p0.x + curve.p3.x) / 2


def test_bezier_rounds_halves_away_from_zero():
    half = Vector2(0.5, -0.5)
    curve = BezierCurve(half, half, half, half)
    assert curve.point_at(0.0) == Vector2(1.0, -1.0)