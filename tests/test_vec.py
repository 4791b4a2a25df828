import math

import pytest

from platnav.vec import WORLD_SCALE, Vec2, sign


def test_add_and_sub_are_inverse():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_add_componentwise():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(1.0 + 3.0, 2.0 + 4.0)


def test_scalar_multiplication_both_sides():
    v = Vec2(1.5, -3.0)
    assert v * 2 == Vec2(3.0, -6.0)
    assert 2 * v == v * 2


def test_division_undoes_multiplication():
    v = Vec2(1.25, -7.5)
    assert (v * 4.0) / 4.0 == v


def test_negation():
    v = Vec2(2.0, -3.0)
    assert -v == Vec2(-2.0, 3.0)
    assert v + (-v) == Vec2(0.0, 0.0)


def test_multiply_by_vector_is_type_error():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) * Vec2(1.0, 1.0)


def test_add_non_vector_is_type_error():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 1.0


def test_length_of_pythagorean_triple():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_length_scales_linearly():
    v = Vec2(1.2, -0.7)
    assert (v * 3.0).length() == pytest.approx(3.0 * v.length())


def test_distance_symmetric_and_matches_difference():
    a = Vec2(-1.0, 2.0)
    b = Vec2(4.5, -3.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.distance(a) == 0.0


def test_unpacking():
    x, y = Vec2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)


def test_vectors_are_immutable():
    v = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 3.0  # type: ignore[misc]
    assert v == Vec2(1.0, 2.0)
    assert v.x == 1.0


@pytest.mark.parametrize(
    "value, expected",
    [(-2.5, -1), (0.0, 0), (0, 0), (3, 1), (0.001, 1), (-math.inf, -1)],
)
def test_sign(value, expected):
    assert sign(value) == expected


def test_world_scale_converts_world_units_to_pixels():
    assert Vec2(1.0, 2.0) * WORLD_SCALE == Vec2(32.0, 64.0)