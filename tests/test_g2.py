import pytest

from edpairing.fields import (
    G2_ONE_X,
    G2_ONE_Y,
    TWIST_COEFF_A,
    TWIST_COEFF_D,
    Fq,
    Fq3,
    Fr,
)
from edpairing.g2 import G2


@pytest.fixture
def base():
    return G2.one()


def _scaled(point, factor):
    """Same point, with every inverted coordinate multiplied by factor."""
    return G2(point.X * factor, point.Y * factor, point.Z * factor)


def test_generator_is_well_formed(base):
    assert base.is_well_formed()


def test_zero_is_well_formed_and_zero():
    zero = G2.zero()
    assert zero.is_zero()
    assert zero.is_well_formed()


def test_generator_affine_coordinates(base):
    copy = G2.one()
    copy.to_affine_coordinates()
    assert copy.X == G2_ONE_X
    assert copy.Y == G2_ONE_Y
    assert copy.Z == Fq3.one()


def test_group_order_annihilates_generator(base):
    assert (G2.order() * base).is_zero()


def test_order_and_characteristic():
    assert G2.order() == Fr.MODULUS
    assert G2.base_field_char() == Fq.MODULUS
    assert G2.size_in_bits() == 550


def test_mul_by_a_matches_twist_coefficient():
    elt = Fq3(12345, 678910, 1112131415)
    assert G2.mul_by_a(elt) == TWIST_COEFF_A * elt


def test_mul_by_d_matches_twist_coefficient():
    elt = Fq3(9876543210, 13579, 24680)
    assert G2.mul_by_d(elt) == TWIST_COEFF_D * elt


def test_addition_identity(base):
    zero = G2.zero()
    assert base + zero == base
    assert zero + base == base


def test_point_minus_itself_is_zero(base):
    assert (base - base).is_zero()


def test_double_equals_sum(base):
    assert base.dbl() == base.add(base)
    assert base.dbl() == 2 * base


def test_addition_commutes_and_associates(base):
    p = 3 * base
    q = 5 * base
    r = 7 * base
    assert p + q == q + p
    assert (p + q) + r == p + (q + r)
    assert p + q == 8 * base


def test_sum_is_well_formed(base):
    assert (base + base.dbl()).is_well_formed()


def test_mixed_add_agrees_with_add(base):
    other = base.dbl()
    other.to_special()
    assert other.is_special()
    assert base.mixed_add(other) == base + other


def test_mixed_add_with_zero(base):
    assert G2.zero().mixed_add(base) == base
    assert base.mixed_add(G2.zero()) == base


def test_negative_scalar(base):
    assert (-3) * base == -(3 * base)


def test_field_scalar(base):
    assert Fr(11) * base == 11 * base


def test_equality_ignores_projective_scaling(base):
    scaled = _scaled(base, Fq3(3, 4, 5))
    assert scaled == base
    assert scaled != base.dbl()


def test_zero_not_equal_to_generator(base):
    assert G2.zero() != base
    assert base != G2.zero()


def test_to_special_keeps_point(base):
    scaled = _scaled(base.dbl(), Fq3(7, 1, 2))
    assert not scaled.is_special()
    scaled.to_special()
    assert scaled.is_special()
    assert scaled.Z == Fq3.one()
    assert scaled == base.dbl()


def test_to_special_leaves_zero_alone():
    zero = G2.zero()
    zero.to_special()
    assert zero.is_zero()


def test_mul_by_q_of_zero():
    assert G2.zero().mul_by_q().is_zero()


def test_mul_by_q_respects_projective_scaling(base):
    scaled = _scaled(base, Fq3(2, 9, 4))
    assert scaled.mul_by_q() == base.mul_by_q()


def test_encode_zero():
    assert G2.zero().encode() == "0 0 0 1"


def test_encode_decode_round_trip(base):
    for point in (base, base.dbl(), 17 * base, -base):
        assert G2.decode(point.encode()) == point


def test_decode_random_round_trip():
    point = G2.random_element()
    assert G2.decode(point.encode()) == point


def test_decode_rejects_bad_token_count():
    with pytest.raises(ValueError):
        G2.decode("1 2 3")


def test_decode_rejects_bad_parity(base):
    x_part = base.encode().rsplit(" ", 1)[0]
    with pytest.raises(ValueError):
        G2.decode(f"{x_part} 7")


def test_decode_rejects_non_number():
    with pytest.raises(ValueError):
        G2.decode("a b c 0")


def test_str_and_coordinates_of_zero():
    assert str(G2.zero()) == "O"
    assert G2.zero().coordinates() == "O"


def test_str_shows_affine_polynomials(base):
    text = str(base)
    assert text == (
        f"({G2_ONE_X.c2}*z^2 + {G2_ONE_X.c1}*z + {G2_ONE_X.c0} , "
        f"{G2_ONE_Y.c2}*z^2 + {G2_ONE_Y.c1}*z + {G2_ONE_Y.c0})"
    )


def test_coordinates_has_three_parts(base):
    assert base.coordinates().count(" : ") == 2
    assert base.coordinates().startswith("(")


def test_batch_to_special(base):
    points = [_scaled(base, Fq3(2, 3, 1)), base.dbl(), 5 * base]
    expected = [base, base.dbl(), 5 * base]
    G2.batch_to_special_all_non_zeros(points)
    assert all(point.Z == Fq3.one() for point in points)
    assert points == expected


def test_batch_to_special_empty():
    points = []
    G2.batch_to_special_all_non_zeros(points)
    assert points == []