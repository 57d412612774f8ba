import pytest

from edpairing.fields import MODULUS_R, Fq, Fq3, Fq6
from edpairing.g1 import G1
from edpairing.g2 import G2
from edpairing.tate import (
    FqConicCoefficients,
    TateG2Precomp,
    _ExtendedPoint,
    _full_addition_step,
    _mixed_addition_step,
    decode_tate_g1_precomp,
    encode_tate_g1_precomp,
    final_exponentiation,
    final_exponentiation_first_chunk,
    final_exponentiation_last_chunk,
    tate_miller_loop,
    tate_pairing,
    tate_precompute_g1,
    tate_precompute_g2,
    tate_reduced_pairing,
)


@pytest.fixture(scope="module")
def base_pairing():
    return tate_reduced_pairing(G1.one(), G2.one())


def test_conic_coefficients_encode_format():
    cc = FqConicCoefficients(Fq(1), Fq(2), Fq(3))
    assert cc.encode() == "1 2 3"


def test_conic_coefficients_round_trip():
    cc = FqConicCoefficients(Fq(7), Fq(-1), Fq(123456789))
    assert FqConicCoefficients.decode(cc.encode()) == cc


@pytest.mark.parametrize("text", ["1 2", "1 2 3 4", "1 x 3", ""])
def test_conic_coefficients_decode_rejects_malformed(text):
    with pytest.raises(ValueError):
        FqConicCoefficients.decode(text)


def test_g2_precomp_round_trip():
    prec = tate_precompute_g2(G2.one())
    assert TateG2Precomp.decode(prec.encode()) == prec


def test_g2_precomp_decode_rejects_malformed():
    with pytest.raises(ValueError):
        TateG2Precomp.decode("1 2 3 4 5")


def test_g2_precomp_equality_distinguishes_points():
    assert tate_precompute_g2(G2.one()) != tate_precompute_g2(G2.one().dbl())
    assert tate_precompute_g2(G2.one()) == tate_precompute_g2(G2.one())


def test_g1_precomp_length_matches_loop():
    prec = tate_precompute_g1(G1.one())
    doublings = MODULUS_R.bit_length() - 1
    additions = bin(MODULUS_R).count("1") - 1
    assert len(prec) == doublings + additions


def test_g1_precomp_independent_of_representation():
    p = G1.one().dbl()
    special = G1(p.X, p.Y, p.Z)
    special.to_special()
    assert tate_precompute_g1(p) == tate_precompute_g1(special)


def test_g1_precomp_text_round_trip():
    prec = tate_precompute_g1(G1.one())
    text = encode_tate_g1_precomp(prec)
    assert text.startswith(f"{len(prec)}\n")
    assert decode_tate_g1_precomp(text) == prec


def test_g1_precomp_empty_round_trip():
    assert encode_tate_g1_precomp([]) == "0\n"
    assert decode_tate_g1_precomp("0\n") == []


def test_g1_precomp_decode_rejects_short_list():
    with pytest.raises(ValueError):
        decode_tate_g1_precomp("2\n1 2 3\n")


def test_g1_precomp_decode_rejects_bad_count():
    with pytest.raises(ValueError):
        decode_tate_g1_precomp("two\n1 2 3\n")


def test_miller_loop_rejects_short_precomp():
    prec_q = tate_precompute_g2(G2.one())
    with pytest.raises(ValueError):
        tate_miller_loop(tate_precompute_g1(G1.one())[:5], prec_q)


def test_pairing_matches_precomputed_loop():
    p, q = G1.one(), G2.one()
    expected = tate_miller_loop(tate_precompute_g1(p), tate_precompute_g2(q))
    assert tate_pairing(p, q) == expected


def test_final_exponentiation_of_one():
    assert final_exponentiation(Fq6.one()) == Fq6.one()


def test_first_chunk_lands_in_cyclotomic_subgroup():
    elt = Fq6(Fq3(3, 5, 7), Fq3(11, 13, 17))
    beta = final_exponentiation_first_chunk(elt, elt.inverse())
    assert beta * beta.unitary_inverse() == Fq6.one()


def test_last_chunk_of_one():
    one = Fq6.one()
    assert final_exponentiation_last_chunk(one, one) == one


def test_reduced_pairing_is_non_degenerate(base_pairing):
    assert base_pairing != Fq6.one()


def test_reduced_pairing_has_order_r(base_pairing):
    assert base_pairing ** MODULUS_R == Fq6.one()


def test_reduced_pairing_is_unitary(base_pairing):
    assert base_pairing * base_pairing.unitary_inverse() == Fq6.one()


def test_bilinear_in_g1(base_pairing):
    assert tate_reduced_pairing(G1.one().dbl(), G2.one()) == base_pairing.squared()


def test_bilinear_in_g2(base_pairing):
    assert tate_reduced_pairing(G1.one(), 3 * G2.one()) == base_pairing ** 3


def test_bilinear_in_both(base_pairing):
    left = tate_reduced_pairing(2 * G1.one(), 3 * G2.one())
    right = tate_reduced_pairing(3 * G1.one(), 2 * G2.one())
    assert left == right == base_pairing ** 6


def test_negation_inverts(base_pairing):
    negated = tate_reduced_pairing(-G1.one(), G2.one())
    assert negated * base_pairing == Fq6.one()


def test_full_addition_agrees_with_mixed_on_affine_base():
    p = G1.one()
    p.to_affine_coordinates()
    base = _ExtendedPoint(p.X, p.Y, p.Z, p.X * p.Y)
    q = G1.one().dbl()
    q.to_affine_coordinates()
    current = _ExtendedPoint(q.X * 5, q.Y * 5, q.Z * 5, q.X * q.Y * 5)
    full_point, full_cc = _full_addition_step(base, current)
    mixed_point, mixed_cc = _mixed_addition_step(base, current)
    assert full_point == mixed_point
    assert full_cc == mixed_cc
    assert full_point.T * full_point.Z == full_point.X * full_point.Y