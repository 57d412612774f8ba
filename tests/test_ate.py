import pytest

from edpairing.ate import (
    AteG1Precomp,
    Fq3ConicCoefficients,
    ate_double_miller_loop,
    ate_miller_loop,
    ate_pairing,
    ate_precompute_g1,
    ate_precompute_g2,
    ate_reduced_pairing,
    decode_ate_g2_precomp,
    encode_ate_g2_precomp,
)
from edpairing.fields import ATE_LOOP_COUNT, G1_ONE_X, G1_ONE_Y, MODULUS_R, Fq, Fq3, Fq6
from edpairing.g1 import G1
from edpairing.g2 import G2


@pytest.fixture(scope="module")
def base_pairing():
    return ate_reduced_pairing(G1.one(), G2.one())


@pytest.fixture(scope="module")
def prec_q():
    return ate_precompute_g2(G2.one())


def test_precompute_g1_uses_affine_coordinates():
    prec = ate_precompute_g1(G1.one())
    assert prec.P_XZ == G1_ONE_X
    assert prec.P_XY == G1_ONE_X * G1_ONE_Y
    assert prec.P_ZZplusYZ == Fq.one() + G1_ONE_Y


def test_precompute_g1_independent_of_representation():
    p = 3 * G1.one()
    special = G1(p.X, p.Y, p.Z)
    special.to_special()
    assert ate_precompute_g1(p) == ate_precompute_g1(special)


def test_ate_g1_precomp_round_trip():
    prec = ate_precompute_g1(5 * G1.one())
    assert AteG1Precomp.decode(prec.encode()) == prec


def test_ate_g1_precomp_decode_rejects_malformed():
    with pytest.raises(ValueError):
        AteG1Precomp.decode("1 2")
    with pytest.raises(ValueError):
        AteG1Precomp.decode("1 2 x")


def test_conic_coefficients_round_trip():
    cc = Fq3ConicCoefficients(Fq3(1, 2, 3), Fq3(4, 5, 6), Fq3(7, 8, 9))
    assert cc.encode() == "1 2 3 4 5 6 7 8 9"
    assert Fq3ConicCoefficients.decode(cc.encode()) == cc


def test_conic_coefficients_decode_rejects_malformed():
    with pytest.raises(ValueError):
        Fq3ConicCoefficients.decode("1 2 3")


def test_precompute_g2_length_matches_loop_count(prec_q):
    doublings = ATE_LOOP_COUNT.bit_length() - 1
    additions = bin(ATE_LOOP_COUNT).count("1") - 1
    assert len(prec_q) == doublings + additions


def test_g2_precomp_round_trip(prec_q):
    text = encode_ate_g2_precomp(prec_q)
    assert text.splitlines()[0] == str(len(prec_q))
    assert decode_ate_g2_precomp(text) == prec_q


def test_g2_precomp_decode_rejects_short_list():
    with pytest.raises(ValueError):
        decode_ate_g2_precomp("2\n1 2 3 4 5 6 7 8 9\n")
    with pytest.raises(ValueError):
        decode_ate_g2_precomp("")


def test_miller_loop_rejects_short_precomputation(prec_q):
    prec_p = ate_precompute_g1(G1.one())
    with pytest.raises(ValueError):
        ate_miller_loop(prec_p, prec_q[:5])


def test_pairing_is_miller_loop_of_precomputations(prec_q):
    p = 2 * G1.one()
    assert ate_pairing(p, G2.one()) == ate_miller_loop(ate_precompute_g1(p), prec_q)


def test_double_miller_loop_is_product(prec_q):
    p1 = G1.one()
    p2 = 7 * G1.one()
    q2 = 3 * G2.one()
    prec_p1 = ate_precompute_g1(p1)
    prec_p2 = ate_precompute_g1(p2)
    prec_q2 = ate_precompute_g2(q2)
    combined = ate_double_miller_loop(prec_p1, prec_q, prec_p2, prec_q2)
    separate = ate_miller_loop(prec_p1, prec_q) * ate_miller_loop(prec_p2, prec_q2)
    assert combined == separate


def test_reduced_pairing_is_nontrivial(base_pairing):
    assert not (base_pairing == Fq6.one())


def test_reduced_pairing_has_order_r(base_pairing):
    assert base_pairing ** MODULUS_R == Fq6.one()


def test_bilinearity(base_pairing):
    e_2p = ate_reduced_pairing(2 * G1.one(), G2.one())
    e_2q = ate_reduced_pairing(G1.one(), 2 * G2.one())
    assert e_2p == e_2q
    assert e_2p == base_pairing ** 2