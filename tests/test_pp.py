import pytest

from edpairing import pp
from edpairing.ate import (
    ate_miller_loop,
    ate_precompute_g1,
    ate_precompute_g2,
    ate_reduced_pairing,
)
from edpairing.fields import Fq6
from edpairing.g1 import G1
from edpairing.g2 import G2
from edpairing.tate import final_exponentiation


@pytest.fixture(scope="module")
def base_pairing():
    return pp.reduced_pairing(G1.one(), G2.one())


def test_precompute_is_ate():
    p = 4 * G1.one()
    q = G2.one()
    assert pp.precompute_g1(p) == ate_precompute_g1(p)
    assert pp.precompute_g2(q) == ate_precompute_g2(q)


def test_miller_loop_matches_pairing():
    p = G1.one()
    q = G2.one()
    via_precomp = pp.miller_loop(pp.precompute_g1(p), pp.precompute_g2(q))
    assert via_precomp == pp.pairing(p, q)
    assert via_precomp == ate_miller_loop(ate_precompute_g1(p), ate_precompute_g2(q))


def test_final_exponentiation_of_pairing(base_pairing):
    f = pp.pairing(G1.one(), G2.one())
    assert pp.final_exponentiation(f) == base_pairing
    assert final_exponentiation(f) == base_pairing


def test_reduced_pairing_is_ate(base_pairing):
    assert base_pairing == ate_reduced_pairing(G1.one(), G2.one())


def test_negation_inverts(base_pairing):
    e_neg = pp.reduced_pairing(-G1.one(), G2.one())
    assert e_neg * base_pairing == Fq6.one()


def test_double_miller_loop_reduces_to_product(base_pairing):
    p = G1.one()
    q = G2.one()
    prec_p = pp.precompute_g1(p)
    prec_q = pp.precompute_g2(q)
    prec_p_neg = pp.precompute_g1(-p)
    f = pp.double_miller_loop(prec_p, prec_q, prec_p_neg, prec_q)
    assert pp.final_exponentiation(f) == Fq6.one()
    f2 = pp.double_miller_loop(prec_p, prec_q, prec_p, prec_q)
    assert pp.final_exponentiation(f2) == base_pairing ** 2