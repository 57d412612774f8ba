"""The pairing chosen for the Edwards curve: the ate pairing."""

from __future__ import annotations

from .ate import (
    AteG1Precomp,
    AteG2Precomp,
    ate_double_miller_loop,
    ate_miller_loop,
    ate_pairing,
    ate_precompute_g1,
    ate_precompute_g2,
    ate_reduced_pairing,
)
from .fields import Fq6
from .g1 import G1
from .g2 import G2
from .tate import final_exponentiation as _final_exponentiation


def final_exponentiation(elt: Fq6) -> Fq6:
    return _final_exponentiation(elt)


def precompute_g1(p: G1) -> AteG1Precomp:
    return ate_precompute_g1(p)


def precompute_g2(q: G2) -> AteG2Precomp:
    return ate_precompute_g2(q)


def miller_loop(prec_p: AteG1Precomp, prec_q: AteG2Precomp) -> Fq6:
    return ate_miller_loop(prec_p, prec_q)


def double_miller_loop(
    prec_p1: AteG1Precomp,
    prec_q1: AteG2Precomp,
    prec_p2: AteG1Precomp,
    prec_q2: AteG2Precomp,
) -> Fq6:
    return ate_double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2)


def pairing(p: G1, q: G2) -> Fq6:
    return ate_pairing(p, q)


def reduced_pairing(p: G1, q: G2) -> Fq6:
    return ate_reduced_pairing(p, q)