"""The reduced Tate pairing on the Edwards curve and its final exponentiation.

The Miller loop runs over the bits of the group order r. G1 precomputation
walks the loop once and records, for each doubling and addition step, the
coefficients of the conic through the points involved. G2 precomputation
reduces Q to the two F_q^3 values at which those conics are evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass

from .fields import (
    FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0,
    FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG,
    FINAL_EXPONENT_LAST_CHUNK_W1,
    MODULUS_R,
    Fq,
    Fq3,
    Fq6,
)
from .g1 import G1
from .g2 import G2


@dataclass(frozen=True)
class FqConicCoefficients:
    """Coefficients of the conic c_ZZ*Z^2 + c_XY*X*Y + c_XZ*X*Z over F_q."""

    c_ZZ: Fq
    c_XY: Fq
    c_XZ: Fq

    def encode(self) -> str:
        return f"{self.c_ZZ} {self.c_XY} {self.c_XZ}"

    @classmethod
    def decode(cls, text: str) -> FqConicCoefficients:
        tokens = text.split()
        if len(tokens) != 3:
            raise ValueError(f"malformed conic coefficients: {text!r}")
        try:
            return cls(*(Fq(token) for token in tokens))
        except ValueError as exc:
            raise ValueError(f"malformed conic coefficients: {text!r}") from exc


TateG1Precomp = list[FqConicCoefficients]


@dataclass(frozen=True)
class TateG2Precomp:
    """The values y0 = Y/Z and eta = (Z+Y)/(u*X) of an affine G2 point."""

    y0: Fq3
    eta: Fq3

    def encode(self) -> str:
        return f"{self.y0} {self.eta}"

    @classmethod
    def decode(cls, text: str) -> TateG2Precomp:
        tokens = text.split()
        if len(tokens) != 6:
            raise ValueError(f"malformed Tate G2 precomputation: {text!r}")
        try:
            return cls(Fq3(*tokens[:3]), Fq3(*tokens[3:]))
        except ValueError as exc:
            raise ValueError(f"malformed Tate G2 precomputation: {text!r}") from exc


def encode_tate_g1_precomp(coefficients: TateG1Precomp) -> str:
    """A count line followed by one set of conic coefficients per line."""
    return f"{len(coefficients)}\n" + "".join(
        f"{cc.encode()}\n" for cc in coefficients
    )


def decode_tate_g1_precomp(text: str) -> TateG1Precomp:
    """Read a list written by :func:`encode_tate_g1_precomp`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty Tate G1 precomputation")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed coefficient count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("Tate G1 precomputation is shorter than its count")
    return [FqConicCoefficients.decode(line) for line in lines[1 : count + 1]]


def final_exponentiation_first_chunk(elt: Fq6, elt_inv: Fq6) -> Fq6:
    """Raise ``elt`` to (q^3 - 1)*(q + 1), given its inverse."""
    elt_q3_over_elt = elt.frobenius_map(3) * elt_inv
    alpha = elt_q3_over_elt.frobenius_map(1)
    return alpha * elt_q3_over_elt


def final_exponentiation_last_chunk(elt: Fq6, elt_inv: Fq6) -> Fq6:
    """Raise a cyclotomic ``elt`` to w1*q + w0, given its inverse."""
    w1_part = elt.frobenius_map(1).cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_W1)
    if FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG:
        w0_part = elt_inv.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    else:
        w0_part = elt.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    return w1_part * w0_part


def final_exponentiation(elt: Fq6) -> Fq6:
    """Map a Miller loop value into the target group GT."""
    elt_inv = elt.inverse()
    elt_to_first_chunk = final_exponentiation_first_chunk(elt, elt_inv)
    elt_inv_to_first_chunk = final_exponentiation_first_chunk(elt_inv, elt)
    return final_exponentiation_last_chunk(elt_to_first_chunk, elt_inv_to_first_chunk)


@dataclass(frozen=True)
class _ExtendedPoint:
    """A G1 point in extended projective coordinates, with T*Z == X*Y."""

    X: Fq
    Y: Fq
    Z: Fq
    T: Fq


def _doubling_step(current: _ExtendedPoint) -> tuple[_ExtendedPoint, FqConicCoefficients]:
    x, y, z, t = current.X, current.Y, current.Z, current.T
    a = x.squared()
    b = y.squared()
    c = z.squared()
    d = (x + y).squared()
    e = (y + z).squared()
    f = d - (a + b)
    g = e - (b + c)
    h = a
    i = h + b
    j = c - i
    k = j + c

    c_zz = y * (t - x)
    c_xz = x * t - b
    cc = FqConicCoefficients(c_ZZ=c_zz + c_zz, c_XY=j + j + g, c_XZ=c_xz + c_xz)
    point = _ExtendedPoint(X=f * k, Y=i * (b - h), Z=i * k, T=f * (b - h))
    return point, cc


def _full_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> tuple[_ExtendedPoint, FqConicCoefficients]:
    x1, y1, z1, t1 = current.X, current.Y, current.Z, current.T
    x2, y2, z2, t2 = base.X, base.Y, base.Z, base.T
    a = x1 * x2
    b = y1 * y2
    c = z1 * t2
    d = t1 * z2
    e = d + c
    f = (x1 - y1) * (x2 + y2) + b - a
    g = b + a
    h = d - c
    i = t1 * t2

    cc = FqConicCoefficients(
        c_ZZ=(t1 - x1) * (t2 + x2) - i + a,
        c_XY=x1 * z2 - x2 * z1 + f,
        c_XZ=(y1 - t1) * (y2 + t2) - b + i - h,
    )
    point = _ExtendedPoint(X=e * f, Y=g * h, Z=f * g, T=e * h)
    return point, cc


def _mixed_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> tuple[_ExtendedPoint, FqConicCoefficients]:
    """Addition step where ``base`` has Z equal to one."""
    x1, y1, z1, t1 = current.X, current.Y, current.Z, current.T
    x2, y2, t2 = base.X, base.Y, base.T
    a = x1 * x2
    b = y1 * y2
    c = z1 * t2
    d = t1
    e = d + c
    f = (x1 - y1) * (x2 + y2) + b - a
    g = b + a
    h = d - c
    i = t1 * t2

    cc = FqConicCoefficients(
        c_ZZ=(t1 - x1) * (t2 + x2) - i + a,
        c_XY=x1 - x2 * z1 + f,
        c_XZ=(y1 - t1) * (y2 + t2) - b + i - h,
    )
    point = _ExtendedPoint(X=e * f, Y=g * h, Z=f * g, T=e * h)
    return point, cc


def _loop_bits(n: int):
    """Bits of ``n`` from most to least significant, without the leading one."""
    return (bit == "1" for bit in bin(n)[3:])


def tate_precompute_g1(p: G1) -> TateG1Precomp:
    """Conic coefficients for every step of the Miller loop over r."""
    affine = G1(p.X, p.Y, p.Z)
    affine.to_affine_coordinates()
    p_ext = _ExtendedPoint(affine.X, affine.Y, affine.Z, affine.X * affine.Y)

    result: TateG1Precomp = []
    r = p_ext
    for bit in _loop_bits(MODULUS_R):
        r, cc = _doubling_step(r)
        result.append(cc)
        if bit:
            r, cc = _mixed_addition_step(p_ext, r)
            result.append(cc)
    return result


def tate_precompute_g2(q: G2) -> TateG2Precomp:
    affine = G2(q.X, q.Y, q.Z)
    affine.to_affine_coordinates()
    y0 = affine.Y * affine.Z.inverse()
    eta = (affine.Z + affine.Y) * Fq6.mul_by_non_residue(affine.X).inverse()
    return TateG2Precomp(y0=y0, eta=eta)


def _conic_at(cc: FqConicCoefficients, prec_q: TateG2Precomp) -> Fq6:
    return Fq6(Fq3(cc.c_XZ, 0, 0) + prec_q.y0 * cc.c_XY, prec_q.eta * cc.c_ZZ)


def tate_miller_loop(prec_p: TateG1Precomp, prec_q: TateG2Precomp) -> Fq6:
    """Evaluate the Miller function of P at Q from both precomputations."""
    coefficients = iter(prec_p)
    f = Fq6.one()
    try:
        for bit in _loop_bits(MODULUS_R):
            f = f.squared() * _conic_at(next(coefficients), prec_q)
            if bit:
                f = f * _conic_at(next(coefficients), prec_q)
    except StopIteration:
        raise ValueError("Tate G1 precomputation is too short") from None
    return f


def tate_pairing(p: G1, q: G2) -> Fq6:
    """The Tate pairing before final exponentiation."""
    return tate_miller_loop(tate_precompute_g1(p), tate_precompute_g2(q))


def tate_reduced_pairing(p: G1, q: G2) -> Fq6:
    """The reduced Tate pairing, a value in GT."""
    return final_exponentiation(tate_pairing(p, q))