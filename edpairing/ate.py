"""The reduced ate pairing on the Edwards curve.

The Miller loop runs over the bits of the ate loop count. Here the roles are
flipped against the Tate pairing: G2 precomputation walks the loop once on
the twist and records F_q^3 conic coefficients for every step, while G1
precomputation reduces P to three F_q values at which they are evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass

from .fields import ATE_LOOP_COUNT, Fq, Fq3, Fq6
from .g1 import G1
from .g2 import G2
from .tate import final_exponentiation


@dataclass(frozen=True)
class Fq3ConicCoefficients:
    """Coefficients of the conic c_ZZ*Z^2 + c_XY*X*Y + c_XZ*X*Z over F_q^3."""

    c_ZZ: Fq3
    c_XY: Fq3
    c_XZ: Fq3

    def encode(self) -> str:
        return f"{self.c_ZZ} {self.c_XY} {self.c_XZ}"

    @classmethod
    def decode(cls, text: str) -> Fq3ConicCoefficients:
        tokens = text.split()
        if len(tokens) != 9:
            raise ValueError(f"malformed conic coefficients: {text!r}")
        try:
            return cls(Fq3(*tokens[0:3]), Fq3(*tokens[3:6]), Fq3(*tokens[6:9]))
        except ValueError as exc:
            raise ValueError(f"malformed conic coefficients: {text!r}") from exc


AteG2Precomp = list[Fq3ConicCoefficients]


@dataclass(frozen=True)
class AteG1Precomp:
    """The values X*Y, X*Z and (Z+Y)*Z of an affine G1 point."""

    P_XY: Fq
    P_XZ: Fq
    P_ZZplusYZ: Fq

    def encode(self) -> str:
        return f"{self.P_XY} {self.P_XZ} {self.P_ZZplusYZ}"

    @classmethod
    def decode(cls, text: str) -> AteG1Precomp:
        tokens = text.split()
        if len(tokens) != 3:
            raise ValueError(f"malformed ate G1 precomputation: {text!r}")
        try:
            return cls(*(Fq(token) for token in tokens))
        except ValueError as exc:
            raise ValueError(f"malformed ate G1 precomputation: {text!r}") from exc


def encode_ate_g2_precomp(coefficients: AteG2Precomp) -> str:
    """A count line followed by one set of conic coefficients per line."""
    return f"{len(coefficients)}\n" + "".join(
        f"{cc.encode()}\n" for cc in coefficients
    )


def decode_ate_g2_precomp(text: str) -> AteG2Precomp:
    """Read a list written by :func:`encode_ate_g2_precomp`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty ate G2 precomputation")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed coefficient count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("ate G2 precomputation is shorter than its count")
    return [Fq3ConicCoefficients.decode(line) for line in lines[1 : count + 1]]


@dataclass(frozen=True)
class _ExtendedPoint:
    """A G2 point in extended projective coordinates, with T*Z == X*Y."""

    X: Fq3
    Y: Fq3
    Z: Fq3
    T: Fq3


def _doubling_step(current: _ExtendedPoint) -> tuple[_ExtendedPoint, Fq3ConicCoefficients]:
    x, y, z, t = current.X, current.Y, current.Z, current.T
    a = x.squared()
    b = y.squared()
    c = z.squared()
    d = (x + y).squared()
    e = (y + z).squared()
    f = d - (a + b)
    g = e - (b + c)
    h = G2.mul_by_a(a)
    i = h + b
    j = c - i
    k = j + c

    c_zz = y * (t - x)
    c_xy = c - G2.mul_by_a(a) - b
    c_xz = G2.mul_by_a(x * t) - b
    cc = Fq3ConicCoefficients(
        c_ZZ=c_zz + c_zz, c_XY=c_xy + c_xy + g, c_XZ=c_xz + c_xz
    )
    point = _ExtendedPoint(X=f * k, Y=i * (b - h), Z=i * k, T=f * (b - h))
    return point, cc


def _full_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> tuple[_ExtendedPoint, Fq3ConicCoefficients]:
    x1, y1, z1, t1 = current.X, current.Y, current.Z, current.T
    x2, y2, z2, t2 = base.X, base.Y, base.Z, base.T
    a = x1 * x2
    b = y1 * y2
    c = z1 * t2
    d = t1 * z2
    e = d + c
    f = (x1 - y1) * (x2 + y2) + b - a
    g = b + G2.mul_by_a(a)
    h = d - c
    i = t1 * t2

    cc = Fq3ConicCoefficients(
        c_ZZ=G2.mul_by_a((t1 - x1) * (t2 + x2) - i + a),
        c_XY=x1 * z2 - x2 * z1 + f,
        c_XZ=(y1 - t1) * (y2 + t2) - b + i - h,
    )
    point = _ExtendedPoint(X=e * f, Y=g * h, Z=f * g, T=e * h)
    return point, cc


def _mixed_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> tuple[_ExtendedPoint, Fq3ConicCoefficients]:
    """Addition step where ``base`` has Z equal to one."""
    x1, y1, z1, t1 = current.X, current.Y, current.Z, current.T
    x2, y2, t2 = base.X, base.Y, base.T
    a = x1 * x2
    b = y1 * y2
    c = z1 * t2
    e = t1 + c
    f = (x1 - y1) * (x2 + y2) + b - a
    g = b + G2.mul_by_a(a)
    h = t1 - c
    i = t1 * t2

    cc = Fq3ConicCoefficients(
        c_ZZ=G2.mul_by_a((t1 - x1) * (t2 + x2) - i + a),
        c_XY=x1 - x2 * z1 + f,
        c_XZ=(y1 - t1) * (y2 + t2) - b + i - h,
    )
    point = _ExtendedPoint(X=e * f, Y=g * h, Z=f * g, T=e * h)
    return point, cc


def _loop_bits(n: int):
    """Bits of ``n`` from most to least significant, without the leading one."""
    return (bit == "1" for bit in bin(n)[3:])


def ate_precompute_g1(p: G1) -> AteG1Precomp:
    affine = G1(p.X, p.Y, p.Z)
    affine.to_affine_coordinates()
    return AteG1Precomp(
        P_XY=affine.X * affine.Y,
        P_XZ=affine.X,
        P_ZZplusYZ=Fq.one() + affine.Y,
    )


def ate_precompute_g2(q: G2) -> AteG2Precomp:
    """Conic coefficients for every step of the Miller loop over the ate loop count."""
    affine = G2(q.X, q.Y, q.Z)
    affine.to_affine_coordinates()
    q_ext = _ExtendedPoint(affine.X, affine.Y, affine.Z, affine.X * affine.Y)

    result: AteG2Precomp = []
    r = q_ext
    for bit in _loop_bits(ATE_LOOP_COUNT):
        r, cc = _doubling_step(r)
        result.append(cc)
        if bit:
            r, cc = _mixed_addition_step(q_ext, r)
            result.append(cc)
    return result


def _line_value(prec_p: AteG1Precomp, cc: Fq3ConicCoefficients) -> Fq3:
    return cc.c_XY * prec_p.P_XY + cc.c_XZ * prec_p.P_XZ


def _doubling_value(prec_p: AteG1Precomp, cc: Fq3ConicCoefficients) -> Fq6:
    return Fq6(_line_value(prec_p, cc), cc.c_ZZ * prec_p.P_ZZplusYZ)


def _addition_value(prec_p: AteG1Precomp, cc: Fq3ConicCoefficients) -> Fq6:
    return Fq6(cc.c_ZZ * prec_p.P_ZZplusYZ, _line_value(prec_p, cc))


def ate_miller_loop(prec_p: AteG1Precomp, prec_q: AteG2Precomp) -> Fq6:
    """Evaluate the Miller function of Q at P from both precomputations."""
    coefficients = iter(prec_q)
    f = Fq6.one()
    try:
        for bit in _loop_bits(ATE_LOOP_COUNT):
            f = f.squared() * _doubling_value(prec_p, next(coefficients))
            if bit:
                f = f * _addition_value(prec_p, next(coefficients))
    except StopIteration:
        raise ValueError("ate G2 precomputation is too short") from None
    return f


def ate_double_miller_loop(
    prec_p1: AteG1Precomp,
    prec_q1: AteG2Precomp,
    prec_p2: AteG1Precomp,
    prec_q2: AteG2Precomp,
) -> Fq6:
    """The product of two Miller loops, computed in one pass."""
    first = iter(prec_q1)
    second = iter(prec_q2)
    f = Fq6.one()
    try:
        for bit in _loop_bits(ATE_LOOP_COUNT):
            cc1, cc2 = next(first), next(second)
            f = (
                f.squared()
                * _doubling_value(prec_p1, cc1)
                * _doubling_value(prec_p2, cc2)
            )
            if bit:
                cc1, cc2 = next(first), next(second)
                f = f * _addition_value(prec_p1, cc1) * _addition_value(prec_p2, cc2)
    except StopIteration:
        raise ValueError("ate G2 precomputation is too short") from None
    return f


def ate_pairing(p: G1, q: G2) -> Fq6:
    """The ate pairing before final exponentiation."""
    return ate_miller_loop(ate_precompute_g1(p), ate_precompute_g2(q))


def ate_reduced_pairing(p: G1, q: G2) -> Fq6:
    """The reduced ate pairing, a value in GT."""
    return final_exponentiation(ate_pairing(p, q))