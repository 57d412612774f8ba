"""The group G2: points of the twisted Edwards curve over F_q^3.

The twist is a*x^2 + y^2 = 1 + d*x^2*y^2, where multiplying by a and by d
are cheap maps on F_q^3. Points are held in inverted coordinates
(X : Y : Z), which stand for the affine point (Z/X, Z/Y).
"""

from __future__ import annotations

from typing import ClassVar

from .fields import (
    G2_FIXED_BASE_EXP_WINDOW_TABLE,
    G2_ONE_X,
    G2_ONE_Y,
    G2_WNAF_WINDOW_TABLE,
    TWIST_MUL_BY_A_C0,
    TWIST_MUL_BY_D_C0,
    TWIST_MUL_BY_D_C1,
    TWIST_MUL_BY_D_C2,
    TWIST_MUL_BY_Q_Y,
    TWIST_MUL_BY_Q_Z,
    Fq,
    Fq3,
    Fr,
)


def _poly(elt: Fq3) -> str:
    return f"{elt.c2}*z^2 + {elt.c1}*z + {elt.c0}"


class G2:
    """A point of G2 in inverted coordinates."""

    WNAF_WINDOW_TABLE: ClassVar[tuple[int, ...]] = G2_WNAF_WINDOW_TABLE
    FIXED_BASE_EXP_WINDOW_TABLE: ClassVar[tuple[int, ...]] = G2_FIXED_BASE_EXP_WINDOW_TABLE

    __slots__ = ("X", "Y", "Z")

    def __init__(self, X: Fq3, Y: Fq3, Z: Fq3):
        self.X = X
        self.Y = Y
        self.Z = Z

    @classmethod
    def from_affine(cls, x: Fq3, y: Fq3) -> G2:
        """The point with affine coordinates (x, y)."""
        return cls(y, x, x * y)

    @classmethod
    def zero(cls) -> G2:
        return cls.from_affine(Fq3.zero(), Fq3.one())

    @classmethod
    def one(cls) -> G2:
        return cls.from_affine(G2_ONE_X, G2_ONE_Y)

    @classmethod
    def random_element(cls) -> G2:
        return Fr.random_element() * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return 3 * Fq.NUM_BITS + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.MODULUS

    @classmethod
    def order(cls) -> int:
        return Fr.MODULUS

    @staticmethod
    def mul_by_a(elt: Fq3) -> Fq3:
        """Multiply by the twist coefficient a (the other two factors are one)."""
        return Fq3(TWIST_MUL_BY_A_C0 * elt.c2, elt.c0, elt.c1)

    @staticmethod
    def mul_by_d(elt: Fq3) -> Fq3:
        """Multiply by the twist coefficient d."""
        return Fq3(
            TWIST_MUL_BY_D_C0 * elt.c2,
            TWIST_MUL_BY_D_C1 * elt.c0,
            TWIST_MUL_BY_D_C2 * elt.c1,
        )

    def _copy(self) -> G2:
        return G2(self.X, self.Y, self.Z)

    def to_affine_coordinates(self) -> None:
        """Rewrite in place so that X, Y are the affine x, y and Z is one."""
        if self.is_zero():
            self.X, self.Y, self.Z = Fq3.zero(), Fq3.one(), Fq3.one()
            return
        t_x = self.Y * self.Z
        t_y = self.X * self.Z
        t_z_inv = (self.X * self.Y).inverse()
        self.X = t_x * t_z_inv
        self.Y = t_y * t_z_inv
        self.Z = Fq3.one()

    def to_special(self) -> None:
        """Rewrite in place so that Z is one (the zero point is left alone)."""
        if self.Z.is_zero():
            return
        z_inv = self.Z.inverse()
        self.X = self.X * z_inv
        self.Y = self.Y * z_inv
        self.Z = Fq3.one()

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == Fq3.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def is_well_formed(self) -> bool:
        """Whether the point satisfies the twisted curve equation."""
        if self.is_zero():
            return True
        x2 = self.X.squared()
        y2 = self.Y.squared()
        z2 = self.Z.squared()
        a_y2 = G2.mul_by_a(y2)
        d_z2 = G2.mul_by_d(z2)
        return z2 * (a_y2 + x2 - d_z2) == x2 * y2

    def _add_with(self, other: G2, a: Fq3) -> G2:
        b = G2.mul_by_d(a.squared())
        c = self.X * other.X
        d = self.Y * other.Y
        e = c * d
        h = c - G2.mul_by_a(d)
        i = (self.X + self.Y) * (other.X + other.Y) - c - d
        return G2((e + b) * h, (e - b) * i, a * h * i)

    def add(self, other: G2) -> G2:
        """Addition formula; does not handle zero or points of order 2 and 4."""
        return self._add_with(other, self.Z * other.Z)

    def mixed_add(self, other: G2) -> G2:
        """Addition where ``other`` is special (its Z is one)."""
        if self.is_zero():
            return other._copy()
        if other.is_zero():
            return self._copy()
        return self._add_with(other, self.Z)

    def dbl(self) -> G2:
        if self.is_zero():
            return self._copy()
        a = self.X.squared()
        b = self.Y.squared()
        u = G2.mul_by_a(b)
        c = a + u
        d = a - u
        e = (self.X + self.Y).squared() - a - b
        d_zz = G2.mul_by_d(self.Z.squared())
        return G2(c * d, e * (c - d_zz - d_zz), d * e)

    def mul_by_q(self) -> G2:
        """Apply the q-power Frobenius endomorphism of the twist."""
        return G2(
            self.X.frobenius_map(1),
            TWIST_MUL_BY_Q_Y * self.Y.frobenius_map(1),
            TWIST_MUL_BY_Q_Z * self.Z.frobenius_map(1),
        )

    def __eq__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        if other.is_zero():
            return False
        if self.X * other.Z != other.X * self.Z:
            return False
        return self.Y * other.Z == other.Y * self.Z

    __hash__ = None  # points are mutable

    def __add__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other._copy()
        if other.is_zero():
            return self._copy()
        return self.add(other)

    def __neg__(self) -> G2:
        return G2(-self.X, self.Y, self.Z)

    def __sub__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, scalar):
        if isinstance(scalar, Fq):
            k = int(scalar)
        elif isinstance(scalar, int) and not isinstance(scalar, bool):
            k = scalar
        else:
            return NotImplemented
        if k < 0:
            return (-k) * (-self)
        result = G2.zero()
        for bit in bin(k)[2:]:
            result = result.dbl()
            if bit == "1":
                result = result + self
        return result

    def __str__(self) -> str:
        if self.is_zero():
            return "O"
        copy = self._copy()
        copy.to_affine_coordinates()
        return f"({_poly(copy.X)} , {_poly(copy.Y)})"

    def __repr__(self) -> str:
        return f"G2({self.X!r}, {self.Y!r}, {self.Z!r})"

    def coordinates(self) -> str:
        """The raw inverted coordinates as text, or "O" for zero."""
        if self.is_zero():
            return "O"
        return f"({_poly(self.X)} : {_poly(self.Y)} : {_poly(self.Z)})"

    def encode(self) -> str:
        """Compressed text form: affine x and the low bit of affine y's c0."""
        copy = self._copy()
        copy.to_affine_coordinates()
        return f"{copy.X} {int(copy.Y.c0) & 1}"

    @classmethod
    def decode(cls, text: str) -> G2:
        """Read a point written by :meth:`encode`."""
        tokens = text.split()
        if len(tokens) != 4:
            raise ValueError(f"malformed G2 encoding: {text!r}")
        *x_tokens, lsb_text = tokens
        if lsb_text not in ("0", "1"):
            raise ValueError(f"malformed y parity in G2 encoding: {lsb_text!r}")
        try:
            t_x = Fq3(*x_tokens)
        except ValueError as exc:
            raise ValueError(f"malformed x in G2 encoding: {text!r}") from exc
        t_x2 = t_x.squared()
        one = Fq3.one()
        try:
            t_y2 = (one - G2.mul_by_a(t_x2)) * (one - G2.mul_by_d(t_x2)).inverse()
        except ZeroDivisionError as exc:
            raise ValueError("x does not belong to a curve point") from exc
        t_y = t_y2.sqrt()
        if (int(t_y.c0) & 1) != int(lsb_text):
            t_y = -t_y
        return cls(t_y, t_x, t_x * t_y)

    @staticmethod
    def batch_to_special_all_non_zeros(points: list[G2]) -> None:
        """Make every point special in place, with one field inversion."""
        if not points:
            return
        prefix = []
        acc = Fq3.one()
        for point in points:
            prefix.append(acc)
            acc = acc * point.Z
        acc_inv = acc.inverse()
        one = Fq3.one()
        for point, before in zip(reversed(points), reversed(prefix)):
            z_inv = acc_inv * before
            acc_inv = acc_inv * point.Z
            point.X = point.X * z_inv
            point.Y = point.Y * z_inv
            point.Z = one