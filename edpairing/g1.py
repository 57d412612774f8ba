"""The group G1: points of the Edwards curve x^2 + y^2 = 1 + d*x^2*y^2 over F_q.

Points are held in inverted coordinates (X : Y : Z), which stand for the
affine point (Z/X, Z/Y).
"""

from __future__ import annotations

from typing import ClassVar

from .fields import (
    COEFF_D,
    G1_FIXED_BASE_EXP_WINDOW_TABLE,
    G1_ONE_X,
    G1_ONE_Y,
    G1_WNAF_WINDOW_TABLE,
    Fq,
    Fr,
)


class G1:
    """A point of G1 in inverted coordinates."""

    WNAF_WINDOW_TABLE: ClassVar[tuple[int, ...]] = G1_WNAF_WINDOW_TABLE
    FIXED_BASE_EXP_WINDOW_TABLE: ClassVar[tuple[int, ...]] = G1_FIXED_BASE_EXP_WINDOW_TABLE

    __slots__ = ("X", "Y", "Z")

    def __init__(self, X: Fq, Y: Fq, Z: Fq):
        self.X = X
        self.Y = Y
        self.Z = Z

    @classmethod
    def from_affine(cls, x: Fq, y: Fq) -> G1:
        """The point with affine coordinates (x, y)."""
        return cls(y, x, x * y)

    @classmethod
    def zero(cls) -> G1:
        return cls.from_affine(Fq.zero(), Fq.one())

    @classmethod
    def one(cls) -> G1:
        return cls.from_affine(G1_ONE_X, G1_ONE_Y)

    @classmethod
    def random_element(cls) -> G1:
        return Fr.random_element() * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return Fq.NUM_BITS + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.MODULUS

    @classmethod
    def order(cls) -> int:
        return Fr.MODULUS

    def _copy(self) -> G1:
        return G1(self.X, self.Y, self.Z)

    def to_affine_coordinates(self) -> None:
        """Rewrite in place so that X, Y are the affine x, y and Z is one."""
        if self.is_zero():
            self.X, self.Y, self.Z = Fq.zero(), Fq.one(), Fq.one()
            return
        t_x = self.Y * self.Z
        t_y = self.X * self.Z
        t_z_inv = (self.X * self.Y).inverse()
        self.X = t_x * t_z_inv
        self.Y = t_y * t_z_inv
        self.Z = Fq.one()

    def to_special(self) -> None:
        """Rewrite in place so that Z is one (the zero point is left alone)."""
        if self.Z.is_zero():
            return
        z_inv = self.Z.inverse()
        self.X = self.X * z_inv
        self.Y = self.Y * z_inv
        self.Z = Fq.one()

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == Fq.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def is_well_formed(self) -> bool:
        """Whether the point satisfies the curve equation."""
        if self.is_zero():
            return True
        x2 = self.X.squared()
        y2 = self.Y.squared()
        z2 = self.Z.squared()
        return z2 * (y2 + x2 - COEFF_D * z2) == x2 * y2

    def _add_with(self, other: G1, a: Fq) -> G1:
        b = COEFF_D * a.squared()
        c = self.X * other.X
        d = self.Y * other.Y
        e = c * d
        h = c - d
        i = (self.X + self.Y) * (other.X + other.Y) - c - d
        return G1((e + b) * h, (e - b) * i, a * h * i)

    def add(self, other: G1) -> G1:
        """Addition formula; does not handle zero or points of order 2 and 4."""
        return self._add_with(other, self.Z * other.Z)

    def mixed_add(self, other: G1) -> G1:
        """Addition where ``other`` is special (its Z is one)."""
        if self.is_zero():
            return other._copy()
        if other.is_zero():
            return self._copy()
        return self._add_with(other, self.Z)

    def dbl(self) -> G1:
        if self.is_zero():
            return self._copy()
        a = self.X.squared()
        b = self.Y.squared()
        c = a + b
        d = a - b
        e = (self.X + self.Y).squared() - c
        d_zz = COEFF_D * self.Z.squared()
        return G1(c * d, e * (c - d_zz - d_zz), d * e)

    def __eq__(self, other):
        if not isinstance(other, G1):
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
        if not isinstance(other, G1):
            return NotImplemented
        if self.is_zero():
            return other._copy()
        if other.is_zero():
            return self._copy()
        return self.add(other)

    def __neg__(self) -> G1:
        return G1(-self.X, self.Y, self.Z)

    def __sub__(self, other):
        if not isinstance(other, G1):
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
        result = G1.zero()
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
        return f"({copy.X} , {copy.Y})"

    def __repr__(self) -> str:
        return f"G1({self.X!r}, {self.Y!r}, {self.Z!r})"

    def coordinates(self) -> str:
        """The raw inverted coordinates as text, or "O" for zero."""
        if self.is_zero():
            return "O"
        return f"({self.X} : {self.Y} : {self.Z})"

    def encode(self) -> str:
        """Compressed text form: affine x and the low bit of affine y."""
        copy = self._copy()
        copy.to_affine_coordinates()
        return f"{copy.X} {int(copy.Y) & 1}"

    @classmethod
    def decode(cls, text: str) -> G1:
        """Read a point written by :meth:`encode`."""
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(f"malformed G1 encoding: {text!r}")
        x_text, lsb_text = tokens
        if lsb_text not in ("0", "1"):
            raise ValueError(f"malformed y parity in G1 encoding: {lsb_text!r}")
        try:
            t_x = Fq(x_text)
        except ValueError as exc:
            raise ValueError(f"malformed x in G1 encoding: {x_text!r}") from exc
        t_x2 = t_x.squared()
        try:
            t_y2 = (Fq.one() - t_x2) * (Fq.one() - COEFF_D * t_x2).inverse()
        except ZeroDivisionError as exc:
            raise ValueError("x does not belong to a curve point") from exc
        t_y = t_y2.sqrt()
        if (int(t_y) & 1) != int(lsb_text):
            t_y = -t_y
        return cls(t_y, t_x, t_x * t_y)

    @staticmethod
    def batch_to_special_all_non_zeros(points: list[G1]) -> None:
        """Make every point special in place, with one field inversion."""
        if not points:
            return
        prefix = []
        acc = Fq.one()
        for point in points:
            prefix.append(acc)
            acc = acc * point.Z
        acc_inv = acc.inverse()
        one = Fq.one()
        for point, before in zip(reversed(points), reversed(prefix)):
            z_inv = acc_inv * before
            acc_inv = acc_inv * point.Z
            point.X = point.X * z_inv
            point.Y = point.Y * z_inv
            point.Z = one


def encode_points(points: list[G1]) -> str:
    """A count line followed by one encoded point per line."""
    return f"{len(points)}\n" + "".join(f"{point.encode()}\n" for point in points)


def decode_points(text: str) -> list[G1]:
    """Read a list written by :func:`encode_points`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty point list")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed point count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("point list is shorter than its count")
    return [G1.decode(line) for line in lines[1 : count + 1]]