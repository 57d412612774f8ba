"""Finite fields of the Edwards pairing curve and the curve's public parameters.

``Fq`` is the base field, ``Fr`` the scalar field, ``Fq3`` the cubic
extension used by the twist and ``Fq6`` the quadratic extension of ``Fq3``
in which pairing values live.
"""

from __future__ import annotations

import secrets
from typing import ClassVar, Union

IntLike = Union[int, str]


def _naf(exponent: int) -> list[int]:
    """Non-adjacent form of ``exponent``, least significant digit first."""
    digits = []
    while exponent > 0:
        if exponent & 1:
            digit = 2 - (exponent & 3)
            exponent -= digit
        else:
            digit = 0
        digits.append(digit)
        exponent >>= 1
    return digits


def _power(base, exponent: int, one):
    """Left-to-right square-and-multiply for a non-negative exponent."""
    result = one
    for bit in bin(exponent)[2:]:
        result = result.squared()
        if bit == "1":
            result = result * base
    return result


def _tonelli_shanks(a, one, s: int, nqr_to_t, t_minus_1_over_2: int):
    """Square root of the quadratic residue ``a`` (Tonelli-Shanks)."""
    v = s
    z = nqr_to_t
    w = a ** t_minus_1_over_2
    x = a * w
    b = x * w
    while b != one:
        m = 0
        b2m = b
        while b2m != one:
            b2m = b2m.squared()
            m += 1
        w = z
        for _ in range(v - m - 1):
            w = w.squared()
        z = w.squared()
        b = b * z
        x = x * w
        v = m
    return x


class Fq:
    """Element of the prime base field F_q."""

    MODULUS: ClassVar[int] = 6210044120409721004947206240885978274523751269793792001
    NUM_BITS: ClassVar[int] = 183
    EULER: ClassVar[int] = 3105022060204860502473603120442989137261875634896896000
    S: ClassVar[int] = 31
    T: ClassVar[int] = 2891777139347848019072416350658041552884388375
    T_MINUS_1_OVER_2: ClassVar[int] = 1445888569673924009536208175329020776442194187
    MULTIPLICATIVE_GENERATOR: ClassVar[int] = 61
    ROOT_OF_UNITY: ClassVar[int] = 4692813029219384139894873043933463717810008194158530536
    NQR: ClassVar[int] = 23
    NQR_TO_T: ClassVar[int] = 2626736066325740702418554487368721595489070118548299138

    __slots__ = ("value",)

    def __init__(self, value: IntLike | Fq = 0):
        if isinstance(value, Fq):
            if type(value) is not type(self):
                raise TypeError(
                    f"cannot build {type(self).__name__} from {type(value).__name__}"
                )
            value = value.value
        elif isinstance(value, str):
            value = int(value.strip(), 10)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot build {type(self).__name__} from {value!r}")
        self.value = value % self.MODULUS

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @classmethod
    def random_element(cls):
        return cls(secrets.randbelow(cls.MODULUS))

    def _coerce(self, other) -> int | None:
        if type(other) is type(self):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other % self.MODULUS
        return None

    def is_zero(self) -> bool:
        return self.value == 0

    def squared(self):
        return type(self)(self.value * self.value)

    def inverse(self):
        if self.value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return type(self)(pow(self.value, -1, self.MODULUS))

    def sqrt(self):
        """A square root; raises ValueError for a non-residue."""
        cls = type(self)
        if self.value == 0:
            return self
        if pow(self.value, cls.EULER, cls.MODULUS) != 1:
            raise ValueError("element is not a quadratic residue")
        return _tonelli_shanks(
            self, cls.one(), cls.S, cls(cls.NQR_TO_T), cls.T_MINUS_1_OVER_2
        )

    def __add__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value + value)

    def __sub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value - value)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return type(self)(self.value * value)

    def __neg__(self):
        return type(self)(-self.value)

    def __pow__(self, exponent: int):
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return type(self)(pow(self.value, exponent, self.MODULUS))

    def __eq__(self, other):
        if not isinstance(other, Fq):
            return NotImplemented
        return type(other) is type(self) and other.value == self.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"


class Fr(Fq):
    """Element of the prime scalar field F_r (the group order)."""

    MODULUS: ClassVar[int] = 1552511030102430251236801561344621993261920897571225601
    NUM_BITS: ClassVar[int] = 181
    EULER: ClassVar[int] = 776255515051215125618400780672310996630960448785612800
    S: ClassVar[int] = 31
    T: ClassVar[int] = 722944284836962004768104088187507350585386575
    T_MINUS_1_OVER_2: ClassVar[int] = 361472142418481002384052044093753675292693287
    MULTIPLICATIVE_GENERATOR: ClassVar[int] = 19
    ROOT_OF_UNITY: ClassVar[int] = 695314865466598274460565335217615316274564719601897184
    NQR: ClassVar[int] = 11
    NQR_TO_T: ClassVar[int] = 1326707053668679463752768729767248251415639579872144553

    __slots__ = ()

    def __init__(self, value: IntLike | Fr = 0):
        super().__init__(value)

    @classmethod
    def random_element(cls):
        return cls(secrets.randbelow(cls.MODULUS))


def _as_fq(value) -> Fq:
    if type(value) is Fq:
        return value
    return Fq(value)


class Fq3:
    """Element c0 + c1*u + c2*u^2 of F_q^3, where u^3 = NON_RESIDUE."""

    NON_RESIDUE: ClassVar[int] = 61
    EULER: ClassVar[int] = 119744082713971502962992613191067836698205043373978948903839934564152994858051284658545502971203325031831647424413111161318314144765646525057914792711854057586688000
    S: ClassVar[int] = 31
    T: ClassVar[int] = 111520367408144756185815309352304634357062208814526860512643991563611659089151103662834971185031649686239331424621037357783237607000066456438894190557165125
    T_MINUS_1_OVER_2: ClassVar[int] = 55760183704072378092907654676152317178531104407263430256321995781805829544575551831417485592515824843119665712310518678891618803500033228219447095278582562
    NQR: ClassVar[tuple[int, int, int]] = (23, 0, 0)
    NQR_TO_T: ClassVar[tuple[int, int, int]] = (
        104810943629412208121981114244673004633270996333237516,
        0,
        0,
    )
    FROBENIUS_COEFFS_C1: ClassVar[tuple[int, int, int]] = (
        1,
        1073752683758513276629212192812154536507607213288832061,
        5136291436651207728317994048073823738016144056504959939,
    )
    FROBENIUS_COEFFS_C2: ClassVar[tuple[int, int, int]] = (
        1,
        5136291436651207728317994048073823738016144056504959939,
        1073752683758513276629212192812154536507607213288832061,
    )

    __slots__ = ("c0", "c1", "c2")

    def __init__(self, c0, c1=0, c2=0):
        self.c0 = _as_fq(c0)
        self.c1 = _as_fq(c1)
        self.c2 = _as_fq(c2)

    @classmethod
    def zero(cls):
        return cls(0, 0, 0)

    @classmethod
    def one(cls):
        return cls(1, 0, 0)

    @classmethod
    def random_element(cls):
        return cls(Fq.random_element(), Fq.random_element(), Fq.random_element())

    def _ints(self) -> tuple[int, int, int]:
        return self.c0.value, self.c1.value, self.c2.value

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    def squared(self):
        return self * self

    def inverse(self):
        a0, a1, a2 = self._ints()
        nr = self.NON_RESIDUE
        c0 = a0 * a0 - nr * a1 * a2
        c1 = nr * a2 * a2 - a0 * a1
        c2 = a1 * a1 - a0 * a2
        norm = Fq(a0 * c0 + nr * (a2 * c1 + a1 * c2))
        t6 = norm.inverse().value
        return Fq3(t6 * c0, t6 * c1, t6 * c2)

    def sqrt(self):
        """A square root; raises ValueError for a non-residue."""
        if self.is_zero():
            return self
        one = Fq3.one()
        if self ** self.EULER != one:
            raise ValueError("element is not a quadratic residue")
        return _tonelli_shanks(
            self, one, self.S, Fq3(*self.NQR_TO_T), self.T_MINUS_1_OVER_2
        )

    def frobenius_map(self, power: int):
        index = power % 3
        return Fq3(
            self.c0,
            self.c1 * self.FROBENIUS_COEFFS_C1[index],
            self.c2 * self.FROBENIUS_COEFFS_C2[index],
        )

    def __add__(self, other):
        if not isinstance(other, Fq3):
            return NotImplemented
        return Fq3(self.c0 + other.c0, self.c1 + other.c1, self.c2 + other.c2)

    def __sub__(self, other):
        if not isinstance(other, Fq3):
            return NotImplemented
        return Fq3(self.c0 - other.c0, self.c1 - other.c1, self.c2 - other.c2)

    def _scale(self, other):
        if type(other) is Fq:
            k = other.value
        elif isinstance(other, int) and not isinstance(other, bool):
            k = other
        else:
            return NotImplemented
        a0, a1, a2 = self._ints()
        return Fq3(k * a0, k * a1, k * a2)

    def __mul__(self, other):
        if isinstance(other, Fq3):
            a0, a1, a2 = self._ints()
            b0, b1, b2 = other._ints()
            nr = self.NON_RESIDUE
            return Fq3(
                a0 * b0 + nr * (a1 * b2 + a2 * b1),
                a0 * b1 + a1 * b0 + nr * a2 * b2,
                a0 * b2 + a1 * b1 + a2 * b0,
            )
        return self._scale(other)

    def __rmul__(self, other):
        return self._scale(other)

    def __neg__(self):
        return Fq3(-self.c0, -self.c1, -self.c2)

    def __pow__(self, exponent: int):
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return _power(self, exponent, Fq3.one())

    def __eq__(self, other):
        if not isinstance(other, Fq3):
            return NotImplemented
        return self._ints() == other._ints()

    def __hash__(self):
        return hash(("Fq3",) + self._ints())

    def __str__(self):
        return f"{self.c0} {self.c1} {self.c2}"

    def __repr__(self):
        return f"Fq3({self.c0.value}, {self.c1.value}, {self.c2.value})"


class Fq6:
    """Element c0 + c1*w of F_q^6 over F_q^3, where w^2 = u."""

    NON_RESIDUE: ClassVar[int] = 61
    FROBENIUS_COEFFS_C1: ClassVar[tuple[int, ...]] = (
        1,
        1073752683758513276629212192812154536507607213288832062,
        1073752683758513276629212192812154536507607213288832061,
        6210044120409721004947206240885978274523751269793792000,
        5136291436651207728317994048073823738016144056504959939,
        5136291436651207728317994048073823738016144056504959940,
    )

    __slots__ = ("c0", "c1")

    def __init__(self, c0: Fq3, c1: Fq3):
        if not isinstance(c0, Fq3) or not isinstance(c1, Fq3):
            raise TypeError("Fq6 coefficients must be Fq3 elements")
        self.c0 = c0
        self.c1 = c1

    @classmethod
    def zero(cls):
        return cls(Fq3.zero(), Fq3.zero())

    @classmethod
    def one(cls):
        return cls(Fq3.one(), Fq3.zero())

    @classmethod
    def random_element(cls):
        return cls(Fq3.random_element(), Fq3.random_element())

    @staticmethod
    def mul_by_non_residue(elt: Fq3) -> Fq3:
        """Multiply an Fq3 element by u, the quadratic non-residue w^2."""
        return Fq3(elt.c2 * Fq6.NON_RESIDUE, elt.c0, elt.c1)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def squared(self):
        a, b = self.c0, self.c1
        ab = a * b
        c0 = (a + b) * (a + Fq6.mul_by_non_residue(b)) - ab - Fq6.mul_by_non_residue(ab)
        return Fq6(c0, ab + ab)

    def inverse(self):
        a, b = self.c0, self.c1
        t0 = a.squared() - Fq6.mul_by_non_residue(b.squared())
        t1 = t0.inverse()
        return Fq6(a * t1, -(b * t1))

    def unitary_inverse(self):
        """Conjugate; equals the inverse for elements of norm one."""
        return Fq6(self.c0, -self.c1)

    def frobenius_map(self, power: int):
        coeff = Fq(self.FROBENIUS_COEFFS_C1[power % 6])
        return Fq6(self.c0.frobenius_map(power), self.c1.frobenius_map(power) * coeff)

    def cyclotomic_exp(self, exponent: int):
        """Power of an element of the cyclotomic subgroup, via its NAF."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Fq6.one()
        inverse = self.unitary_inverse()
        found_nonzero = False
        for digit in reversed(_naf(exponent)):
            if found_nonzero:
                result = result.squared()
            if digit:
                found_nonzero = True
                result = result * (self if digit > 0 else inverse)
        return result

    def __mul__(self, other):
        if not isinstance(other, Fq6):
            return NotImplemented
        a0b0 = self.c0 * other.c0
        a1b1 = self.c1 * other.c1
        return Fq6(
            a0b0 + Fq6.mul_by_non_residue(a1b1),
            (self.c0 + self.c1) * (other.c0 + other.c1) - a0b0 - a1b1,
        )

    def __pow__(self, exponent: int):
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return _power(self, exponent, Fq6.one())

    def __eq__(self, other):
        if not isinstance(other, Fq6):
            return NotImplemented
        return self.c0 == other.c0 and self.c1 == other.c1

    def __hash__(self):
        return hash(("Fq6", self.c0, self.c1))

    def __str__(self):
        return f"{self.c0} {self.c1}"

    def __repr__(self):
        return f"Fq6({self.c0!r}, {self.c1!r})"


MODULUS_R = Fr.MODULUS
MODULUS_Q = Fq.MODULUS

# Edwards curve E_{1,d}(F_q) and its twist E_{a',d'}(F_q^3).
COEFF_A = Fq.one()
COEFF_D = Fq("600581931845324488256649384912508268813600056237543024")
TWIST = Fq3(0, 1, 0)
TWIST_COEFF_A = COEFF_A * TWIST
TWIST_COEFF_D = COEFF_D * TWIST
TWIST_MUL_BY_A_C0 = COEFF_A * Fq(Fq3.NON_RESIDUE)
TWIST_MUL_BY_A_C1 = COEFF_A
TWIST_MUL_BY_A_C2 = COEFF_A
TWIST_MUL_BY_D_C0 = COEFF_D * Fq(Fq3.NON_RESIDUE)
TWIST_MUL_BY_D_C1 = COEFF_D
TWIST_MUL_BY_D_C2 = COEFF_D
TWIST_MUL_BY_Q_Y = Fq("1073752683758513276629212192812154536507607213288832062")
TWIST_MUL_BY_Q_Z = Fq("1073752683758513276629212192812154536507607213288832062")

# Affine coordinates of the chosen generators.
G1_ONE_X = Fq("3713709671941291996998665608188072510389821008693530490")
G1_ONE_Y = Fq("4869953702976555123067178261685365085639705297852816679")
G2_ONE_X = Fq3(
    Fq("4531683359223370252210990718516622098304721701253228128"),
    Fq("5339624155305731263217400504407647531329993548123477368"),
    Fq("3964037981777308726208525982198654699800283729988686552"),
)
G2_ONE_Y = Fq3(
    Fq("364634864866983740775341816274081071386963546650700569"),
    Fq("3264380230116139014996291397901297105159834497864380415"),
    Fq("3504781284999684163274269077749440837914479176282903747"),
)

G1_WNAF_WINDOW_TABLE = (9, 14, 24, 117)
G1_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 4, 10, 25, 60, 149, 370, 849, 1765, 4430, 13389, 15368, 74912, 0,
    438107, 0, 1045626, 1577434, 0, 0, 17350594, 0,
)
G2_WNAF_WINDOW_TABLE = (6, 12, 42, 97)
G2_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 5, 11, 26, 61, 146, 357, 823, 1589, 4136, 14298, 16745, 51769, 99811,
    193307, 0, 907185, 1389683, 0, 6752696, 193642895, 226760202,
)

# Pairing parameters.
ATE_LOOP_COUNT = 4492509698523932320491110403
FINAL_EXPONENT = 36943107177961694649618797346446870138748651578611748415128207429491593976636391130175425245705674550269561361208979548749447898941828686017765730419416875539615941651269793928962468899856083169227457503942470721108165443528513330156264699608120624990672333642644221591552000
FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0 = 17970038794095729281964441603
FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG = True
FINAL_EXPONENT_LAST_CHUNK_W1 = 4