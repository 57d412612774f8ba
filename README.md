# edpairing

Pure Python arithmetic on a pairing-friendly Edwards curve
`x^2 + y^2 = 1 + d·x^2·y^2` over a 183-bit prime field, its twist over the
cubic extension field, and two bilinear pairings (Tate and ate) into a sextic
extension field. It needs nothing outside the standard library.

## Installation

```
pip install .
```

## Modules

- `edpairing.fields`: the prime fields `Fq` (base, 183 bits) and `Fr`
  (scalars, the group order, 181 bits), the cubic extension `Fq3` and the
  sextic extension `Fq6`. Elements support `+`, `-`, `*`, `**`, `==`,
  `inverse()` (raises `ZeroDivisionError` on zero), `squared()` and, for `Fq`
  and `Fq3`, `sqrt()` (raises `ValueError` on a non-residue). `Fq3` and `Fq6`
  have `frobenius_map`; `Fq6` also has `unitary_inverse` and
  `cyclotomic_exp`. The module holds the curve constants as well: `COEFF_D`,
  the twist multipliers, the generator coordinates, the ate loop count and the
  final-exponent pieces.
- `edpairing.g1`: `G1`, points on the curve over `Fq`, kept in inverted
  coordinates `(X : Y : Z)` for the affine point `(Z/X, Z/Y)`; plus
  `encode_points` and `decode_points` for lists of points.
- `edpairing.g2`: `G2`, points on the twisted curve over `Fq3`, with
  `mul_by_a`, `mul_by_d` and the Frobenius endomorphism `mul_by_q`.
- `edpairing.tate`: the Tate pairing (`tate_precompute_g1`,
  `tate_precompute_g2`, `tate_miller_loop`, `tate_pairing`,
  `tate_reduced_pairing`) and the final exponentiation shared by both pairings.
- `edpairing.ate`: the ate pairing (`ate_precompute_g1`, `ate_precompute_g2`,
  `ate_miller_loop`, `ate_double_miller_loop`, `ate_pairing`,
  `ate_reduced_pairing`).
- `edpairing.pp`: the default pairing, the ate pairing, behind one interface:
  `precompute_g1`, `precompute_g2`, `miller_loop`, `double_miller_loop`,
  `final_exponentiation`, `pairing`, `reduced_pairing`.

## Example

```python
from edpairing.fields import Fr
from edpairing.g1 import G1
from edpairing.g2 import G2
from edpairing import pp

P = G1.one()
Q = G2.one()
a = int(Fr.random_element())
b = int(Fr.random_element())

lhs = pp.reduced_pairing(a * P, b * Q)
rhs = pp.reduced_pairing(P, Q) ** (a * b)
assert lhs == rhs
```

A product of two pairings can be taken in one pass:

```python
f = pp.double_miller_loop(
    pp.precompute_g1(P), pp.precompute_g2(Q),
    pp.precompute_g1(-P), pp.precompute_g2(Q),
)
value = pp.final_exponentiation(f)
```

## Group operations

Points support `+`, `-`, unary negation, `==` and scalar multiplication with
an integer or a field element on the left (`k * P`). `G1.zero()` and
`G1.one()` give the identity and the generator; `random_element()` multiplies
the generator by a random scalar. The `dbl`, `add` and `mixed_add` methods
expose the formulas directly; `add` does not handle the identity, while `+`
does. `to_affine_coordinates` and `to_special` normalise a point in place,
`batch_to_special_all_non_zeros` normalises a list of non-zero points with a
single inversion, and `is_well_formed` checks the curve equation.
`str(point)` shows the affine coordinates and `point.coordinates()` the raw
inverted ones; the identity shows as `O`.

## Serialisation

Points are written in compressed text form: the affine `x` coordinate (three
space-separated numbers for a `G2` point), then the lowest bit of `y` (of its
first coefficient for `G2`).

```python
text = P.encode()
assert G1.decode(text) == P
```

`decode` raises `ValueError` on malformed text or on an `x` that belongs to no
curve point. `edpairing.g1.encode_points` and `decode_points` write and read a
count line followed by one `G1` point per line. Precomputed pairing data has
matching text forms: `FqConicCoefficients`, `TateG2Precomp`,
`encode_tate_g1_precomp` and `decode_tate_g1_precomp` in `edpairing.tate`;
`Fq3ConicCoefficients`, `AteG1Precomp`, `encode_ate_g2_precomp` and
`decode_ate_g2_precomp` in `edpairing.ate`.

## What it does not do

- There is no command-line tool; the package is a library only.
- Scalar multiplication is plain double-and-add. The window tables in
  `edpairing.fields` and on `G1`/`G2` are kept as data, but no windowed or
  multi-scalar exponentiation uses them.
- Arithmetic runs on Python integers, with no attempt at constant-time
  behaviour, and a full reduced pairing takes noticeable time.

## Running the tests

```
pip install .[test]
pytest
```