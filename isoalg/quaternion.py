"""
The quaternion algebra B(p, inf) ramified at p and infinity.

Basis 1, i, j, k with i^2 = -1, j^2 = -p and k = ij = -ji, so k^2 = -p. This
presentation is B(p, inf) only for p = 3 mod 4, which covers the primes used in
isogeny-based cryptography; other primes are rejected. Coefficients are exact
rationals.
"""

from __future__ import annotations

from fractions import Fraction
from functools import cached_property
from typing import Tuple, Union

from .util import check_prime

Rational = Union[int, Fraction]


class QuaternionAlgebra:
  def __init__(self, p: int):
    self.p = check_prime(p)
    if p % 4 != 3: raise ValueError(f"i^2 = -1, j^2 = -p only presents B(p, inf) for p = 3 mod 4, not p={p}")

  def __repr__(self): return f"QuaternionAlgebra({self.p})"
  def __hash__(self): return hash(("B", self.p))
  def __eq__(self, other): return isinstance(other, QuaternionAlgebra) and self.p == other.p

  def gen(self, a: Rational = 0, b: Rational = 0, c: Rational = 0, d: Rational = 0) -> Quaternion:
    """The element a + b i + c j + d k"""
    return Quaternion(self, (a, b, c, d))

  __call__ = gen

  @cached_property
  def zero(self) -> Quaternion: return self.gen()

  @cached_property
  def one(self) -> Quaternion: return self.gen(1)


class Quaternion:
  def __init__(self, algebra: QuaternionAlgebra, coefficients):
    if len(coefficients) != 4: raise ValueError("A quaternion has four coefficients")
    self.algebra = algebra
    self.coefficients: Tuple[Fraction, ...] = tuple(Fraction(c) for c in coefficients)

  def __repr__(self):
    return "Quaternion(" + ", ".join(str(c) for c in self.coefficients) + ")"

  def __hash__(self): return hash((self.algebra, self.coefficients))

  def _check(self, o) -> Quaternion:
    if not isinstance(o, Quaternion): raise TypeError(f"Quaternions cannot be combined with {type(o)}")
    if o.algebra != self.algebra: raise ValueError(f"{self.algebra!r} and {o.algebra!r} do not mix")
    return o

  def __eq__(self, other): return self.coefficients == self._check(other).coefficients
  def __neg__(self): return Quaternion(self.algebra, [-c for c in self.coefficients])

  def __add__(self, o: Quaternion) -> Quaternion:
    o = self._check(o)
    return Quaternion(self.algebra, [a + b for a, b in zip(self.coefficients, o.coefficients)])

  def __sub__(self, o: Quaternion) -> Quaternion:
    return self + -self._check(o)

  def __mul__(self, o) -> Quaternion:
    if isinstance(o, (int, Fraction)):
      return Quaternion(self.algebra, [c * o for c in self.coefficients])
    o = self._check(o)
    p = self.algebra.p
    a0, a1, a2, a3 = self.coefficients
    b0, b1, b2, b3 = o.coefficients
    return Quaternion(self.algebra, [
      a0 * b0 - a1 * b1 - p * a2 * b2 - p * a3 * b3,
      a0 * b1 + a1 * b0 + p * a2 * b3 - p * a3 * b2,
      a0 * b2 + a2 * b0 - a1 * b3 + a3 * b1,
      a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
    ])

  def __rmul__(self, s: Rational) -> Quaternion:
    if not isinstance(s, (int, Fraction)): return NotImplemented
    return self * s

  @cached_property
  def conjugate(self) -> Quaternion:
    a0, a1, a2, a3 = self.coefficients
    return Quaternion(self.algebra, (a0, -a1, -a2, -a3))

  @cached_property
  def reduced_trace(self) -> Fraction: return 2 * self.coefficients[0]

  @cached_property
  def reduced_norm(self) -> Fraction:
    """x * conjugate(x) = a^2 + b^2 + p c^2 + p d^2"""
    a0, a1, a2, a3 = self.coefficients
    p = self.algebra.p
    return a0 * a0 + a1 * a1 + p * (a2 * a2 + a3 * a3)
