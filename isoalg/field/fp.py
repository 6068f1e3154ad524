from __future__ import annotations

import logging
from functools import cached_property
from typing import Optional

from ..exceptions import FieldMismatchError, NoInverseError, SamplingError
from ..util import attempts_or_default, check_prime, double_and_add, egcd, randbits, square_and_multiply, trailing_zeros

log = logging.getLogger(__name__)


class PrimeField:
  """The field of integers modulo an odd prime p"""
  def __init__(self, p: int):
    self.p = check_prime(p)
    # Precalculate commonly needed parts of the prime
    self.p2 = (p - 1) // 2
    self.sqrt_exp = (p + 1) // 4 if p % 4 == 3 else None
    self.e = trailing_zeros(p - 1)
    self.m = (p - 1) >> self.e  # p - 1 = 2^e * m with m odd

  def __repr__(self): return f"PrimeField({self.p})"
  def __hash__(self): return hash(self.p)
  def __eq__(self, other): return isinstance(other, PrimeField) and self.p == other.p

  def gen(self, n: int) -> fe:
    """Reduce an integer into the field"""
    return fe(self, n)

  __call__ = gen

  @cached_property
  def zero(self) -> fe: return fe(self, 0)

  @cached_property
  def one(self) -> fe: return fe(self, 1)

  def rand(self, bits: Optional[int] = None, rng=None) -> fe:
    """Random element from a random integer of the given size (default: that of p)"""
    return fe(self, randbits(self.p.bit_length() if bits is None else bits, rng))


class fe:
  """An element of a PrimeField, with the value always reduced to [0, p)"""
  def __init__(self, field: PrimeField, x: int):
    self.field = field
    # Python's modulo of a negative number is already non-negative
    self.val = x % field.p

  def __hash__(self): return hash((self.field.p, self.val))
  def __repr__(self): return f"fe({self.val})"
  def __str__(self): return str(self.val)
  def __int__(self): return self.val

  def _check(self, o) -> fe:
    if not isinstance(o, fe): raise TypeError(f"Expected an element of {self.field!r}, got {o!r}")
    if o.field.p != self.field.p:
      raise FieldMismatchError(f"Elements of {self.field!r} and {o.field!r} do not mix")
    return o

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    return self.val == self._check(other).val

  def __neg__(self): return fe(self.field, -self.val)
  def __add__(self, o: fe): return fe(self.field, self.val + self._check(o).val)
  def __sub__(self, o: fe): return fe(self.field, self.val - self._check(o).val)

  def __mul__(self, o):
    if isinstance(o, int): return self.scale(o)
    return fe(self.field, self.val * self._check(o).val)

  def __rmul__(self, n: int):
    if not isinstance(n, int): return NotImplemented
    return self.scale(n)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self * self._check(o).inv

  def __pow__(self, e: int) -> fe:
    if e < 0: return square_and_multiply(self, -e, self.field.one).inv
    return square_and_multiply(self, e, self.field.one)

  def scale(self, n: int) -> fe:
    """Multiply by an integer as an element of the Z-module"""
    if n < 0: return double_and_add(-self, -n, self.field.zero)
    return double_and_add(self, n, self.field.zero)

  @property
  def is_zero(self) -> bool: return self.val == 0

  @cached_property
  def inv(self) -> fe:
    g, x, _ = egcd(self.val, self.field.p)
    if g != 1: raise NoInverseError(f"There is no multiplicative inverse of {self!r}")
    return fe(self.field, x)

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  # Euler's criterion: n^((p-1)/2) is one for non-zero squares (quadratic residues)
  @cached_property
  def is_square(self) -> bool:
    return self**self.field.p2 == self.field.one

  def sqrt(self, rng=None, attempts: Optional[int] = None) -> Optional[fe]:
    """A square root, or None unless the element is a non-zero square."""
    if not self.is_square: return None
    if self.field.sqrt_exp is not None:
      # p = 3 mod 4 has a closed form
      return self**self.field.sqrt_exp
    return self._sqrt_peralta(rng, attempts_or_default(attempts))

  def _sqrt_peralta(self, rng, attempts: int) -> fe:
    # Peralta's algorithm, https://arxiv.org/pdf/2206.07145.pdf
    # Works in Fp[t] with t^2 = -self, where (u + t)^m becomes a power-of-two root of
    # unity in each of the two components. Squaring it until the real part vanishes
    # means (ru + rv t)^2 has ru^2 = self * rv^2, so ru / rv is the root.
    F = self.field
    a = self

    def qmul(x, y):
      return x[0] * y[0] - a * x[1] * y[1], x[0] * y[1] + x[1] * y[0]

    for attempt in range(attempts):
      u = F.rand(rng=rng)
      # u + t must not be a zero divisor
      if u.sq == -a:
        log.debug("sqrt: u=%r is a zero divisor, resampling", u)
        continue
      ru, rv = square_and_multiply((u, F.one), F.m, (F.one, F.zero), qmul)
      if ru.is_zero or rv.is_zero:
        log.debug("sqrt: attempt %d gave %r + %r t, resampling", attempt, ru, rv)
        continue
      for _ in range(F.e):
        real = ru.sq - a * rv.sq
        if real.is_zero:
          root = ru / rv
          assert root.sq == a
          return root
        ru, rv = real, ru * rv * 2
      raise RuntimeError(f"Square root of {a!r} did not converge, is {F.p} prime?")
    log.warning("sqrt: no root of %r found in %d attempts", a, attempts)
    raise SamplingError(f"Square root of {a!r} not found in {attempts} attempts")
