from __future__ import annotations

from functools import cached_property
from typing import Optional, Union

from ..exceptions import FieldMismatchError, NoInverseError
from ..util import double_and_add, square_and_multiply
from .fp import PrimeField, fe

# Elements are c0 + c1 * a with a^2 = beta. Coefficients are fe of the base field.


class QuadraticField:
  """Quadratic extension Fp[a] of a prime field, a^2 = beta for a non-square beta"""
  def __init__(self, base: PrimeField, beta: Union[int, fe]):
    self.base = base
    self.beta = base.gen(beta) if isinstance(beta, int) else beta
    if self.beta.field != base: raise FieldMismatchError(f"beta={beta!r} is not in {base!r}")
    if self.beta.is_zero or self.beta.is_square: raise ValueError(f"beta={self.beta!r} is a square in {base!r}")

  def __repr__(self): return f"QuadraticField({self.base.p}, beta={self.beta.val})"
  def __hash__(self): return hash((self.base.p, self.beta.val))

  def __eq__(self, other):
    return isinstance(other, QuadraticField) and self.base == other.base and self.beta == other.beta

  @cached_property
  def order(self) -> int: return self.base.p**2

  def gen(self, n: Union[int, fe], m: Union[int, fe] = 0) -> fe2:
    """The element n + m * a"""
    return fe2(self, n, m)

  __call__ = gen

  @cached_property
  def zero(self) -> fe2: return fe2(self, 0, 0)

  @cached_property
  def one(self) -> fe2: return fe2(self, 1, 0)

  @cached_property
  def a(self) -> fe2:
    """The generator of the extension"""
    return fe2(self, 0, 1)

  def rand(self, bits: Optional[int] = None, rng=None) -> fe2:
    return fe2(self, self.base.rand(bits, rng), self.base.rand(bits, rng))


class fe2:
  """An element of a QuadraticField"""
  def __init__(self, field: QuadraticField, c0: Union[int, fe], c1: Union[int, fe] = 0):
    self.field = field
    base = field.base
    self.c0 = base.gen(c0) if isinstance(c0, int) else c0
    self.c1 = base.gen(c1) if isinstance(c1, int) else c1

  def __hash__(self): return hash((self.field, self.c0.val, self.c1.val))
  def __repr__(self): return f"fe2({self.c0.val}, {self.c1.val})"
  def __str__(self): return f"{self.c0} + {self.c1}*a"

  def _check(self, o) -> fe2:
    if not isinstance(o, fe2): raise TypeError(f"Expected an element of {self.field!r}, got {o!r}")
    if o.field != self.field:
      raise FieldMismatchError(f"Elements of {self.field!r} and {o.field!r} do not mix")
    return o

  def __eq__(self, other):
    o = self._check(other)
    return self.c0 == o.c0 and self.c1 == o.c1

  def __neg__(self): return fe2(self.field, -self.c0, -self.c1)

  def __add__(self, o: fe2):
    o = self._check(o)
    return fe2(self.field, self.c0 + o.c0, self.c1 + o.c1)

  def __sub__(self, o: fe2):
    o = self._check(o)
    return fe2(self.field, self.c0 - o.c0, self.c1 - o.c1)

  def __mul__(self, o):
    if isinstance(o, int): return self.scale(o)
    o = self._check(o)
    c0 = self.c0 * o.c0 + self.field.beta * self.c1 * o.c1
    c1 = self.c0 * o.c1 + self.c1 * o.c0
    return fe2(self.field, c0, c1)

  def __rmul__(self, n: int):
    if not isinstance(n, int): return NotImplemented
    return self.scale(n)

  def __truediv__(self, o: fe2) -> fe2:
    return self * self._check(o).inv

  def __pow__(self, e: int) -> fe2:
    if e < 0: return square_and_multiply(self, -e, self.field.one).inv
    return square_and_multiply(self, e, self.field.one)

  def scale(self, n: int) -> fe2:
    """Multiply by an integer as an element of the Z-module"""
    if n < 0: return double_and_add(-self, -n, self.field.zero)
    return double_and_add(self, n, self.field.zero)

  @property
  def is_zero(self) -> bool: return self.c0.is_zero and self.c1.is_zero

  @cached_property
  def conjugate(self) -> fe2: return fe2(self.field, self.c0, -self.c1)

  @cached_property
  def norm(self) -> fe:
    """The norm c0^2 - beta c1^2 down to the base field, zero only for zero"""
    return self.c0.sq - self.field.beta * self.c1.sq

  @cached_property
  def inv(self) -> fe2:
    if self.is_zero: raise NoInverseError(f"There is no multiplicative inverse of {self!r}")
    n = self.norm.inv
    return fe2(self.field, self.c0 * n, -self.c1 * n)

  @cached_property
  def sq(self) -> fe2:
    """Squared"""
    return self * self

  # The norm maps non-zero squares onto non-zero squares of the base field
  @cached_property
  def is_square(self) -> bool: return self.norm.is_square

  def sqrt(self, rng=None, attempts: Optional[int] = None) -> Optional[fe2]:
    """A square root using square roots in the base field, or None unless a non-zero square."""
    F = self.field
    if not self.is_square: return None
    if self.c1.is_zero:
      # Either c0 or c0 / beta is a square of the base field
      r = self.c0.sqrt(rng, attempts)
      if r is not None: return fe2(F, r, 0)
      return fe2(F, 0, (self.c0 / F.beta).sqrt(rng, attempts))
    # (x + y a)^2 = c0 + c1 a with x^2 = (c0 + n) / 2 for n^2 = norm, y = c1 / 2x
    n = self.norm.sqrt(rng, attempts)
    half = F.base.gen(2).inv
    x2 = (self.c0 + n) * half
    if not x2.is_square: x2 = (self.c0 - n) * half
    x = x2.sqrt(rng, attempts)
    root = fe2(F, x, self.c1 / (x * 2))
    assert root.sq == self
    return root
