from __future__ import annotations

from typing import List, Sequence, Tuple

from .exceptions import FieldMismatchError
from .field.base import Field


class Polynomial:
  """
  Polynomial with coefficients in a field, lowest degree first.

  Trailing zero coefficients are dropped, so the zero polynomial has no
  coefficients at all. Its degree is reported as 0.
  """
  def __init__(self, field: Field, coefficients: Sequence = ()):
    self.field = field
    coeffs: List = [field.gen(c) if isinstance(c, int) else c for c in coefficients]
    while coeffs and coeffs[-1].is_zero:
      coeffs.pop()
    self.coefficients = coeffs

  def __repr__(self):
    if self.is_zero: return "Polynomial(0)"
    terms = [f"{c}*x^{i}" if i else str(c) for i, c in enumerate(self.coefficients) if not c.is_zero]
    return f"Polynomial({' + '.join(reversed(terms))})"

  def __hash__(self): return hash((self.field, tuple(self.coefficients)))

  def _check(self, o) -> Polynomial:
    if not isinstance(o, Polynomial): raise TypeError(f"Polynomials cannot be combined with {type(o)}")
    if o.field != self.field: raise FieldMismatchError(f"Polynomials over {self.field!r} and {o.field!r} do not mix")
    return o

  @property
  def is_zero(self) -> bool: return not self.coefficients

  @property
  def degree(self) -> int: return max(len(self.coefficients) - 1, 0)

  @property
  def lc(self):
    """Leading coefficient"""
    return self.coefficients[-1] if self.coefficients else self.field.zero

  def __eq__(self, other):
    o = self._check(other)
    return len(self.coefficients) == len(o.coefficients) and all(
      a == b for a, b in zip(self.coefficients, o.coefficients)
    )

  def __call__(self, x):
    """Evaluate at x by Horner's rule"""
    result = self.field.zero
    for c in reversed(self.coefficients):
      result = result * x + c
    return result

  def __neg__(self): return Polynomial(self.field, [-c for c in self.coefficients])

  def __add__(self, o: Polynomial) -> Polynomial:
    o = self._check(o)
    a, b = self.coefficients, o.coefficients
    if len(a) < len(b): a, b = b, a
    return Polynomial(self.field, [c + d for c, d in zip(a, b)] + a[len(b):])

  def __sub__(self, o: Polynomial) -> Polynomial:
    return self + -self._check(o)

  def __mul__(self, o) -> Polynomial:
    if not isinstance(o, Polynomial):
      # Scalar: a field element or an int
      if isinstance(o, int): o = self.field.gen(o)
      return Polynomial(self.field, [c * o for c in self.coefficients])
    o = self._check(o)
    if self.is_zero or o.is_zero: return Polynomial(self.field)
    result = [self.field.zero] * (len(self.coefficients) + len(o.coefficients) - 1)
    for i, a in enumerate(self.coefficients):
      for j, b in enumerate(o.coefficients):
        result[i + j] = result[i + j] + a * b
    return Polynomial(self.field, result)

  def __rmul__(self, o) -> Polynomial:
    return self * o

  def __divmod__(self, o: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """Long division, returns (quotient, remainder) with deg(remainder) < deg(o)"""
    o = self._check(o)
    if o.is_zero: raise ZeroDivisionError("Polynomial division by zero")
    F = self.field
    rem = list(self.coefficients)
    n = len(o.coefficients)
    quot = [F.zero] * max(len(rem) - n + 1, 0)
    lc_inv = o.lc.inv
    for i in reversed(range(len(quot))):
      c = rem[i + n - 1] * lc_inv
      quot[i] = c
      for j, d in enumerate(o.coefficients):
        rem[i + j] = rem[i + j] - c * d
    return Polynomial(F, quot), Polynomial(F, rem[:n - 1])

  def __floordiv__(self, o: Polynomial) -> Polynomial:
    return divmod(self, o)[0]

  def __mod__(self, o: Polynomial) -> Polynomial:
    return divmod(self, o)[1]
