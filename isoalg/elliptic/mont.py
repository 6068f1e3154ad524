from __future__ import annotations

import logging
from functools import cached_property
from typing import Optional

from ..exceptions import CurveMismatchError, FieldMismatchError, SamplingError
from ..field.base import Field
from ..util import attempts_or_default, double_and_add

log = logging.getLogger(__name__)

# Montgomery curve: y2 = x3 + A x2 + x, over any field that provides
# zero, one, gen, rand and elements with inv and sqrt.

# Points are kept as (x, y, z) where z = 0 marks the point at infinity, which
# is the neutral element (0, 1, 0). Finite points normalise to z = 1.


class MontgomeryCurve:
  def __init__(self, field: Field, A):
    self.field = field
    self.A = field.gen(A) if isinstance(A, int) else A
    if self.A.field != field: raise FieldMismatchError(f"A={A!r} is not in {field!r}")

  def __repr__(self): return f"MontgomeryCurve({self.field!r}, A={self.A!r})"
  def __hash__(self): return hash((self.field, self.A))

  def __eq__(self, other):
    return isinstance(other, MontgomeryCurve) and self.field == other.field and self.A == other.A

  def gen(self, x, y, z=1) -> MontPoint:
    """Point from coordinates (field elements or ints). The curve equation is not checked."""
    F = self.field
    return MontPoint(self, *(F.gen(c) if isinstance(c, int) else c for c in (x, y, z)))

  @cached_property
  def zero(self) -> MontPoint:
    """Neutral element"""
    return self.gen(0, 1, 0)

  @cached_property
  def j_invariant(self):
    """256 (A^2 - 3)^3 / (A^2 - 4), raises NoInverseError for a singular curve."""
    F = self.field
    A2 = self.A.sq
    return F.gen(256) * (A2 - F.gen(3))**3 / (A2 - F.gen(4))

  def rhs(self, x):
    """The right-hand side x^3 + A x^2 + x, i.e. y^2 for a curve point"""
    return (x + self.A) * x.sq + x

  def lift_x(self, x, rng=None) -> MontPoint:
    """The curve point with the given x coordinate (either of the two)"""
    if isinstance(x, int): x = self.field.gen(x)
    y = self.rhs(x).sqrt(rng)
    if y is None: raise ValueError(f"{x=} is not the x coordinate of a point on {self!r}")
    return MontPoint(self, x, y, self.field.one)

  def rand(self, rng=None, attempts: Optional[int] = None) -> MontPoint:
    """Random affine point by rejection sampling of the x coordinate"""
    attempts = attempts_or_default(attempts)
    for _ in range(attempts):
      x = self.field.rand(rng=rng)
      y = self.rhs(x).sqrt(rng)
      if y is not None: return MontPoint(self, x, y, self.field.one)
      log.debug("rand: %r is not on the curve, resampling", x)
    log.warning("rand: no point found on %r in %d attempts", self, attempts)
    raise SamplingError(f"No random point found on {self!r} in {attempts} attempts")


class MontPoint:
  def __init__(self, curve: MontgomeryCurve, x, y, z):
    if x.is_zero and y.is_zero and z.is_zero: raise ValueError("(0, 0, 0) is not a point")
    self.curve = curve
    self.x = x
    self.y = y
    self.z = z

  def __repr__(self): return f"MontPoint({self.x!r}, {self.y!r}, {self.z!r})"

  def __hash__(self):
    P = self.norm
    return hash((P.x, P.y, P.z))

  def _check(self, o) -> MontPoint:
    if not isinstance(o, MontPoint): raise TypeError(f"MontPoints cannot be combined with {type(o)}")
    if o.curve != self.curve: raise CurveMismatchError(f"Points of {self.curve!r} and {o.curve!r} do not mix")
    return o

  @property
  def is_zero(self) -> bool: return self.z.is_zero

  @cached_property
  def is_on_curve(self) -> bool:
    """Check y2 z = x3 + A x2 z + x z2, which holds for the neutral element as well"""
    x, y, z = self.x, self.y, self.z
    return y.sq * z == (x + self.curve.A * z) * x.sq + x * z.sq

  @cached_property
  def norm(self) -> MontPoint:
    """Return a normalized point, scaled by 1/z, or by 1/y at infinity."""
    s = self.y if self.z.is_zero else self.z
    if s == self.curve.field.one: return self
    s = s.inv
    return MontPoint(self.curve, self.x * s, self.y * s, self.z * s)

  def __eq__(self, other):
    o = self._check(other)
    # Equal if (x, y, z) are proportional: scale by the first non-zero coordinate of self
    pairs = [(self.x, o.x), (self.y, o.y), (self.z, o.z)]
    a, b = next((a, b) for a, b in pairs if not a.is_zero)
    if b.is_zero: return False
    lam = a.inv * b
    return all(a * lam == b for a, b in pairs)

  def __neg__(self) -> MontPoint:
    if self.is_zero: return self
    return MontPoint(self.curve, self.x, -self.y, self.z).norm

  def __add__(self, othr: MontPoint) -> MontPoint:
    if not isinstance(othr, MontPoint): return NotImplemented
    self._check(othr)
    if self.is_zero: return othr
    if othr.is_zero: return self
    if self == -othr: return self.curve.zero
    P, Q = self.norm, othr.norm
    F = self.curve.field
    A = self.curve.A
    if P == Q:
      # Doubling a point of order two (y = 0) gives infinity, the tangent is vertical
      if P.y.is_zero: return self.curve.zero
      lam = (F.gen(3) * P.x.sq + F.gen(2) * A * P.x + F.one) / (F.gen(2) * P.y)
    else:
      lam = (P.y - Q.y) / (P.x - Q.x)
    x = lam.sq - P.x - Q.x - A
    y = lam * (P.x - x) - P.y
    R = MontPoint(self.curve, x, y, F.one)
    assert R.is_on_curve, f"{self!r} + {othr!r} gave {R!r} which is not on the curve"
    return R

  def __sub__(self, othr: MontPoint) -> MontPoint:
    if not isinstance(othr, MontPoint): return NotImplemented
    return self + -othr

  def __mul__(self, s: int) -> MontPoint:
    """Multiply the point by an integer scalar."""
    if not isinstance(s, int): return NotImplemented
    if s < 0: return double_and_add(-self, -s, self.curve.zero)
    return double_and_add(self, s, self.curve.zero)

  def __rmul__(self, s: int) -> MontPoint:
    return self * s
