"""
Capability contracts for fields and their elements.

Concrete fields do not inherit from these, they only need to provide the same
attributes. The protocols are runtime checkable so that isinstance() can be
used to verify that a type is usable wherever a field is expected, e.g. as
the base of an elliptic curve or a polynomial ring.
"""

from __future__ import annotations

from typing import Optional, Protocol, TypeVar, runtime_checkable

E = TypeVar("E", bound="FieldElement")


@runtime_checkable
class FieldElement(Protocol):
  """An element that belongs to exactly one field instance."""
  field: Field

  def __add__(self: E, o: E) -> E: ...
  def __sub__(self: E, o: E) -> E: ...
  def __mul__(self: E, o) -> E: ...
  def __rmul__(self: E, n: int) -> E: ...
  def __neg__(self: E) -> E: ...
  def __truediv__(self: E, o: E) -> E: ...
  def __pow__(self: E, e: int) -> E: ...
  def __eq__(self, o) -> bool: ...
  def sqrt(self: E, rng=None) -> Optional[E]: ...

  @property
  def inv(self: E) -> E: ...

  @property
  def sq(self: E) -> E: ...

  @property
  def is_zero(self) -> bool: ...

  @property
  def is_square(self) -> bool: ...


@runtime_checkable
class Field(Protocol):
  """A field that produces its own elements."""

  @property
  def zero(self) -> FieldElement: ...

  @property
  def one(self) -> FieldElement: ...

  def gen(self, n: int) -> FieldElement: ...
  def rand(self, bits: Optional[int] = None, rng=None) -> FieldElement: ...
