"""Capability contract for additive groups such as elliptic curves."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

G = TypeVar("G", bound="GroupElement")


@runtime_checkable
class GroupElement(Protocol):
  def __add__(self: G, o: G) -> G: ...
  def __sub__(self: G, o: G) -> G: ...
  def __neg__(self: G) -> G: ...
  def __eq__(self, o) -> bool: ...

  @property
  def is_zero(self) -> bool: ...


@runtime_checkable
class Group(Protocol):
  @property
  def zero(self) -> GroupElement: ...
