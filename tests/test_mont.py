import random

import pytest

from isoalg import *

F13 = PrimeField(13)
F97 = PrimeField(97)
E13 = MontgomeryCurve(F13, 0)
E97 = MontgomeryCurve(F97, 0)


def all_points(E):
  """Brute force list of all points, the point at infinity first"""
  F = E.field
  points = [E.zero]
  for x in range(F.p):
    y2 = E.rhs(F(x))
    points += [E.gen(x, y) for y in range(F.p) if F(y).sq == y2]
  return points


def test_construction():
  assert E97.A == F97.zero
  assert E97 == MontgomeryCurve(PrimeField(97), F97(0))
  assert E97 != MontgomeryCurve(F97, 1)
  assert isinstance(E97, Group)
  assert isinstance(E97.zero, GroupElement)
  assert E97.zero.is_zero
  assert E97.zero.is_on_curve
  assert E97.gen(0, 0).z == F97.one

  with pytest.raises(FieldMismatchError):
    MontgomeryCurve(F97, F13(1))

  with pytest.raises(ValueError):
    E97.gen(0, 0, 0)


def test_j_invariant():
  assert E97.j_invariant == F97(256 * (0 - 3)**3 * pow(0 - 4, -1, 97))
  assert E97.j_invariant == F97(1728)
  E = MontgomeryCurve(F97, 5)
  assert E.j_invariant == F97(256 * (25 - 3)**3 * pow(25 - 4, -1, 97))

  # Singular curves
  for A in (2, -2):
    with pytest.raises(NoInverseError):
      MontgomeryCurve(F97, A).j_invariant


def test_identity():
  rng = random.Random(3)
  for _ in range(20):
    P = E97.rand(rng=rng)
    assert P.is_on_curve
    assert not P.is_zero
    assert P + E97.zero == P
    assert E97.zero + P == P
    assert P + -P == E97.zero
    assert P - P == E97.zero
    assert -(-P) == P
  assert -E97.zero == E97.zero


def test_two_torsion():
  # x^3 + x = x (x^2 + 1) has the roots 0, 5, 8 mod 13
  for x in (0, 5, 8):
    P = E13.gen(x, 0)
    assert P.is_on_curve
    assert P == -P
    assert P + P == E13.zero
    assert 2 * P == E13.zero
    assert 3 * P == P
    # y = 0 has no square root, so these points are not lifted
    with pytest.raises(ValueError):
      E13.lift_x(x)


def test_equality():
  P = E97.rand(rng=random.Random(4))
  c = F97(5)
  assert E97.gen(P.x * c, P.y * c, P.z * c) == P
  assert E97.gen(0, 7, 0) == E97.zero
  assert E97.zero == E97.gen(0, 96, 0)
  assert P != E97.zero
  assert E97.zero != P
  assert E97.gen(0, 0) != E97.zero
  assert E97.zero != E97.gen(0, 0)
  assert len({E97.zero, E97.gen(0, 3, 0), P, E97.gen(P.x * c, P.y * c, c)}) == 2

  with pytest.raises(TypeError):
    P == P.x


def test_norm():
  P = E97.rand(rng=random.Random(5))
  Q = E97.gen(P.x * 3, P.y * 3, 3).norm
  assert Q.z == F97.one
  assert Q.x == P.x and Q.y == P.y
  Z = E97.gen(0, 5, 0).norm
  assert Z.y == F97.one and Z.x.is_zero and Z.z.is_zero
  assert P.norm is P
  # Negation normalises as well
  assert (-E97.gen(P.x * 2, P.y * 2, 2)).z == F97.one


def test_associativity():
  rng = random.Random(6)
  for _ in range(30):
    P1, P2, P3 = E97.rand(rng=rng), E97.rand(rng=rng), E97.rand(rng=rng)
    assert (P1 + P2) + P3 == P1 + (P2 + P3)
    assert P1 + P2 == P2 + P1
    assert P1 - P2 == -(P2 - P1)


def test_group_exhaustive():
  points = all_points(E13)
  n = len(points)
  for P in points:
    assert P.is_on_curve
    assert n * P == E13.zero
    for Q in points:
      R = P + Q
      assert R.is_on_curve
      assert R == Q + P
      assert R - Q == P


def test_scalarmult():
  n = len(all_points(E97))
  rng = random.Random(7)
  for _ in range(10):
    P = E97.rand(rng=rng)
    a, b = rng.randrange(1000), rng.randrange(1000)
    assert (a + b) * P == a * P + b * P
    assert P * a == a * P
    assert -3 * P == -(3 * P)
    assert 0 * P == E97.zero
    assert 1 * P == P
    assert n * P == E97.zero
    assert (n + 1) * P == P


def test_lift_x():
  E = MontgomeryCurve(F97, 3)
  P = E.rand(rng=random.Random(8))
  Q = E.lift_x(P.x)
  assert Q == P or Q == -P
  for x in range(97):
    if E.rhs(F97(x)).is_square:
      assert E.lift_x(x).x == F97(x)
    else:
      with pytest.raises(ValueError) as exc:
        E.lift_x(x)
      assert "not the x coordinate" in str(exc.value)


def test_rand():
  assert E97.rand(rng=random.Random(9)) == E97.rand(rng=random.Random(9))
  assert len({E97.rand() for _ in range(50)}) > 5


def test_rand_gives_up(mocker):
  F = PrimeField(13)
  E = MontgomeryCurve(F, 0)
  # 1 + 1 = 2 is not a square mod 13
  rand = mocker.patch.object(F, "rand", return_value=F(1))
  with pytest.raises(SamplingError):
    E.rand(attempts=5)
  assert rand.call_count == 5


def test_mismatch():
  P = E97.rand()
  Q = MontgomeryCurve(F97, 1).rand()
  with pytest.raises(CurveMismatchError):
    P == Q
  with pytest.raises(CurveMismatchError):
    P + Q


def test_supersingular_fp2():
  # y^2 = x^3 + x and its 2-isogenous neighbour y^2 = x^3 + 6x^2 + x are
  # supersingular over F_p^2 with (p + 1)^2 points for p = 3 mod 4
  p = 431
  K = QuadraticField(PrimeField(p), -1)
  E0 = MontgomeryCurve(K, 0)
  E6 = MontgomeryCurve(K, 6)
  assert E0.j_invariant == K(1728)
  assert E6.j_invariant == K(287496)
  rng = random.Random(10)
  for E in (E0, E6):
    for _ in range(5):
      P, Q, R = E.rand(rng=rng), E.rand(rng=rng), E.rand(rng=rng)
      assert P.is_on_curve
      assert (p + 1)**2 * P == E.zero
      assert (P + Q) + R == P + (Q + R)


def test_fp2_general_sqrt():
  # p = 1 mod 4 takes the randomised square root branch in the base field
  K = QuadraticField(PrimeField(13), 2)
  E = MontgomeryCurve(K, 3)
  rng = random.Random(11)
  for _ in range(10):
    P, Q = E.rand(rng=rng), E.rand(rng=rng)
    assert (P + Q).is_on_curve
    assert P + Q - Q == P
