import operator
import secrets
from typing import Optional, Tuple

import gmpy2

from .exceptions import NotPrimeError

# Cap for the outer rejection-sampling loops (square roots, random curve points).
# Each attempt succeeds with probability of about one half.
SAMPLING_ATTEMPTS = 256


def check_prime(p: int) -> int:
  """Return p if it is an odd prime, raise NotPrimeError otherwise."""
  if not isinstance(p, int): raise TypeError(f"Modulus must be an integer, not {p!r}")
  if p < 3 or not p & 1: raise NotPrimeError(f"The modulus {p} is not an odd prime")
  if not gmpy2.is_prime(p): raise NotPrimeError(f"The modulus {p} is not prime")
  return p


def egcd(a: int, b: int) -> Tuple[int, int, int]:
  """Extended Euclidean algorithm, returns (g, x, y) such that a*x + b*y == g"""
  x0, x1, y0, y1 = 1, 0, 0, 1
  while b:
    q, a, b = a // b, b, a % b
    x0, x1 = x1, x0 - q * x1
    y0, y1 = y1, y0 - q * y1
  return a, x0, y0


def randbits(k: int, rng=None) -> int:
  """Random k-bit integer from secrets, or from rng.getrandbits if given"""
  return secrets.randbits(k) if rng is None else rng.getrandbits(k)


def trailing_zeros(n: int) -> int:
  return (n & -n).bit_length() - 1


# Generic ladders over anything that has the operators, used by field elements
# (multiplicative and Z-module structure) and by curve points (group law).
# Neither is constant time.

def square_and_multiply(x, e: int, one, mul=operator.mul):
  """x**e for e >= 0, scanning the bits of e from the lowest"""
  result = one
  while e > 0:
    if e & 1: result = mul(result, x)
    e >>= 1
    if e: x = mul(x, x)
  return result


def double_and_add(x, n: int, zero):
  """n * x for n >= 0 by repeated doubling"""
  return square_and_multiply(x, n, zero, operator.add)


def attempts_or_default(attempts: Optional[int]) -> int:
  return SAMPLING_ATTEMPTS if attempts is None else attempts
