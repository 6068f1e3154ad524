class NotPrimeError(ValueError):
  """Field or algebra modulus is not an odd prime"""

class NoInverseError(ZeroDivisionError):
  """Element has no multiplicative inverse"""

class FieldMismatchError(TypeError):
  """Operands belong to different fields"""

class CurveMismatchError(TypeError):
  """Points belong to different curves"""

class SamplingError(RuntimeError):
  """Rejection sampling gave up after too many attempts"""
