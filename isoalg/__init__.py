# Algebraic structures for isogeny-based cryptography: prime fields and their
# quadratic extensions, Montgomery curves over any such field, polynomials and
# the quaternion algebra B(p, inf).

# Plain Python reference arithmetic. Not constant time and not zeroing
# anything after use, so none of this should touch real secrets.

# Public symbols are imported here.

import logging

from .elliptic import MontgomeryCurve, MontPoint
from .exceptions import CurveMismatchError, FieldMismatchError, NoInverseError, NotPrimeError, SamplingError
from .field import Field, FieldElement, PrimeField, QuadraticField, fe, fe2
from .group import Group, GroupElement
from .poly import Polynomial
from .quaternion import Quaternion, QuaternionAlgebra

logging.getLogger(__name__).addHandler(logging.NullHandler())
