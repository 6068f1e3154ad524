from .base import Field, FieldElement
from .fp import PrimeField, fe
from .fp2 import QuadraticField, fe2
