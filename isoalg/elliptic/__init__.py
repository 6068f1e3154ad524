# Elliptic curves over the fields of isoalg.field. Affine formulas with
# inversions everywhere, not constant time. Meant as a reference to test
# faster isogeny arithmetic against, not for handling secrets.

from .mont import MontgomeryCurve, MontPoint
