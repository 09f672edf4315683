"""
Exact Rational Arithmetic for Share Computation.

Problem: Shares are divided again at every representation or re-transfer
generation, so denominators compound. Floating point would drift, and an
unbounded integer would silently exceed what downstream collaborators can
represent.

Solution: A small fraction type that
1. Always reduces by the greatest common divisor
2. Keeps the sign on the numerator (denominator strictly positive)
3. Refuses, with a dedicated error, any reduced component outside
   +/- SAFE_INTEGER_MAX
4. Pre-reduces operands before adding or multiplying so intermediate values
   stay as small as possible

All helpers are free functions over immutable values.
"""

from dataclasses import dataclass
from fractions import Fraction
from math import gcd

from succession.constants import SAFE_INTEGER_MAX


# =============================================================================
# ERRORS
# =============================================================================

class RationalError(ArithmeticError):
    """Base class for fatal rational-arithmetic contract violations."""
    pass


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """Raised for a zero denominator or division by a zero fraction."""
    pass


class RationalOverflowError(RationalError, OverflowError):
    """Raised when a reduced component leaves the safe integer range."""
    pass


# =============================================================================
# RATIONAL
# =============================================================================

@dataclass(frozen=True, eq=False)
class Rational:
    """
    An exact fraction n/d.

    Instances built through frac() are always reduced with d > 0. Direct
    construction does not reduce, so equality and hashing compare reduced
    forms.
    """
    n: int
    d: int = 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return equals(self, other)

    def __hash__(self) -> int:
        reduced = simplify(self.n, self.d)
        return hash((reduced.n, reduced.d))

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"Rational({self.n}, {self.d})"

    @property
    def is_zero(self) -> bool:
        return self.n == 0

    @property
    def is_positive(self) -> bool:
        return (self.n > 0) == (self.d > 0) and self.n != 0

    def to_fraction(self) -> Fraction:
        """Convert to the standard library Fraction type."""
        return Fraction(self.n, self.d)


def _check_safe(n: int, d: int) -> None:
    if abs(n) > SAFE_INTEGER_MAX or abs(d) > SAFE_INTEGER_MAX:
        raise RationalOverflowError(
            f"Fraction overflow: {n}/{d} exceeds safe integer range. "
            f"Consider reducing the depth of representation or re-transfer chains."
        )


def simplify(n: int, d: int) -> Rational:
    """
    Reduce n/d to lowest terms with a positive denominator.

    Raises:
        ZeroDenominatorError: If d is zero.
        RationalOverflowError: If a reduced component exceeds SAFE_INTEGER_MAX.
    """
    if d == 0:
        raise ZeroDenominatorError("Denominator cannot be zero")
    if n == 0:
        return Rational(0, 1)
    if d < 0:
        n, d = -n, -d
    g = gcd(n, d)
    rn, rd = n // g, d // g
    _check_safe(rn, rd)
    return Rational(rn, rd)


def frac(n: int, d: int = 1) -> Rational:
    """Construct a reduced fraction."""
    return simplify(n, d)


def add(a: Rational, b: Rational) -> Rational:
    # Common denominator via gcd instead of a.d * b.d
    g = gcd(a.d, b.d)
    da = a.d // g
    db = b.d // g
    return simplify(a.n * db + b.n * da, da * b.d)


def subtract(a: Rational, b: Rational) -> Rational:
    g = gcd(a.d, b.d)
    da = a.d // g
    db = b.d // g
    return simplify(a.n * db - b.n * da, da * b.d)


def multiply(a: Rational, b: Rational) -> Rational:
    # Cross-reduce before multiplying
    g1 = gcd(a.n, b.d) or 1
    g2 = gcd(b.n, a.d) or 1
    return simplify((a.n // g1) * (b.n // g2), (a.d // g2) * (b.d // g1))


def divide(a: Rational, b: Rational) -> Rational:
    """
    Divide a by b.

    Raises:
        ZeroDenominatorError: If b is zero.
    """
    if b.n == 0:
        raise ZeroDenominatorError("Division by zero")
    g1 = gcd(a.n, b.n) or 1
    g2 = gcd(a.d, b.d) or 1
    return simplify((a.n // g1) * (b.d // g2), (a.d // g2) * (b.n // g1))


def equals(a: Rational, b: Rational) -> bool:
    """
    Compare two fractions by their reduced components.

    Never cross-multiplies: a.n * b.d can leave the safe range even when both
    operands are small once reduced.
    """
    sa = simplify(a.n, a.d)
    sb = simplify(b.n, b.d)
    return sa.n == sb.n and sa.d == sb.d


def to_string(f: Rational) -> str:
    """Render as 'n/d', 'n' for integers, or '0'."""
    if f.n == 0:
        return "0"
    if f.d == 1:
        return f"{f.n}"
    return f"{f.n}/{f.d}"


def to_percent(f: Rational) -> str:
    """
    Render as a percentage with at most one decimal place.

    Rounds half up on the absolute value; a trailing '.0' is dropped.

    Example:
        >>> to_percent(frac(1, 3))
        '33.3%'
        >>> to_percent(frac(1, 4))
        '25%'
    """
    if f.n == 0:
        return "0%"
    reduced = simplify(f.n, f.d)
    tenths, remainder = divmod(abs(reduced.n) * 1000, reduced.d)
    if remainder * 2 >= reduced.d:
        tenths += 1
    sign = "-" if reduced.n < 0 else ""
    whole, decimal = divmod(tenths, 10)
    if decimal == 0:
        return f"{sign}{whole}%"
    return f"{sign}{whole}.{decimal}%"


ZERO = frac(0)
ONE = frac(1)


__all__ = [
    "RationalError",
    "ZeroDenominatorError",
    "RationalOverflowError",
    "Rational",
    "simplify",
    "frac",
    "add",
    "subtract",
    "multiply",
    "divide",
    "equals",
    "to_string",
    "to_percent",
    "ZERO",
    "ONE",
]
