"""
Triangular and trapezoidal membership functions.

Both functions are total over the reals: they never raise and always return a
degree in [0.0, 1.0], including when two shape parameters coincide. A zero
width edge is evaluated as a step instead of a slope.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ShapeKind(Enum):
    """Membership function shape tag and the parameter count it takes."""

    TRIANGLE = 3
    TRAPEZOID = 4

    @property
    def arity(self) -> int:
        return self.value


def triangle(x: float, a: float, b: float, c: float) -> float:
    """
    Calculates the membership degree for a triangular function.

    Args:
        x (float): The crisp input value.
        a (float): Left foot of the triangle.
        b (float): Peak of the triangle.
        c (float): Right foot of the triangle.

    Returns:
        float: The degree of membership, from 0.0 to 1.0.
    """
    # vertical left edge
    if b == a:
        rising = 1.0 if x == a else 0.0
    else:
        rising = (x - a) / (b - a)
    # vertical right edge
    if c == b:
        falling = 1.0 if x == b else 0.0
    else:
        falling = (c - x) / (c - b)
    return max(0.0, min(rising, falling, 1.0))


def trapezoid(x: float, a: float, b: float, c: float, d: float) -> float:
    """
    Calculates the membership degree for a trapezoidal function.

    Args:
        x (float): The crisp input value.
        a (float), d (float): The bases (zero membership).
        b (float), c (float): The top (membership = 1.0).

    Returns:
        float: Degree of membership (0.0 to 1.0)
    """
    if b == a:
        rising = 1.0 if x >= a else 0.0
    else:
        rising = (x - a) / (b - a)
    if d == c:
        falling = 1.0 if x <= d else 0.0
    else:
        falling = (d - x) / (d - c)
    return max(0.0, min(rising, 1.0, falling))


@dataclass(frozen=True)
class MembershipShape:
    """
    A membership function shape together with its parameters.

    Attributes:
        kind (ShapeKind): Triangle or trapezoid.
        params (Tuple[float, ...]): (a, b, c) or (a, b, c, d).
    """

    kind: ShapeKind
    params: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.params) != self.kind.arity:
            raise ValueError(
                f"{self.kind.name.lower()} takes {self.kind.arity} params, "
                f"got {list(self.params)}"
            )
        object.__setattr__(self, "params", tuple(float(p) for p in self.params))

    @classmethod
    def tri(cls, a: float, b: float, c: float) -> "MembershipShape":
        return cls(ShapeKind.TRIANGLE, (a, b, c))

    @classmethod
    def trap(cls, a: float, b: float, c: float, d: float) -> "MembershipShape":
        return cls(ShapeKind.TRAPEZOID, (a, b, c, d))

    def degree(self, x: float) -> float:
        """Evaluates the shape at x."""
        if self.kind is ShapeKind.TRIANGLE:
            return triangle(x, *self.params)
        return trapezoid(x, *self.params)
