"""
Linguistic variables and terms used by the student evaluator.

This is the single source of truth for the fuzzy set parameters: the
fuzzifier, the defuzzifier and the plotting utilities all read the same
FUZZY_SETS mapping. The mapping and everything inside it is read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from fis.membership import MembershipShape

UNIVERSE: Tuple[float, float] = (0.0, 100.0)

INPUT_VARIABLES: Tuple[str, ...] = ("attendance", "assignment", "exam", "participation")
OUTPUT_VARIABLE = "performance"
OUTPUT_TERMS: Tuple[str, ...] = ("poor", "average", "good", "excellent")

_tri = MembershipShape.tri
_trap = MembershipShape.trap


@dataclass(frozen=True)
class LinguisticVariable:
    """
    A named dimension decomposed into linguistic terms.

    Attributes:
        name (str): Variable name, e.g. 'exam'.
        terms (Mapping[str, MembershipShape]): Term name to shape, in
            definition order.
        universe (Tuple[float, float]): Universe of discourse.
    """

    name: str
    terms: Mapping[str, MembershipShape]
    universe: Tuple[float, float] = UNIVERSE

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", MappingProxyType(dict(self.terms)))

    def degrees(self, x: float) -> Dict[str, float]:
        """Membership degree of x in every term of this variable."""
        return {term: shape.degree(x) for term, shape in self.terms.items()}


def _low_medium_high() -> Dict[str, MembershipShape]:
    return {
        "low": _trap(0, 0, 40, 60),
        "medium": _tri(40, 60, 80),
        "high": _trap(60, 80, 100, 100),
    }


FUZZY_SETS: Mapping[str, LinguisticVariable] = MappingProxyType(
    {
        "attendance": LinguisticVariable(
            "attendance",
            {
                "poor": _trap(0, 0, 50, 70),
                "average": _tri(50, 70, 85),
                "good": _trap(70, 85, 100, 100),
            },
        ),
        "assignment": LinguisticVariable("assignment", _low_medium_high()),
        "exam": LinguisticVariable("exam", _low_medium_high()),
        "participation": LinguisticVariable("participation", _low_medium_high()),
        OUTPUT_VARIABLE: LinguisticVariable(
            OUTPUT_VARIABLE,
            {
                "poor": _trap(0, 0, 30, 50),
                "average": _tri(30, 50, 70),
                "good": _tri(50, 70, 90),
                "excellent": _trap(70, 90, 100, 100),
            },
        ),
    }
)
