"""
Computes the final crisp score from the aggregated fuzzy output.

This module implements centroid (center of gravity) defuzzification for a
Mamdani system. Each output term is clipped at its aggregated strength (min
implication), the clipped terms are combined with max, and the centroid of the
resulting shape is integrated numerically over the output universe.
"""

import logging
from typing import List, Mapping, Tuple

import numpy as np

from fis.fuzzy_sets import FUZZY_SETS, OUTPUT_VARIABLE, LinguisticVariable

defuzzifier_log = logging.getLogger("defuzzifier")


class Defuzzifier:
    """
    Performs discretized centroid defuzzification.

    Attributes:
        output_variable (LinguisticVariable): The output variable whose terms
            are clipped and combined.
        step (float): Sampling step over the universe of discourse. A step of
            1.0 samples x = 0, 1, ..., 100.
    """

    def __init__(
        self,
        output_variable: LinguisticVariable = FUZZY_SETS[OUTPUT_VARIABLE],
        step: float = 1.0,
    ):
        if not step > 0:
            raise ValueError(f"Defuzzification step must be positive, got {step}")
        self.output_variable = output_variable
        self.step = float(step)
        defuzzifier_log.info(
            "Defuzzifier initialized for '%s' (%d terms, step=%.3f, %d samples).",
            output_variable.name,
            len(output_variable.terms),
            self.step,
            len(self.sample_points()),
        )

    def sample_points(self) -> List[float]:
        """Sample positions across the output universe, both ends included."""
        lo, hi = self.output_variable.universe
        n = int(round((hi - lo) / self.step))
        return [lo + i * self.step for i in range(n + 1)]

    def membership(self, x: float, aggregated: Mapping[str, float]) -> float:
        """
        Degree of x in the aggregated output set.

        mu(x) = max over terms of min(aggregated[term], term(x)).
        """
        mu = 0.0
        for term, shape in self.output_variable.terms.items():
            clipped = min(aggregated.get(term, 0.0), shape.degree(x))
            mu = max(mu, clipped)
        return mu

    def defuzzify(self, aggregated: Mapping[str, float]) -> float:
        """
        Calculates the crisp output value.

        The output is the discrete centroid:
            score = (Σ x * mu(x)) / (Σ mu(x))

        Args:
            aggregated (Mapping[str, float]): Output term to aggregated
                strength, as produced by the RuleEngine.

        Returns:
            float: The crisp score in the output universe. Returns 0 if no
                rule fired.
        """
        numerator = 0.0
        denominator = 0.0

        for x in self.sample_points():
            mu = self.membership(x, aggregated)
            numerator += x * mu
            denominator += mu

        if denominator == 0:
            defuzzifier_log.warning("Aggregated output set is empty. Outputting 0.")
            return 0.0

        final_output = numerator / denominator
        defuzzifier_log.debug(
            "Defuzzified output: %.4f (numerator= %.4f, denominator= %.4f)",
            final_output,
            numerator,
            denominator,
        )
        return final_output

    def aggregated_curve(
        self, aggregated: Mapping[str, float]
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Samples the clipped and combined output set for plotting.

        Returns:
            Tuple[np.ndarray, np.ndarray]: (xs, mu) arrays of equal length.
        """
        xs = np.array(self.sample_points())
        mu = np.array([self.membership(x, aggregated) for x in xs])
        return xs, mu
