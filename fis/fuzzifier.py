"""
Fuzzifies crisp student metrics into membership degrees.

This module takes the crisp percentage scores (attendance, assignment, exam,
participation) and determines their degree of membership in every linguistic
term of the matching variable (e.g. exam -> 'low', 'medium', 'high').
No range validation is done here: out-of-range values saturate naturally
through the membership functions.
"""

import logging
from typing import Dict, Mapping, Sequence

from fis.fuzzy_sets import FUZZY_SETS, INPUT_VARIABLES, LinguisticVariable

fuzzifier_log = logging.getLogger("fuzzifier")


class Fuzzifier:
    """
    Calculates membership degrees for crisp inputs.

    Attributes:
        fuzzy_sets (Mapping[str, LinguisticVariable]): The registry of
            linguistic variables to fuzzify against.
        input_names (Sequence[str]): The input variables fuzzified by
            fuzzify(), in order.
    """

    def __init__(
        self,
        fuzzy_sets: Mapping[str, LinguisticVariable] = FUZZY_SETS,
        input_names: Sequence[str] = INPUT_VARIABLES,
    ) -> None:
        self.fuzzy_sets = fuzzy_sets
        self.input_names = tuple(input_names)
        fuzzifier_log.info(
            "Fuzzifier initialized with %d input variables: %s",
            len(self.input_names),
            ", ".join(self.input_names),
        )

    def fuzzify_variable(self, input_name: str, crisp_value: float) -> Dict[str, float]:
        """
        Fuzzifies a single crisp input value.

        Args:
            input_name (str): The name of the input variable (e.g. 'exam').
            crisp_value (float): The crisp value to fuzzify.

        Returns:
            Dict[str, float]: Every term name mapped to its membership degree,
                zero degrees included.
        """
        if input_name not in self.fuzzy_sets:
            raise KeyError(f"No fuzzy sets defined for input '{input_name}'")

        fuzzified_output = self.fuzzy_sets[input_name].degrees(crisp_value)

        formatted_output = {k: f"{v:.3f}" for k, v in fuzzified_output.items()}
        fuzzifier_log.debug(
            "Fuzzified %s= %.3f -> %s", input_name, crisp_value, formatted_output
        )
        return fuzzified_output

    def fuzzify(self, crisp_inputs: Mapping[str, float]) -> Dict[str, Dict[str, float]]:
        """
        Fuzzifies all input variables.

        Args:
            crisp_inputs (Mapping[str, float]): Variable name to crisp value.
                Every name in input_names must be present.

        Returns:
            Dict[str, Dict[str, float]]: Variable name to term degrees.
        """
        missing = [name for name in self.input_names if name not in crisp_inputs]
        if missing:
            raise KeyError(f"Missing crisp input(s): {', '.join(missing)}")

        return {
            name: self.fuzzify_variable(name, crisp_inputs[name])
            for name in self.input_names
        }
