"""
Evaluates the fuzzy rule base to determine rule activation and aggregation.

This module takes the fuzzified inputs (membership degrees) and applies them to
a fixed set of Mamdani rules. Each rule has two antecedents joined by fuzzy AND
(minimum) and names one output term of the 'performance' variable. Rules that
share a consequent are combined with fuzzy OR (maximum).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from fis.fuzzy_sets import OUTPUT_TERMS

rule_engine_log = logging.getLogger("rule_engine")


@dataclass(frozen=True)
class Rule:
    """
    IF <variable is term> AND <variable is term> THEN performance is <output>.

    Attributes:
        antecedents (Tuple[Tuple[str, str], ...]): (variable, term) pairs.
        output (str): The consequent output term.
    """

    antecedents: Tuple[Tuple[str, str], ...]
    output: str

    def __str__(self) -> str:
        cond = " AND ".join(f"{var} is {term}" for var, term in self.antecedents)
        return f"IF {cond} THEN performance is {self.output}"


@dataclass(frozen=True)
class RuleFiring:
    """Firing strength of one rule and the output term it drives."""

    strength: float
    output: str

    def to_dict(self) -> Dict[str, object]:
        return {"strength": self.strength, "output": self.output}


RULE_BASE: Tuple[Rule, ...] = (
    Rule((("attendance", "good"), ("exam", "high")), "excellent"),
    Rule((("attendance", "poor"), ("exam", "low")), "poor"),
    Rule((("assignment", "medium"), ("participation", "high")), "good"),
    Rule((("assignment", "high"), ("exam", "high")), "excellent"),
    Rule((("attendance", "average"), ("participation", "low")), "average"),
    Rule((("exam", "medium"), ("assignment", "low")), "poor"),
    Rule((("participation", "medium"), ("attendance", "good")), "good"),
    # Low exam redeemed by high participation.
    Rule((("exam", "low"), ("participation", "high")), "average"),
)


class RuleEngine:
    """
    Evaluates a Mamdani-type fuzzy rule base.

    Attributes:
        rules (Tuple[Rule, ...]): The rule definitions, in evaluation order.
        output_terms (Tuple[str, ...]): Keys of the aggregated output.
    """

    def __init__(
        self,
        rule_base: Sequence[Rule] = RULE_BASE,
        output_terms: Sequence[str] = OUTPUT_TERMS,
    ):
        self.rules = tuple(rule_base)
        self.output_terms = tuple(output_terms)
        for rule in self.rules:
            if rule.output not in self.output_terms:
                raise ValueError(f"Rule '{rule}' targets unknown output term '{rule.output}'")

        rule_engine_log.info("Rule Engine initialized with %d rules.", len(self.rules))

    def fire(self, fuzzified: Mapping[str, Mapping[str, float]]) -> List[RuleFiring]:
        """
        Computes the firing strength of every rule.

        The strength is the minimum (fuzzy AND) of the antecedent membership
        degrees; a degree absent from the fuzzified input counts as 0.

        Returns:
            List[RuleFiring]: One entry per rule in rule order, zero strengths
                included.
        """
        firings = []
        for i, rule in enumerate(self.rules, start=1):
            degrees = [
                fuzzified.get(var, {}).get(term, 0.0) for var, term in rule.antecedents
            ]
            strength = min(degrees)
            firings.append(RuleFiring(strength, rule.output))
            rule_engine_log.debug(
                "Rule# %d %s -> degrees=%s W= %.3f",
                i,
                rule.output,
                [round(d, 3) for d in degrees],
                strength,
            )
        return firings

    def aggregate(self, firings: Sequence[RuleFiring]) -> Dict[str, float]:
        """
        Combines firings per output term with the maximum (fuzzy OR).

        Returns:
            Dict[str, float]: Every output term mapped to its strength; terms
                no rule fired for stay at 0.
        """
        aggregated = {term: 0.0 for term in self.output_terms}
        for firing in firings:
            aggregated[firing.output] = max(aggregated[firing.output], firing.strength)
        return aggregated

    def evaluate(
        self, fuzzified: Mapping[str, Mapping[str, float]]
    ) -> Tuple[Dict[str, float], List[RuleFiring]]:
        """
        Evaluates all rules in the rule base.

        Args:
            fuzzified (Mapping[str, Mapping[str, float]]): Membership degrees
                per input variable, as produced by the Fuzzifier.

        Returns:
            Tuple[Dict[str, float], List[RuleFiring]]: The aggregated output
            strengths and the raw per-rule firings.
        """
        firings = self.fire(fuzzified)
        aggregated = self.aggregate(firings)

        rounded = {k: round(v, 3) for k, v in aggregated.items()}
        rule_engine_log.debug(
            "Active rules: %d/%d, aggregated=%s",
            sum(1 for f in firings if f.strength > 0),
            len(firings),
            rounded,
        )
        return aggregated, firings
# End of rule_engine.py
