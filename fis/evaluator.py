"""
Orchestrates the fuzzy student evaluation.

This module integrates the Fuzzifier, Rule Engine, and Defuzzifier to turn the
four crisp student metrics into a 0-100 performance score and a category
label. It serves as the main interface to the inference system and holds no
state between evaluations.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from fis.defuzzifier import Defuzzifier
from fis.fuzzifier import Fuzzifier
from fis.rule_engine import RuleEngine, RuleFiring

evaluator_log = logging.getLogger("evaluator")

# (lower bound, label), checked top down
CATEGORY_THRESHOLDS = (
    (80.0, "Excellent"),
    (60.0, "Good"),
    (40.0, "Average"),
)
LOWEST_CATEGORY = "Poor"


def categorize(score: float) -> str:
    """Maps a crisp score to its category label."""
    for lower, label in CATEGORY_THRESHOLDS:
        if score >= lower:
            return label
    return LOWEST_CATEGORY


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of one evaluation.

    Attributes:
        score (float): Defuzzified performance score.
        category (str): 'Excellent', 'Good', 'Average' or 'Poor'.
        fuzzy_inputs (Dict[str, Dict[str, float]]): Membership degrees per
            input variable.
        aggregated (Dict[str, float]): Strength per output term.
        rules (List[RuleFiring]): Firing of every rule, in rule order.
        inputs (Dict[str, float]): The crisp inputs evaluated.
    """

    score: float
    category: str
    fuzzy_inputs: Dict[str, Dict[str, float]]
    aggregated: Dict[str, float]
    rules: List[RuleFiring]
    inputs: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict in the shape consumed by charts and the history panel."""
        return {
            "score": self.score,
            "category": self.category,
            "fuzzyInputs": {k: dict(v) for k, v in self.fuzzy_inputs.items()},
            "aggregated": dict(self.aggregated),
            "rules": [firing.to_dict() for firing in self.rules],
        }


class StudentEvaluator:
    """
    The main fuzzy evaluation class.

    Attributes:
        fuzzifier (Fuzzifier): The fuzzifier instance.
        rule_engine (RuleEngine): The rule engine instance.
        defuzzifier (Defuzzifier): The defuzzifier instance.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initializes the evaluator by setting up its components.

        Args:
            config (Optional[Dict[str, Any]]): The configuration dictionary
                loaded from fis_config.toml. Only the [defuzzifier] section is
                read here.
        """
        config = config or {}
        step = float(config.get("defuzzifier", {}).get("STEP", 1.0))

        self.fuzzifier = Fuzzifier()
        self.rule_engine = RuleEngine()
        self.defuzzifier = Defuzzifier(step=step)
        evaluator_log.info("Student evaluator initialized and ready.")

    def evaluate(self, inputs: Mapping[str, float]) -> EvaluationResult:
        """
        Executes one full pass of the fuzzy inference system.

        Args:
            inputs (Mapping[str, float]): attendance, assignment, exam and
                participation values, expected in [0, 100].

        Returns:
            EvaluationResult: Score, category and the intermediate fuzzy values.
        """
        evaluator_log.debug("--- Evaluation Start (inputs= %s) ---", dict(inputs))

        # 1) Fuzzification
        fuzzy_inputs = self.fuzzifier.fuzzify(inputs)

        # 2) Rule Evaluation
        aggregated, firings = self.rule_engine.evaluate(fuzzy_inputs)

        # 3) Defuzzification
        score = self.defuzzifier.defuzzify(aggregated)
        category = categorize(score)

        evaluator_log.debug(
            "--- Evaluation End (score= %.4f, category= %s) ---", score, category
        )
        return EvaluationResult(
            score=score,
            category=category,
            fuzzy_inputs=fuzzy_inputs,
            aggregated=aggregated,
            rules=firings,
            inputs={name: inputs[name] for name in self.fuzzifier.input_names},
        )


_default_evaluator: Optional[StudentEvaluator] = None


def evaluate(inputs: Mapping[str, float]) -> EvaluationResult:
    """Evaluates inputs with a default-configured StudentEvaluator."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = StudentEvaluator()
    return _default_evaluator.evaluate(inputs)
