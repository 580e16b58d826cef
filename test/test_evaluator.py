# test/test_evaluator.py

import pytest
from fis import evaluator as evaluator_mod
from fis.evaluator import EvaluationResult, StudentEvaluator, categorize

OUTPUT_TERMS = {"poor", "average", "good", "excellent"}


def _inputs(attendance, assignment, exam, participation):
    return {
        "attendance": attendance,
        "assignment": assignment,
        "exam": exam,
        "participation": participation,
    }


def test_top_student_is_excellent(evaluator):
    result = evaluator.evaluate(_inputs(100, 100, 100, 100))
    assert result.aggregated["excellent"] > 0
    assert result.aggregated == {"poor": 0.0, "average": 0.0, "good": 0.0, "excellent": 1.0}
    assert result.score >= 80
    assert result.score == pytest.approx(1833.5 / 20.5)
    assert result.category == "Excellent"


def test_absent_student_is_poor(evaluator):
    result = evaluator.evaluate(_inputs(0, 0, 0, 0))
    assert result.aggregated["poor"] == 1.0
    assert result.score < 40
    assert result.score == pytest.approx(816.5 / 40.5)
    assert result.category == "Poor"


def test_mid_profile(evaluator):
    # attendance 70 is fully 'average'; assignment/participation 70 are half
    # 'medium' and half 'high'; exam 50 is half 'low'.
    result = evaluator.evaluate(_inputs(70, 70, 50, 70))
    assert result.aggregated["good"] == pytest.approx(0.5)
    assert result.aggregated["average"] == pytest.approx(0.5)
    assert result.aggregated["excellent"] == 0.0
    assert result.score == pytest.approx(60.0, abs=1e-9)


def test_evaluate_is_idempotent(evaluator):
    inputs = _inputs(83, 61.5, 72, 44)
    first = evaluator.evaluate(inputs)
    second = evaluator.evaluate(inputs)
    assert first == second
    assert first.to_dict() == second.to_dict()
    assert first.score == second.score


def test_separate_evaluators_agree():
    inputs = _inputs(55, 90, 35, 80)
    assert StudentEvaluator().evaluate(inputs) == StudentEvaluator().evaluate(inputs)


def test_score_does_not_decrease_with_exam(evaluator):
    scores = [
        evaluator.evaluate(_inputs(70, 70, exam, 70)).score
        for exam in (50, 60, 70, 80, 90, 100)
    ]
    assert all(a <= b + 1e-9 for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize(
    "inputs",
    [
        _inputs(0, 0, 0, 0),
        _inputs(100, 100, 100, 100),
        _inputs(65, 45, 72, 58),
        _inputs(-20, 150, 50, 1e6),
        _inputs(150, 150, 150, 150),
    ],
)
def test_result_invariants(evaluator, inputs):
    result = evaluator.evaluate(inputs)
    assert set(result.aggregated) == OUTPUT_TERMS
    assert all(0.0 <= v <= 1.0 for v in result.aggregated.values())
    assert len(result.rules) == 8
    assert all(0.0 <= r.strength <= 1.0 for r in result.rules)
    for degrees in result.fuzzy_inputs.values():
        assert all(0.0 <= d <= 1.0 for d in degrees.values())
    assert 0.0 <= result.score <= 100.0
    assert result.category == categorize(result.score)


def test_nothing_fires_scores_zero(evaluator):
    # above 100 the right shoulders drop to 0, so no rule fires
    result = evaluator.evaluate(_inputs(150, 150, 150, 150))
    assert result.score == 0
    assert result.category == "Poor"


@pytest.mark.parametrize(
    "score,category",
    [
        (100.0, "Excellent"),
        (80.0, "Excellent"),
        (79.999, "Good"),
        (60.0, "Good"),
        (59.999, "Average"),
        (40.0, "Average"),
        (39.999, "Poor"),
        (0.0, "Poor"),
    ],
)
def test_categorize_thresholds(score, category):
    assert categorize(score) == category


def test_to_dict_shape(evaluator):
    result = evaluator.evaluate(_inputs(90, 80, 85, 60))
    data = result.to_dict()
    assert set(data) == {"score", "category", "fuzzyInputs", "aggregated", "rules"}
    assert set(data["fuzzyInputs"]) == {"attendance", "assignment", "exam", "participation"}
    assert set(data["aggregated"]) == OUTPUT_TERMS
    assert len(data["rules"]) == 8
    assert set(data["rules"][0]) == {"strength", "output"}


def test_result_keeps_inputs(evaluator):
    inputs = _inputs(90, 80, 85, 60)
    inputs["notes"] = "ignored"
    result = evaluator.evaluate(inputs)
    assert result.inputs == _inputs(90, 80, 85, 60)
    assert isinstance(result, EvaluationResult)


def test_missing_input_raises(evaluator):
    with pytest.raises(KeyError):
        evaluator.evaluate({"attendance": 90, "exam": 85})


def test_config_step_is_applied():
    evaluator = StudentEvaluator({"defuzzifier": {"STEP": 0.5}})
    assert evaluator.defuzzifier.step == 0.5
    result = evaluator.evaluate(_inputs(100, 100, 100, 100))
    assert result.category == "Excellent"


def test_module_level_evaluate():
    result = evaluator_mod.evaluate(_inputs(100, 100, 100, 100))
    assert result.category == "Excellent"
    assert result == StudentEvaluator().evaluate(_inputs(100, 100, 100, 100))
