# rule_trace.py

from typing import List, Dict, Any
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from fis.evaluator import EvaluationResult
from fis.rule_engine import RULE_BASE


OUTPUT_COLORS = {
    "poor": "#ef4444",
    "average": "#f59e0b",
    "good": "#3b82f6",
    "excellent": "#10b981",
}


def trace_rule_firing(result: EvaluationResult) -> List[Dict[str, Any]]:
    """
    Pair each rule with its antecedent degrees and firing strength.

    Args:
        result: A completed evaluation.

    Returns:
        A list of dictionaries with detailed rule evaluation traces, one per
        rule, in rule order.
    """
    traces = []
    for i, (rule, firing) in enumerate(zip(RULE_BASE, result.rules), start=1):
        degrees = [
            result.fuzzy_inputs.get(var, {}).get(term, 0.0)
            for var, term in rule.antecedents
        ]
        traces.append(
            {
                "rule_index": i,
                "rule": str(rule),
                "antecedents": [f"{var}.{term}" for var, term in rule.antecedents],
                "degrees": degrees,
                "firing_strength": firing.strength,
                "output": firing.output,
            }
        )
    return traces


def plot_rule_contributions(trace_data, result: EvaluationResult, show=True):
    labels = [f"R{t['rule_index']}: " + " & ".join(t["antecedents"]) for t in trace_data]
    ws = [t["firing_strength"] for t in trace_data]
    colors = [OUTPUT_COLORS.get(t["output"], "gray") for t in trace_data]

    fig, ax = plt.subplots(figsize=(12, 6))
    bars = ax.bar(range(len(labels)), ws, color=colors, alpha=0.8)

    ax.set_ylabel("Firing Strength")
    ax.set_ylim(0, 1.1)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.text(
        0.01,
        0.99,
        "\n".join(f"{k} = {v:g}" for k, v in result.inputs.items()),
        transform=ax.transAxes,
        fontsize=11,
        verticalalignment="top",
        bbox=dict(facecolor="white", alpha=0.7, edgecolor="gray"),
    )

    # Annotate W values on top of bars
    for bar in bars:
        height = bar.get_height()
        if height > 0:
            ax.text(
                bar.get_x() + bar.get_width() / 2,
                height + 0.01,
                f"{height:.2f}",
                ha="center",
                va="bottom",
                fontsize=8,
                color="black",
            )

    patches = [mpatches.Patch(color=c, label=term) for term, c in OUTPUT_COLORS.items()]
    ax.legend(handles=patches, loc="upper right", title="Consequent")

    ax.set_title(
        f"Rule Firing Strengths (score = {result.score:.1f}, {result.category})"
    )
    fig.tight_layout()
    if show:
        plt.show()
    return fig
