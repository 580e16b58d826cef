import os
import logging

import numpy as np
import matplotlib.pyplot as plt

from fis.fuzzy_sets import FUZZY_SETS, INPUT_VARIABLES, OUTPUT_VARIABLE
from fis.defuzzifier import Defuzzifier

main_log = logging.getLogger("main")


def sample_membership(variable_name, step=1.0):
    """
    Sample every term of a registry variable across its universe.

    Args:
        variable_name (str): Key into FUZZY_SETS.
        step (float): Sampling step; 1.0 gives x = 0..100.

    Returns:
        (xs, curves): xs is a numpy array, curves maps term -> numpy array.
    """
    variable = FUZZY_SETS[variable_name]
    lo, hi = variable.universe
    n = int(round((hi - lo) / step))
    xs = lo + np.arange(n + 1) * step
    curves = {
        term: np.array([shape.degree(x) for x in xs])
        for term, shape in variable.terms.items()
    }
    return xs, curves


def _save(fig, title, output_dir):
    os.makedirs(output_dir, exist_ok=True)
    filename = os.path.join(output_dir, f"{title.lower().replace(' ', '_')}.png")
    fig.savefig(filename)
    main_log.info("Saved plot to: %s", filename)
    return filename


def plot_membership_functions(
    variable_name, crisp_value=None, save=False, output_dir="plots", show=True
):
    """
    Plot the membership curves of one variable.
    Optionally mark a crisp value and its degree in each term.
    """
    xs, curves = sample_membership(variable_name)
    fig, ax = plt.subplots(figsize=(8, 4))
    for term, ys in curves.items():
        ax.plot(xs, ys, label=term)
        ax.fill_between(xs, ys, alpha=0.1)

    if crisp_value is not None:
        degrees = FUZZY_SETS[variable_name].degrees(crisp_value)
        ax.axvline(crisp_value, color="gray", linestyle="--", linewidth=1)
        ax.scatter(
            [crisp_value] * len(degrees),
            list(degrees.values()),
            color="red",
            s=30,
            edgecolors="black",
            linewidths=0.8,
            zorder=10,
            label=f"input = {crisp_value:g}",
        )

    ax.set_title(f"Membership Functions – {variable_name}")
    ax.set_xlabel("Value")
    ax.set_ylabel("Membership Degree")
    ax.set_ylim(-0.05, 1.05)
    ax.grid(True)
    ax.legend()
    fig.tight_layout()

    if save:
        _save(fig, f"{variable_name}_membership_functions", output_dir)
    if show:
        plt.show()
    return fig


def plot_defuzzification(
    result, defuzzifier=None, save=False, output_dir="plots", show=True
):
    """
    Plot the clipped aggregate output set of an evaluation and its centroid.
    """
    defuzzifier = defuzzifier or Defuzzifier()
    xs, mu = defuzzifier.aggregated_curve(result.aggregated)
    _, curves = sample_membership(OUTPUT_VARIABLE, defuzzifier.step)

    fig, ax = plt.subplots(figsize=(8, 4))
    for term, ys in curves.items():
        ax.plot(xs, ys, linestyle=":", alpha=0.6, label=term)
    ax.plot(xs, mu, color="purple", linewidth=2.5, label="aggregated output")
    ax.fill_between(xs, mu, color="purple", alpha=0.15)
    ax.axvline(result.score, color="red", linewidth=1.5,
               label=f"centroid = {result.score:.1f} ({result.category})")

    ax.set_title("Defuzzification – Centroid")
    ax.set_xlabel("Performance")
    ax.set_ylabel("Membership Degree")
    ax.set_ylim(-0.05, 1.05)
    ax.grid(True)
    ax.legend()
    fig.tight_layout()

    if save:
        _save(fig, "defuzzification", output_dir)
    if show:
        plt.show()
    return fig


def main():
    import argparse

    parser = argparse.ArgumentParser(
        description="Plot fuzzy membership function shapes."
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save plots as PNG files in the 'plots/' directory.",
    )
    args = parser.parse_args()

    for name in INPUT_VARIABLES + (OUTPUT_VARIABLE,):
        plot_membership_functions(name, save=args.save)


if __name__ == "__main__":
    main()
