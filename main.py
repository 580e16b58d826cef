"""
Main entry point for the fuzzy student performance evaluator.

This script initializes logging and the evaluator from config/fis_config.toml,
then evaluates the metrics given on the command line. Without metric flags it
reads one "attendance assignment exam participation" line per evaluation from
stdin and keeps a history of the results.
"""

import argparse
import json
import logging
import os
import sys
import tomllib

from utils.logger import setup_logging, set_eval_index
from utils.profiler import CodeProfiler
from fis.evaluator import StudentEvaluator
from fis.fuzzy_sets import INPUT_VARIABLES
from fis.history import EvaluationHistory

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "fis_config.toml")


def load_config(path=DEFAULT_CONFIG_PATH):
    """
    Loads configuration from config/fis_config.toml located relative to this script.
    """
    with open(path, "rb") as f:
        return tomllib.load(f)


def _level(name, default):
    return getattr(logging, str(name).upper(), default)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate student performance with a Mamdani fuzzy inference system."
    )
    for name in INPUT_VARIABLES:
        parser.add_argument(f"--{name}", type=float, help=f"{name} score (0-100)")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON.")
    parser.add_argument("--plot", action="store_true", help="Show membership and rule plots.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to fis_config.toml.")
    return parser.parse_args(argv)


def format_result(result):
    lines = [f"Score: {result.score:.2f}  Category: {result.category}"]
    for term, strength in result.aggregated.items():
        lines.append(f"  {term:<10} {strength:.3f}")
    return "\n".join(lines)


def _parse_line(line):
    values = [float(v) for v in line.replace(",", " ").split()]
    if len(values) != len(INPUT_VARIABLES):
        raise ValueError(
            f"Expected {len(INPUT_VARIABLES)} values ({', '.join(INPUT_VARIABLES)}), got {len(values)}"
        )
    return dict(zip(INPUT_VARIABLES, values))


def _show_plots(result, evaluator):
    # matplotlib is only needed when plotting
    from utils.plot_membership_shapes import plot_membership_functions, plot_defuzzification
    from utils.rule_trace import trace_rule_firing, plot_rule_contributions

    for name in INPUT_VARIABLES:
        plot_membership_functions(name, crisp_value=result.inputs[name], show=False)
    plot_rule_contributions(trace_rule_firing(result), result, show=False)
    plot_defuzzification(result, evaluator.defuzzifier, show=True)


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config)

    log_cfg = config.get("logging", {})
    setup_logging(
        log_dir=log_cfg.get("LOG_DIR", "logs"),
        overwrite=bool(log_cfg.get("OVERWRITE", True)),
        log_level=_level(log_cfg.get("LOG_LEVEL", "DEBUG"), logging.DEBUG),
        console_level=_level(log_cfg.get("CONSOLE_LEVEL", "INFO"), logging.INFO),
    )
    main_log = logging.getLogger("main")
    main_log.info("Configuration file '%s' loaded.", args.config)

    warn_ms = float(config.get("profiler", {}).get("WARN_MS", 10.0))
    evaluator = StudentEvaluator(config)
    history = EvaluationHistory(int(config.get("history", {}).get("MAX_ENTRIES", 50)))

    given = {name: getattr(args, name) for name in INPUT_VARIABLES}
    if all(v is not None for v in given.values()):
        batch = [given]
    elif any(v is not None for v in given.values()):
        missing = [name for name, v in given.items() if v is None]
        main_log.error("Missing metric(s): %s", ", ".join(missing))
        return 2
    else:
        batch = (_parse_line(line) for line in sys.stdin if line.strip())

    try:
        result = None
        for i, inputs in enumerate(batch):
            set_eval_index(i)
            with CodeProfiler("Evaluation", warn_ms=warn_ms):
                result = evaluator.evaluate(inputs)
            history.record(result)

            if args.json:
                print(json.dumps(result.to_dict()))
            else:
                print(format_result(result))

        if result is not None and args.plot:
            _show_plots(result, evaluator)
    except Exception as e:
        main_log.critical("An unhandled exception occurred: %s", e, exc_info=True)
        return 1

    main_log.info("%d evaluation(s) recorded in history.", len(history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
