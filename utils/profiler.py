"""
A simple context manager for timing an evaluation.

Measures the wall time of a code block and logs it to the 'profiler' logger,
warning when it exceeds the configured budget.
"""
import time
import logging

profiler_log = logging.getLogger('profiler')


class CodeProfiler:
    """
    A context manager to time the execution of a code block.

    Example:
        with CodeProfiler("Evaluation", warn_ms=5.0):
            evaluator.evaluate(inputs)

    Attributes:
        name (str): The name of the code block being timed.
        warn_ms (float): Latency above which a warning is logged.
        elapsed_ms (float): Measured duration, set on exit.
    """
    def __init__(self, name="", warn_ms=10.0):
        self.name = name
        self.warn_ms = float(warn_ms)
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000
        profiler_log.info("'%s' execution time: %.3f ms", self.name, self.elapsed_ms)
        if self.elapsed_ms > self.warn_ms:
            profiler_log.warning("'%s' exceeded %.1f ms.", self.name, self.warn_ms)
