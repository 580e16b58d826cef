# test/conftest.py
import logging

import matplotlib

matplotlib.use("Agg")

import pytest

from fis.evaluator import StudentEvaluator
from utils.logger import LOGGER_NAMES


@pytest.fixture
def evaluator():
    return StudentEvaluator()


@pytest.fixture
def restore_loggers():
    """Undo setup_logging() so later tests see default propagation."""
    saved = {}
    for name in LOGGER_NAMES:
        log = logging.getLogger(name)
        saved[name] = (log.level, log.propagate, list(log.handlers))
    yield
    for name, (level, propagate, handlers) in saved.items():
        log = logging.getLogger(name)
        for h in list(log.handlers):
            if h not in handlers:
                log.removeHandler(h)
                h.close()
        log.setLevel(level)
        log.propagate = propagate
