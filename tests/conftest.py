"""
-------
conftest.py
-------
Shared pytest fixtures for texstroke tests.
"""

import logging

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt

from texstroke.geometry import Line
from texstroke.options import TexturedOptions
from texstroke.rng import RNG


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)


# -----------------------------------------------------------------------------
# RNG fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def seeded_rng() -> RNG:
  """Deterministic NumPy-backed RNG."""
  return RNG(seed=123)


@pytest.fixture
def std_rng() -> RNG:
  """Deterministic stdlib-backed RNG."""
  return RNG(seed=123, use_numpy=False)


# -----------------------------------------------------------------------------
# Stroke fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def horizontal_line() -> Line:
  """Line from (0, 0) to (10, 0)."""
  return Line((0.0, 0.0), (10.0, 0.0))


@pytest.fixture
def diagonal_line() -> Line:
  return Line((-3.0, 2.0), (9.0, 11.0))


@pytest.fixture
def seeded_options() -> TexturedOptions:
  return TexturedOptions(seed=42)


@pytest.fixture
def reset_texstroke_logger():
  """Drop handlers the CLI installs so log files are released after the test."""
  yield
  logger = logging.getLogger("texstroke")
  for h in list(logger.handlers):
    logger.removeHandler(h)
    h.close()
  logger.setLevel(logging.NOTSET)
