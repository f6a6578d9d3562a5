"""
test_geometry.py
----------------

Line, envelope and affine helper tests.
"""

import math

import numpy as np
import pytest

from texstroke.geometry import Envelope, Line, affine_matrix, apply_affine


# ---------------------------------------------------------------------
# Affine helpers
# ---------------------------------------------------------------------
def test_affine_matrix_identity():
  assert np.allclose(affine_matrix(1.0, 0.0, 0.0, 0.0), np.eye(3))


def test_affine_matrix_rotates_then_translates():
  mat = affine_matrix(1.0, math.pi / 2, 3.0, -1.0)
  out = apply_affine([(1.0, 0.0), (0.0, 2.0)], mat)
  assert out == pytest.approx(np.array([[3.0, 0.0], [1.0, -1.0]]))


def test_affine_matrix_scale():
  out = apply_affine((1.0, 1.0), affine_matrix(2.0, 0.0, 0.0, 0.0))
  assert out.shape == (1, 2)
  assert out[0] == pytest.approx([2.0, 2.0])


# ---------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------
def test_line_derived_values(diagonal_line):
  assert diagonal_line.vec == (12.0, 9.0)
  assert diagonal_line.length == pytest.approx(15.0)
  assert diagonal_line.midpoint == (3.0, 6.5)
  assert diagonal_line.angle == pytest.approx(math.atan2(9.0, 12.0))


def test_line_coerces_points_to_float_tuples():
  line = Line([1, 2], np.array([3, 4]))
  assert line.start == (1.0, 2.0)
  assert line.end == (3.0, 4.0)
  assert all(isinstance(v, float) for v in line.start + line.end)


def test_zero_length_line_has_zero_angle():
  line = Line((2.0, 2.0), (2.0, 2.0))
  assert line.length == 0.0
  assert line.angle == 0.0


def test_line_to_dict():
  assert Line((0, 1), (2, 3)).to_dict() == {"start": [0.0, 1.0], "end": [2.0, 3.0]}


# ---------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------
def test_envelope_extents_and_area(horizontal_line):
  rect = horizontal_line.to_envelope(2.0)
  assert rect.half_extents == (5.0, 1.0)
  assert rect.area == pytest.approx(20.0)
  assert rect.center == (5.0, 0.0)
  assert rect.angle == 0.0


def test_envelope_maps_local_axis_onto_line(diagonal_line):
  rect = diagonal_line.to_envelope(3.0)
  hx, _ = rect.half_extents
  world = rect.to_world([(0.0, 0.0), (-hx, 0.0), (hx, 0.0)])
  assert world[0] == pytest.approx(diagonal_line.midpoint)
  assert world[1] == pytest.approx(diagonal_line.start)
  assert world[2] == pytest.approx(diagonal_line.end)


def test_envelope_cross_axis_is_perpendicular(diagonal_line):
  rect = diagonal_line.to_envelope(4.0)
  p = rect.to_world((0.0, 2.0))[0] - np.array(diagonal_line.midpoint)
  assert np.dot(p, diagonal_line.vec) == pytest.approx(0.0, abs=1e-9)
  assert np.hypot(*p) == pytest.approx(2.0)


def test_envelope_inverse_round_trip(diagonal_line):
  rect = diagonal_line.to_envelope(1.5)
  pts = np.array([[0.3, -0.7], [-7.5, 0.75], [7.4, -0.74]])
  assert rect.to_local(rect.to_world(pts)) == pytest.approx(pts)
  assert rect.inverse_transform @ rect.transform == pytest.approx(np.eye(3))


def test_envelope_corners_span_the_rectangle(horizontal_line):
  corners = horizontal_line.to_envelope(2.0).corners()
  assert corners == pytest.approx(np.array([[0, -1], [10, -1], [10, 1], [0, 1]], dtype=float))


def test_degenerate_envelope_has_zero_area():
  assert Line((1, 1), (1, 1)).to_envelope(5.0).area == 0.0
  assert Line((0, 0), (4, 0)).to_envelope(0.0).area == 0.0


def test_default_envelope_is_axis_aligned_at_origin():
  rect = Envelope(half_extents=(1.0, 2.0))
  assert np.allclose(rect.transform, np.eye(3))
