import json

import pytest
from matplotlib.patches import Ellipse

from texstroke.base import Primitive
from texstroke.color import Color
from texstroke.geometry import Line
from texstroke.options import TexturedOptions
from texstroke.stroke import TexturedStroke


@pytest.fixture
def stroke_instance(fig_ax):
  _, ax = fig_ax
  return TexturedStroke(ax)


# A. Metadata structure

def test_make_geometry_structure(stroke_instance, horizontal_line, seeded_options):
  stroke = stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options)
  assert stroke is stroke_instance
  meta = stroke.meta
  assert set(meta) == {"line", "width", "options", "n_dots", "dots"}
  assert meta["n_dots"] == 10 == len(meta["dots"]) == len(stroke.group)
  assert meta["line"] == {"start": [0.0, 0.0], "end": [10.0, 0.0]}
  assert meta["options"] == seeded_options.to_dict()
  assert set(meta["dots"][0]) == {"cx", "cy", "rx", "ry", "rotation", "rotation_deg", "fill"}


def test_meta_is_a_copy(stroke_instance, horizontal_line, seeded_options):
  stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options)
  meta = stroke_instance.meta
  meta["dots"].clear()
  assert stroke_instance.meta["n_dots"] == len(stroke_instance.meta["dots"])


def test_json_and_str(stroke_instance, horizontal_line, seeded_options):
  stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options)
  assert json.loads(stroke_instance.json) == stroke_instance.meta
  assert str(stroke_instance).startswith("TexturedStroke(id=0x")
  assert "n_dots" in repr(stroke_instance)


def test_width_defaults_to_options_width(stroke_instance, horizontal_line):
  stroke_instance.make_geometry(horizontal_line, options=TexturedOptions(seed=1, width=4.0))
  assert stroke_instance.meta["width"] == 4.0
  assert stroke_instance.meta["n_dots"] == 20


def test_line_accepts_point_pairs(stroke_instance):
  stroke_instance.make_geometry(((0, 0), (10, 0)), 2.0, TexturedOptions(seed=42))
  assert stroke_instance.meta["line"] == Line((0, 0), (10, 0)).to_dict()


def test_default_options(stroke_instance, horizontal_line):
  stroke_instance.make_geometry(horizontal_line)
  assert stroke_instance.meta["options"] == TexturedOptions().to_dict()
  assert stroke_instance.meta["width"] == 1.0


# B. Argument validation

@pytest.mark.parametrize("kwargs", [
    {"line": 5},
    {"line": ((0, 0),)},
    {"line": ((0, 0), (1, 1)), "options": {"seed": 1}},
    {"line": ((0, 0), (1, 1)), "width": "wide"},
])
def test_make_geometry_rejects_bad_types(stroke_instance, kwargs):
  with pytest.raises(TypeError):
    stroke_instance.make_geometry(**kwargs)


def test_ax_must_be_axes():
  with pytest.raises(TypeError):
    TexturedStroke(ax="not an axes")


def test_primitive_is_abstract():
  with pytest.raises(TypeError):
    Primitive()


# C. Drawing

def test_draw_adds_one_ellipse_per_dot(fig_ax, stroke_instance, horizontal_line, seeded_options):
  _, ax = fig_ax
  stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options).draw()
  ellipses = [p for p in ax.patches if isinstance(p, Ellipse)]
  assert len(ellipses) == 10
  assert list(stroke_instance.iter_patches()) == ellipses
  for patch, dot in zip(ellipses, stroke_instance.group):
    assert patch.center == pytest.approx(dot.center)
    assert patch.width == pytest.approx(2 * dot.rx)
    assert patch.height == pytest.approx(2 * dot.ry)
    assert patch.angle == pytest.approx(dot.rotation_deg)
    assert tuple(patch.get_facecolor()) == pytest.approx(Color.BLACK.to_rgba())


def test_draw_without_fill_is_transparent(stroke_instance, horizontal_line):
  stroke_instance.make_geometry(horizontal_line, 2.0, TexturedOptions(seed=1, stroke_color=None)).draw()
  assert stroke_instance.patches
  assert all(p.get_facecolor()[3] == 0.0 for p in stroke_instance.patches)


def test_draw_requires_axes(horizontal_line):
  stroke = TexturedStroke().make_geometry(horizontal_line, 2.0)
  with pytest.raises(TypeError):
    stroke.draw()


def test_draw_requires_geometry(stroke_instance):
  with pytest.raises(ValueError):
    stroke_instance.draw()


def test_make_geometry_resets_patches(fig_ax, stroke_instance, horizontal_line, seeded_options):
  stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options).draw()
  stroke_instance.make_geometry(horizontal_line, 2.0, seeded_options.with_(density=0.0))
  assert stroke_instance.patches == []
  assert len(stroke_instance.group) == 0
