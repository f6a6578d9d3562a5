"""
textured.py
-----------

Composes a textured (chalk-like) stroke for a line segment.

The stroke is a scatter of small rotated ellipses ("dots") inside the
oriented rectangle that a line of the given width covers. Dot positions along
the line are uniform; positions across it follow the configured
`DotsDistribution`. Rotations and radii get a small uniform jitter.

Output is structured primitive data (`DotGroup`); encoding it as markup or
drawing it is left to the caller (see `texstroke.stroke`).
"""

from __future__ import annotations

__all__ = ["NO_FILL", "Dot", "DotGroup", "compose_line", "dot_count",]

import math
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .color import Color
from .geometry import Line, apply_affine
from .options import TexturedOptions
from .rng import RNG

LOGGER_NAME = "texstroke"

# Dots per unit area for density 1.0 (density counts dots per 10x10 area).
DENSITY_SCALE = 0.1
# Rotation jitter and radius jitter factors per dot.
ROTATION_JITTER = math.pi / 8.0
RADIUS_JITTER = (0.8, 1.25)
# Fill marker for dots of a stroke without color.
NO_FILL: Optional[Color] = None


@dataclass(frozen=True)
class Dot:
    """One elliptical mark. `rotation` is in radians, counter-clockwise about (cx, cy)."""
    cx: float
    cy: float
    rx: float
    ry: float
    rotation: float
    fill: Optional[Color] = NO_FILL

    @property
    def center(self) -> Tuple[float, float]:
        return (self.cx, self.cy)

    @property
    def rotation_deg(self) -> float:
        return math.degrees(self.rotation)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cx": self.cx,
            "cy": self.cy,
            "rx": self.rx,
            "ry": self.ry,
            "rotation": self.rotation,
            "rotation_deg": self.rotation_deg,
            "fill": self.fill.to_css() if self.fill is not NO_FILL else None,
        }


@dataclass(frozen=True)
class DotGroup:
    """Ordered, immutable collection of dots in sampling order."""
    dots: Tuple[Dot, ...] = ()

    def __len__(self) -> int:
        return len(self.dots)

    def __iter__(self) -> Iterator[Dot]:
        return iter(self.dots)

    def __getitem__(self, idx: int) -> Dot:
        return self.dots[idx]

    def as_array(self) -> np.ndarray:
        """(N, 5) array of [cx, cy, rx, ry, rotation] rows."""
        if not self.dots:
            return np.empty((0, 5), dtype=np.float64)
        return np.array([(d.cx, d.cy, d.rx, d.ry, d.rotation) for d in self.dots], dtype=np.float64)

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [dot.to_dict() for dot in self.dots]


def _round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def dot_count(line: Line, width: float, density: float) -> int:
    """Number of dots a stroke of `width` along `line` gets at `density`."""
    area = line.to_envelope(width).area
    return _round_half_away(area * DENSITY_SCALE * density)


def compose_line(line: Line, width: float, options: TexturedOptions) -> DotGroup:
    """
    Scatter the dots of a textured stroke along `line`.

    Args:
        line:    Segment the stroke follows.
        width:   Stroke width; the envelope extends width/2 to each side.
        options: Texture parameters. `options.seed` makes the result
                 reproducible; without it each call draws fresh entropy.

    Returns:
        DotGroup: one dot per sample, in sampling order. Empty when the
        computed dot count is zero (density 0, zero width or zero-length line).

    Per dot, random draws happen in a fixed order: x (uniform), y (configured
    distribution), rotation jitter, x radius, y radius. The generator is
    NumPy's PCG64, so a seed reproduces the same group.
    """
    logger = logging.getLogger(LOGGER_NAME)
    rng = RNG(seed=options.seed, use_numpy=True)

    rect = line.to_envelope(width)
    hx, hy = rect.half_extents
    n_dots = _round_half_away(rect.area * DENSITY_SCALE * options.density)
    logger.debug(f"compose_line(): half_extents=({hx:.4g}, {hy:.4g}); n_dots={n_dots}; rng={rng!r}")
    if n_dots <= 0:
        return DotGroup()

    # Ranges for randomization
    range_x = (-hx, hx)
    range_y = (-hy, hy)
    range_rot = (-ROTATION_JITTER, ROTATION_JITTER)
    range_rx = (options.radii[0] * RADIUS_JITTER[0], options.radii[0] * RADIUS_JITTER[1])
    range_ry = (options.radii[1] * RADIUS_JITTER[0], options.radii[1] * RADIUS_JITTER[1])

    transform = rect.transform
    base_angle = line.angle
    fill = options.stroke_color if options.stroke_color is not None else NO_FILL
    distribution = options.distribution

    dots: List[Dot] = []
    for _ in range(n_dots):
        x_pos = rng.uniform(*range_x)
        y_pos = distribution.sample(rng, *range_y)
        cx, cy = apply_affine((x_pos, y_pos), transform)[0]
        rotation = base_angle + rng.uniform(*range_rot)
        rx = rng.uniform(*range_rx)
        ry = rng.uniform(*range_ry)
        dots.append(Dot(float(cx), float(cy), rx, ry, rotation, fill))

    return DotGroup(tuple(dots))
