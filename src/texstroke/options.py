"""
options.py
----------

Options describing how a textured stroke looks.

The serialized form is a flat mapping keyed by field name:

    {"seed": null, "width": 1.0, "stroke_color": {"r": 0, "g": 0, "b": 0, "a": 1},
     "density": 5.0, "radii": [2.0, 0.3], "distribution": "normal"}

Missing keys take the defaults below, so older documents keep loading.
"""

from __future__ import annotations

__all__ = ["TexturedOptions",]

import json
from dataclasses import dataclass, field, replace
from numbers import Integral
from typing import Any, ClassVar, Dict, Optional, Tuple

from .color import Color
from .distribution import DotsDistribution

_UNSET = object()


def _parse_seed(value: Any) -> Optional[int]:
    """Seeds are non-negative integers; integral floats are accepted."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (Integral, float)):
        raise ValueError(f"seed must be a non-negative integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"seed must be a non-negative integer, got {value!r}")
    seed = int(value)
    if seed < 0:
        raise ValueError(f"seed must be a non-negative integer, got {value!r}")
    return seed


def _parse_number(field: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{field} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class TexturedOptions:
    """Immutable texture parameters for one stroke.

    Attributes:
        seed:         Seed for reproducible strokes. None draws fresh entropy
                      on every compose call.
        width:        Stroke width.
        stroke_color: Dot fill color. None renders the dots without fill.
        density:      Amount of dots per 10x10 area.
        radii:        Base (x, y) radii of the dots.
        distribution: Spread of the dots across the stroke width.
    """
    WIDTH_DEFAULT: ClassVar[float] = 1.0
    DENSITY_DEFAULT: ClassVar[float] = 5.0
    RADII_DEFAULT: ClassVar[Tuple[float, float]] = (2.0, 0.3)
    COLOR_DEFAULT: ClassVar[Color] = Color.BLACK

    seed: Optional[int] = None
    width: float = WIDTH_DEFAULT
    stroke_color: Optional[Color] = COLOR_DEFAULT
    density: float = DENSITY_DEFAULT
    radii: Tuple[float, float] = RADII_DEFAULT
    distribution: DotsDistribution = field(default_factory=DotsDistribution.default)

    def __post_init__(self):
        object.__setattr__(self, "radii", (float(self.radii[0]), float(self.radii[1])))

    def with_(self, **changes: Any) -> TexturedOptions:
        """Copy with the given fields replaced."""
        return replace(self, **changes)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "stroke_color": self.stroke_color.to_dict() if self.stroke_color is not None else None,
            "density": self.density,
            "radii": list(self.radii),
            "distribution": self.distribution.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TexturedOptions:
        """Rebuild options from `to_dict()` output; absent keys use defaults.

        Raises:
            ValueError: malformed field values.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Unsupported options type: {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        if "seed" in data:
            kwargs["seed"] = _parse_seed(data["seed"])
        if "width" in data:
            kwargs["width"] = _parse_number("width", data["width"])
        color = data.get("stroke_color", _UNSET)
        if color is not _UNSET:
            if color is None:
                kwargs["stroke_color"] = None
            elif isinstance(color, dict):
                kwargs["stroke_color"] = Color.from_dict(color)
            else:
                kwargs["stroke_color"] = Color.parse(color)
        if "density" in data:
            kwargs["density"] = _parse_number("density", data["density"])
        if "radii" in data:
            radii = data["radii"]
            try:
                rx, ry = radii
                kwargs["radii"] = (float(rx), float(ry))
            except (TypeError, ValueError) as e:
                raise ValueError(f"radii must hold two numbers, got {radii!r}") from e
        if "distribution" in data:
            try:
                kwargs["distribution"] = DotsDistribution.parse(data["distribution"])
            except TypeError as e:
                raise ValueError(f"Invalid distribution: {data['distribution']!r}") from e
        return cls(**kwargs)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> TexturedOptions:
        return cls.from_dict(json.loads(text))
