"""
color.py
--------

RGBA color value used for dot fills.
"""

from __future__ import annotations

__all__ = ["Color", "ColorSpec",]

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple, Union

import numpy as np
from matplotlib import colors

ColorSpec = Union[str, Tuple[float, ...], "Color"]


@dataclass(frozen=True)
class Color:
    """Immutable RGBA color, channels in [0, 1]."""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    BLACK: ClassVar[Color]

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, float(np.clip(getattr(self, name), 0.0, 1.0)))

    @classmethod
    def parse(cls, spec: ColorSpec) -> Color:
        """Build a Color from a CSS4/X11 name, hex string or RGB(A) tuple.

        Raises:
            ValueError: `spec` is not a color Matplotlib understands.
        """
        if isinstance(spec, Color):
            return spec
        if isinstance(spec, str):
            spec = spec.strip().lower()
        try:
            r, g, b, a = colors.to_rgba(spec)
        except ValueError as e:
            raise ValueError(f"Invalid color: {spec!r}") from e
        return cls(r, g, b, a)

    def to_rgba(self) -> Tuple[float, float, float, float]:
        """Matplotlib-compatible RGBA tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        """CSS `rgba()` string with 0-255 integer channels."""
        r, g, b = (int(round(c * 255.0)) for c in (self.r, self.g, self.b))
        return f"rgba({r}, {g}, {b}, {self.a:.3f})"

    def to_hex(self) -> str:
        return colors.to_hex(self.to_rgba(), keep_alpha=True)

    def to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Color:
        try:
            return cls(float(data["r"]), float(data["g"]), float(data["b"]), float(data.get("a", 1.0)))
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid color mapping: {data!r}") from e


Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
