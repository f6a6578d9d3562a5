"""
stroke.py
---------

Implements TexturedStroke - a textured line primitive drawn with Matplotlib.

Responsibilities:
  - Compose the dots of one stroke and keep them as metadata (make_geometry)
  - Draw the dots as Matplotlib ellipse patches (draw)
  - Support object reuse (reset() clears patches and metadata)
"""

from __future__ import annotations

__all__ = ["TexturedStroke",]

import logging
from typing import Optional, Sequence, Tuple, Union

from matplotlib.axes import Axes
from matplotlib.patches import Ellipse

from .base import Primitive
from .geometry import Line
from .options import TexturedOptions
from .textured import NO_FILL, DotGroup, compose_line

LOGGER_NAME = "texstroke"

LineLike = Union[Line, Tuple[Sequence[float], Sequence[float]]]


class TexturedStroke(Primitive):
    """
    Textured stroke primitive metadata and rendering class.

    Extends:
        Primitive

    Example:
        >>> stroke = TexturedStroke(ax).make_geometry(Line((0, 0), (10, 0)), 2.0)
        >>> stroke.draw()
    """

    __slots__ = ("_group",)

    def reset(self) -> None:
        super().reset()
        self._group: Optional[DotGroup] = None

    @property
    def group(self) -> Optional[DotGroup]:
        """Dots composed by the last make_geometry() call."""
        return self._group

    # -------------------------------------------------------------------------
    # Geometry synthesis
    # -------------------------------------------------------------------------
    def make_geometry(
        self,
        line: LineLike,
        width: Optional[float] = None,
        options: Optional[TexturedOptions] = None,
        ax: Optional[Axes] = None,
    ) -> TexturedStroke:
        """
        Compose the dots of a textured stroke and record them as metadata.

        Args:
            line (Line | ((x1, y1), (x2, y2))):
                Segment the stroke follows.
            width (float, optional):
                Stroke width. Defaults to `options.width`.
            options (TexturedOptions, optional):
                Texture parameters. Defaults to `TexturedOptions()`.
            ax (matplotlib.axes.Axes, optional):
                Replaces the target axis.

        Returns:
            TexturedStroke: self, so calls chain into draw().

        Raises:
            TypeError: unsupported argument types.
        """
        logger = logging.getLogger(LOGGER_NAME)
        if ax is not None:
            self.ax = ax

        if not isinstance(line, Line):
            try:
                start, end = line
                line = Line(tuple(start), tuple(end))
            except (TypeError, ValueError, IndexError):
                raise TypeError(f"Unsupported line type: {type(line).__name__}") from None

        if options is None:
            options = TexturedOptions()
        elif not isinstance(options, TexturedOptions):
            raise TypeError(f"Unsupported options type: {type(options).__name__}")

        if width is None:
            width = options.width
        elif not isinstance(width, (int, float)):
            raise TypeError(f"Unsupported width type: {type(width).__name__}")

        self.reset()
        self._group = compose_line(line, float(width), options)
        logger.info(f"Composed textured stroke: {len(self._group)} dots; "
                    f"distribution={options.distribution.value}; seed={options.seed}")

        self._meta = {
            "line": line.to_dict(),
            "width": float(width),
            "options": options.to_dict(),
            "n_dots": len(self._group),
            "dots": self._group.to_dicts(),
        }
        return self

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------
    def draw(self) -> None:
        """
        Render the composed dots onto the Matplotlib axis, one ellipse each.
        """
        if not isinstance(self._ax, Axes):
            raise TypeError("ax is not set.")
        if self._group is None:
            raise ValueError("make_geometry() must run before draw().")

        ax = self._ax
        for dot in self._group:
            facecolor = dot.fill.to_rgba() if dot.fill is not NO_FILL else "none"
            patch = Ellipse(
                dot.center,
                width=2.0 * dot.rx,
                height=2.0 * dot.ry,
                angle=dot.rotation_deg,
                facecolor=facecolor,
                edgecolor="none",
                linewidth=0.0,
            )
            ax.add_patch(patch)
            self.patches.append(patch)
