"""
base.py
-------

Defines the abstract base class for drawable stroke primitives.
"""

from __future__ import annotations

__all__ = ["Primitive",]

import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from matplotlib.axes import Axes
from matplotlib.patches import Patch

LOGGER_NAME = "texstroke"


class Primitive(ABC):
    """
    Abstract base class for drawable primitives.

    A primitive first resolves its geometry into plain metadata
    (`make_geometry`) and then renders that metadata onto a Matplotlib axis
    (`draw`). Metadata stays JSON-serializable so runs can be logged and
    replayed.
    """

    __slots__ = ("_meta", "_ax", "patches",)

    def __init__(self, ax: Optional[Axes] = None) -> None:
        """
        Args:
            ax (matplotlib.axes.Axes, optional): Target Matplotlib axis.
        """
        self._ax: Optional[Axes] = None
        if ax is not None:
            self.ax = ax
        self.reset()

    def reset(self) -> None:
        logging.getLogger(LOGGER_NAME).debug(f"Running {self.__class__.__name__} reset().")
        self.patches: list[Patch] = []
        self._meta: Dict[str, Any] = {}

    # ---------------------------------------------------------------------------
    # Metadata accessors
    # ---------------------------------------------------------------------------
    def iter_patches(self):
        yield from self.patches

    @property
    def ax(self) -> Optional[Axes]: return self._ax

    @ax.setter
    def ax(self, ax: Axes) -> None:
        if not isinstance(ax, Axes):
            raise TypeError(f"ax must be a Matplotlib Axes, not {type(ax).__name__}")
        self._ax = ax

    @property
    def meta(self) -> Dict[str, Any]:
        """Deep copy of the primitive's current metadata (safe to mutate)."""
        return copy.deepcopy(self._meta)

    @property
    def json(self) -> str:
        """JSON-encoded metadata string (sorted, compact)."""
        return json.dumps(self._meta, sort_keys=True, separators=(",", ":"), default=str)

    @property
    def jsonpp(self) -> str:
        """Return pretty-printed JSON (good for debugging / logs)."""
        return json.dumps(self._meta, sort_keys=True, indent=4, default=str)

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @abstractmethod
    def make_geometry(self, *args, **kwargs) -> Primitive:
        """Generate metadata describing the primitive's geometry."""
        raise NotImplementedError

    @abstractmethod
    def draw(self) -> None:
        """Render the primitive onto the Matplotlib axis."""
        raise NotImplementedError

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        """Readable summary showing available metadata keys."""
        return f"<{self.__class__.__name__} keys={sorted(self._meta.keys())}>"

    def __str__(self) -> str:
        """
        Return a detailed, human-readable string representation.

        Example output:
            TexturedStroke(id=0x1f2c4fa2):
            {
                "dots": [...],
                "n_dots": 10,
                ...
            }
        """
        return f"{self.__class__.__name__}(id={hex(id(self))}):\n{self.jsonpp}"
