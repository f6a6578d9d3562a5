from .rng import RNG
from .color import Color
from .geometry import Line, Envelope
from .distribution import DotsDistribution
from .options import TexturedOptions
from .textured import NO_FILL, Dot, DotGroup, compose_line, dot_count
from .stroke import TexturedStroke

__version__ = "0.1.0"

__all__ = [
    "RNG",
    "Color",
    "Line",
    "Envelope",
    "DotsDistribution",
    "TexturedOptions",
    "NO_FILL",
    "Dot",
    "DotGroup",
    "compose_line",
    "dot_count",
    "TexturedStroke",
]
