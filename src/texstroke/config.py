"""
config.py - Configuration dataclass for rendering textured strokes to files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings for the command-line renderer."""
    logger_level: int = logging.INFO
    img_size: Tuple[int, int] = (800, 400)
    dpi: int = 100
    output_dir: Path = Path("./out")
    log_dir: Optional[Path] = Path("./logs")
    # Extra room around the envelope, as a fraction of its larger side.
    margin: float = 0.1

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.log_dir is not None:
            object.__setattr__(self, "log_dir", Path(self.log_dir))
        self.output_dir.mkdir(parents=True, exist_ok=True)
