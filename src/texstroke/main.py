"""
main.py - Command-line entry point: render one textured stroke to an image.

Example:
    texstroke --start 0 0 --end 10 0 --width 2 --seed 42 --output out/stroke.png

Writes the image and a JSON sidecar (`stroke.json`) with the composed dots.
"""

import sys
import json
import logging
import argparse
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt

from .color import Color
from .config import RenderConfig
from .distribution import DotsDistribution
from .geometry import Line
from .logging_utils import configure_logging
from .options import TexturedOptions
from .stroke import TexturedStroke

LOGGER_NAME = "texstroke"


def build_parser() -> argparse.ArgumentParser:
    defaults = TexturedOptions()
    parser = argparse.ArgumentParser(
        prog="texstroke",
        description="Render a textured (chalk-like) stroke along a line segment.",
    )
    parser.add_argument("--start", nargs=2, type=float, default=(0.0, 0.0), metavar=("X", "Y"))
    parser.add_argument("--end", nargs=2, type=float, default=(10.0, 0.0), metavar=("X", "Y"))
    parser.add_argument("--width", type=float, default=defaults.width, help="stroke width")
    parser.add_argument("--density", type=float, default=defaults.density,
                        help="dots per 10x10 area")
    parser.add_argument("--radii", nargs=2, type=float, default=defaults.radii,
                        metavar=("RX", "RY"), help="base dot radii")
    parser.add_argument("--distribution", default=defaults.distribution.value,
                        choices=[d.value for d in DotsDistribution],
                        help="spread of the dots across the stroke width")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible stroke")
    color = parser.add_mutually_exclusive_group()
    color.add_argument("--color", default="black", help="fill color (name, hex)")
    color.add_argument("--no-fill", action="store_true", help="render dots without fill")
    parser.add_argument("--output", type=Path, default=None,
                        help="image path (format from suffix); defaults to out/stroke.png")
    parser.add_argument("--size", nargs=2, type=int, default=RenderConfig.img_size,
                        metavar=("W", "H"), help="image size in pixels")
    parser.add_argument("--dpi", type=int, default=RenderConfig.dpi)
    parser.add_argument("--log-dir", type=Path, default=RenderConfig.log_dir)
    parser.add_argument("--no-log-file", action="store_true", help="log to the console only")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> TexturedOptions:
    try:
        stroke_color = None if args.no_fill else Color.parse(args.color)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return TexturedOptions(
        seed=args.seed,
        width=args.width,
        stroke_color=stroke_color,
        density=args.density,
        radii=tuple(args.radii),
        distribution=DotsDistribution.parse(args.distribution),
    )


def render_stroke(stroke: TexturedStroke, output_path: Path, config: RenderConfig) -> Tuple[Path, Path]:
    """Draw a composed stroke on an off-screen figure; save image + JSON sidecar."""
    logger = logging.getLogger(LOGGER_NAME)
    meta = stroke.meta
    line = Line(tuple(meta["line"]["start"]), tuple(meta["line"]["end"]))
    envelope = line.to_envelope(meta["width"])

    width_in = config.img_size[0] / config.dpi
    height_in = config.img_size[1] / config.dpi
    fig, ax = plt.subplots(figsize=(width_in, height_in), frameon=False)
    try:
        ax.set_aspect("equal")
        ax.axis("off")
        corners = envelope.corners()
        x_min, y_min = corners.min(axis=0)
        x_max, y_max = corners.max(axis=0)
        pad = (max(meta["options"]["radii"]) * 1.25
               + config.margin * max(x_max - x_min, y_max - y_min))
        ax.set_xlim(x_min - pad, x_max + pad)
        ax.set_ylim(y_min - pad, y_max + pad)

        stroke.ax = ax
        stroke.draw()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=config.dpi, bbox_inches=None, pad_inches=0)
    finally:
        plt.close(fig)

    meta_path = output_path.with_suffix(".json")
    with open(meta_path, "w", encoding="utf-8") as f:
        json.dump(meta, f, indent=2, ensure_ascii=False)

    logger.info(f"Image written: {output_path}")
    logger.info(f"Metadata written: {meta_path}")
    return output_path, meta_path


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, compose the stroke and render it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = options_from_args(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    output_path = args.output or RenderConfig.output_dir / "stroke.png"
    config = RenderConfig(
        logger_level=logging.DEBUG if args.verbose else logging.INFO,
        img_size=tuple(args.size),
        dpi=args.dpi,
        output_dir=Path(output_path).parent,
        log_dir=None if args.no_log_file else args.log_dir,
    )
    log_path = configure_logging(
        level=config.logger_level,
        log_dir=config.log_dir,
        name=LOGGER_NAME,
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"RenderConfig: {asdict(config)}")
    logger.debug(f"TexturedOptions: {options.to_json()}")
    if log_path is not None:
        logger.info(f"Logs written to: {log_path}")

    try:
        stroke = TexturedStroke().make_geometry(
            Line(tuple(args.start), tuple(args.end)), options.width, options
        )
        render_stroke(stroke, output_path, config)
    except Exception as e:
        logger.critical(f"Rendering aborted due to fatal error: {e}")
        raise SystemExit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
