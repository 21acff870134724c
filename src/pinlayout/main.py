"""Main entry point for pinlayout."""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from .core.view import View
from .engine import LayoutEngine
from .errors import PinLayoutError
from .layout import LayoutLoader

logger = logging.getLogger(__name__)

# Outline colors cycled by view depth
DEPTH_COLORS = [
    (40, 40, 40),
    (31, 119, 180),
    (214, 39, 40),
    (44, 160, 44),
    (148, 103, 189),
    (255, 127, 14),
]


def _get_layouts_dir() -> Path:
    """Get the bundled example layouts directory (shipped as package data)."""
    return Path(__file__).parent / "layouts"


def available_layouts() -> dict[str, Path]:
    """Bundled example layouts by name."""
    layouts_dir = _get_layouts_dir()
    if not layouts_dir.is_dir():
        logger.warning("Bundled layouts directory %s is missing", layouts_dir)
        return {}
    return {path.stem: path for path in sorted(layouts_dir.glob("*.yaml"))}


def resolve_layout_path(layout: str) -> Path:
    """Resolve a layout argument to a file: either a path or a bundled name."""
    path = Path(layout)
    if path.is_file():
        return path
    layouts = available_layouts()
    if layout in layouts:
        return layouts[layout]
    raise FileNotFoundError(
        f"Layout '{layout}' is neither a file nor one of: {', '.join(layouts) or 'none'}"
    )


def absolute_frames(root: View) -> dict[str, np.ndarray]:
    """Frames of every view in root coordinates, as [x, y, width, height]."""
    frames: dict[str, np.ndarray] = {}
    offsets = {id(root): np.zeros(2)}
    for view in root.iter_views():
        offset = offsets[id(view)]
        frame = view.frame.to_array()
        frame[:2] += offset
        frames[view.name] = frame
        for subview in view.subviews:
            offsets[id(subview)] = frame[:2]
    return frames


def format_tree(root: View) -> str:
    """Indented listing of the hierarchy with frames in superview coordinates."""
    lines = []
    for view in root.iter_views():
        indent = "  " * view.depth
        x, y, w, h = np.round(view.frame.to_array(), 6) + 0.0
        lines.append(f"{indent}- {view.name} ({x:g}, {y:g}, {w:g}, {h:g})")
    return "\n".join(lines)


def render_frames(root: View, width: int, height: int) -> Image.Image:
    """Draw every view's frame as an outlined rectangle.

    The hierarchy is scaled uniformly to fit the image.
    """
    frames = absolute_frames(root)
    bounds = frames[root.name]
    span = np.maximum(bounds[2:], 1.0)
    scale = float(min((width - 1) / span[0], (height - 1) / span[1]))

    image = Image.new("RGB", (width, height), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    for view in root.iter_views():
        x, y, w, h = frames[view.name]
        left = (x - bounds[0]) * scale
        top = (y - bounds[1]) * scale
        box = [left, top, left + max(w, 0.0) * scale, top + max(h, 0.0) * scale]
        color = DEPTH_COLORS[view.depth % len(DEPTH_COLORS)]
        draw.rectangle(box, outline=color, width=2)
        draw.text((box[0] + 4, box[1] + 2), view.name, fill=color)
    return image


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pinlayout - lay out a YAML view hierarchy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "layout",
        help=f"Layout YAML file or bundled layout name ({', '.join(available_layouts())})",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the solved frames to an image file",
    )
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        default="640x960",
        help="Render resolution (default: 640x960)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run pinlayout."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        root = LayoutLoader().load(resolve_layout_path(args.layout))
        LayoutEngine().layout(root)
    except (FileNotFoundError, PinLayoutError) as exc:
        logger.error("%s", exc)
        return 1

    print(format_tree(root))

    if args.render:
        width, height = map(int, args.resolution.split("x"))
        output_path = Path(args.render)
        render_frames(root, width, height).save(str(output_path))
        print(f"Saved render to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
