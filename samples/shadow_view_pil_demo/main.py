"""Demo: ShadowViewPil rendering a card with a soft drop shadow.

Demonstrates:
- Drawing content with a PIL callback
- Changing shadow parameters between renders
- Re-rendering only the content while the shadow stays cached

Usage:
    python samples/shadow_view_pil_demo/main.py --radius 16 --color "#00000080"
"""

import argparse
import logging
from pathlib import Path

from PIL import ImageDraw

from shadowstag import ShadowViewPil

# Output directory (in project's tmp folder, which is gitignored)
OUTPUT_DIR = Path(__file__).parent.parent.parent / "tmp" / "shadow_view_pil_demo"


def draw_card(ctx: ImageDraw.ImageDraw, width: int, height: int) -> None:
    """Rounded white card with a title bar."""
    ctx.rounded_rectangle((0, 0, width - 1, height - 1), radius=12, fill=(255, 255, 255, 255))
    ctx.rounded_rectangle((0, 0, width - 1, 36), radius=12, fill=(52, 101, 164, 255))
    ctx.rectangle((0, 24, width - 1, 36), fill=(52, 101, 164, 255))
    ctx.text((12, 12), "ShadowStag", fill=(255, 255, 255, 255))


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a card with a drop shadow")
    parser.add_argument("--width", type=int, default=240)
    parser.add_argument("--height", type=int, default=160)
    parser.add_argument("--radius", type=float, default=16.0)
    parser.add_argument("--dx", type=float, default=8.0)
    parser.add_argument("--dy", type=float, default=10.0)
    parser.add_argument("--spread", type=float, default=0.0)
    parser.add_argument("--color", default="#00000080")
    parser.add_argument("--frames", type=int, default=3, help="Frames to render (shadow is computed once)")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    view = ShadowViewPil(args.width, args.height, draw=draw_card, background=(236, 236, 236, 255))
    view.compositor.update(
        radius=args.radius,
        offset_x=args.dx,
        offset_y=args.dy,
        spread=args.spread,
        color=args.color,
    )

    for i in range(args.frames):
        frame = view.render()
        path = OUTPUT_DIR / f"frame_{i:02d}.png"
        frame.save(path)
        print(f"Saved {path} ({frame.width}x{frame.height})")

    print(f"Shadow pipeline runs: {view.compositor.pipeline_runs}")
    view.close()


if __name__ == "__main__":
    main()
