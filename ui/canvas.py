"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: array values + Highlight → SVG string.

The renderer consumes:
  • values     – the array snapshot carried by a Frame
  • highlight  – the Frame's Highlight (or None for a plain redraw)
  • config     – visual config (canvas size, colors, fonts, …)

Design decisions:
  - NO mutation.  Stateless; the caller passes everything in.
  - Colour precedence per bar: swapping > comparing > sorted region,
    and CustomColors overrides all of them.
  - Bar height is proportional to value / max(values) so any value range
    fills the canvas.
"""

from typing import Dict, Optional, Sequence

from algorithms.step import (
    Comparing,
    CustomColors,
    Frame,
    Highlight,
    SortedFrom,
    SortedUpTo,
    Swapping,
)


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"
    padding: int = 12

    # bar colors (role → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#10b981",   # emerald
        "comparing": "#f59e0b",   # amber
        "swapping":  "#ef4444",   # red
        "sorted":    "#06b6d4",   # teal
    }

    bar_gap:           float = 2.0
    label_color:       str   = "#e6edf3"
    label_size:        int   = 11
    label_max_bars:    int   = 40     # hide value labels on denser arrays
    empty_text_color:  str   = "#7d8590"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[float],
    highlight: Optional[Highlight] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values    : Array snapshot to draw, one bar per element.
        highlight : What to colour for this step (or None).
        config    : Visual config.
    """
    w, h, pad = config.width, config.height, config.padding
    svg_parts = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{w}" height="{h}" fill="{config.bg}"/>',
    ]

    n = len(values)
    if n == 0:
        svg_parts.append(
            f'<text x="{w / 2}" y="{h / 2}" text-anchor="middle" '
            f'fill="{config.empty_text_color}" font-size="14">Empty array</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    top = max(max(values), 1)
    slot = (w - 2 * pad) / n
    bar_w = max(1.0, slot - config.bar_gap)
    show_labels = n <= config.label_max_bars

    for i, value in enumerate(values):
        bar_h = max(1.0, (h - 2 * pad - 16) * (value / top))
        x = pad + i * slot
        y = h - pad - bar_h
        fill = bar_color(i, n, highlight, config)
        svg_parts.append(
            f'<rect class="bar" data-index="{i}" x="{x:.2f}" y="{y:.2f}" '
            f'width="{bar_w:.2f}" height="{bar_h:.2f}" rx="2" fill="{fill}"/>'
        )
        if show_labels:
            svg_parts.append(
                f'<text x="{x + bar_w / 2:.2f}" y="{y - 4:.2f}" text-anchor="middle" '
                f'font-size="{config.label_size}" fill="{config.label_color}">{_fmt(value)}</text>'
            )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def render_frame(frame: Frame, config: CanvasConfig = CONFIG) -> str:
    return render_bars(frame.values, frame.highlight, config)


# ---------------------------------------------------------------------------
# Colour resolution
# ---------------------------------------------------------------------------
def bar_color(i: int, n: int, highlight: Optional[Highlight], config: CanvasConfig = CONFIG) -> str:
    colors = config.bar_colors

    if isinstance(highlight, CustomColors):
        return highlight.colors.get(i, colors["default"])
    if isinstance(highlight, Swapping):
        if i in (highlight.first, highlight.second):
            return colors["swapping"]
        if _in_sorted(i, highlight.sorted_from, highlight.sorted_upto):
            return colors["sorted"]
        return colors["default"]
    if isinstance(highlight, Comparing):
        return colors["comparing"] if i in highlight.indices else colors["default"]
    if isinstance(highlight, SortedFrom):
        return colors["sorted"] if i >= highlight.index else colors["default"]
    if isinstance(highlight, SortedUpTo):
        return colors["sorted"] if i <= highlight.index else colors["default"]
    return colors["default"]


def _in_sorted(i: int, sorted_from: Optional[int], sorted_upto: Optional[int]) -> bool:
    if sorted_from is not None and i >= sorted_from:
        return True
    return sorted_upto is not None and i <= sorted_upto


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"
