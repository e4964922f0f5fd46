"""Placement sides and helpers."""

from __future__ import annotations

import enum


class Side(str, enum.Enum):
    """Placement directive for a region, corner, or indicator.

    HIDDEN/SHOWN are visibility directives; the four edges are anchors.
    Only edges can position a region.
    """

    HIDDEN = "hidden"
    SHOWN = "shown"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


_OPPOSITE = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}


def is_edge(side: Side) -> bool:
    """True for the four screen edges."""
    return side in _OPPOSITE


def is_horizontal(side: Side) -> bool:
    """True for top/bottom (region spans the monitor width)."""
    return side in (Side.TOP, Side.BOTTOM)


def opposite(side: Side) -> Side:
    """Edge across the monitor from *side*; ValueError for non-edges."""
    try:
        return _OPPOSITE[side]
    except KeyError:
        raise ValueError(f"{side!r} has no opposite edge") from None
