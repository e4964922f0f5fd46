"""Animation vectors, region states and easing curves."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable


class RegionState(enum.Enum):
    HIDDEN = "hidden"
    SHOWING = "showing"
    SHOWN = "shown"
    HIDING = "hiding"


# Region lifecycle, owned by the host:
#
#   ┌────────┐  show   ┌─────────┐  done   ┌───────┐
#   │ HIDDEN │───────->│ SHOWING │───────->│ SHOWN │
#   └────────┘         └─────────┘         └───────┘
#       ^                                      │
#       │      done    ┌────────┐    hide      │
#       └──────────────│ HIDING │<─────────────┘
#                      └────────┘
#
# The policy only supplies vectors for SHOWING and HIDING.


class RegionKind(enum.Enum):
    """Bars slide by position only; notifications also fade."""

    BAR = "bar"
    NOTIFICATION = "notification"


OPACITY_SHOWN = 255
OPACITY_HIDDEN = 0


def linear(t: float) -> float:
    return t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out: fast start, decelerating."""
    return t * (2.0 - t)


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in: slow start, accelerating."""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out: fast start, decelerating."""
    return 1.0 - (1.0 - t) ** 3


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "easeOutQuad": ease_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
}


def get_easing(name: str) -> Callable[[float], float]:
    """Look up an easing curve by its tween name, linear if unknown."""
    return EASINGS.get(name, linear)


@dataclass(frozen=True)
class AnimationVector:
    """Start/end values for one SHOWING or HIDING transition.

    Values are absolute stage coordinates along *axis*. The vector does
    not depend on where the region currently is, so an interrupted
    transition can be restarted from any intermediate position.
    """

    axis: str
    shown_value: int
    hidden_value: int
    duration_ms: int
    easing: str
    direction: RegionState
    # Target opacity, None for position-only (bar) transitions
    opacity: int | None = None

    @property
    def target(self) -> int:
        if self.direction == RegionState.SHOWING:
            return self.shown_value
        return self.hidden_value

    @property
    def origin(self) -> int:
        if self.direction == RegionState.SHOWING:
            return self.hidden_value
        return self.shown_value

    @property
    def final_state(self) -> RegionState:
        if self.direction == RegionState.SHOWING:
            return RegionState.SHOWN
        return RegionState.HIDDEN

    def value_at(self, progress: float, start: float | None = None) -> float:
        """Interpolated position at *progress* (0..1) along the easing.

        *start* overrides the origin when resuming from an interrupted
        transition; the end point is always the target.
        """
        t = min(1.0, max(0.0, progress))
        begin = self.origin if start is None else start
        return begin + (self.target - begin) * get_easing(self.easing)(t)

    def opacity_at(self, progress: float, start: float | None = None) -> float | None:
        """Interpolated opacity at *progress*, None for position-only vectors."""
        if self.opacity is None:
            return None
        t = min(1.0, max(0.0, progress))
        if start is None:
            start = OPACITY_HIDDEN if self.direction == RegionState.SHOWING else OPACITY_SHOWN
        return start + (self.opacity - start) * get_easing(self.easing)(t)

    def tween_params(self) -> dict[str, object]:
        """Properties in the shape host tween drivers accept."""
        params: dict[str, object] = {
            self.axis: self.target,
            "time": self.duration_ms / 1000.0,
            "transition": self.easing,
        }
        if self.opacity is not None:
            params["opacity"] = self.opacity
        return params
