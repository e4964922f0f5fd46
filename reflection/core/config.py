"""Placement configuration fixed for the lifetime of the extension."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from reflection.core.position import Side, opposite
from reflection.log import get_logger

log = get_logger(name="config")

# Hot corners are removed unless set to TOP (host default) or BOTTOM.
HOT_CORNERS = Side.HIDDEN

# Status indicators keyed by panel role; only HIDDEN has an effect.
INDICATORS: Mapping[str, Side] = MappingProxyType({"a11y": Side.HIDDEN})

PANEL_SIDE = Side.BOTTOM

# Host tray animation time
ANIMATION_TIME_MS = 200
EASING = "easeOutQuad"


def _frozen_indicators(
    indicators: Mapping[str, Side] | None = None,
) -> Mapping[str, Side]:
    return MappingProxyType(dict(INDICATORS if indicators is None else indicators))


@dataclass(frozen=True)
class PlacementConfig:
    """Process-wide placement directives, built once at enable time."""

    # Hot corner handling: HIDDEN, TOP (untouched) or BOTTOM
    hot_corners: Side = HOT_CORNERS
    # Indicator role -> HIDDEN/SHOWN
    indicators: Mapping[str, Side] = field(default_factory=_frozen_indicators)
    # Duration of tray and notification transitions in ms
    animation_time_ms: int = ANIMATION_TIME_MS
    # Easing name handed to the host tween driver
    easing: str = EASING

    def __post_init__(self) -> None:
        # Indicators must not change after construction
        if not isinstance(self.indicators, MappingProxyType):
            object.__setattr__(
                self, "indicators", _frozen_indicators(self.indicators)
            )

    @property
    def panel_side(self) -> Side:
        return PANEL_SIDE

    @property
    def tray_side(self) -> Side:
        """The tray sits on the edge opposite the panel."""
        return opposite(PANEL_SIDE)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PlacementConfig:
        """Build a config from plain values, falling back to defaults.

        Unknown keys are ignored. Unknown side names fall back to the
        built-in default for that entry and are logged.
        """
        kwargs: dict[str, Any] = {}

        if "hot_corners" in data:
            kwargs["hot_corners"] = _parse_side(
                data["hot_corners"], default=HOT_CORNERS, what="hot_corners"
            )

        if "indicators" in data:
            indicators: dict[str, Side] = {}
            for role, value in dict(data["indicators"]).items():
                indicators[str(role)] = _parse_side(
                    value, default=Side.SHOWN, what=f"indicator {role!r}"
                )
            kwargs["indicators"] = indicators

        if "animation_time_ms" in data:
            try:
                duration = int(data["animation_time_ms"])
            except (TypeError, ValueError):
                log.warning(
                    "Invalid animation_time_ms %r, using %d",
                    data["animation_time_ms"],
                    ANIMATION_TIME_MS,
                )
            else:
                kwargs["animation_time_ms"] = max(0, duration)

        if "easing" in data and data["easing"]:
            kwargs["easing"] = str(data["easing"])

        return cls(**kwargs)


def _parse_side(value: Any, default: Side, what: str) -> Side:
    if isinstance(value, Side):
        return value
    try:
        return Side(str(value).lower())
    except ValueError:
        log.warning("Unknown side %r for %s, using %s", value, what, default.value)
        return default
