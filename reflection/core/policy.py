"""Layout policy -- where the panel, tray, and hot corners go.

Everything here is a pure function of the monitor geometry and the
placement config. Host mutation lives in reflection.shell.

Coordinate convention (stage coordinates, y grows downward):

    monitor.y ─────────┬──────────────────────────┐
                       │ tray (clip: full height) │  <- pinned to top
                       ├──────────────────────────┤
                       │                          │
                       │                          │
                       ├──────────────────────────┤
                       │ panel                    │  <- pinned to bottom
    monitor.y + h ─────┴──────────────────────────┘

Bars hide behind their edge but keep one pixel on screen (the seam), so
there is no rendering gap at the monitor edge while hidden. A 28px tray
at the top therefore hides at y = -27. Notifications fade out and hide
by their full extent instead.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from reflection.core.animation import (
    OPACITY_HIDDEN,
    OPACITY_SHOWN,
    AnimationVector,
    RegionKind,
    RegionState,
)
from reflection.core.config import PlacementConfig
from reflection.core.errors import UnsupportedPlacement
from reflection.core.geometry import (
    MonitorRect,
    Point,
    Rect,
    RegionLayout,
    Size,
    validate_extent,
    validate_monitor,
)
from reflection.core.position import Side, is_edge, is_horizontal

SEAM_PX = 1

# Far outside any realistic stage (16-bit signed coordinate limit)
PARKED_COORD = -32768

CONSOLE_WIDTH_RATIO = 0.7
CONSOLE_HEIGHT_RATIO = 0.7
CONSOLE_AVAILABLE_RATIO = 0.9


class CornerAction(enum.Enum):
    """What the adapter must do with the host's hot corner triggers."""

    RETAIN = "retain"  # leave the host default alone
    MOVE = "move"  # reposition to (x, y)
    DISABLED = "disabled"  # destroy; must be recreated to come back
    PARKED = "parked"  # move off-canvas; reversible


class HotCornerPlacement(NamedTuple):
    action: CornerAction
    x: int | None = None
    y: int | None = None


def is_indicator_suppressed(name: str, config: PlacementConfig) -> bool:
    """True iff the indicator role is configured HIDDEN."""
    return config.indicators.get(name) == Side.HIDDEN


def menu_arrow_side(panel_side: Side) -> Side:
    """Popup menus point their arrow at the panel they open from."""
    if not is_edge(panel_side):
        raise UnsupportedPlacement(f"panel side {panel_side.value!r} is not an edge")
    return panel_side


def summary_arrow_side(tray_side: Side) -> Side:
    """Summary item menus point their arrow at the tray."""
    if not is_edge(tray_side):
        raise UnsupportedPlacement(f"tray side {tray_side.value!r} is not an edge")
    return tray_side


def compute_banner_offset(
    notification_height: int, tray_height: int, expanded: bool
) -> int:
    """Y of a notification inside the tray.

    Collapsed banners align their bottom with the tray bottom, so the
    part taller than the bar sits above it (inside the tray clip).
    Expanded notifications rest at the tray origin.
    """
    validate_extent(name="notification height", value=notification_height)
    validate_extent(name="tray height", value=tray_height)
    if expanded:
        return 0
    return tray_height - notification_height


def compute_console_region(
    monitor: MonitorRect, keyboard_height: int = 0
) -> RegionLayout:
    """Geometry of the debug console, centred and anchored at the top.

    The console stays at the top edge because the panel no longer lives
    there. Its height leaves room for an on-screen keyboard.
    """
    validate_monitor(monitor=monitor)
    validate_extent(name="keyboard height", value=keyboard_height)
    width = int(monitor.width * CONSOLE_WIDTH_RATIO)
    available = max(0, monitor.height - keyboard_height)
    height = int(
        min(
            monitor.height * CONSOLE_HEIGHT_RATIO,
            available * CONSOLE_AVAILABLE_RATIO,
        )
    )
    x = monitor.x + (monitor.width - width) // 2
    return RegionLayout(position=Point(x, monitor.y), size=Size(width, height))


def resolve_hot_corner_placement(mode: Side, monitor: MonitorRect) -> HotCornerPlacement:
    """Decide what happens to the hot corners for *mode*.

    Only the primary monitor is handled; hot corners on other monitors
    keep the host default.
    """
    if mode == Side.HIDDEN:
        return HotCornerPlacement(CornerAction.DISABLED)
    if mode == Side.TOP:
        return HotCornerPlacement(CornerAction.RETAIN)
    if mode == Side.BOTTOM:
        validate_monitor(monitor=monitor)
        return HotCornerPlacement(
            CornerAction.MOVE, monitor.x, monitor.y + monitor.height - 1
        )
    raise UnsupportedPlacement(f"hot corners cannot be placed at {mode.value!r}")


def park_hot_corner() -> HotCornerPlacement:
    """Off-canvas placement for hosts that cannot recreate corners."""
    return HotCornerPlacement(CornerAction.PARKED, PARKED_COORD, PARKED_COORD)


class LayoutPolicy:
    """Computes region layouts and animation vectors for one config."""

    def __init__(self, config: PlacementConfig | None = None) -> None:
        self.config = config or PlacementConfig()

    def compute_panel_region(
        self, monitor: MonitorRect, panel_height: int
    ) -> RegionLayout:
        """Full-width panel whose bottom edge is the monitor bottom."""
        validate_monitor(monitor=monitor)
        validate_extent(name="panel height", value=panel_height)
        return RegionLayout(
            position=Point(monitor.x, monitor.y + monitor.height - panel_height),
            size=Size(monitor.width, panel_height),
        )

    def compute_tray_region(
        self, monitor: MonitorRect, tray_height: int
    ) -> RegionLayout:
        """Full-width tray pinned to the monitor top.

        The clip spans the whole monitor height below the tray origin so
        notifications taller than the bar stay visible while animating,
        and nothing above the monitor top leaks through.
        """
        validate_monitor(monitor=monitor)
        validate_extent(name="tray height", value=tray_height)
        return RegionLayout(
            position=Point(monitor.x, monitor.y),
            size=Size(monitor.width, tray_height),
            clip=Rect(0, 0, monitor.width, monitor.height),
        )

    def compute_show_vector(
        self,
        region: RegionLayout,
        monitor: MonitorRect,
        side: Side,
        kind: RegionKind = RegionKind.BAR,
    ) -> AnimationVector:
        """Vector that slides *region* in from behind *side*."""
        return self._vector(
            region=region,
            monitor=monitor,
            side=side,
            kind=kind,
            direction=RegionState.SHOWING,
        )

    def compute_hide_vector(
        self,
        region: RegionLayout,
        monitor: MonitorRect,
        side: Side,
        kind: RegionKind = RegionKind.BAR,
    ) -> AnimationVector:
        """Vector that slides *region* out behind *side*."""
        return self._vector(
            region=region,
            monitor=monitor,
            side=side,
            kind=kind,
            direction=RegionState.HIDING,
        )

    def resolve_hot_corner_placement(self, monitor: MonitorRect) -> HotCornerPlacement:
        return resolve_hot_corner_placement(mode=self.config.hot_corners, monitor=monitor)

    def is_indicator_suppressed(self, name: str) -> bool:
        return is_indicator_suppressed(name=name, config=self.config)

    def _vector(
        self,
        region: RegionLayout,
        monitor: MonitorRect,
        side: Side,
        kind: RegionKind,
        direction: RegionState,
    ) -> AnimationVector:
        validate_monitor(monitor=monitor)
        if not is_edge(side):
            raise UnsupportedPlacement(
                f"cannot animate a region toward {side.value!r}"
            )

        horizontal = is_horizontal(side)
        axis = "y" if horizontal else "x"
        extent = region.height if horizontal else region.width
        validate_extent(name="region extent", value=extent)

        # Bars keep a one pixel seam on screen; notifications leave fully
        seam = min(SEAM_PX, extent) if kind == RegionKind.BAR else 0

        if side == Side.TOP:
            shown = monitor.y
            hidden = monitor.y - extent + seam
        elif side == Side.BOTTOM:
            shown = monitor.y + monitor.height - extent
            hidden = monitor.y + monitor.height - seam
        elif side == Side.LEFT:
            shown = monitor.x
            hidden = monitor.x - extent + seam
        else:  # RIGHT
            shown = monitor.x + monitor.width - extent
            hidden = monitor.x + monitor.width - seam

        opacity = None
        if kind == RegionKind.NOTIFICATION:
            opacity = (
                OPACITY_SHOWN if direction == RegionState.SHOWING else OPACITY_HIDDEN
            )

        return AnimationVector(
            axis=axis,
            shown_value=shown,
            hidden_value=hidden,
            duration_ms=self.config.animation_time_ms,
            easing=self.config.easing,
            direction=direction,
            opacity=opacity,
        )
