"""Host shell interface -- the capabilities the adjustments rely on.

The host owns the widget tree, the tween driver, and the tray state
machine. Adjustments never reach into it directly; they receive an
object satisfying ShellApi and register override callbacks the host
invokes after its own default behaviour.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence

from reflection.core.geometry import MonitorRect, Rect, Size
from reflection.core.position import Side

# Region names
PANEL = "panel"
TRAY = "tray"
NOTIFICATION = "notification"
CONSOLE = "console"
KEYBOARD = "keyboard"

# Signals
MONITORS_CHANGED = "monitors-changed"
STATUS_ICON_ADDED = "status-icon-added"

# Override hooks the host calls after its default implementation
RELAYOUT = "relayout"
UPDATE_HOT_CORNERS = "update_hot_corners"
SHOW_TRAY = "show_tray"
HIDE_TRAY = "hide_tray"
SHOW_NOTIFICATION = "show_notification"
HIDE_NOTIFICATION = "hide_notification"
EXPAND_NOTIFICATION = "expand_notification"
RESIZE_CONSOLE = "resize_console"

# State fields a tween sets to the final RegionState on completion
TRAY_STATE = "tray_state"
NOTIFICATION_STATE = "notification_state"


class ShellApi(Protocol):
    """Subset of the host shell the customizations talk to."""

    # Whether destroyed hot corners come back on the next relayout
    supports_hot_corner_recreate: bool

    # Monitor queries, answered by GdkMonitors when the host lacks them
    def primary_monitor(self) -> MonitorRect: ...

    def tray_monitor(self) -> MonitorRect: ...

    def region_size(self, name: str) -> Size: ...

    def region_position(self, name: str) -> tuple[int, int]: ...

    def set_region_position(self, name: str, x: int, y: int) -> None: ...

    def set_region_size(self, name: str, width: int, height: int) -> None: ...

    def set_region_clip(self, name: str, clip: Rect) -> None: ...

    def region_opacity(self, name: str) -> int: ...

    def set_region_opacity(self, name: str, opacity: int) -> None: ...

    def set_region_state(self, name: str, state_field: str, state: str) -> None: ...

    def set_override(self, hook: str, callback: Callable[..., Any]) -> None: ...

    def clear_override(self, hook: str) -> None: ...

    def connect(self, signal: str, callback: Callable[..., Any]) -> int: ...

    def disconnect(self, handler_id: int) -> None: ...

    def emit(self, signal: str, *args: Any) -> None: ...

    def tween(
        self,
        region: str,
        state_field: str,
        target_state: str,
        params: dict[str, Any],
    ) -> None: ...

    def remove_tweens(self, region: str) -> None: ...

    def hot_corners(self) -> Sequence[Any]: ...

    def move_hot_corner(self, corner: Any, x: int, y: int) -> None: ...

    def destroy_hot_corners(self) -> None: ...

    def indicator(self, role: str) -> Any | None: ...

    def remove_indicator(self, role: str) -> None: ...

    def hide_panel_corners(self) -> None: ...

    def menus(self) -> Sequence[Any]: ...

    def set_menu_arrow_side(self, menu: Any, side: Side) -> None: ...

    def set_default_arrow_side(self, side: Side) -> None: ...

    def set_summary_arrow_side(self, side: Side) -> None: ...

    def set_summary_alignment(self, alignment: str) -> None: ...

    def notification_expanded(self) -> bool: ...
